# src/todo_cli/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import Ask, CommandRegistry, Emit, LoopState
from ..cli.commands import registry as command_registry
from ..core.errors import TaskFileError
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    ask: Ask | None = None,
    emit: Emit | None = None,
    registry: CommandRegistry | None = None,
) -> bool:
    """
    Menu loop: print menu, read one choice, dispatch, repeat.

    Returns True when the user quit through the menu (tasks were saved),
    False when input ended (EOF / Ctrl+C) and nothing was saved.
    """
    ask = ask or input
    emit = emit or print
    registry = registry or command_registry
    logger.info("Console loop started (tasks=%d).", len(state.task_store))

    loop_state = LoopState.AWAITING_CHOICE
    while loop_state is not LoopState.DONE:
        emit(registry.build_menu())
        try:
            choice = ask("> ")
            loop_state = registry.handle(state, choice, ask, emit)
        except EOFError:
            logger.info("Console EOF received, exiting without saving.")
            return False
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting without saving.")
            emit("")
            return False
        except TaskFileError:
            raise
        except Exception:
            logger.exception("Command handler crashed.")
            emit("Internal error while handling a command.")
            loop_state = LoopState.AWAITING_CHOICE

    logger.info("Console loop finished.")
    return True
