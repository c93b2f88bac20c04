# src/task_manager/connectors/console_connector.py

from __future__ import annotations

import logging
from types import ModuleType

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.ports import LineReader
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _load_readline() -> ModuleType | None:
    """GNU readline / libedit bindings; missing on some platforms (e.g. Windows)."""
    try:
        import readline
    except ImportError:
        logger.debug("readline not available; arrow-key history disabled.")
        return None
    return readline


class ConsoleLineReader:
    """
    LineReader over input().

    Non-empty lines are kept in an in-memory history (capped at history_length)
    and, where readline exists, pushed into it so the up arrow recalls them.
    readline's own auto-history is switched off: it would store the raw,
    unstripped line a second time.
    """

    def __init__(self, *, history_enabled: bool = True, history_length: int = 100) -> None:
        self.history_enabled = history_enabled
        self.history_length = max(0, int(history_length))
        self.history: list[str] = []
        self._readline = _load_readline() if history_enabled else None
        if self._readline is not None:
            self._readline.set_auto_history(False)
            self._readline.set_history_length(self.history_length)

    def read(self, message: str) -> str:
        line = input(f"{message}: ").strip()
        if line and self.history_enabled:
            self._remember(line)
        return line

    def _remember(self, line: str) -> None:
        if self.history_length == 0:
            return
        self.history.append(line)
        del self.history[: -self.history_length]
        if self._readline is not None:
            self._readline.add_history(line)


def run_console_loop(
    state: AppState,
    reader: LineReader | None = None,
    *,
    registry: CommandRegistry | None = None,
) -> None:
    if reader is None:
        reader = ConsoleLineReader(
            history_enabled=bool(getattr(state.settings, "history_enabled", True)),
            history_length=int(getattr(state.settings, "history_length", 100)),
        )
    registry = registry or command_registry

    logger.info("Console connector started (tasks=%d).", len(state.tasks.all()))

    def emit(text: str) -> None:
        print(text, flush=True)

    while state.running:
        print(registry.build_menu())
        try:
            choice = reader.read("Select an option")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        try:
            reply = registry.handle(state, choice, reader, emit=emit)
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed mid-command, exiting.")
            print()
            break
        except Exception:
            logger.exception("Command handler crashed (choice=%r).", choice)
            reply = "Internal error while handling a command."

        print(reply)

    logger.info("Console connector finished.")
