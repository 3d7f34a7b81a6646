# src/taskdeck/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.session import run_session
from ..core.state import AppState

logger = logging.getLogger(__name__)

YES_ANSWERS = {"y", "yes"}
NO_ANSWERS = {"n", "no", ""}


def console_emit(text: str) -> None:
    print(text, flush=True)


class ConsolePrompter:
    """
    Prompter backed by input().

    Ctrl+D (EOF) and Ctrl+C cancel the current prompt. An empty line is an
    answer, not a cancellation.
    """

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = console_emit,
    ) -> None:
        self._read = read
        self._write = write

    def _ask(self, question: str) -> str | None:
        try:
            return self._read(f"{question} ")
        except EOFError:
            logger.info("Console EOF received, prompt cancelled.")
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, prompt cancelled.")
        self._write("")
        return None

    def ask_text(self, question: str) -> str | None:
        return self._ask(question)

    def confirm(self, question: str) -> bool | None:
        while True:
            answer = self._ask(f"{question} [y/N]")
            if answer is None:
                return None
            answer = answer.strip().lower()
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self._write("Please answer 'y' or 'n'.")

    def alert(self, message: str) -> None:
        self._write(f"[!] {message}")


def run_console_session(state: AppState) -> int:
    logger.info("Console session started.")
    added = run_session(state, ConsolePrompter(), console_emit)
    logger.info("Console session finished.")
    return added
