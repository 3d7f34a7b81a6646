# src/taskdeck/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The session depends on these Protocols instead of input()/print() directly.
This keeps the console swappable and lets tests drive a session with scripted answers.
"""

from collections.abc import Callable
from typing import Protocol

Emitter = Callable[[str], None]
# Receives one output line at a time (console log lines, reports).


class Prompter(Protocol):
    """
    Blocking, modal user input.

    ask_text/confirm return None when the user cancels (distinct from an empty answer).
    """

    def ask_text(self, question: str) -> str | None: ...

    def confirm(self, question: str) -> bool | None: ...

    def alert(self, message: str) -> None: ...
