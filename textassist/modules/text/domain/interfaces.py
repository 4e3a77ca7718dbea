from __future__ import annotations

from typing import Protocol


class TextCorrectorLLM(Protocol):
    async def correct(self, text: str) -> str:
        """Return the raw model output for the given text."""


class Notifier(Protocol):
    async def notify(self, message: str) -> None:
        """Show a transient notice to the user."""


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None:
        """Hand plain text to the user's clipboard."""
