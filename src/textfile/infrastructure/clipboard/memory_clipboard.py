"""In-memory clipboard — a process-local ClipboardPort."""

from __future__ import annotations

from textfile.domain.errors import ClipboardError
from textfile.domain.ports.clipboard_port import ClipboardPort


class InMemoryClipboard(ClipboardPort):
    """Clipboard that keeps its text in an attribute.

    Setting ``available`` to ``False`` makes every operation raise
    ``ClipboardError``, as a busy system clipboard would.
    """

    def __init__(self, text: str | None = None, available: bool = True) -> None:
        self.text = text
        self.available = available

    def _check(self) -> None:
        if not self.available:
            raise ClipboardError("Clipboard is unavailable")

    def copy(self, text: str) -> None:
        self._check()
        self.text = text

    def paste(self) -> str | None:
        self._check()
        return self.text
