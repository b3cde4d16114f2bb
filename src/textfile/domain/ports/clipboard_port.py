"""Port: Clipboard — exchange plain text with the system clipboard."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ClipboardPort(ABC):
    """Contract for clipboard operations."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Replace the clipboard content with the given text.

        Raises:
            ClipboardError: If no clipboard backend is available or the
                backend rejects the copy.
        """
        ...

    @abstractmethod
    def paste(self) -> str | None:
        """Return the clipboard's text content.

        Returns:
            The text, or ``None`` when the clipboard holds no text.

        Raises:
            ClipboardError: If no clipboard backend is available.
        """
        ...
