"""File clipboard — a ClipboardPort kept in a file so it outlives a process.

Used when no system clipboard is reachable (headless hosts, CI) and for
handing text between separate ``textfile`` command invocations.
"""

from __future__ import annotations

import logging
from pathlib import Path

import platformdirs

from textfile.domain.errors import ClipboardError
from textfile.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)

_APP_NAME = "textfile"
_CLIPBOARD_FILENAME = "clipboard.txt"


class FileClipboard(ClipboardPort):
    """Clipboard stored as UTF-8 text under the user cache directory.

    Parameters
    ----------
    path : Path | None
        Override the backing file (useful for testing).
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path(platformdirs.user_cache_dir(_APP_NAME)) / _CLIPBOARD_FILENAME

    @property
    def path(self) -> Path:
        """Backing file of the clipboard."""
        return self._path

    def copy(self, text: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8", newline="") as fh:
                fh.write(text)
        except (OSError, UnicodeError) as exc:
            raise ClipboardError(f"Clipboard copy failed: {exc}") from exc
        logger.debug("Copied %d characters to %s", len(text), self._path)

    def paste(self) -> str | None:
        """Return the stored text, or ``None`` if nothing was ever copied."""
        try:
            with open(self._path, encoding="utf-8", newline="") as fh:
                return fh.read()
        except FileNotFoundError:
            return None
        except UnicodeDecodeError:
            logger.info("Clipboard file %s is not UTF-8 text", self._path)
            return None
        except OSError as exc:
            raise ClipboardError(f"Clipboard paste failed: {exc}") from exc
