"""Text file handle — whole-file text I/O plus clipboard interchange.

A :class:`TextFile` references a file by path and performs every operation
fresh against the disk: nothing is cached and no stream stays open between
calls. I/O and clipboard failures never propagate; reads return a failed
:class:`~textfile.domain.models.result.ReadResult` and writes return
``False``.

Usage::

    notes = TextFile("notes.txt")
    notes.write_all("first line")
    notes.append("\\nsecond line")
    notes.read_lines().unwrap()      # ['first line', 'second line']
    notes.copy_from()                # content now on the clipboard
"""

from __future__ import annotations

import locale
import logging
import os
import shutil
import sys
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO, Union

from textfile.domain.errors import ClipboardError
from textfile.domain.models.enums import AppendMode
from textfile.domain.models.result import ReadResult
from textfile.domain.ports.clipboard_port import ClipboardPort
from textfile.infrastructure.clipboard.system_clipboard import SystemClipboard

logger = logging.getLogger(__name__)

_IO_ERRORS = (OSError, UnicodeError)

PathLike = Union[str, os.PathLike]


class TextFile:
    """Handle to a text file on disk.

    Parameters
    ----------
    path : str | os.PathLike
        File the handle refers to. It is fixed for the handle's lifetime.
        An empty path is accepted here and fails on first use.
    clipboard : ClipboardPort | None
        Clipboard used by :meth:`copy_from` and :meth:`paste_into`.
        Defaults to the system clipboard.
    encoding : str | None
        Text encoding; ``None`` uses the platform default.
    append_mode : AppendMode
        ``REWRITE`` reads the file and rewrites it with the text added
        (not atomic); ``NATIVE`` issues one append-mode write.
    """

    __slots__ = ("_path", "_clipboard", "_encoding", "_append_mode")

    def __init__(
        self,
        path: PathLike,
        clipboard: ClipboardPort | None = None,
        *,
        encoding: str | None = None,
        append_mode: AppendMode = AppendMode.REWRITE,
    ) -> None:
        self._path = Path(path)
        self._clipboard = clipboard if clipboard is not None else SystemClipboard()
        self._encoding = encoding
        self._append_mode = AppendMode(append_mode)

    # -- Identity ------------------------------------------------------------

    @property
    def path(self) -> Path:
        """The file this handle refers to."""
        return self._path

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __repr__(self) -> str:
        return f"TextFile({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextFile):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    # -- Reading -------------------------------------------------------------

    def _lines(self) -> list[str]:
        # Universal newlines: \r\n and \r arrive as \n.
        with open(self._path, encoding=self._encoding) as fh:
            return [line[:-1] if line.endswith("\n") else line for line in fh]

    def read_all(self) -> ReadResult[str]:
        """Read the whole file as one string.

        Lines are joined with a single ``\\n`` whatever terminator the file
        uses, and a terminator at the very end of the file is dropped.

        Returns:
            ``ReadResult.success(text)``, or ``ReadResult.failure(reason)``
            when the file is missing, unreadable or not decodable.
        """
        try:
            lines = self._lines()
        except _IO_ERRORS as exc:
            logger.warning("Cannot read %s: %s", self._path, exc)
            return ReadResult.failure(f"Cannot read {self._path}: {exc}")
        return ReadResult.success("\n".join(lines))

    def read_lines(self) -> ReadResult[list[str]]:
        """Read the file as a list of lines without terminators."""
        try:
            lines = self._lines()
        except _IO_ERRORS as exc:
            logger.warning("Cannot read %s: %s", self._path, exc)
            return ReadResult.failure(f"Cannot read {self._path}: {exc}")
        return ReadResult.success(lines)

    def contains(self, needle: str) -> bool:
        """Return whether *needle* occurs in the file's content.

        ``False`` when the file cannot be read.
        """
        result = self.read_all()
        return result.ok and needle in result.unwrap()

    def print_file(self, stream: TextIO | None = None) -> bool:
        """Write the file's content to *stream* (default ``sys.stdout``).

        No newline is added. Nothing is written if the file cannot be read.
        """
        result = self.read_all()
        if not result.ok:
            return False
        (stream or sys.stdout).write(result.unwrap())
        return True

    # -- Writing -------------------------------------------------------------

    def write_all(self, text: str | Iterable[str]) -> bool:
        """Replace the file's content.

        Args:
            text: The exact text to write, or an iterable of strings that
                are concatenated with no separator.

        Returns:
            ``True`` on success, ``False`` if the file cannot be written.

        Raises:
            TypeError: *text* is neither a string nor an iterable of strings.
        """
        if not isinstance(text, str):
            text = "".join(text)
        try:
            # Encoding up front means an unencodable text never truncates the file.
            data = text.encode(self._encoding or locale.getpreferredencoding(False))
            self._replace_with(data)
        except _IO_ERRORS as exc:
            logger.warning("Cannot write %s: %s", self._path, exc)
            return False
        logger.debug("Wrote %d characters to %s", len(text), self._path)
        return True

    def _replace_with(self, data: bytes) -> None:
        """Write *data* to a temp file beside the target, then rename it over."""
        tmp_fd, tmp_path = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
        )
        try:
            with open(tmp_fd, "wb") as fh:
                fh.write(data)
            if self._path.is_file():
                shutil.copymode(self._path, tmp_path)
            Path(tmp_path).replace(self._path)
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def _read_raw(self) -> str:
        # newline="" keeps the file's own terminators intact.
        with open(self._path, encoding=self._encoding, newline="") as fh:
            return fh.read()

    def append(self, text: str) -> bool:
        """Add *text* directly after the current content, with no separator.

        In ``REWRITE`` mode the file is read and rewritten whole, which is
        not atomic with respect to other writers, and a failed read aborts
        the append. In ``NATIVE`` mode a missing file is created.
        """
        if self._append_mode is AppendMode.NATIVE:
            try:
                with open(self._path, "a", encoding=self._encoding, newline="") as fh:
                    fh.write(text)
            except _IO_ERRORS as exc:
                logger.warning("Cannot append to %s: %s", self._path, exc)
                return False
            return True

        try:
            current = self._read_raw()
        except _IO_ERRORS as exc:
            logger.warning("Cannot append to %s, read failed: %s", self._path, exc)
            return False
        return self.write_all(current + text)

    def clear(self) -> bool:
        """Truncate the file to empty content."""
        return self.write_all("")

    # -- Clipboard -----------------------------------------------------------

    def paste_into(self) -> bool:
        """Overwrite the file with the clipboard's text.

        Returns ``False`` and leaves the file untouched if the clipboard is
        unavailable or holds no text; ``False`` as well if the write fails.
        """
        try:
            text = self._clipboard.paste()
        except ClipboardError as exc:
            logger.warning("Cannot read clipboard: %s", exc)
            return False
        if text is None:
            logger.info("Clipboard holds no text, %s left unchanged", self._path)
            return False
        return self.write_all(text)

    def copy_from(self) -> bool:
        """Place the file's content on the clipboard.

        The content is copied as stored, terminators included, so that
        :meth:`paste_into` restores the file unchanged. The clipboard is not
        touched if the file cannot be read.
        """
        try:
            text = self._read_raw()
        except _IO_ERRORS as exc:
            logger.warning("Cannot read %s: %s", self._path, exc)
            return False
        try:
            self._clipboard.copy(text)
        except ClipboardError as exc:
            logger.warning("Cannot copy %s to clipboard: %s", self._path, exc)
            return False
        return True
