"""Domain models — public API."""

from textfile.domain.models.enums import AppendMode, ClipboardBackend, LogLevel
from textfile.domain.models.result import ReadResult
from textfile.domain.models.settings import TextFileSettings

__all__ = [
    "AppendMode",
    "ClipboardBackend",
    "LogLevel",
    "ReadResult",
    "TextFileSettings",
]
