"""textfile — whole-file text I/O and clipboard interchange.

Public API::

    from textfile import TextFile, ReadResult
"""

from textfile.domain.errors import (
    ClipboardError,
    ConfigurationError,
    FileReadError,
    FileWriteError,
    TextFileError,
)
from textfile.domain.models.enums import AppendMode, ClipboardBackend
from textfile.domain.models.result import ReadResult
from textfile.domain.models.settings import TextFileSettings
from textfile.domain.ports.clipboard_port import ClipboardPort
from textfile.infrastructure.clipboard.file_clipboard import FileClipboard
from textfile.infrastructure.clipboard.memory_clipboard import InMemoryClipboard
from textfile.infrastructure.clipboard.system_clipboard import SystemClipboard
from textfile.text_file import TextFile

__version__ = "0.1.0"

__all__ = [
    "AppendMode",
    "ClipboardBackend",
    "ClipboardError",
    "ClipboardPort",
    "ConfigurationError",
    "FileReadError",
    "FileWriteError",
    "FileClipboard",
    "InMemoryClipboard",
    "ReadResult",
    "SystemClipboard",
    "TextFile",
    "TextFileError",
    "TextFileSettings",
]
