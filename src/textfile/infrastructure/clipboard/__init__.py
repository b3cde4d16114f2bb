"""Clipboard adapters."""

from textfile.infrastructure.clipboard.file_clipboard import FileClipboard
from textfile.infrastructure.clipboard.memory_clipboard import InMemoryClipboard
from textfile.infrastructure.clipboard.system_clipboard import SystemClipboard

__all__ = ["FileClipboard", "InMemoryClipboard", "SystemClipboard"]
