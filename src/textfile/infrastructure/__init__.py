"""Infrastructure layer — clipboard and settings adapters."""

from textfile.infrastructure.clipboard.file_clipboard import FileClipboard
from textfile.infrastructure.clipboard.memory_clipboard import InMemoryClipboard
from textfile.infrastructure.clipboard.system_clipboard import SystemClipboard
from textfile.infrastructure.config.settings_manager import SettingsManager

__all__ = [
    "FileClipboard",
    "InMemoryClipboard",
    "SettingsManager",
    "SystemClipboard",
]
