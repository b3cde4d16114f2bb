"""Domain ports (interfaces)."""

from textfile.domain.ports.clipboard_port import ClipboardPort
from textfile.domain.ports.settings_port import SettingsPort

__all__ = ["ClipboardPort", "SettingsPort"]
