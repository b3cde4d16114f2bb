"""Composition Root — Dependency Injection Container.

This module is the ONLY place where settings are turned into concrete
clipboard adapters and handle options. All other layers refer to ports.
"""

from __future__ import annotations

from pathlib import Path

from textfile.domain.models.enums import ClipboardBackend
from textfile.domain.models.settings import TextFileSettings
from textfile.domain.ports.clipboard_port import ClipboardPort
from textfile.domain.ports.settings_port import SettingsPort
from textfile.infrastructure.clipboard.file_clipboard import FileClipboard
from textfile.infrastructure.clipboard.system_clipboard import SystemClipboard
from textfile.infrastructure.config.settings_manager import SettingsManager
from textfile.text_file import PathLike, TextFile


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container()
        notes = container.text_file("notes.txt")
        notes.paste_into()
    """

    def __init__(
        self,
        settings_port: SettingsPort | None = None,
        *,
        config_dir: Path | None = None,
        clipboard_backend: ClipboardBackend | None = None,
    ) -> None:
        self._settings_port = settings_port or SettingsManager(config_dir=config_dir)
        self._settings = self._settings_port.load()
        if clipboard_backend is not None:
            self._settings = self._settings.model_copy(
                update={"clipboard_backend": ClipboardBackend(clipboard_backend)}
            )
        self._clipboard = self._build_clipboard(self._settings.clipboard_backend)

    @staticmethod
    def _build_clipboard(backend: ClipboardBackend) -> ClipboardPort:
        if backend is ClipboardBackend.FILE:
            return FileClipboard()
        return SystemClipboard()

    # -- Accessors -----------------------------------------------------------

    @property
    def settings(self) -> TextFileSettings:
        return self._settings

    @property
    def settings_port(self) -> SettingsPort:
        return self._settings_port

    @property
    def clipboard(self) -> ClipboardPort:
        return self._clipboard

    # -- Factories -----------------------------------------------------------

    def text_file(self, path: PathLike) -> TextFile:
        """Build a handle for *path* using the configured options."""
        return TextFile(
            path,
            self._clipboard,
            encoding=self._settings.encoding,
            append_mode=self._settings.append_mode,
        )
