"""Settings manager — loads/saves TextFileSettings to the OS config dir.

Implements ``SettingsPort`` and persists settings as JSON to
``~/.config/textfile/settings.json`` (Linux) or the equivalent platform
directory via ``platformdirs``.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

import platformdirs
from pydantic import ValidationError

from textfile.domain.errors import ConfigurationError
from textfile.domain.models.settings import TextFileSettings
from textfile.domain.ports.settings_port import SettingsPort

logger = logging.getLogger(__name__)

_APP_NAME = "textfile"
_SETTINGS_FILENAME = "settings.json"


class SettingsManager(SettingsPort):
    """Concrete implementation of :class:`SettingsPort`.

    Parameters
    ----------
    config_dir : Path | None
        Override the default config directory (useful for testing).
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(_APP_NAME))
        self._settings_path = self._config_dir / _SETTINGS_FILENAME

    # -- Public API ----------------------------------------------------------

    def load(self) -> TextFileSettings:
        """Load settings from disk, falling back to defaults."""
        if not self._settings_path.exists():
            return TextFileSettings()

        try:
            raw = json.loads(self._settings_path.read_text(encoding="utf-8"))
            return TextFileSettings.model_validate(raw)
        except (OSError, ValueError) as exc:
            # Corrupted file → safe defaults
            logger.warning("Ignoring unreadable settings %s: %s", self._settings_path, exc)
            return TextFileSettings()

    def save(self, settings: TextFileSettings) -> None:
        """Persist settings atomically (write to temp, then rename)."""
        self._config_dir.mkdir(parents=True, exist_ok=True)

        data = settings.model_dump(mode="json")
        tmp_fd, tmp_path = tempfile.mkstemp(
            dir=self._config_dir,
            suffix=".tmp",
        )
        try:
            with open(tmp_fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, ensure_ascii=False)
            Path(tmp_path).replace(self._settings_path)
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise
        logger.debug("Saved settings to %s", self._settings_path)

    def update(self, **changes: Any) -> TextFileSettings:
        """Validate *changes* against the current settings and persist them.

        Raises:
            ConfigurationError: A field is unknown or a value is invalid.
        """
        current = self.load().model_dump(mode="json")
        unknown = set(changes) - set(current)
        if unknown:
            raise ConfigurationError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

        current.update(changes)
        try:
            settings = TextFileSettings.model_validate(current)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc
        self.save(settings)
        return settings

    def reset_to_defaults(self) -> TextFileSettings:
        """Delete the persisted file and return factory defaults."""
        self._settings_path.unlink(missing_ok=True)
        return TextFileSettings()

    @property
    def settings_path(self) -> Path:
        """Absolute path to the settings JSON file."""
        return self._settings_path
