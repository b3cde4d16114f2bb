"""Port (ABC) for settings persistence.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from textfile.domain.models.settings import TextFileSettings


class SettingsPort(ABC):
    """Abstract interface for loading / saving settings."""

    @abstractmethod
    def load(self) -> TextFileSettings:
        """Load persisted settings (or defaults if none exist)."""

    @abstractmethod
    def save(self, settings: TextFileSettings) -> None:
        """Persist the given settings."""

    @abstractmethod
    def update(self, **changes: Any) -> TextFileSettings:
        """Apply field changes, persist and return the new settings."""

    @abstractmethod
    def reset_to_defaults(self) -> TextFileSettings:
        """Delete persisted settings and return factory defaults."""

    @property
    @abstractmethod
    def settings_path(self) -> Path:
        """Location of the persisted settings."""
