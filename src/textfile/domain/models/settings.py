"""Settings model for textfile.

``TextFileSettings`` captures the user preferences that shape how handles
are built: which clipboard they talk to, which encoding they read and
write with, and how appends reach the disk.
"""

from __future__ import annotations

import codecs
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from textfile.domain.models.enums import AppendMode, ClipboardBackend, LogLevel


class TextFileSettings(BaseModel):
    """Root settings — persisted to ``settings.json``."""

    clipboard_backend: ClipboardBackend = Field(
        default=ClipboardBackend.SYSTEM,
        description="Clipboard implementation used by copy/paste.",
    )
    encoding: Optional[str] = Field(
        default=None,
        description="Text encoding for reads and writes; None uses the platform default.",
    )
    append_mode: AppendMode = Field(
        default=AppendMode.REWRITE,
        description="Read-modify-write or native append-mode writes.",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Level for the textfile logger when run from the CLI.",
    )

    @field_validator("encoding", mode="before")
    @classmethod
    def _validate_encoding(cls, v: str | None) -> str | None:
        """Reject codec names Python does not know; blank means default."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            return None
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: '{v}'") from exc
        return v
