"""Tests for the ReadResult and TextFileSettings models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from textfile.domain.errors import (
    ClipboardError,
    ConfigurationError,
    FileReadError,
    FileWriteError,
    TextFileError,
)
from textfile.domain.models.enums import AppendMode, ClipboardBackend, LogLevel
from textfile.domain.models.result import ReadResult
from textfile.domain.models.settings import TextFileSettings


# ═══════════════════════════════════════════════════════════════════════════════
# ReadResult
# ═══════════════════════════════════════════════════════════════════════════════


class TestReadResult:
    def test_success(self):
        result = ReadResult.success("text")
        assert result.ok
        assert bool(result)
        assert result.value == "text"
        assert result.error is None

    def test_empty_value_is_success(self):
        assert ReadResult.success("").ok
        assert ReadResult.success([]).ok

    def test_failure(self):
        result = ReadResult.failure("disk on fire")
        assert not result.ok
        assert not bool(result)
        assert result.value is None
        assert result.error == "disk on fire"

    def test_unwrap_success(self):
        assert ReadResult.success(["a", "b"]).unwrap() == ["a", "b"]

    def test_unwrap_failure_raises(self):
        with pytest.raises(FileReadError, match="disk on fire"):
            ReadResult.failure("disk on fire").unwrap()

    def test_error_hierarchy(self):
        for exc in (FileReadError, FileWriteError, ClipboardError, ConfigurationError):
            assert issubclass(exc, TextFileError)

    def test_unwrap_or(self):
        assert ReadResult.failure("x").unwrap_or("fallback") == "fallback"
        assert ReadResult.success("").unwrap_or("fallback") == ""

    def test_requires_exactly_one_outcome(self):
        with pytest.raises(ValidationError):
            ReadResult()
        with pytest.raises(ValidationError):
            ReadResult(value="v", error="e")

    def test_frozen(self):
        result = ReadResult.success("text")
        with pytest.raises(ValidationError):
            result.value = "other"  # type: ignore[misc]

    def test_parametrized(self):
        result = ReadResult[list[str]].success(["x"])
        assert result.unwrap() == ["x"]


# ═══════════════════════════════════════════════════════════════════════════════
# TextFileSettings
# ═══════════════════════════════════════════════════════════════════════════════


class TestTextFileSettings:
    def test_defaults(self):
        settings = TextFileSettings()
        assert settings.clipboard_backend == ClipboardBackend.SYSTEM
        assert settings.encoding is None
        assert settings.append_mode == AppendMode.REWRITE
        assert settings.log_level == LogLevel.WARNING

    def test_values_from_strings(self):
        settings = TextFileSettings.model_validate(
            {"clipboard_backend": "file", "append_mode": "native", "log_level": "DEBUG"}
        )
        assert settings.clipboard_backend is ClipboardBackend.FILE
        assert settings.append_mode is AppendMode.NATIVE
        assert settings.log_level is LogLevel.DEBUG

    def test_known_encoding(self):
        assert TextFileSettings(encoding=" utf-8 ").encoding == "utf-8"

    def test_blank_encoding_means_default(self):
        assert TextFileSettings(encoding="").encoding is None

    def test_unknown_encoding_rejected(self):
        with pytest.raises(ValidationError, match="Unknown encoding"):
            TextFileSettings(encoding="klingon-8")

    def test_invalid_enum_rejected(self):
        with pytest.raises(ValidationError):
            TextFileSettings(append_mode="sideways")
        with pytest.raises(ValidationError):
            TextFileSettings(clipboard_backend="memory")

    def test_serialization_roundtrip(self):
        original = TextFileSettings(encoding="latin-1", append_mode=AppendMode.NATIVE)
        data = original.model_dump(mode="json")
        assert data["append_mode"] == "native"
        assert TextFileSettings.model_validate(data) == original
