"""Tests for settings persistence and the composition root.

Covers:
- SettingsManager load / save / update / reset with a temp directory
- Container wiring of clipboard backend and handle options
"""

from __future__ import annotations

import json
from pathlib import Path

import platformdirs
import pytest

from textfile.bootstrap import Container
from textfile.domain.errors import ConfigurationError
from textfile.domain.models.enums import AppendMode, ClipboardBackend
from textfile.domain.models.settings import TextFileSettings
from textfile.infrastructure.clipboard.file_clipboard import FileClipboard
from textfile.infrastructure.clipboard.system_clipboard import SystemClipboard
from textfile.infrastructure.config.settings_manager import SettingsManager


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture()
def tmp_config_dir(tmp_path: Path) -> Path:
    """Return a temporary directory for settings files."""
    return tmp_path / "textfile_config"


@pytest.fixture(autouse=True)
def cache_dir(tmp_path: Path, monkeypatch) -> Path:
    """Keep the file clipboard out of the real user cache directory."""
    cache = tmp_path / "cache"
    monkeypatch.setattr(platformdirs, "user_cache_dir", lambda *args, **kwargs: str(cache))
    return cache


@pytest.fixture()
def manager(tmp_config_dir: Path) -> SettingsManager:
    """SettingsManager pointing at a temp directory."""
    return SettingsManager(config_dir=tmp_config_dir)


# ── SettingsManager Tests ─────────────────────────────────────────────────


class TestSettingsManager:
    """Tests for SettingsManager load/save/update/reset."""

    def test_load_defaults_when_no_file(self, manager: SettingsManager) -> None:
        assert manager.load() == TextFileSettings()

    def test_save_and_load(self, manager: SettingsManager) -> None:
        custom = TextFileSettings(encoding="latin-1", append_mode=AppendMode.NATIVE)
        manager.save(custom)

        loaded = manager.load()
        assert loaded.encoding == "latin-1"
        assert loaded.append_mode == AppendMode.NATIVE

    def test_reset_to_defaults(self, manager: SettingsManager) -> None:
        manager.save(TextFileSettings(clipboard_backend=ClipboardBackend.FILE))
        assert manager.settings_path.exists()

        reset = manager.reset_to_defaults()
        assert reset.clipboard_backend == ClipboardBackend.SYSTEM
        assert not manager.settings_path.exists()

    def test_reset_without_file(self, manager: SettingsManager) -> None:
        assert manager.reset_to_defaults() == TextFileSettings()

    def test_corrupted_file_returns_defaults(
        self, manager: SettingsManager, tmp_config_dir: Path
    ) -> None:
        tmp_config_dir.mkdir(parents=True, exist_ok=True)
        manager.settings_path.write_text("{{invalid json", encoding="utf-8")

        assert manager.load() == TextFileSettings()

    def test_invalid_values_return_defaults(
        self, manager: SettingsManager, tmp_config_dir: Path
    ) -> None:
        tmp_config_dir.mkdir(parents=True, exist_ok=True)
        manager.settings_path.write_text(
            json.dumps({"append_mode": "sideways"}), encoding="utf-8"
        )

        assert manager.load() == TextFileSettings()

    def test_settings_path_property(self, manager: SettingsManager) -> None:
        assert manager.settings_path.name == "settings.json"

    def test_save_creates_directory(self, tmp_path: Path) -> None:
        nested = tmp_path / "deep" / "nested"
        mgr = SettingsManager(config_dir=nested)
        mgr.save(TextFileSettings())
        assert mgr.settings_path.exists()

    def test_save_leaves_no_temp_files(self, manager: SettingsManager, tmp_config_dir: Path) -> None:
        manager.save(TextFileSettings())
        assert [p.name for p in tmp_config_dir.iterdir()] == ["settings.json"]

    def test_save_file_content_is_valid_json(self, manager: SettingsManager) -> None:
        manager.save(TextFileSettings())
        data = json.loads(manager.settings_path.read_text(encoding="utf-8"))
        assert data["clipboard_backend"] == "system"
        assert data["append_mode"] == "rewrite"
        assert data["encoding"] is None

    def test_update(self, manager: SettingsManager) -> None:
        updated = manager.update(append_mode="native", encoding="utf-8")
        assert updated.append_mode == AppendMode.NATIVE
        assert manager.load() == updated

    def test_update_unknown_key(self, manager: SettingsManager) -> None:
        with pytest.raises(ConfigurationError, match="Unknown setting"):
            manager.update(colour="blue")

    def test_update_invalid_value_not_saved(self, manager: SettingsManager) -> None:
        with pytest.raises(ConfigurationError):
            manager.update(encoding="klingon-8")
        assert not manager.settings_path.exists()


# ── Container Tests ───────────────────────────────────────────────────────


class TestContainer:
    def test_defaults_to_system_clipboard(self, tmp_config_dir: Path) -> None:
        container = Container(config_dir=tmp_config_dir)
        assert isinstance(container.clipboard, SystemClipboard)
        assert container.settings == TextFileSettings()

    def test_file_backend_from_settings(self, manager: SettingsManager, cache_dir: Path) -> None:
        manager.update(clipboard_backend="file")
        container = Container(manager)
        assert isinstance(container.clipboard, FileClipboard)
        assert container.clipboard.path == cache_dir / "clipboard.txt"

    def test_backend_override(self, tmp_config_dir: Path) -> None:
        container = Container(config_dir=tmp_config_dir, clipboard_backend=ClipboardBackend.FILE)
        assert isinstance(container.clipboard, FileClipboard)
        assert container.settings.clipboard_backend == ClipboardBackend.FILE

    def test_override_is_not_persisted(self, manager: SettingsManager) -> None:
        Container(manager, clipboard_backend=ClipboardBackend.FILE)
        assert manager.load().clipboard_backend == ClipboardBackend.SYSTEM

    def test_text_file_uses_settings(self, manager: SettingsManager, tmp_path: Path) -> None:
        manager.update(append_mode="native", clipboard_backend="file")
        container = Container(manager)

        tf = container.text_file(tmp_path / "log.txt")
        assert tf.append("created by append")
        assert tf.copy_from()
        assert container.clipboard.paste() == "created by append"

    def test_text_file_shares_clipboard(self, tmp_config_dir: Path, tmp_path: Path) -> None:
        container = Container(config_dir=tmp_config_dir, clipboard_backend=ClipboardBackend.FILE)
        src = container.text_file(tmp_path / "a.txt")
        dst = container.text_file(tmp_path / "b.txt")
        src.write_all("hand-over")
        src.copy_from()
        dst.paste_into()
        assert dst.read_all().unwrap() == "hand-over"
