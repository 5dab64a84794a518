"""
Tests for the config infrastructure layer.

This module tests the repository and manager components.
"""

import json
import shutil
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from sqladminlog.application.container import Container
from sqladminlog.domain.config import LoggingSettings, ProviderSettings
from sqladminlog.infrastructure.config.manager import ConfigManager
from sqladminlog.infrastructure.config.repository import ConfigRepository, _strip_comments
from sqladminlog.infrastructure.providers import MemoryProvider


class TestConfigRepository:
    """Test cases for ConfigRepository."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.repo = ConfigRepository(self.temp_dir)

    def teardown_method(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def test_load_json_file_success(self):
        test_data = {"key": "value", "number": 42}
        (self.temp_dir / "test.json").write_text(json.dumps(test_data))

        assert self.repo.load_json_file("test") == test_data

    def test_load_jsonc_with_comments(self):
        content = """
        {
            // cycle interval
            "interval_ms": 50, /* fast */
            "path": "C://logs//sql.log"
        }
        """
        (self.temp_dir / "test.jsonc").write_text(content)

        result = self.repo.load_json_file("test")
        assert result == {"interval_ms": 50, "path": "C://logs//sql.log"}

    def test_invalid_json_raises_value_error(self):
        (self.temp_dir / "test.json").write_text("{not json")
        with pytest.raises(ValueError):
            self.repo.load_json_file("test")

    def test_load_json_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            self.repo.load_json_file("nonexistent")

    def test_save_json_file_creates_directory(self):
        repo = ConfigRepository(self.temp_dir / "nested" / "config")
        path = repo.save_json_file("test", {"a": 1})

        assert path.exists()
        assert json.loads(path.read_text()) == {"a": 1}


def test_strip_comments_keeps_strings():
    assert _strip_comments('{"a": "/* not a comment */"} // trailing') == '{"a": "/* not a comment */"} '
    assert _strip_comments('{"a": "quote \\" // still string"}') == '{"a": "quote \\" // still string"}'


class TestConfigManager:
    """Test cases for ConfigManager."""

    def test_missing_file_yields_defaults(self, tmp_path):
        manager = ConfigManager(tmp_path)
        assert manager.load_logging_settings() == LoggingSettings()

    def test_load_and_cache(self, tmp_path):
        (tmp_path / "logging_config.json").write_text(json.dumps({
            "interval_ms": 200,
            "providers": [{"name": "mem", "type": "memory"}],
        }))
        manager = ConfigManager(tmp_path)

        first = manager.load_logging_settings()
        (tmp_path / "logging_config.json").write_text(json.dumps({"interval_ms": 300}))

        assert manager.load_logging_settings() is first
        assert manager.load_logging_settings(force_reload=True).interval_ms == 300
        assert first.providers[0].name == "mem"

    def test_invalid_settings_raise(self, tmp_path):
        (tmp_path / "logging_config.json").write_text(json.dumps({"interval_ms": -1}))
        with pytest.raises(ValidationError):
            ConfigManager(tmp_path).load_logging_settings()

    def test_save_round_trip(self, tmp_path):
        manager = ConfigManager(tmp_path)
        settings = LoggingSettings(
            disable_flush_on_exit=True,
            providers=[ProviderSettings(name="file", type="logfile", path="out/sql.jsonl")],
        )

        manager.save_logging_settings(settings)

        assert ConfigManager(tmp_path).load_logging_settings() == settings


class TestContainer:
    """Container wiring of configured providers."""

    def test_registers_configured_providers(self, tmp_path):
        (tmp_path / "logging_config.json").write_text(json.dumps({
            "providers": [
                {"name": "mem", "type": "memory"},
                {"name": "quiet", "type": "memory", "enabled": False},
            ],
        }))

        service = Container(tmp_path).logging_service

        providers = {p.name: p for p in service.get_providers()}
        assert set(providers) == {"mem", "quiet"}
        assert providers["mem"].enabled is True
        assert providers["quiet"].enabled is False
        assert isinstance(providers["mem"].hooks, MemoryProvider)

    def test_settings_override(self, tmp_path):
        container = Container(tmp_path, settings=LoggingSettings(interval_ms=20))
        assert container.logging_service.settings.interval_ms == 20
