"""
Tests for configuration loading and logging setup.
"""

import json
import logging

import pytest

from flj import FljSettings, configure_logging, get_settings, reset_settings
from flj.config_loader import ConfigLoader
from flj.logging_config import FlushingStreamHandler, LOG_FILENAME, PACKAGE_LOGGER


@pytest.fixture
def write_config(tmp_path):
    """Write a flj.json into the test project root."""
    def _write(content):
        path = tmp_path / "flj.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def package_logger():
    """The package logger, restored to defaults after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    yield logger
    configure_logging(FljSettings())


class TestConfigLoader:

    def test_defaults_without_file(self):
        settings = get_settings()
        assert settings == FljSettings()
        assert settings.repr_limit == 10
        assert settings.debug_log is False
        assert settings.log_level == "WARNING"

    def test_reads_config_file(self, write_config):
        write_config({"repr_limit": 3, "log_level": "INFO"})
        settings = get_settings()
        assert settings.repr_limit == 3
        assert settings.log_level == "INFO"

    def test_env_overrides_file(self, write_config, monkeypatch):
        write_config({"repr_limit": 3, "debug_log": False})
        monkeypatch.setenv("FLJ_REPR_LIMIT", "7")
        monkeypatch.setenv("FLJ_DEBUG_LOG", "yes")
        reset_settings()
        settings = get_settings()
        assert settings.repr_limit == 7
        assert settings.debug_log is True

    def test_env_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("FLJ_LOG_LEVEL", "debug")
        assert get_settings().log_level == "DEBUG"

    def test_invalid_json_falls_back_to_defaults(self, write_config, caplog):
        write_config("{not json")
        with caplog.at_level(logging.WARNING, logger="flj"):
            assert get_settings() == FljSettings()
        assert "Invalid JSON" in caplog.text

    def test_invalid_value_falls_back_to_defaults(self, write_config, caplog):
        write_config({"repr_limit": -1})
        with caplog.at_level(logging.WARNING, logger="flj"):
            assert get_settings() == FljSettings()
        assert "Invalid flj settings" in caplog.text

    def test_non_object_config_is_ignored(self, write_config, caplog):
        write_config([1, 2])
        with caplog.at_level(logging.WARNING, logger="flj"):
            assert get_settings() == FljSettings()

    def test_loader_reports_path(self, write_config, tmp_path):
        path = write_config({"repr_limit": 1})
        loader = ConfigLoader()
        assert loader.load(tmp_path) is True
        assert loader.config_path == path
        assert loader.get("repr_limit") == 1
        assert loader.config == {"repr_limit": 1}

    def test_loader_without_file(self, tmp_path):
        loader = ConfigLoader()
        assert loader.load(tmp_path) is False
        assert loader.config_path is None

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()


class TestLoggingConfig:

    def test_quiet_by_default(self, package_logger):
        logger = configure_logging(FljSettings())
        assert logger is package_logger
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)
        assert logger.level == logging.WARNING

    def test_debug_log_adds_stderr_handler(self, package_logger):
        logger = configure_logging(FljSettings(debug_log=True, log_level="DEBUG"))
        assert any(isinstance(h, FlushingStreamHandler) for h in logger.handlers)
        assert logger.level == logging.DEBUG

    def test_log_dir_adds_file_handler(self, package_logger, tmp_path):
        log_dir = tmp_path / "logs"
        logger = configure_logging(FljSettings(debug_log=True, log_dir=str(log_dir)))
        logger.warning("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in (log_dir / LOG_FILENAME).read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self, package_logger):
        configure_logging(FljSettings(debug_log=True))
        logger = configure_logging(FljSettings(debug_log=True))
        assert sum(isinstance(h, FlushingStreamHandler) for h in logger.handlers) == 1
