"""Tests for init() and get_config()."""

import logging

import pytest

import fundament
from fundament import Config, get_config, init


@pytest.fixture
def restore_root_logger():
    """Undo the handler and level changes init() makes to the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv('FUNDAMENT_LOG_LEVEL', raising=False)
    monkeypatch.delenv('FUNDAMENT_LOG_FORMAT', raising=False)
    return monkeypatch


@pytest.mark.usefixtures('reset_config', 'restore_root_logger')
class TestInit:
    def test_get_config_before_init(self):
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_defaults(self, clean_env):
        config = init()
        assert config == Config(log_level=None, json_logs=True)
        assert get_config() is config

    def test_silent_by_default(self, clean_env):
        root = logging.getLogger()
        handlers = root.handlers[:]
        init()
        assert root.handlers == handlers

    def test_explicit_arguments(self, clean_env):
        config = init(log_level='debug', json_logs=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False
        assert logging.getLogger().level == logging.DEBUG

    def test_level_from_env(self, clean_env):
        clean_env.setenv('FUNDAMENT_LOG_LEVEL', ' warning ')
        assert init().log_level == 'WARNING'
        assert logging.getLogger().level == logging.WARNING

    def test_console_format_from_env(self, clean_env):
        clean_env.setenv('FUNDAMENT_LOG_FORMAT', 'Console')
        assert init().json_logs is False

    def test_json_format_from_env(self, clean_env):
        clean_env.setenv('FUNDAMENT_LOG_FORMAT', 'json')
        assert init().json_logs is True

    def test_unknown_format_warns(self, clean_env, caplog):
        clean_env.setenv('FUNDAMENT_LOG_FORMAT', 'xml')
        with caplog.at_level(logging.WARNING, logger='fundament._config'):
            assert init().json_logs is True
        assert any(r.getMessage() == 'unknown log format, defaulting to json' for r in caplog.records)

    def test_arguments_override_env(self, clean_env):
        clean_env.setenv('FUNDAMENT_LOG_LEVEL', 'ERROR')
        clean_env.setenv('FUNDAMENT_LOG_FORMAT', 'console')
        config = init(log_level='INFO', json_logs=True)
        assert config == Config(log_level='INFO', json_logs=True)

    def test_config_is_frozen(self, clean_env):
        config = init()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]

    def test_reinit_replaces_config(self, clean_env):
        init(log_level='INFO')
        init(log_level='ERROR')
        assert fundament.get_config().log_level == 'ERROR'
