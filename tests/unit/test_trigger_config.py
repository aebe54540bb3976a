"""Tests for process-wide trigger configuration."""

import logging

import pytest

from trigger.config import DEFAULT_CONFIG
from trigger.config import TriggerConfig
from trigger.config import config_context
from trigger.config import get_config
from trigger.config import reset_config
from trigger.config import set_config
from trigger.config import update_config
from trigger.errors import ConfigurationError


class TestTriggerConfig:
    def test_default_config(self) -> None:
        config = TriggerConfig()

        assert config.isolate_listener_errors is False
        config.validate()

    def test_validate_rejects_non_bool(self) -> None:
        config = TriggerConfig(isolate_listener_errors="yes")  # type: ignore[arg-type]

        with pytest.raises(ConfigurationError) as excinfo:
            config.validate()
        assert excinfo.value.config_key == "isolate_listener_errors"


class TestConfigManager:
    def test_get_config_defaults(self) -> None:
        assert get_config() is DEFAULT_CONFIG

    def test_set_and_reset_config(self) -> None:
        custom = TriggerConfig(isolate_listener_errors=True)
        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config() is DEFAULT_CONFIG

    def test_set_config_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            set_config(TriggerConfig(isolate_listener_errors=1))  # type: ignore[arg-type]
        assert get_config() is DEFAULT_CONFIG

    def test_update_config_leaves_defaults_untouched(self) -> None:
        update_config(isolate_listener_errors=True)

        assert get_config().isolate_listener_errors is True
        assert DEFAULT_CONFIG.isolate_listener_errors is False

    def test_update_config_warns_on_unknown_keys(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="trigger.config.config_manager"):
            update_config(bogus=1)

        assert "bogus" in caplog.text
        assert get_config().isolate_listener_errors is False

    def test_config_context_restores(self) -> None:
        with config_context(isolate_listener_errors=True) as config:
            assert config.isolate_listener_errors is True
            assert get_config() is config

        assert get_config() is DEFAULT_CONFIG

    def test_config_context_restores_after_error(self) -> None:
        with pytest.raises(RuntimeError), config_context(isolate_listener_errors=True):
            raise RuntimeError

        assert get_config().isolate_listener_errors is False
