"""Configuration management for trigger registries."""

from trigger.config.config_manager import ConfigContext
from trigger.config.config_manager import config_context
from trigger.config.config_manager import get_config
from trigger.config.config_manager import reset_config
from trigger.config.config_manager import set_config
from trigger.config.config_manager import update_config
from trigger.config.trigger_config import DEFAULT_CONFIG
from trigger.config.trigger_config import TriggerConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigContext",
    "TriggerConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    "update_config",
]
