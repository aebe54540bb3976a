"""Trigger - in-process named-event listener registry."""

from trigger.config import TriggerConfig
from trigger.config import config_context
from trigger.config import get_config
from trigger.config import reset_config
from trigger.config import set_config
from trigger.config import update_config
from trigger.errors import ConfigurationError
from trigger.errors import InvalidArgumentError
from trigger.errors import TriggerError
from trigger.factory import create
from trigger.registry import EventRegistry
from trigger.registry import Subscription

__all__ = [
    "ConfigurationError",
    "EventRegistry",
    "InvalidArgumentError",
    "Subscription",
    "TriggerConfig",
    "TriggerError",
    "__version__",
    "config_context",
    "create",
    "get_config",
    "reset_config",
    "set_config",
    "update_config",
]
__version__ = "0.1.0"
