"""Error types for the trigger package."""

from trigger.errors.trigger_errors import ConfigurationError
from trigger.errors.trigger_errors import InvalidArgumentError
from trigger.errors.trigger_errors import TriggerError

__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "TriggerError",
]
