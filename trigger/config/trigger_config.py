"""Process-wide settings for trigger registries."""

from __future__ import annotations

from dataclasses import dataclass

from trigger.errors import ConfigurationError


@dataclass
class TriggerConfig:
    """Settings shared by every registry that does not override them.

    ``isolate_listener_errors`` switches ``fire`` from propagating the first
    listener exception to logging each failure and carrying on with the rest
    of the snapshot.
    """

    isolate_listener_errors: bool = False

    def validate(self) -> None:
        """Validate configuration and raise errors for invalid setups."""
        if not isinstance(self.isolate_listener_errors, bool):
            raise ConfigurationError(
                "isolate_listener_errors must be a bool",
                config_key="isolate_listener_errors",
                details={"value": repr(self.isolate_listener_errors)},
            )


# Default configuration instance
DEFAULT_CONFIG = TriggerConfig()
