"""Global configuration management for trigger registries.

Registries read the current configuration each time they fire, so changes
made here take effect on the next dispatch.
"""

from __future__ import annotations

from dataclasses import fields
from dataclasses import replace
import logging
import threading
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    import types

from trigger.config.trigger_config import DEFAULT_CONFIG
from trigger.config.trigger_config import TriggerConfig

logger = logging.getLogger(__name__)

_CONFIG_KEYS = frozenset(f.name for f in fields(TriggerConfig))


class ConfigManager:
    """Thread-safe manager for process-wide configuration state."""

    def __init__(self, default_config: TriggerConfig) -> None:
        self._lock = threading.RLock()
        self._default_config = default_config
        self._current_config = default_config

    def get_config(self) -> TriggerConfig:
        """Get the current configuration in a thread-safe manner."""
        with self._lock:
            return self._current_config

    def set_config(self, config: TriggerConfig) -> None:
        """Set the current configuration in a thread-safe manner."""
        with self._lock:
            config.validate()
            self._current_config = config

    def _apply(self, changes: dict[str, Any]) -> tuple[TriggerConfig, TriggerConfig]:
        unknown_keys = sorted(set(changes) - _CONFIG_KEYS)
        if unknown_keys:
            logger.warning("Ignoring unknown config key(s): %s", ", ".join(unknown_keys))

        known = {k: v for k, v in changes.items() if k in _CONFIG_KEYS}
        original = self._current_config
        new_config = replace(original, **known)
        new_config.validate()
        self._current_config = new_config
        return original, new_config

    def update_config(self, **kwargs: Any) -> None:
        """Update the current configuration with new values."""
        with self._lock:
            self._apply(kwargs)

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        with self._lock:
            self._current_config = self._default_config

    def apply_context_changes(self, changes: dict[str, Any]) -> tuple[TriggerConfig, TriggerConfig]:
        """Apply temporary configuration changes atomically.

        Returns:
            Tuple of (original_config, new_config).
        """
        with self._lock:
            return self._apply(changes)

    def restore_config(self, config: TriggerConfig) -> None:
        """Restore a previously captured configuration."""
        with self._lock:
            self._current_config = config


_config_manager = ConfigManager(DEFAULT_CONFIG)


def get_config() -> TriggerConfig:
    """Get the current configuration.

    Returns:
        The current TriggerConfig instance
    """
    return _config_manager.get_config()


def set_config(config: TriggerConfig) -> None:
    """Replace the current configuration.

    Args:
        config: The new configuration to set

    Raises:
        ConfigurationError: If ``config`` does not validate.
    """
    _config_manager.set_config(config)


def update_config(**kwargs: Any) -> None:
    """Update the current configuration with new values.

    Args:
        **kwargs: Configuration values to update
    """
    _config_manager.update_config(**kwargs)


def reset_config() -> None:
    """Reset configuration to defaults."""
    _config_manager.reset_config()


class ConfigContext:
    """Context manager for temporary configuration changes.

    The configuration in effect on entry is restored on exit.
    """

    def __init__(self, **kwargs: Any):
        self._manager = _config_manager
        self._changes = kwargs
        self._original_config: TriggerConfig | None = None

    def __enter__(self) -> TriggerConfig:
        self._original_config, new_config = self._manager.apply_context_changes(self._changes)
        return new_config

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        if self._original_config is not None:
            self._manager.restore_config(self._original_config)


def config_context(**kwargs: Any) -> ConfigContext:
    """Create a context manager for temporary configuration changes."""
    return ConfigContext(**kwargs)
