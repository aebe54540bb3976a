"""Attach registry operations to an existing object."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from trigger.errors import InvalidArgumentError
from trigger.registry import EventRegistry

logger = logging.getLogger(__name__)

OPERATIONS = (
    "on",
    "off",
    "fire",
    "fire_async",
    "listener_count",
    "has_listeners",
    "has_listener",
    "active_events",
)


_MISSING = object()


def _reject(target: Any, cause: Exception | None = None) -> InvalidArgumentError:
    return InvalidArgumentError(
        f'"target" does not accept attributes: {type(target).__name__}',
        argument="target",
        expected="object with writable attributes",
        cause=cause,
    )


def _attach(target: Any, registry: EventRegistry) -> None:
    """Bind every operation onto ``target``, or none of them."""
    namespace = vars(target)
    previous: dict[str, Any] = {}
    try:
        for name in OPERATIONS:
            before = namespace.get(name, _MISSING)
            setattr(target, name, getattr(registry, name))
            previous[name] = before
    except (AttributeError, TypeError) as e:
        # read-only properties, frozen dataclasses, builtin types
        for name, before in previous.items():
            if before is _MISSING:
                delattr(target, name)
            else:
                setattr(target, name, before)
        raise _reject(target, e) from e


def create(
    target: Any = None,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
    isolate_errors: bool | None = None,
) -> Any:
    """Create a trigger.

    With no ``target`` a new :class:`EventRegistry` is returned. Otherwise a
    private registry owned by ``target`` is created and its operations are
    bound onto ``target`` as attributes, replacing any existing attributes of
    the same names. Classes, modules and functions are valid targets.

    Args:
        target: Object to receive the trigger operations.
        loop: Event loop for ``fire_async``, see :class:`EventRegistry`.
        isolate_errors: Per-registry listener error isolation override.

    Returns:
        The augmented ``target``, or the new registry.

    Raises:
        InvalidArgumentError: If ``target`` cannot hold attributes. The
            target is left unchanged.
    """
    if target is None:
        return EventRegistry(loop=loop, isolate_errors=isolate_errors)

    if not hasattr(target, "__dict__"):
        raise _reject(target)

    registry = EventRegistry(target, loop=loop, isolate_errors=isolate_errors)
    _attach(target, registry)
    logger.debug("Attached trigger operations to %r", target)
    return target
