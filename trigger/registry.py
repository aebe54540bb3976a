"""Named-event listener registry.

An :class:`EventRegistry` maps event names to the listeners registered for
them, in registration order. ``fire`` delivers to a snapshot of those
listeners taken when the firing starts, so listeners may register or remove
listeners (themselves included) without disturbing the delivery in progress.
``fire_async`` defers the same firing to a later turn of the asyncio event
loop.
"""

from __future__ import annotations

import asyncio
import logging
import types
from typing import Any
from typing import Callable

from trigger.config import get_config
from trigger.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]

# C-implemented bound methods such as ``some_list.append``
_BOUND_BUILTINS = (types.BuiltinMethodType, types.MethodWrapperType)


def _same_listener(a: Listener, b: Listener) -> bool:
    """Identity comparison that treats re-bound methods as the same listener."""
    if a is b:
        return True
    if isinstance(a, types.MethodType) and isinstance(b, types.MethodType):
        return a.__self__ is b.__self__ and a.__func__ is b.__func__
    if isinstance(a, _BOUND_BUILTINS) and type(a) is type(b):
        return a.__self__ is b.__self__ and a.__name__ == b.__name__
    return False


def _check_event(event: Any) -> None:
    if not isinstance(event, str):
        raise InvalidArgumentError(
            f'"event" not a str: {type(event).__name__}',
            argument="event",
            expected="str",
        )


def _check_listener(fn: Any) -> None:
    if not callable(fn):
        raise InvalidArgumentError(
            f'"fn" not callable: {type(fn).__name__}',
            argument="fn",
            expected="callable",
        )


class Subscription:
    """Cancellation handle for one registration.

    Returned by :meth:`EventRegistry.subscribe`. Usable as a context manager
    that cancels the registration on exit.
    """

    def __init__(self, registry: EventRegistry, event: str, listener: Listener) -> None:
        self._registry = registry
        self.event = event
        self.listener = listener

    @property
    def active(self) -> bool:
        return self._registry.has_listener(self.event, self.listener)

    def cancel(self) -> bool:
        """Unregister the listener. Returns False if it was already gone."""
        return self._registry.off(self.event, self.listener)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()

    def __repr__(self) -> str:
        state = "active" if self.active else "cancelled"
        return f"<Subscription event={self.event!r} listener={self.listener!r} {state}>"


class EventRegistry:
    """Registry of listeners keyed by event name.

    Args:
        owner: Object returned from ``fire``/``fire_async`` for chaining.
            Defaults to the registry itself.
        loop: Event loop used by ``fire_async``. When omitted the running
            loop at call time is used.
        isolate_errors: Per-registry override of
            ``TriggerConfig.isolate_listener_errors``. ``None`` follows the
            process-wide setting.
    """

    def __init__(
        self,
        owner: Any = None,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
        isolate_errors: bool | None = None,
    ) -> None:
        self._listeners: dict[str, list[Listener]] = {}
        self._owner = self if owner is None else owner
        self._loop = loop
        self._isolate_errors = isolate_errors

    @property
    def owner(self) -> Any:
        return self._owner

    def _registered(self, event: Any) -> list[Listener]:
        # Lookups tolerate any event value; only mutation and dispatch validate.
        if not isinstance(event, str):
            return []
        return self._listeners.get(event, [])

    def _find(self, event: str, fn: Listener) -> int:
        for index, registered in enumerate(self._registered(event)):
            if _same_listener(registered, fn):
                return index
        return -1

    def on(self, event: str, fn: Listener) -> bool:
        """Register ``fn`` for ``event``.

        Returns:
            True if the listener was added, False if it was already
            registered for this event.

        Raises:
            InvalidArgumentError: If ``event`` is not a str or ``fn`` is not
                callable.
        """
        _check_event(event)
        _check_listener(fn)

        if self._find(event, fn) >= 0:
            return False
        self._listeners.setdefault(event, []).append(fn)
        logger.debug("Registered listener %r for event %r", fn, event)
        return True

    def off(self, event: str, fn: Listener | None = None) -> bool:
        """Unregister ``fn`` from ``event``, or every listener when ``fn`` is omitted.

        Returns:
            True if anything was removed.

        Raises:
            InvalidArgumentError: If ``event`` is not a str or ``fn`` is given
                and not callable.
        """
        _check_event(event)
        if fn is not None:
            _check_listener(fn)

        listeners = self._listeners.get(event)
        if not listeners:
            return False

        if fn is None:
            del self._listeners[event]
            logger.debug("Removed all %d listener(s) for event %r", len(listeners), event)
            return True

        index = self._find(event, fn)
        if index < 0:
            return False
        del listeners[index]
        if not listeners:
            del self._listeners[event]
        logger.debug("Removed listener %r for event %r", fn, event)
        return True

    def subscribe(self, event: str, fn: Listener) -> Subscription:
        """Register ``fn`` for ``event`` and return a handle that can cancel it."""
        self.on(event, fn)
        return Subscription(self, event, fn)

    def _should_isolate(self) -> bool:
        if self._isolate_errors is not None:
            return self._isolate_errors
        return get_config().isolate_listener_errors

    def fire(self, event: str, *args: Any) -> Any:
        """Invoke every listener registered for ``event`` with ``args``.

        Listeners run synchronously, in registration order, against a snapshot
        of the registrations at the time of the call. Unless error isolation
        is enabled, the first listener exception propagates and the rest of
        the snapshot is skipped.

        Returns:
            The registry owner.
        """
        _check_event(event)

        listeners = self._listeners.get(event)
        if not listeners:
            return self._owner

        snapshot = tuple(listeners)
        logger.debug("Firing event %r to %d listener(s)", event, len(snapshot))

        if not self._should_isolate():
            for fn in snapshot:
                fn(*args)
            return self._owner

        for fn in snapshot:
            try:
                fn(*args)
            except Exception:
                logger.exception("error in listener %r for event %r", fn, event)
        return self._owner

    def fire_async(self, event: str, *args: Any) -> Any:
        """Schedule ``fire(event, *args)`` on a later turn of the event loop.

        The listener snapshot is taken when the scheduled call runs. Deferred
        firings run in the order they were scheduled.

        Returns:
            The registry owner, before any listener has run.

        Raises:
            InvalidArgumentError: If ``event`` is not a str.
            RuntimeError: If no loop was given and none is running.
        """
        _check_event(event)

        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        loop.call_soon(self.fire, event, *args)
        return self._owner

    def listener_count(self, event: str) -> int:
        return len(self._registered(event))

    def has_listeners(self, event: str) -> bool:
        return self.listener_count(event) > 0

    def has_listener(self, event: str, fn: Listener) -> bool:
        return self._find(event, fn) >= 0

    def active_events(self) -> list[str]:
        """Names of events with at least one listener, in no particular order."""
        return list(self._listeners)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} events={len(self._listeners)}>"
