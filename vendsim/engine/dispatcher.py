"""
Publish/subscribe dispatcher for the vendsim inventory simulator.

The dispatcher owns an ordered registry of ``(event_type, handler)``
subscriptions and delivers each published event to the handlers
registered for its type, in registration order.

Handlers run synchronously and receive the dispatcher itself, so they may
subscribe or unsubscribe while an event is being delivered. Such changes
never alter the recipients of the publish call that is already under way:
``publish`` freezes the matching subscriptions before invoking anyone.
They apply from the next publish call onwards.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, NamedTuple

from vendsim.engine.subscriber import Subscriber
from vendsim.events import MachineEvent

logger = logging.getLogger(__name__)


class Subscription(NamedTuple):
    """A single registry record."""

    event_type: str
    handler: Subscriber

    def matches(self, event_type: str, kind: str | None = None) -> bool:
        if self.event_type != event_type:
            return False
        return kind is None or self.handler.kind == kind


@contextmanager
def _in_flight(handler: Subscriber) -> Iterator[None]:
    """
    Mark ``handler`` as pending for the duration of the block.

    The previous value is restored rather than forced to False, so a
    handler re-entered through a nested publish stays pending until its
    outer invocation returns.
    """
    previous = handler._pending
    handler._pending = True
    try:
        yield
    finally:
        handler._pending = previous


class PublishSubscribeService:
    """
    Synchronous, single-threaded event dispatcher.

    If a handler raises, the exception propagates to the caller of
    ``publish`` and the remaining recipients of that call are skipped.
    The failing handler's pending flag is restored before the exception
    leaves the dispatcher.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def subscribe(self, event_type: str, handler: Subscriber) -> None:
        """
        Register ``handler`` for ``event_type``.

        A no-op if a handler of the same kind already holds that type.
        """
        if self.is_subscribed(event_type, handler):
            logger.debug(
                "Ignoring duplicate subscription of %s to %r",
                handler.kind,
                event_type,
            )
            return

        self._subscriptions.append(Subscription(event_type, handler))
        logger.debug("Subscribed %s to %r", handler.kind, event_type)

    def unsubscribe(self, event_type: str, handler: Subscriber | None = None) -> None:
        """
        Remove subscriptions for ``event_type``.

        Without ``handler`` every subscription for the type is removed;
        with one, only those of the same kind. Nothing matching is fine.
        """
        kind = handler.kind if handler is not None else None
        kept = [s for s in self._subscriptions if not s.matches(event_type, kind)]
        removed = len(self._subscriptions) - len(kept)
        self._subscriptions = kept
        logger.debug(
            "Unsubscribed %d handler(s) of kind %s from %r",
            removed,
            kind or "*",
            event_type,
        )

    def publish(self, event: MachineEvent) -> None:
        """
        Deliver ``event`` to every handler registered for its type.
        """
        if not self._subscriptions:
            return

        recipients = tuple(s.handler for s in self._subscriptions if s.matches(event.type))
        logger.debug(
            "Publishing %r for machine %s to %d handler(s)",
            event.type,
            event.machine_id,
            len(recipients),
        )

        for handler in recipients:
            with _in_flight(handler):
                handler.handle(self, event)

    def is_subscribed(self, event_type: str, handler: Subscriber) -> bool:
        """
        Whether a handler of ``handler``'s kind is registered for the type.
        """
        return any(s.matches(event_type, handler.kind) for s in self._subscriptions)

    def subscriptions(self, event_type: str | None = None) -> tuple[Subscription, ...]:
        """
        Return a copy of the registry, optionally filtered by type.
        """
        if event_type is None:
            return tuple(self._subscriptions)
        return tuple(s for s in self._subscriptions if s.matches(event_type))
