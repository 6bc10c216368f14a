"""
Subscriber contract for the vendsim dispatcher.

Every handler registered with the dispatcher derives from ``Subscriber``.
A subscriber carries two things the dispatcher relies on:

- ``kind``: an explicit, stable identifier for the handler kind. The
  registry compares subscriptions by kind, not by object reference.
- ``pending``: the in-flight flag. The dispatcher sets it immediately
  before calling ``handle`` and restores it as soon as ``handle`` exits.
  Other handlers may read it to tell whether this handler is currently
  processing the event being delivered.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from vendsim.engine.dispatcher import PublishSubscribeService
    from vendsim.events import MachineEvent


class Subscriber(ABC):
    """
    Base class for event handlers.

    Identity policy: two independent instances that share a ``kind`` are
    indistinguishable to the registry. Subscribing a second instance of a
    kind for a type it already holds is ignored, and unsubscribing any
    instance of that kind removes the registered one. Subclasses that need
    separate registry slots must declare distinct kinds.
    """

    kind: ClassVar[str] = ""

    def __init__(self) -> None:
        if not type(self).kind:
            raise TypeError(
                f"{type(self).__name__} must declare a non-empty 'kind'"
            )
        self._pending: bool = False

    @property
    def pending(self) -> bool:
        """
        True only while the dispatcher is inside this handler's ``handle``.
        """
        return self._pending

    @abstractmethod
    def handle(
        self, dispatcher: PublishSubscribeService, event: MachineEvent
    ) -> None:
        """
        Process a delivered event.

        The dispatcher passes itself in so the handler may subscribe,
        unsubscribe or publish while it runs.
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} kind={self.kind!r} pending={self._pending}>"
