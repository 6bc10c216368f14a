"""
Event journal: remembers every event it is handed, in delivery order.
"""

from __future__ import annotations

from typing import Any

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.engine.subscriber import Subscriber
from vendsim.events import EVENT_TYPES, MachineEvent, event_to_dict


class EventJournal(Subscriber):
    kind = "journal"

    def __init__(self) -> None:
        super().__init__()
        self.events: list[MachineEvent] = []

    def handle(self, dispatcher: PublishSubscribeService, event: MachineEvent) -> None:
        self.events.append(event)

    def attach(self, dispatcher: PublishSubscribeService) -> None:
        """Subscribe the journal to every known event type."""
        for event_type in EVENT_TYPES:
            dispatcher.subscribe(event_type, self)

    def as_dicts(self) -> list[dict[str, Any]]:
        return [event_to_dict(event) for event in self.events]
