"""
Refill handling: increment stock and announce recovery.
"""

from __future__ import annotations

import logging

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.events import MachineEvent, StockLevelOkEvent
from vendsim.machines import find_machine
from vendsim.subscribers.base import StockSubscriber

logger = logging.getLogger(__name__)


class MachineRefillSubscriber(StockSubscriber):
    """
    Applies refill events to the target machine.

    A refill that lifts a machine from below the threshold to at or above
    it publishes a ``StockLevelOkEvent``.
    """

    kind = "machine.refill"

    def handle(self, dispatcher: PublishSubscribeService, event: MachineEvent) -> None:
        machine = find_machine(self.machines, event.machine_id)
        if machine is None:
            logger.warning("Ignoring refill for unknown machine %s", event.machine_id)
            return

        self.emit_report(event)

        was_low = self.is_low(machine)
        machine.stock_level += event.quantity

        if was_low and not self.is_low(machine):
            dispatcher.publish(
                StockLevelOkEvent(machine.id, t=event.t, stock_level=machine.stock_level)
            )
