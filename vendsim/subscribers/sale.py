"""
Sale handling: decrement stock and raise low-stock warnings.
"""

from __future__ import annotations

import logging

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.events import LowStockWarningEvent, MachineEvent
from vendsim.machines import find_machine
from vendsim.subscribers.base import StockSubscriber

logger = logging.getLogger(__name__)


class MachineSaleSubscriber(StockSubscriber):
    """
    Applies sale events to the target machine.

    A sale is refused, with a warning, when the machine is unknown or does
    not hold enough stock. Every completed sale that leaves the machine
    below the low stock threshold publishes a ``LowStockWarningEvent``
    while this handler is still in flight.
    """

    kind = "machine.sale"

    def handle(self, dispatcher: PublishSubscribeService, event: MachineEvent) -> None:
        machine = find_machine(self.machines, event.machine_id)
        if machine is None:
            logger.warning("Ignoring sale for unknown machine %s", event.machine_id)
            return

        if event.quantity > machine.stock_level:
            logger.warning(
                "Machine %s holds %d, refusing sale of %d",
                machine.id,
                machine.stock_level,
                event.quantity,
            )
            return

        self.emit_report(event)

        machine.stock_level -= event.quantity

        if self.is_low(machine):
            dispatcher.publish(
                LowStockWarningEvent(machine.id, t=event.t, stock_level=machine.stock_level)
            )
