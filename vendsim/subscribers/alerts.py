"""
Stock alert handlers.

These two handlers switch sales off and on by changing the dispatcher's
subscriptions from inside their own delivery.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.events import SALE, MachineEvent
from vendsim.machines import Machine
from vendsim.subscribers.base import Report, StockSubscriber
from vendsim.subscribers.sale import MachineSaleSubscriber

logger = logging.getLogger(__name__)


class LowStockWarningSubscriber(StockSubscriber):
    """
    Reports low stock and suspends sales.

    Sales are suspended only when the watched sale handler is pending,
    meaning the warning came out of a sale whose decrement has already
    been applied. Warnings published from anywhere else are reported and
    nothing more.
    """

    kind = "machine.low_stock"

    def __init__(
        self,
        machines: Sequence[Machine],
        sale_subscriber: MachineSaleSubscriber,
        report: Report | None = None,
        **kwargs,
    ) -> None:
        super().__init__(machines, report=report, **kwargs)
        self.sale_subscriber = sale_subscriber

    def handle(self, dispatcher: PublishSubscribeService, event: MachineEvent) -> None:
        self.emit_report(event)

        if not self.sale_subscriber.pending:
            return

        logger.info("Suspending sales: machine %s is low on stock", event.machine_id)
        dispatcher.unsubscribe(SALE, self.sale_subscriber)


class StockLevelOkSubscriber(StockSubscriber):
    """
    Reports recovered stock and resumes sales once no machine is low.

    On resume the sale handler is put back ahead of any other sale
    subscriber, restoring the order ``register`` set up.
    """

    kind = "machine.stock_ok"

    def __init__(
        self,
        machines: Sequence[Machine],
        sale_subscriber: MachineSaleSubscriber,
        report: Report | None = None,
        **kwargs,
    ) -> None:
        super().__init__(machines, report=report, **kwargs)
        self.sale_subscriber = sale_subscriber

    def handle(self, dispatcher: PublishSubscribeService, event: MachineEvent) -> None:
        self.emit_report(event)

        if any(self.is_low(machine) for machine in self.machines):
            return

        if dispatcher.is_subscribed(SALE, self.sale_subscriber):
            return

        logger.info("Resuming sales: all machines are back above threshold")
        # Sale handler first, observers such as the journal after it.
        followers = [subscription.handler for subscription in dispatcher.subscriptions(SALE)]
        dispatcher.unsubscribe(SALE)
        dispatcher.subscribe(SALE, self.sale_subscriber)
        for handler in followers:
            dispatcher.subscribe(SALE, handler)
