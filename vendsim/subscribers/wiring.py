"""
Default subscriber set for a vending floor.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.engine.subscriber import Subscriber
from vendsim.events import LOW_STOCK, REFILL, SALE, STOCK_OK
from vendsim.machines import Machine
from vendsim.subscribers.alerts import LowStockWarningSubscriber, StockLevelOkSubscriber
from vendsim.subscribers.base import DEFAULT_LOW_STOCK_THRESHOLD, Report
from vendsim.subscribers.journal import EventJournal
from vendsim.subscribers.refill import MachineRefillSubscriber
from vendsim.subscribers.sale import MachineSaleSubscriber

logger = logging.getLogger(__name__)


def register(
    dispatcher: PublishSubscribeService,
    machines: Sequence[Machine],
    report: Report | None = None,
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    journal: EventJournal | None = None,
) -> dict[str, Subscriber]:
    """
    Create the stock handlers and subscribe them to ``dispatcher``.

    Stock handlers are subscribed before the journal, so for each type the
    journal sees an event after the handlers that act on it. A floor that
    already holds a low machine starts with sales suspended; the first
    stock-ok event that leaves nothing low switches them on.

    Returns:
        The subscribers keyed by role: ``sale``, ``refill``, ``low_stock``,
        ``stock_ok`` and, when given, ``journal``.
    """
    options = {"report": report, "low_stock_threshold": low_stock_threshold}

    sale = MachineSaleSubscriber(machines, **options)
    refill = MachineRefillSubscriber(machines, **options)
    low_stock = LowStockWarningSubscriber(machines, sale, **options)
    stock_ok = StockLevelOkSubscriber(machines, sale, **options)

    low = [machine.id for machine in machines if sale.is_low(machine)]
    if low:
        logger.info("Sales start suspended: machines %s are low on stock", ", ".join(low))
    else:
        dispatcher.subscribe(SALE, sale)
    dispatcher.subscribe(REFILL, refill)
    dispatcher.subscribe(LOW_STOCK, low_stock)
    dispatcher.subscribe(STOCK_OK, stock_ok)

    subscribers: dict[str, Subscriber] = {
        "sale": sale,
        "refill": refill,
        "low_stock": low_stock,
        "stock_ok": stock_ok,
    }

    if journal is not None:
        journal.attach(dispatcher)
        subscribers["journal"] = journal

    return subscribers
