"""
Shared plumbing for subscribers that act on machine stock.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from vendsim.engine.subscriber import Subscriber
from vendsim.events import MachineEvent
from vendsim.machines import Machine
from vendsim.output.adapter import MachineEventAdapter
from vendsim.output.base import Adapter

logger = logging.getLogger(__name__)

Report = Callable[[str], None]

DEFAULT_LOW_STOCK_THRESHOLD = 3


def log_report(line: str) -> None:
    """Default report sink: one INFO record per line."""
    logger.info("%s", line)


class StockSubscriber(Subscriber):
    """
    Base for handlers that read or change the machines' stock.

    Report lines are rendered from the stock *before* the handler applies
    its change, then handed to ``report`` one at a time.
    """

    def __init__(
        self,
        machines: Sequence[Machine],
        report: Report | None = None,
        adapter: Adapter | None = None,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        super().__init__()
        self.machines = machines
        self.report = report or log_report
        self.adapter = adapter or MachineEventAdapter()
        self.low_stock_threshold = low_stock_threshold

    def is_low(self, machine: Machine) -> bool:
        return machine.stock_level < self.low_stock_threshold

    def emit_report(self, event: MachineEvent) -> None:
        for line in self.adapter.transform(event, self.machines):
            self.report(line)
