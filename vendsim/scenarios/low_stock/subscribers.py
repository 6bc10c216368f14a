"""
Extra subscribers for the low_stock scenario.

Tallies low-stock warnings per machine so the operator can see which
machines keep running dry.
"""

import logging
from collections import Counter
from collections.abc import Sequence

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.engine.subscriber import Subscriber
from vendsim.events import LOW_STOCK, MachineEvent
from vendsim.machines import Machine

logger = logging.getLogger(__name__)


class LowStockTally(Subscriber):
    kind = "low_stock.tally"

    def __init__(self) -> None:
        super().__init__()
        self.warnings: Counter[str] = Counter()

    def handle(self, dispatcher: PublishSubscribeService, event: MachineEvent) -> None:
        self.warnings[event.machine_id] += 1
        logger.info(
            "Machine %s has run low %d time(s)",
            event.machine_id,
            self.warnings[event.machine_id],
        )


def register(
    dispatcher: PublishSubscribeService, machines: Sequence[Machine], scenario_name: str
) -> None:
    dispatcher.subscribe(LOW_STOCK, LowStockTally())
