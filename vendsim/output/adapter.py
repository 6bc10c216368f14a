# vendsim/output/adapter.py
from __future__ import annotations

from collections.abc import Iterable, Sequence

from vendsim.events import LOW_STOCK, REFILL, SALE, STOCK_OK, MachineEvent
from vendsim.machines import Machine

from .base import Adapter
from .stock_adapter import RefillAdapter, SaleAdapter, StockAlertAdapter


class MachineEventAdapter(Adapter):
    """Dispatch events to the proper stock adapter."""

    def __init__(self) -> None:
        alerts = StockAlertAdapter()
        self.adapters: dict[str, Adapter] = {
            SALE: SaleAdapter(),
            REFILL: RefillAdapter(),
            LOW_STOCK: alerts,
            STOCK_OK: alerts,
        }

    def transform(self, event: MachineEvent, machines: Sequence[Machine]) -> Iterable[str]:
        adapter = self.adapters.get(event.type)
        if adapter is None:
            return []
        return adapter.transform(event, machines)
