# vendsim/output/stock_adapter.py
from __future__ import annotations

from collections.abc import Iterable, Sequence

from vendsim.events import LOW_STOCK, REFILL, SALE, STOCK_OK, MachineEvent
from vendsim.machines import Machine

from .base import Adapter


def _stock_lines(
    machines: Sequence[Machine], machine_id: str, quantity: int, sign: str
) -> list[str]:
    lines: list[str] = []
    for machine in machines:
        if machine.id == machine_id:
            after = machine.stock_level + quantity if sign == "+" else machine.stock_level - quantity
            lines.append(
                f"Machine {machine.id} remainer stock {machine.stock_level} {sign} {quantity} = {after}"
            )
        else:
            lines.append(f"Machine {machine.id} remainer stock {machine.stock_level}")
    return lines


class SaleAdapter(Adapter):
    """Render a sale against the stock levels before it is applied."""

    def transform(self, event: MachineEvent, machines: Sequence[Machine]) -> Iterable[str]:
        if event.type != SALE:
            return []

        lines = [f"Sale machine {event.machine_id} with {event.quantity}"]
        lines.extend(_stock_lines(machines, event.machine_id, event.quantity, "-"))
        lines.append("")
        return lines


class RefillAdapter(Adapter):
    """Render a refill against the stock levels before it is applied."""

    def transform(self, event: MachineEvent, machines: Sequence[Machine]) -> Iterable[str]:
        if event.type != REFILL:
            return []

        lines = [f"Refill machine {event.machine_id} with {event.quantity}"]
        lines.extend(_stock_lines(machines, event.machine_id, event.quantity, "+"))
        lines.append("")
        return lines


class StockAlertAdapter(Adapter):
    """Render low-stock warnings and recoveries as single lines."""

    def transform(self, event: MachineEvent, machines: Sequence[Machine]) -> Iterable[str]:
        if event.type == LOW_STOCK:
            return [f"Low stock warning machine {event.machine_id}: {event.stock_level} remaining"]
        if event.type == STOCK_OK:
            return [f"Stock level ok machine {event.machine_id}: {event.stock_level} remaining"]
        return []
