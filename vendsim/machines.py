"""
Vending machine stock records.

Machines are plain mutable records shared by the stock subscribers. The
dispatcher never sees them.
"""

from typing import Any, Iterable

DEFAULT_STOCK_LEVEL = 10
DEFAULT_MACHINE_IDS = ("001", "002", "003")


class Machine:
    """A single machine and its remaining stock."""

    def __init__(self, machine_id: str, stock_level: int = DEFAULT_STOCK_LEVEL) -> None:
        self.id = machine_id
        self.stock_level = stock_level

    def __repr__(self) -> str:
        return f"Machine(id={self.id!r}, stock_level={self.stock_level})"


def default_machines() -> list[Machine]:
    """
    Return the standard floor: three machines with full stock.
    """
    return [Machine(machine_id) for machine_id in DEFAULT_MACHINE_IDS]


def build_machines(specs: Iterable[dict[str, Any]]) -> list[Machine]:
    """
    Build machines from scenario ``machines`` entries.

    Each entry needs an ``id`` and may give a starting ``stock``.
    """
    machines: list[Machine] = []
    seen: set[str] = set()

    for spec in specs:
        if not isinstance(spec, dict) or "id" not in spec:
            raise ValueError(f"Machine entry must be a mapping with an 'id': {spec!r}")

        machine_id = str(spec["id"])
        if machine_id in seen:
            raise ValueError(f"Duplicate machine id {machine_id!r}")

        stock = int(spec.get("stock", DEFAULT_STOCK_LEVEL))
        if stock < 0:
            raise ValueError(f"Machine {machine_id} cannot start with negative stock")

        seen.add(machine_id)
        machines.append(Machine(machine_id, stock))

    return machines


def find_machine(machines: Iterable[Machine], machine_id: str) -> Machine | None:
    for machine in machines:
        if machine.id == machine_id:
            return machine
    return None
