"""
Inventory events published through the vendsim dispatcher.

Events are immutable. Each class fixes its ``type`` tag; instances carry
the machine they concern, the simulated second ``t`` at which they
happened, and a kind-specific payload.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar

SALE = "sale"
REFILL = "refill"
LOW_STOCK = "low_stock"
STOCK_OK = "stock_ok"

EVENT_TYPES = (SALE, REFILL, LOW_STOCK, STOCK_OK)


@dataclass(frozen=True)
class MachineEvent:
    """Base event: something happened to one machine."""

    type: ClassVar[str] = ""

    machine_id: str
    t: int = 0


@dataclass(frozen=True)
class MachineSaleEvent(MachineEvent):
    type: ClassVar[str] = SALE

    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(f"Sale quantity must be positive, got {self.quantity}")


@dataclass(frozen=True)
class MachineRefillEvent(MachineEvent):
    type: ClassVar[str] = REFILL

    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(f"Refill quantity must be positive, got {self.quantity}")


@dataclass(frozen=True)
class LowStockWarningEvent(MachineEvent):
    type: ClassVar[str] = LOW_STOCK

    stock_level: int = 0


@dataclass(frozen=True)
class StockLevelOkEvent(MachineEvent):
    type: ClassVar[str] = STOCK_OK

    stock_level: int = 0


def _int_field(entry: dict[str, Any], key: str, default: int) -> int:
    value = entry.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(
            f"Timeline entry field {key!r} must be an integer, got {value!r}"
        ) from None


def event_from_entry(entry: dict[str, Any]) -> MachineEvent:
    """
    Build an event from a scenario timeline entry.

    Expected keys: ``type``, ``machine``, ``t`` and, depending on the type,
    ``quantity`` or ``stock``.
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Timeline entry must be a mapping: {entry!r}")

    event_type = entry.get("type")
    machine_id = entry.get("machine")
    if machine_id is None:
        raise ValueError(f"Timeline entry is missing 'machine': {entry!r}")

    machine_id = str(machine_id)
    t = _int_field(entry, "t", 0)

    if event_type == SALE:
        return MachineSaleEvent(machine_id, t=t, quantity=_int_field(entry, "quantity", 1))
    if event_type == REFILL:
        return MachineRefillEvent(machine_id, t=t, quantity=_int_field(entry, "quantity", 1))
    if event_type == LOW_STOCK:
        return LowStockWarningEvent(machine_id, t=t, stock_level=_int_field(entry, "stock", 0))
    if event_type == STOCK_OK:
        return StockLevelOkEvent(machine_id, t=t, stock_level=_int_field(entry, "stock", 0))

    raise ValueError(f"Unknown event type {event_type!r} in timeline entry")


def event_to_dict(event: MachineEvent) -> dict[str, Any]:
    """Flatten an event into a JSON-friendly mapping."""
    return {"type": event.type, **asdict(event)}
