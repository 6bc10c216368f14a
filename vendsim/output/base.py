# vendsim/output/base.py
from __future__ import annotations

from collections.abc import Iterable, Sequence

from vendsim.events import MachineEvent
from vendsim.machines import Machine


class Adapter:
    """Base adapter for rendering machine events as report lines."""

    def transform(self, event: MachineEvent, machines: Sequence[Machine]) -> Iterable[str]:
        """Override in subclasses."""
        return []
