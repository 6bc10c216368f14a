"""
Random machine event feed.

Generates the everyday mix of purchases and refills across a floor of
machines. Deterministic for a given seed.
"""

import random
from collections.abc import Sequence

from vendsim.engine.simulation_engine import EventFeed
from vendsim.events import MachineEvent, MachineRefillEvent, MachineSaleEvent

SALE_QUANTITIES = (1, 2)
REFILL_QUANTITIES = (3, 5)


class RandomMachineEventFeed(EventFeed):
    """
    Produces random sale and refill events.

    Half the events are sales of 1 or 2 units, the rest refills of 3 or 5
    units. The target machine is chosen uniformly.
    """

    def __init__(self, machine_ids: Sequence[str], rate: float = 1.0, seed: int = 42):
        """
        Args:
            machine_ids: Machines events may target
            rate: Average events per second for generate_events()
            seed: Random seed for determinism
        """
        if not machine_ids:
            raise ValueError("RandomMachineEventFeed needs at least one machine id")

        self.machine_ids = list(machine_ids)
        self.rate = rate
        self.seed = seed

    def generate(self, count: int) -> list[MachineEvent]:
        """
        Generate ``count`` events at t = 0, 1, 2, ...
        """
        rng = random.Random(self.seed)
        return [self._random_event(rng, t) for t in range(count)]

    def generate_events(self, duration: int) -> list[MachineEvent]:
        """
        Generate events spread at random over ``duration`` seconds.

        Args:
            duration: Simulation duration in seconds

        Returns:
            Events sorted by ``t``
        """
        rng = random.Random(self.seed)
        total_events = int(duration * self.rate)

        events = [
            self._random_event(rng, rng.randint(0, duration))
            for _ in range(total_events)
        ]
        return sorted(events, key=lambda event: event.t)

    def _random_event(self, rng: random.Random, t: int) -> MachineEvent:
        machine_id = rng.choice(self.machine_ids)
        if rng.random() < 0.5:
            return MachineSaleEvent(machine_id, t=t, quantity=rng.choice(SALE_QUANTITIES))
        return MachineRefillEvent(machine_id, t=t, quantity=rng.choice(REFILL_QUANTITIES))
