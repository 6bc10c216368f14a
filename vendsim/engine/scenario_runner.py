"""
Scenario runner for the vendsim inventory simulator.

Responsibilities:

- Load a scenario definition from YAML
- Build the machines the scenario describes
- Turn the timeline into events ordered by simulated time
- Hand events to the dispatcher
"""

from pathlib import Path
from typing import Any

import yaml

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.events import MachineEvent, event_from_entry
from vendsim.machines import Machine, build_machines, default_machines
from vendsim.subscribers.base import DEFAULT_LOW_STOCK_THRESHOLD


class ScenarioRunner:
    """
    Executes a single inventory scenario.
    """

    def __init__(self, scenario_path: Path, dispatcher: PublishSubscribeService) -> None:
        self.scenario_path = scenario_path
        self.dispatcher = dispatcher
        self.scenario: dict[str, Any] = {}

    def load(self) -> None:
        """
        Load the scenario YAML from disk and validate structure.
        """
        with self.scenario_path.open("r", encoding="utf-8") as fh:
            self.scenario = yaml.safe_load(fh)

        if not isinstance(self.scenario, dict):
            raise ValueError("Scenario file must be a YAML mapping (dict)")

        if "timeline" not in self.scenario:
            raise ValueError("Scenario is missing a 'timeline' section")

        if not isinstance(self.scenario["timeline"], list):
            raise ValueError("'timeline' must be a list of events")

        machines = self.scenario.get("machines")
        if machines is not None and not isinstance(machines, list):
            raise ValueError("'machines' must be a list of machine entries")

        threshold = self.scenario.get("low_stock_threshold", DEFAULT_LOW_STOCK_THRESHOLD)
        if not isinstance(threshold, int) or threshold < 0:
            raise ValueError("'low_stock_threshold' must be a non-negative integer")

        # Fail on malformed entries now rather than mid-run
        self.events()

    @property
    def scenario_id(self) -> str | None:
        return self.scenario.get("id")

    @property
    def low_stock_threshold(self) -> int:
        return self.scenario.get("low_stock_threshold", DEFAULT_LOW_STOCK_THRESHOLD)

    def machines(self) -> list[Machine]:
        """
        Build the machines declared by the scenario, or the default floor.
        """
        specs = self.scenario.get("machines")
        if not specs:
            return default_machines()
        return build_machines(specs)

    def events(self) -> list[MachineEvent]:
        """
        Return the timeline as events sorted by ``t``.

        Entries sharing a ``t`` keep their file order.
        """
        timeline = self.scenario.get("timeline", [])
        events = [event_from_entry(entry) for entry in timeline]
        return sorted(events, key=lambda event: event.t)

    def run(self) -> None:
        """
        Publish the scenario's events from start to finish.
        """
        for event in self.events():
            self.dispatcher.publish(event)
