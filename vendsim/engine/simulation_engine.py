"""
Simulation engine for the vendsim inventory simulator.

The engine merges events from scenario timelines and generated feeds and
publishes them through the dispatcher in simulated-time order.
"""

from collections.abc import Iterable

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.events import MachineEvent


class EventFeed:
    """
    A feed generates time-stamped machine events independently of scenarios.

    These events represent ordinary floor activity:
    - Customer purchases
    - Routine refills
    """

    def generate_events(self, duration: int) -> list[MachineEvent]:
        """
        Generate all feed events for the simulation duration.

        Args:
            duration: Total simulation time in seconds

        Returns:
            Events ordered by their ``t``
        """
        raise NotImplementedError("Subclasses must implement generate_events()")


def run_events(events: Iterable[MachineEvent], dispatcher: PublishSubscribeService) -> int:
    """
    Publish ``events`` one after another.

    Returns:
        Number of events published
    """
    count = 0
    for event in events:
        dispatcher.publish(event)
        count += 1
    return count


def run_with_feeds(
    scenario_runner,
    feeds: list[EventFeed],
    dispatcher: PublishSubscribeService,
) -> int:
    """
    Run a scenario with feed events mixed in.

    This function:
    1. Collects the scenario's events and every feed's events
    2. Sorts them by ``t``, scenario events first on ties
    3. Publishes them in order

    Args:
        scenario_runner: Loaded ScenarioRunner instance
        feeds: List of feed instances
        dispatcher: Dispatcher to publish all events to

    Returns:
        Number of events published
    """
    scenario_events = scenario_runner.events()
    duration = max((event.t for event in scenario_events), default=60)

    tagged: list[tuple[int, int, MachineEvent]] = [
        (event.t, 0, event) for event in scenario_events
    ]
    for feed in feeds:
        tagged.extend((event.t, 1, event) for event in feed.generate_events(duration))

    tagged.sort(key=lambda item: (item[0], item[1]))

    return run_events((event for _, _, event in tagged), dispatcher)
