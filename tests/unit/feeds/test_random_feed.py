"""Unit tests for the random machine event feed using pytest."""

import pytest

from vendsim.engine.simulation_engine import EventFeed
from vendsim.events import REFILL, SALE
from vendsim.feeds.random_feed import RandomMachineEventFeed

MACHINES = ["001", "002", "003"]


class TestRandomFeedInit:
    """Test RandomMachineEventFeed initialization."""

    def test_default_parameters(self):
        feed = RandomMachineEventFeed(MACHINES)
        assert feed.machine_ids == MACHINES
        assert feed.rate == 1.0
        assert feed.seed == 42

    def test_custom_parameters(self):
        feed = RandomMachineEventFeed(["X"], rate=2.5, seed=999)
        assert feed.rate == 2.5
        assert feed.seed == 999

    def test_requires_machines(self):
        with pytest.raises(ValueError):
            RandomMachineEventFeed([])

    def test_is_event_feed(self):
        assert isinstance(RandomMachineEventFeed(MACHINES), EventFeed)


class TestGenerate:
    """Test generate(count)."""

    @pytest.fixture
    def feed(self):
        return RandomMachineEventFeed(MACHINES, seed=7)

    def test_count_and_times(self, feed):
        events = feed.generate(5)
        assert len(events) == 5
        assert [event.t for event in events] == [0, 1, 2, 3, 4]

    def test_zero_count(self, feed):
        assert feed.generate(0) == []

    def test_deterministic_for_seed(self, feed):
        assert feed.generate(20) == RandomMachineEventFeed(MACHINES, seed=7).generate(20)

    def test_different_seeds_differ(self):
        first = RandomMachineEventFeed(MACHINES, seed=1).generate(50)
        second = RandomMachineEventFeed(MACHINES, seed=2).generate(50)
        assert first != second

    def test_quantities_and_targets(self, feed):
        events = feed.generate(200)
        for event in events:
            assert event.machine_id in MACHINES
            if event.type == SALE:
                assert event.quantity in (1, 2)
            else:
                assert event.type == REFILL
                assert event.quantity in (3, 5)

    def test_mix_of_sales_and_refills(self, feed):
        types = {event.type for event in feed.generate(200)}
        assert types == {SALE, REFILL}


class TestGenerateEvents:
    """Test generate_events(duration)."""

    def test_count_follows_rate(self):
        feed = RandomMachineEventFeed(MACHINES, rate=0.5, seed=3)
        assert len(feed.generate_events(100)) == 50

    def test_zero_rate(self):
        feed = RandomMachineEventFeed(MACHINES, rate=0.0)
        assert feed.generate_events(100) == []

    def test_sorted_within_duration(self):
        feed = RandomMachineEventFeed(MACHINES, rate=2.0, seed=3)
        times = [event.t for event in feed.generate_events(30)]
        assert times == sorted(times)
        assert all(0 <= t <= 30 for t in times)
