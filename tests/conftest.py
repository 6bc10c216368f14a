"""Test configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vendsim.engine.dispatcher import PublishSubscribeService  # noqa: E402
from vendsim.engine.subscriber import Subscriber  # noqa: E402
from vendsim.machines import Machine  # noqa: E402


class RecordingSubscriber(Subscriber):
    """
    Test handler that logs its deliveries and runs an optional callback.

    Concrete kinds are created with ``make_subscriber_class``.
    """

    kind = "test.recording"

    def __init__(self, log=None, on_handle=None):
        super().__init__()
        self.log = log if log is not None else []
        self.on_handle = on_handle
        self.received = []

    def handle(self, dispatcher, event):
        self.received.append(event)
        self.log.append(self.kind)
        if self.on_handle is not None:
            self.on_handle(dispatcher, event)


def make_subscriber_class(kind):
    """Return a RecordingSubscriber subclass with its own ``kind``."""
    class KindedSubscriber(RecordingSubscriber):
        pass

    KindedSubscriber.kind = kind
    KindedSubscriber.__name__ = f"Recording_{kind}"
    return KindedSubscriber


@pytest.fixture
def dispatcher():
    return PublishSubscribeService()


@pytest.fixture
def mock_dispatcher():
    """Mock dispatcher for subscriber and engine tests."""
    return Mock(spec=PublishSubscribeService)


@pytest.fixture
def machines():
    """Three machines with full stock."""
    return [Machine("001"), Machine("002"), Machine("003")]


@pytest.fixture
def report_lines():
    """Collects report lines; pass ``report_lines.append`` as the sink."""
    return []


@pytest.fixture
def subscriber_class():
    """Factory for recording subscriber classes with a given ``kind``."""
    return make_subscriber_class
