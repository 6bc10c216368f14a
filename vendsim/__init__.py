"""
vendsim: vending machine inventory simulator.

The core is an in-process publish/subscribe dispatcher whose handlers may
change the subscription set while an event is being delivered. The
package provides:
- PublishSubscribeService
- Subscriber
- ScenarioRunner

The simulation layer (machines, stock subscribers, random feed, report
adapters) drives the dispatcher with sale and refill events.
"""

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.engine.subscriber import Subscriber

# Expose core engine components
from vendsim.engine.scenario_runner import ScenarioRunner
