from vendsim.engine.dispatcher import PublishSubscribeService, Subscription
from vendsim.engine.subscriber import Subscriber

__all__ = ["PublishSubscribeService", "Subscription", "Subscriber"]
