from vendsim.feeds.random_feed import RandomMachineEventFeed

__all__ = ["RandomMachineEventFeed"]
