"""
Inventory subscribers for the vendsim dispatcher.

Handlers included:
- MachineSaleSubscriber: applies sales, raises low-stock warnings
- MachineRefillSubscriber: applies refills, announces recovery
- LowStockWarningSubscriber: suspends sales mid-delivery
- StockLevelOkSubscriber: resumes sales
- EventJournal: records delivered events
"""

from vendsim.subscribers.alerts import LowStockWarningSubscriber, StockLevelOkSubscriber
from vendsim.subscribers.journal import EventJournal
from vendsim.subscribers.refill import MachineRefillSubscriber
from vendsim.subscribers.sale import MachineSaleSubscriber
from vendsim.subscribers.wiring import register

__all__ = [
    "MachineSaleSubscriber",
    "MachineRefillSubscriber",
    "LowStockWarningSubscriber",
    "StockLevelOkSubscriber",
    "EventJournal",
    "register",
]
