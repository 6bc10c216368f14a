# vendsim/output/__init__.py
from .base import Adapter
from .adapter import MachineEventAdapter
from .stock_adapter import RefillAdapter, SaleAdapter, StockAlertAdapter

__all__ = [
    "Adapter",
    "MachineEventAdapter",
    "SaleAdapter",
    "RefillAdapter",
    "StockAlertAdapter",
]
