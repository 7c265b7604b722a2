from dataclasses import dataclass
from typing import Any, Optional


class Event:
    pass


@dataclass
class OrderAllocated(Event):
    header: Any


@dataclass
class OrderRejected(Event):
    reason: str
    header: Optional[Any] = None


@dataclass
class LineSkipped(Event):
    header: Any
    product: Any


@dataclass
class InventoryExhausted(Event):
    header: Any
