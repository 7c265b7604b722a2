from typing import Any, Iterable, List, Protocol

from allocator.domain import events, model


class IDiagnosticsSink(Protocol):
    """
    Interface for the write-only channel receiving human-readable errors
    """

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        raise NotImplementedError

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        raise NotImplementedError

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        raise NotImplementedError


class IAllocationEngine(Protocol):
    catalog: model.ProductCatalog
    events: List[events.Event]

    def run(self, orders: Iterable[Any]) -> List[model.AllocationReport]:
        raise NotImplementedError
