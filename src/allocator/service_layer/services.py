from typing import Any, Iterable, List, Mapping, Optional, Set

from allocator import config
from allocator.adapters import parser
from allocator.domain import events, exceptions
from allocator.domain.model import AllocationReport, Order, ProductCatalog
from allocator.interfaces.main import IAllocationEngine, IDiagnosticsSink
from allocator.logger import logger


class AllocationEngine(IAllocationEngine):
    """
    Allocates a shared, depleting inventory to orders in arrival order.

    Each call to ``run`` starts from the starting inventory with no headers
    seen. Bad records, orders and lines are reported to the diagnostics sink
    and skipped; processing stops early once every product is sold out.
    """

    def __init__(
        self,
        inventory: Optional[Mapping[str, int]] = None,
        diagnostics: Optional[IDiagnosticsSink] = None,
    ):
        self.inventory = dict(config.get_initial_inventory() if inventory is None else inventory)
        self.diagnostics = diagnostics or logger
        self.catalog = ProductCatalog.from_inventory(self.inventory)
        self.seen_headers: Set[Any] = set()
        self.events: List[events.Event] = []

    def run(self, orders: Iterable[Any]) -> List[AllocationReport]:
        self.catalog = ProductCatalog.from_inventory(self.inventory)
        self.seen_headers = set()
        self.events = []
        product_ids = self.catalog.product_ids
        reports: List[AllocationReport] = []

        for raw in orders:
            order = self._accept(raw)
            if order is None:
                continue
            report = self._allocate(order, product_ids)
            reports.append(report)
            self.events.append(events.OrderAllocated(header=order.header))

            if self.catalog.is_exhausted:
                self.events.append(events.InventoryExhausted(header=order.header))
                self.diagnostics.info(f"Inventory exhausted after order {order.header}, stopping")
                break

        self.diagnostics.debug(f"Allocated {len(reports)} orders, remaining inventory {self.catalog.snapshot()}")
        return reports

    def _accept(self, raw: Any) -> Optional[Order]:
        try:
            order = parser.parse_order(raw)
        except (exceptions.ParseError, exceptions.ValidationError) as e:
            self._reject(e)
            return None

        if order.header in self.seen_headers:
            error = exceptions.DuplicateHeader(f"order found with existing header: {order.header}")
            self._reject(error, header=order.header)
            return None
        self.seen_headers.add(order.header)
        return order

    def _allocate(self, order: Order, product_ids: List[str]) -> AllocationReport:
        report = AllocationReport.empty(header=order.header, product_ids=product_ids)
        for line in order.lines:
            try:
                result = self.catalog.allocate(line)
            except exceptions.UnknownProduct as e:
                self.diagnostics.error(f"ERROR: {e}")
                self.events.append(events.LineSkipped(header=order.header, product=line.product))
                continue
            report.record(
                product_id=result.product,
                demand=result.requested,
                allocated=result.allocated,
                backorder=result.backorder,
            )
        return report

    def _reject(self, error: exceptions.AllocationError, header: Any = None) -> None:
        self.diagnostics.error(f"ERROR: {error}")
        self.events.append(events.OrderRejected(reason=type(error).__name__, header=header))


def run(
    orders: Iterable[Any],
    inventory: Optional[Mapping[str, int]] = None,
    diagnostics: Optional[IDiagnosticsSink] = None,
) -> List[AllocationReport]:
    engine = AllocationEngine(inventory=inventory, diagnostics=diagnostics)
    return engine.run(orders)
