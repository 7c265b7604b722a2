from .domain.model import AllocationReport, Order, OrderLine, ProductCatalog
from .domain.exceptions import AllocationError, ParseError, ValidationError, UnknownProduct, DuplicateHeader
from .adapters.reporter import render_report, write_reports
from .service_layer.services import AllocationEngine, run

__all__ = [
    "AllocationReport",
    "Order",
    "OrderLine",
    "ProductCatalog",
    "AllocationError",
    "ParseError",
    "ValidationError",
    "UnknownProduct",
    "DuplicateHeader",
    "render_report",
    "write_reports",
    "AllocationEngine",
    "run",
]
