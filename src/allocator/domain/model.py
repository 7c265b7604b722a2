import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from allocator.domain import exceptions

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))([eE][+-]?\d+)?")


def _float_to_int(value: float) -> int:
    return int(value) if math.isfinite(value) else 0


def read_quantity(raw: Any) -> int:
    """
    Read a quantity the way a lenient integer cast does, keeping its sign.

    Strings contribute their leading number ("4 boxes" -> 4, "1e3" -> 1000),
    numbers are truncated, booleans count as 0/1 and anything else is 0,
    including numbers too long to convert.
    """
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return _float_to_int(raw)
    if not isinstance(raw, (str, bytes)):
        return 0
    text = raw.decode(errors="replace") if isinstance(raw, bytes) else raw
    match = _LEADING_NUMBER.match(text)
    if not match:
        return 0
    number, exponent = match.groups()
    if exponent is None and "." not in number:
        try:
            return int(number)
        except ValueError:
            return 0
    return _float_to_int(float(number + (exponent or "")))


def parse_quantity(raw: Any) -> int:
    """Requested quantity of an order line; negative quantities are not orderable and read as 0."""
    return max(read_quantity(raw), 0)


@dataclass(frozen=True)
class OrderLine:
    product: Any
    qty: int


@dataclass(frozen=True)
class Order:
    header: Any
    lines: Tuple[OrderLine, ...]

    @property
    def total_demand(self) -> int:
        return sum(line.qty for line in self.lines)


@dataclass
class AllocationReport:
    header: Any
    demand: Dict[str, int]
    allocation: Dict[str, int]
    backorder: Dict[str, int]

    @classmethod
    def empty(cls, header: Any, product_ids: Iterable[str]) -> "AllocationReport":
        product_ids = list(product_ids)
        return cls(
            header=header,
            demand=dict.fromkeys(product_ids, 0),
            allocation=dict.fromkeys(product_ids, 0),
            backorder=dict.fromkeys(product_ids, 0),
        )

    def record(self, product_id: str, demand: int, allocated: int, backorder: int) -> None:
        self.demand[product_id] += demand
        self.allocation[product_id] += allocated
        self.backorder[product_id] += backorder


@dataclass
class LineAllocation:
    product: str
    requested: int
    allocated: int
    backorder: int


@dataclass
class ProductCatalog:
    """
    Live quantities of every known product, kept in starting-inventory order.
    """

    _quantities: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_inventory(cls, inventory: Mapping[str, int]) -> "ProductCatalog":
        quantities = {}
        for product_id, qty in inventory.items():
            if qty < 0:
                raise ValueError(f"Starting quantity for product {product_id} cannot be negative: {qty}")
            quantities[product_id] = int(qty)
        return cls(_quantities=quantities)

    def __contains__(self, product_id: Any) -> bool:
        try:
            return product_id in self._quantities
        except TypeError:
            return False

    @property
    def product_ids(self) -> List[str]:
        return list(self._quantities)

    @property
    def total(self) -> int:
        return sum(self._quantities.values())

    @property
    def is_exhausted(self) -> bool:
        return self.total == 0

    def available(self, product_id: str) -> int:
        if product_id not in self:
            raise exceptions.UnknownProduct(f"invalid product ordered: {product_id}")
        return self._quantities[product_id]

    def allocate(self, line: OrderLine) -> LineAllocation:
        available = self.available(line.product)
        allocated = min(line.qty, available)
        self._quantities[line.product] = max(available - allocated, 0)
        return LineAllocation(
            product=line.product,
            requested=line.qty,
            allocated=allocated,
            backorder=line.qty - allocated,
        )

    def snapshot(self) -> Dict[str, int]:
        return dict(self._quantities)
