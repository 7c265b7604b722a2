import json
from typing import Any, Mapping, Sequence

from allocator.domain import exceptions
from allocator.domain.model import Order, OrderLine, parse_quantity, read_quantity

HEADER = "Header"
LINES = "Lines"
PRODUCT = "Product"
QUANTITY = "Quantity"

SCALAR_TYPES = (str, int, float, bool, type(None))


def decode_record(raw: Any) -> Mapping[str, Any]:
    """
    Turn a raw order record into a mapping.

    JSON text and bytes are decoded; already decoded mappings pass through.
    Anything that does not end up as a mapping is unparseable.
    """
    record = raw
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            record = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise exceptions.ParseError(f"could not parse order: {raw!r} ({e})") from e
    if not isinstance(record, Mapping):
        raise exceptions.ParseError(f"could not parse order: {raw!r}")
    return record


def _raw_quantity(line: Any) -> Any:
    return line.get(QUANTITY) if isinstance(line, Mapping) else None


def validate_record(record: Mapping[str, Any]) -> None:
    if HEADER not in record:
        raise exceptions.MissingHeader(f"Invalid order found with no Header: {dict(record)!r}")
    if LINES not in record:
        raise exceptions.MissingLines(f"Invalid order found with no Lines: {dict(record)!r}")
    lines = record[LINES]
    if not isinstance(lines, Sequence) or isinstance(lines, (str, bytes, bytearray)):
        raise exceptions.LinesNotSequence(f"Invalid order found with non-array Lines: {dict(record)!r}")
    if not lines:
        raise exceptions.EmptyLines(f"Invalid order found with no Line items: {dict(record)!r}")
    if sum(read_quantity(_raw_quantity(line)) for line in lines) == 0:
        raise exceptions.ZeroDemand(f"Invalid order found with zero total demand: {dict(record)!r}")


def to_order(record: Mapping[str, Any]) -> Order:
    header = record[HEADER]
    if not isinstance(header, SCALAR_TYPES):
        raise exceptions.ParseError(f"could not parse order: Header {header!r} is not a scalar")
    lines = []
    for line in record[LINES]:
        product = line.get(PRODUCT) if isinstance(line, Mapping) else None
        lines.append(OrderLine(product=product, qty=parse_quantity(_raw_quantity(line))))
    return Order(header=header, lines=tuple(lines))


def parse_order(raw: Any) -> Order:
    record = decode_record(raw)
    validate_record(record)
    return to_order(record)
