import argparse
import sys
from typing import List, Optional

from allocator.adapters import reporter
from allocator.logger import setup_logger
from allocator.service_layer import services

SAMPLE_ORDERS = [
    '{"Header": 1, "Lines": [{"Product": "A", "Quantity": "1"},{"Product": "C", "Quantity": "1"}]}',
    '{"Header": 2, "Lines": [{"Product": "E", "Quantity": "5"}]}',
    '{"Header": 3, "Lines": [{"Product": "D", "Quantity": "4"}]}',
    '{"Header": 4, "Lines": [{"Product": "A", "Quantity": "1"}, {"Product": "C", "Quantity": "1"}]}',
    '{"Header": 5, "Lines": [{"Product": "B", "Quantity": "3"}]}',
    '{"Header": 6, "Lines": [{"Product": "D", "Quantity": "4"}]}',
]


def read_orders(path: str) -> List[str]:
    """Read one raw JSON order per non-blank line."""
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def main(argv: Optional[List[str]] = None) -> int:
    arg_parser = argparse.ArgumentParser(
        prog="allocate-inventory",
        description="Allocate inventory to orders first come, first served.",
    )
    arg_parser.add_argument("orders_file", nargs="?", help="file with one JSON order per line (default: sample orders)")
    arg_parser.add_argument("--log-level", default=None, help="diagnostics level (default: ALLOCATOR_LOG_LEVEL or INFO)")
    args = arg_parser.parse_args(argv)

    logger = setup_logger(log_level=args.log_level)
    orders = read_orders(args.orders_file) if args.orders_file else SAMPLE_ORDERS
    reports = services.run(orders, diagnostics=logger)
    reporter.write_reports(reports, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
