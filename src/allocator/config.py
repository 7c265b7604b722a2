import os
import pathlib
from typing import Dict

import dotenv

ENV_FILE = pathlib.Path(__file__).parent.parent.parent / "env" / "allocator.env"

DEFAULT_INVENTORY = "A=2,B=3,C=1,D=0,E=0"


def _get_setting(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        dotenv.load_dotenv(dotenv_path=ENV_FILE)
        value = os.environ.get(name, default)
    return value


def parse_inventory(value: str) -> Dict[str, int]:
    """
    Read a starting inventory written as "A=2,B=3"; order is kept as written.
    """
    inventory: Dict[str, int] = {}
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        product_id, sep, qty = item.partition("=")
        product_id = product_id.strip()
        if not sep or not product_id:
            raise ValueError(f"Invalid inventory entry {item!r}, expected PRODUCT=QUANTITY")
        try:
            quantity = int(qty)
        except ValueError:
            raise ValueError(f"Invalid quantity {qty!r} for product {product_id}")
        if quantity < 0:
            raise ValueError(f"Starting quantity for product {product_id} cannot be negative: {quantity}")
        if product_id in inventory:
            raise ValueError(f"Product {product_id} listed more than once")
        inventory[product_id] = quantity
    return inventory


def get_initial_inventory() -> Dict[str, int]:
    return parse_inventory(_get_setting("ALLOCATOR_INVENTORY", DEFAULT_INVENTORY))


def get_log_level() -> str:
    return _get_setting("ALLOCATOR_LOG_LEVEL", "INFO")


def get_api_url():
    host = os.environ.get("API_HOST", "localhost")
    port = 8000 if host == "localhost" else 80
    return f"http://{host}:{port}"
