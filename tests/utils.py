import uuid


def random_suffix() -> str:
    return uuid.uuid4().hex[:6]


def random_product(name="") -> str:
    return f"product-{name}-{random_suffix()}"


def random_header(name="") -> str:
    return f"order-{name}-{random_suffix()}"
