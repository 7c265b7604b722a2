class AllocationError(Exception):
    """Base exception for all allocation-related errors."""

    pass


class ParseError(AllocationError):
    """Raised when a raw order record cannot be read as an order."""

    pass


class ValidationError(AllocationError):
    """Base exception for structurally invalid orders."""

    pass


class MissingHeader(ValidationError):
    """Raised when an order has no Header."""

    pass


class MissingLines(ValidationError):
    """Raised when an order has no Lines."""

    pass


class LinesNotSequence(ValidationError):
    """Raised when an order's Lines is not a list of lines."""

    pass


class EmptyLines(ValidationError):
    """Raised when an order has no line items."""

    pass


class ZeroDemand(ValidationError):
    """Raised when an order's lines request nothing in total."""

    pass


class UnknownProduct(AllocationError):
    """Raised when an order line references a product missing from the catalog."""

    pass


class DuplicateHeader(AllocationError):
    """Raised when an order reuses an already accepted header."""

    pass
