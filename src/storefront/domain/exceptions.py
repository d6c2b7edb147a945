"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
Storage errors are never wrapped here; they propagate as raised by the
persistence layer.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainException):
    """A requested entity does not exist or does not belong to the caller."""


class BadRequestError(DomainException):
    """A precondition of the requested operation does not hold."""


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart with no lines."""

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class InsufficientStockError(DomainException):
    """A product does not have enough stock for the requested quantity."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product: {product_name} "
            f"(requested {requested}, available {available})"
        )


class InvalidTransitionError(BadRequestError):
    """An order status change is not allowed from the current status."""

    def __init__(self, current, requested) -> None:
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invalid status transition from {current.value} to {requested.value}"
        )
