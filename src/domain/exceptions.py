"""
Domain-specific exceptions.

These exceptions represent business rule violations and domain errors.
They are independent of infrastructure concerns.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    pass


class OrderValidationError(DomainError):
    """Raised when an order submission lacks required information."""

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = missing_fields
        super().__init__(f"Missing required order information: {', '.join(missing_fields)}")
