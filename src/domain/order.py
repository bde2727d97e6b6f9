"""
Order value objects.

An order only lives for the duration of one confirmation request.
It is never persisted, so these are plain value objects without identity.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.exceptions import OrderValidationError


@dataclass(frozen=True)
class LineItem:
    """
    One product entry within an order.

    All display fields are optional: the storefront does not guarantee them,
    and a missing thumbnail must not prevent the confirmation from going out.
    """

    name: str | None = None
    productcode: str | None = None
    quantity: int | None = None
    price: Decimal | None = None
    image: str | None = None

    @property
    def line_total(self) -> Decimal | None:
        """Unit price times quantity, or None when either is unknown."""
        if self.price is None or self.quantity is None:
            return None
        return self.price * self.quantity


@dataclass(frozen=True)
class Order:
    """
    A submitted order awaiting its confirmation email.

    Attributes:
        order_id: Opaque identifier chosen by the storefront
        email: Recipient address
        date: Display string for the order date
        items: Ordered line items
        subtotal: Sum of line totals as computed by the storefront
        shipping: Shipping cost (zero means free shipping)
        total: Amount charged
    """

    order_id: str | None
    email: str | None
    items: tuple[LineItem, ...] = field(default_factory=tuple)
    date: str | None = None
    subtotal: Decimal | None = None
    shipping: Decimal | None = None
    total: Decimal | None = None

    @property
    def has_free_shipping(self) -> bool:
        return self.shipping is not None and self.shipping == 0

    def missing_fields(self) -> list[str]:
        """
        List the required fields that are absent or empty.

        Only the order id, the recipient and at least one item are required.
        Amounts are not checked: the storefront owns the pricing.
        """
        missing = []
        if not self.order_id:
            missing.append("orderId")
        if not self.email:
            missing.append("email")
        if not self.items:
            missing.append("items")
        return missing

    def validate(self) -> None:
        """
        Ensure the order carries enough information to be confirmed.

        Raises:
            OrderValidationError: If orderId, email or items are missing
        """
        missing = self.missing_fields()
        if missing:
            raise OrderValidationError(missing)

    @property
    def confirmation_subject(self) -> str:
        return f"Order Confirmation - {self.order_id}"
