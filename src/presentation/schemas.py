"""
API request/response schemas (DTOs).

These Pydantic models define the API contract for requests and responses.
Field names match the storefront payload (camelCase orderId, lowercase
productcode).

Decision: Required order fields are declared optional here. Presence is a
business rule checked by the domain, which answers with the storefront's
{success: false, message} shape instead of a schema error list.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.domain.order import LineItem, Order


class LineItemPayload(BaseModel):
    """One product entry of an order submission."""

    name: str | None = Field(None, description="Product display name", examples=["Linen Shirt"])
    productcode: str | None = Field(None, description="Product code", examples=["P1"])
    quantity: int | None = Field(None, description="Number of units", examples=[2])
    price: Decimal | None = Field(None, description="Unit price", examples=[1000])
    image: str | None = Field(
        None, description="Thumbnail URL", examples=["https://cdn.example.com/shirt.jpg"]
    )

    @field_validator("productcode", mode="before")
    @classmethod
    def coerce_productcode(cls, value: Any) -> Any:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    def to_domain(self) -> LineItem:
        return LineItem(
            name=self.name,
            productcode=self.productcode,
            quantity=self.quantity,
            price=self.price,
            image=self.image,
        )


class OrderConfirmationRequest(BaseModel):
    """Request schema for sending an order confirmation."""

    orderId: str | None = Field(None, description="Order identifier", examples=["ORD1"])
    email: str | None = Field(None, description="Customer email address", examples=["a@b.com"])
    date: str | None = Field(None, description="Order date as displayed", examples=["17/10/2026"])
    items: list[LineItemPayload] | None = Field(None, description="Ordered line items")
    subtotal: Decimal | None = Field(None, description="Sum of line totals", examples=[500])
    shipping: Decimal | None = Field(
        None, description="Shipping cost, 0 for free shipping", examples=[0]
    )
    total: Decimal | None = Field(None, description="Amount charged", examples=[500])

    @field_validator("orderId", mode="before")
    @classmethod
    def coerce_order_id(cls, value: Any) -> Any:
        """Storefronts sometimes send numeric ids. Zero counts as no id."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value) if value != 0 else None
        return value

    def to_domain(self) -> Order:
        return Order(
            order_id=self.orderId,
            email=self.email,
            date=self.date,
            items=tuple(item.to_domain() for item in self.items or []),
            subtotal=self.subtotal,
            shipping=self.shipping,
            total=self.total,
        )


class OrderConfirmationResponse(BaseModel):
    """Response schema for a confirmation that was handed to the relay."""

    success: bool = Field(True, description="Always true on this response")
    message: str = Field(
        ...,
        description="Success message",
        examples=["Order confirmation email sent successfully"],
    )
    orderId: str = Field(..., description="Echo of the confirmed order id")


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    success: bool = Field(False, description="Always false on this response")
    message: str = Field(..., description="Human-readable error message")
    error: str | None = Field(None, description="Underlying failure description")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Service status", examples=["OK"])
    message: str = Field(..., description="Human-readable status", examples=["Server is running"])
