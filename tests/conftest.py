"""
Pytest configuration and shared fixtures.

This file provides common fixtures and configuration for all tests.

Decision: pytest-asyncio runs with asyncio_mode = "auto" configured in
pyproject.toml, so async tests need no event loop fixture.
"""

import os
from decimal import Decimal
from pathlib import Path

import pytest

# Set test environment variables before the settings module is imported
# Use .setdefault() to respect values already set by the environment
os.environ.setdefault("EMAIL_SERVICE", "mailhog")
os.environ.setdefault("EMAIL_USER", "orders@zone5shop.com")
os.environ.setdefault("LOG_LEVEL", "ERROR")
os.environ.setdefault("VERIFY_TRANSPORT_ON_STARTUP", "false")
os.environ.setdefault("STATIC_DIR", str(Path(__file__).parent.parent / "public"))

from src.domain.order import LineItem, Order  # noqa: E402


@pytest.fixture
def shirt() -> LineItem:
    """A single line item as the storefront sends it."""
    return LineItem(
        name="Shirt",
        productcode="P1",
        quantity=1,
        price=Decimal("500"),
        image="x.jpg",
    )


@pytest.fixture
def order(shirt: LineItem) -> Order:
    """A minimal valid order with free shipping."""
    return Order(
        order_id="ORD1",
        email="a@b.com",
        date="17/10/2026",
        items=(shirt,),
        subtotal=Decimal("500"),
        shipping=Decimal("0"),
        total=Decimal("500"),
    )


@pytest.fixture
def order_payload() -> dict:
    """JSON body of a minimal valid order submission."""
    return {
        "orderId": "ORD1",
        "email": "a@b.com",
        "date": "17/10/2026",
        "items": [
            {
                "name": "Shirt",
                "productcode": "P1",
                "quantity": 1,
                "price": 500,
                "image": "x.jpg",
            }
        ],
        "subtotal": 500,
        "shipping": 0,
        "total": 500,
    }
