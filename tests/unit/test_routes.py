"""
Tests for API routes (presentation layer).

These tests verify the API endpoints with a mocked use case.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from src.application.mail_transport import DeliveryReceipt, MailTransportError
from src.domain.exceptions import OrderValidationError
from src.main import app
from src.presentation.dependencies import get_send_order_confirmation_use_case


@pytest.fixture
def mock_use_case():
    """Create mock send-confirmation use case."""
    mock = Mock()
    mock.execute = AsyncMock(return_value=DeliveryReceipt(message_id="<id@test>"))
    return mock


@pytest.fixture
def client(mock_use_case):
    """Create test client with mocked dependencies."""
    app.dependency_overrides[get_send_order_confirmation_use_case] = lambda: mock_use_case

    yield TestClient(app, raise_server_exceptions=False)

    # Clean up
    app.dependency_overrides = {}


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health_check(self, client):
        """Test health check returns 200."""
        response = client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "OK", "message": "Server is running"}


class TestSendOrderConfirmationEndpoint:
    """Tests for the order confirmation endpoint."""

    def test_send_success(self, client, mock_use_case, order_payload):
        """Test successful confirmation."""
        response = client.post("/api/send-order-confirmation", json=order_payload)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": True,
            "message": "Order confirmation email sent successfully",
            "orderId": "ORD1",
        }
        mock_use_case.execute.assert_awaited_once()
        order = mock_use_case.execute.await_args.args[0]
        assert order.order_id == "ORD1"
        assert order.email == "a@b.com"

    def test_validation_error_returns_400(self, client, mock_use_case, order_payload):
        """Test a domain validation failure returns 400."""
        mock_use_case.execute.side_effect = OrderValidationError(["items"])

        response = client.post("/api/send-order-confirmation", json=order_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "success": False,
            "message": "Missing required order information",
        }

    def test_transport_error_returns_500(self, client, mock_use_case, order_payload):
        """Test a relay failure returns 500 with the error text."""
        mock_use_case.execute.side_effect = MailTransportError("Connection refused")

        response = client.post("/api/send-order-confirmation", json=order_payload)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {
            "success": False,
            "message": "Failed to send confirmation email",
            "error": "Connection refused",
        }

    def test_unexpected_error_returns_500(self, client, mock_use_case, order_payload):
        """Test any other failure is caught at the route boundary."""
        mock_use_case.execute.side_effect = RuntimeError("template missing")

        response = client.post("/api/send-order-confirmation", json=order_payload)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "template missing"

    def test_malformed_items_returns_400(self, client, mock_use_case, order_payload):
        """Test a wrongly typed body returns 400 in the API's error shape."""
        order_payload["items"] = "not-a-list"

        response = client.post("/api/send-order-confirmation", json=order_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Invalid order information"
        assert data["errors"]
        mock_use_case.execute.assert_not_called()

    def test_invalid_json_returns_400(self, client, mock_use_case):
        """Test a body that is not JSON returns 400."""
        response = client.post(
            "/api/send-order-confirmation",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        mock_use_case.execute.assert_not_called()
