"""
FastAPI routes for order confirmation emails.

This module defines the HTTP API endpoints.
Each route is thin - it just handles HTTP concerns and delegates to use cases.

Decision: Error bodies keep the storefront's {success, message, error}
shape at the top level, so routes return JSONResponse directly instead of
raising HTTPException (which would nest everything under "detail").
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.mail_transport import MailTransportError
from src.application.send_order_confirmation import SendOrderConfirmationUseCase
from src.domain.exceptions import OrderValidationError
from src.presentation.dependencies import get_send_order_confirmation_use_case
from src.presentation.schemas import (
    ErrorResponse,
    HealthCheckResponse,
    OrderConfirmationRequest,
    OrderConfirmationResponse,
)

logger = logging.getLogger(__name__)

MISSING_INFORMATION_MESSAGE = "Missing required order information"
SEND_FAILED_MESSAGE = "Failed to send confirmation email"

# Create router
router = APIRouter(prefix="/api", tags=["orders"])


def error_response(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    """Build a {success: false, message, error?} JSON response."""
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


@router.post(
    "/send-order-confirmation",
    response_model=OrderConfirmationResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Confirmation email handed to the mail relay"},
        400: {"model": ErrorResponse, "description": "Missing required order information"},
        500: {"model": ErrorResponse, "description": "Mail relay failure"},
    },
    summary="Send an order confirmation email",
    description="""
    Render the submitted order as an HTML email and send it to the customer.

    Business Rules:
    - orderId, email and at least one item are required
    - Subject is "Order Confirmation - <orderId>"
    - A failed send is reported once, never retried
    """,
)
async def send_order_confirmation(
    request: OrderConfirmationRequest,
    use_case: Annotated[
        SendOrderConfirmationUseCase, Depends(get_send_order_confirmation_use_case)
    ],
) -> OrderConfirmationResponse | JSONResponse:
    """Send the confirmation email for one order."""
    order = request.to_domain()

    try:
        await use_case.execute(order)

    except OrderValidationError as e:
        logger.warning(f"Order confirmation rejected: missing {', '.join(e.missing_fields)}")
        return error_response(status.HTTP_400_BAD_REQUEST, MISSING_INFORMATION_MESSAGE)

    except MailTransportError as e:
        logger.error(f"Error sending email for order {order.order_id}: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SEND_FAILED_MESSAGE, str(e))

    except Exception as e:
        logger.error(
            f"Unexpected error sending confirmation for order {order.order_id}: {e}",
            exc_info=True,
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SEND_FAILED_MESSAGE, str(e))

    return OrderConfirmationResponse(
        message="Order confirmation email sent successfully",
        orderId=str(order.order_id),
    )


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Liveness probe. Does not depend on the mail relay.",
    tags=["health"],
)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(status="OK", message="Server is running")
