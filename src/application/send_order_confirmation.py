"""
Send Order Confirmation use case.

Orchestrates the confirmation flow:
1. Validating the submitted order
2. Rendering the confirmation email
3. Handing the message to the mail transport

Failures are reported once. There is no retry and no queue: a transport
error ends the request.
"""

import logging
from typing import Protocol

from src.application.mail_transport import DeliveryReceipt, MailMessage, MailTransport
from src.domain.order import Order

logger = logging.getLogger(__name__)


class OrderRenderer(Protocol):
    """
    Protocol for turning an order into email bodies.

    Keeps the use case agnostic of the template technology (Jinja2, in our case).
    """

    def render(self, order: Order) -> str:
        """Render the HTML body."""
        ...

    def render_text(self, order: Order) -> str:
        """Render the plain text alternative."""
        ...


class SendOrderConfirmationUseCase:
    """
    Use case for emailing an order confirmation to the customer.

    Decision: Renderer and transport are injected so tests can substitute
    an in-memory transport and assert on what would have been sent.
    """

    def __init__(self, renderer: OrderRenderer, transport: MailTransport, sender: str):
        """
        Initialize the use case.

        Args:
            renderer: Builds the email bodies from an order
            transport: Delivers the message
            sender: From header, e.g. '"Zone 5 Shop" <orders@example.com>'
        """
        self.renderer = renderer
        self.transport = transport
        self.sender = sender

    def build_message(self, order: Order) -> MailMessage:
        """Render the order and wrap it in a message addressed to the customer."""
        return MailMessage(
            sender=self.sender,
            recipient=str(order.email),
            subject=order.confirmation_subject,
            html=self.renderer.render(order),
            text=self.renderer.render_text(order),
        )

    async def execute(self, order: Order) -> DeliveryReceipt:
        """
        Execute the confirmation use case.

        Args:
            order: The submitted order

        Returns:
            DeliveryReceipt from the mail transport

        Raises:
            OrderValidationError: If orderId, email or items are missing.
                Nothing is rendered or sent in that case.
            MailTransportError: If the relay rejected or never received the message
        """
        order.validate()

        message = self.build_message(order)
        receipt = await self.transport.send(message)

        logger.info(f"Email sent successfully: {receipt.message_id}")
        logger.info(f"Order ID: {order.order_id}")
        logger.info(f"Recipient: {order.email}")

        return receipt
