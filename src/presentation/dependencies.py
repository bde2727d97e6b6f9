"""
FastAPI dependency injection.

This module provides dependency injection for our application.
It's the glue that wires together our layers (domain, application, infrastructure).

Decision: The mail transport is built once and shared, but it is handed to
the use case through Depends so tests can swap it with
app.dependency_overrides instead of patching a module global.
"""

import logging
from functools import lru_cache
from typing import Annotated

from config.settings import settings
from fastapi import Depends

from src.application.mail_transport import MailTransport
from src.application.send_order_confirmation import SendOrderConfirmationUseCase
from src.infrastructure.email.order_email_renderer import OrderEmailRenderer
from src.infrastructure.email.smtp_mail_transport import SmtpMailTransport

logger = logging.getLogger(__name__)


@lru_cache
def get_mail_transport() -> MailTransport:
    """
    Get mail transport instance (singleton).

    Returns:
        SmtpMailTransport configured from settings
    """
    logger.info(f"Creating mail transport for service: {settings.email_service}")
    return SmtpMailTransport(
        service=settings.email_service,
        username=settings.email_user,
        password=settings.email_password,
        host=settings.smtp_host,
        port=settings.smtp_port,
        use_tls=settings.smtp_use_tls,
        timeout=settings.smtp_timeout_seconds,
    )


@lru_cache
def get_order_renderer() -> OrderEmailRenderer:
    """Get the order email renderer (templates are loaded once)."""
    return OrderEmailRenderer(
        shop_name=settings.shop_name,
        shop_tagline=settings.shop_tagline,
        support_email=settings.support_email,
        instagram_url=settings.instagram_url,
        currency_symbol=settings.currency_symbol,
    )


def get_sender_address() -> str:
    """From header: shop display name and the authenticated mailbox."""
    return f'"{settings.shop_name}" <{settings.email_user or settings.support_email}>'


def get_send_order_confirmation_use_case(
    renderer: Annotated[OrderEmailRenderer, Depends(get_order_renderer)],
    transport: Annotated[MailTransport, Depends(get_mail_transport)],
    sender: Annotated[str, Depends(get_sender_address)],
) -> SendOrderConfirmationUseCase:
    """
    Get SendOrderConfirmation use case with dependencies injected.

    Args:
        renderer: Order email renderer (injected)
        transport: Mail transport (injected)
        sender: From header (injected)

    Returns:
        SendOrderConfirmationUseCase instance
    """
    return SendOrderConfirmationUseCase(renderer, transport, sender)
