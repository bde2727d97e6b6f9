"""
Main application entry point.

This module initializes and configures the FastAPI application.
It handles startup/shutdown events and wires everything together.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress
from pathlib import Path

from config.settings import settings
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from src.application.mail_transport import MailTransport, MailTransportError
from src.presentation.dependencies import get_mail_transport
from src.presentation.routes import router

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def verify_mail_transport(transport: MailTransport) -> None:
    """Check the relay once and log the outcome. Never raises."""
    try:
        await transport.verify()
        logger.info("Email server is ready to send messages")
    except MailTransportError as e:
        logger.error(f"Email transporter error: {e}")
    except Exception as e:
        logger.error(f"Unexpected error verifying email transporter: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Startup kicks off mail transport verification in the background and
    starts serving right away. A failure is only logged: each send reports
    its own error.
    """
    logger.info("Starting Order Confirmation Mailer...")

    verification: asyncio.Task[None] | None = None
    if settings.verify_transport_on_startup:
        # dependency_overrides apply to startup verification as well
        transport_provider = app.dependency_overrides.get(get_mail_transport, get_mail_transport)
        verification = asyncio.create_task(verify_mail_transport(transport_provider()))

    logger.info(f"Server is running on port {settings.port}")
    logger.info(f"API endpoint: http://localhost:{settings.port}/api/send-order-confirmation")

    yield

    if verification is not None and not verification.done():
        verification.cancel()
        with suppress(asyncio.CancelledError):
            await verification

    logger.info("Order Confirmation Mailer stopped")


# Create FastAPI application
app = FastAPI(
    title="Order Confirmation Mailer",
    description="""
    Sends HTML order confirmation emails for the storefront.

    ## Endpoints
    - POST /api/send-order-confirmation
    - GET /api/health
    """,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware
# Decision: The storefront calls this API from the browser, any origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies and return 400 Bad Request.

    Decision: Same {success, message} shape as every other error of this API,
    instead of FastAPI's default 422 body.
    """
    errors = exc.errors()
    error_messages = [f"{err['loc'][-1]}: {err['msg']}" for err in errors]
    logger.warning(f"Invalid request on {request.url.path}: {len(errors)} error(s)")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Invalid order information",
            "errors": error_messages,
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything a route did not handle itself."""
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "Internal server error",
            "error": str(exc),
        },
    )


# Include routes
app.include_router(router)

# Serve the storefront's static files. Mounted last so API routes win.
static_dir = Path(settings.static_dir)
if static_dir.is_dir():
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    logger.info(f"Serving static files from {static_dir.resolve()}")
else:
    logger.info(f"Static directory '{static_dir}' not found, static files disabled")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
