"""
Error types raised by the product service and their HTTP mapping.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class ProductServiceError(Exception):
    """Base error; carries the status code and the client-facing message."""
    status_code = 500
    message = "Internal server error"


class ValidationError(ProductServiceError):
    """A required field is missing from the request body."""
    status_code = 400
    message = "Name and price are required"


class NotFoundError(ProductServiceError):
    """No row matched the given id."""
    status_code = 404
    message = "Product not found"


class StoreError(ProductServiceError):
    """Any failure reported by the database driver."""
    status_code = 500
    message = "Internal server error"


async def handle_service_error(request: Request, exc: ProductServiceError) -> PlainTextResponse:
    """
    Map a service error to its status code and plain-text message.
    Store failures are logged with their driver detail.
    """
    if isinstance(exc, StoreError):
        # Driver detail stays in the server log
        logger.error("Database error: %s", exc)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_error_handlers(app: FastAPI):
    """Install the service error handler on the app."""
    app.add_exception_handler(ProductServiceError, handle_service_error)
