"""Logging setup and request-scoped error logging for the contact service."""

import logging
from typing import Optional

from litestar import Request

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("Contact")


def configure_logging(debug: bool) -> None:
    """Install the root handler once and set the ``Contact`` level from the app config."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def request_context(request: Request) -> dict:
    """What an operator needs to find the failing submission in the access log."""
    client = request.client
    return {
        "method": request.method,
        "path": request.url.path,
        "ip": request.headers.get("x-forwarded-for") or (client.host if client else "unknown"),
        "user_agent": request.headers.get("user-agent", "unknown"),
    }


def log_request_error(request: Request, exc: BaseException, message: Optional[str] = None) -> None:
    """Log ``exc`` with its traceback and the request it broke."""
    context = ", ".join(f"{k}={v}" for k, v in request_context(request).items())
    msg = message or f"Unhandled exception: {type(exc).__name__}"
    logger.error(f"{msg} | {context} | {type(exc).__name__}: {exc}", exc_info=exc)
