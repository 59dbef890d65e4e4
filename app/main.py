import logging
from typing import Optional

from app.config import AppConfig, load_env_file_fallback

# Load .env before reading any configuration from the environment
load_env_file_fallback()

from litestar import Litestar, Request
from litestar.datastructures import State
from litestar.exceptions import HTTPException, MethodNotAllowedException
from litestar.response import Response
from litestar.status_codes import HTTP_500_INTERNAL_SERVER_ERROR

from app.contact import ContactError, InternalError, LoggingNotifier, MethodNotAllowed, Notifier
from app.routes import ROUTES
from app.utils.logging import configure_logging, log_request_error

logger = logging.getLogger("Contact")


def error_response(exc: ContactError) -> Response:
    return Response(
        content=exc.to_content(),
        status_code=exc.status_code,
        media_type="application/json"
    )


# --- Exception handlers
def handle_contact_error(request: Request, exc: ContactError) -> Response:
    if isinstance(exc, InternalError):
        log_request_error(request, exc.__cause__ or exc, message="Contact form error")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.status_code} {exc.error}")
    return error_response(exc)


def handle_method_not_allowed(request: Request, exc: MethodNotAllowedException) -> Response:
    return error_response(MethodNotAllowed())


def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    """Framework errors (404, 400, ...) keep their own status code."""
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        return log_exceptions(request, exc)
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.detail}")
    return Response(
        content={"error": exc.detail},
        status_code=exc.status_code,
        headers=exc.headers,
        media_type="application/json"
    )


def log_exceptions(request: Request, exc: Exception) -> Response:
    log_request_error(request, exc, message="Unhandled exception occurred")
    return error_response(InternalError())


def create_app(config: Optional[AppConfig] = None, notifier: Optional[Notifier] = None) -> Litestar:
    """Build the application around ``config`` (defaults to the environment)."""
    config = config or AppConfig.from_env()
    configure_logging(config.debug)
    logger.info(f"Starting app in {'DEBUG' if config.debug else 'PRODUCTION'} mode")
    logger.info(f"Submissions directory: {config.submissions_dir}")
    logger.info(f"Settings file: {config.settings_path}")

    return Litestar(
        route_handlers=ROUTES,
        debug=config.debug,
        state=State({"config": config, "notifier": notifier or LoggingNotifier()}),
        exception_handlers={
            Exception: log_exceptions,
            HTTPException: handle_http_exception,
            ContactError: handle_contact_error,
            MethodNotAllowedException: handle_method_not_allowed,
        },
    )


app = create_app()
