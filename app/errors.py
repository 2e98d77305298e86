import logging
from flask import Blueprint
from flask_limiter.errors import RateLimitExceeded
from werkzeug.exceptions import HTTPException
from app.services.crypto import ProviderError
from app.utils.pagination import InvalidCursor
from app.utils.responses import error, INTERNAL_ERROR_MESSAGE

errors_bp = Blueprint("errors_bp", __name__)
logger = logging.getLogger(__name__)


@errors_bp.app_errorhandler(RateLimitExceeded)
def handle_rate_limit(e):
    logger.warning("Rate limit hit: %s", e.description)
    return error(e.description or "Too many requests", status=429, code=429)


@errors_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    msg = e.description or getattr(e, "name", "HTTP Error")
    return error(msg, status=e.code, code=e.code)


@errors_bp.app_errorhandler(InvalidCursor)
def handle_invalid_cursor(e):
    return error(str(e), status=400)


@errors_bp.app_errorhandler(ProviderError)
def handle_provider_error(e):
    logger.error("Upstream provider failed: %s", e)
    return error("Upstream market data provider unavailable", status=502)


@errors_bp.app_errorhandler(Exception)
def handle_unexpected_exception(e):
    logger.exception("Unhandled exception")
    return error(INTERNAL_ERROR_MESSAGE, status=500, code=500)
