import logging

from flask import Blueprint

logger = logging.getLogger(__name__)

bp = Blueprint('errors', __name__)


class ConfigError(RuntimeError):
    """Required configuration is missing or unusable."""


# App-wide error pages, plain text like the handler failures
@bp.app_errorhandler(404)
def handle_not_found(e):
    return "Not found", 404, {"Content-Type": "text/plain; charset=utf-8"}


@bp.app_errorhandler(500)
def handle_internal_error(e):
    logger.error("Unhandled error: %s", e)
    return "Internal server error", 500, {"Content-Type": "text/plain; charset=utf-8"}
