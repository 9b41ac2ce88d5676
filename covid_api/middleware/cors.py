"""Cross-origin resource sharing using Flask-CORS."""
import logging
from flask_cors import CORS

from covid_api.middleware.request_id import REQUEST_ID_HEADER


logger = logging.getLogger(__name__)


def init_cors(app) -> CORS:
    """
    Allow browser clients on every route.

    Origins come from ``CORS_ORIGINS`` (comma separated, ``*`` for any).
    The request id header is exposed so browser clients can report it.

    Args:
        app: Flask application instance

    Returns:
        Configured CORS extension
    """
    origins = [
        origin.strip()
        for origin in app.config.get("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ] or ["*"]

    cors = CORS(
        app,
        resources={r"/*": {"origins": origins}},
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )
    logger.info(f"CORS enabled for origins: {origins}")
    return cors
