"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


logger = logging.getLogger(__name__)


def create_rate_limiter(app) -> Limiter:
    """
    Create and configure Flask-Limiter instance.

    Limits are kept per client address. Storage comes from
    ``RATELIMIT_STORAGE_URL`` (``memory://`` or a ``redis://`` URL).

    Args:
        app: Flask application instance

    Returns:
        Configured Limiter instance
    """
    if not app.config.get("RATELIMIT_ENABLED", True):
        # No-op limiter when rate limiting is disabled
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=[],
            storage_uri="memory://",
            enabled=False
        )

    storage_uri = app.config.get("RATELIMIT_STORAGE_URL") or "memory://"
    default_limits = [
        limit.strip()
        for limit in app.config.get("RATELIMIT_DEFAULT", "").split(";")
        if limit.strip()
    ]

    limiter = Limiter(
        get_remote_address,
        app=app,
        default_limits=default_limits,
        storage_uri=storage_uri,
        strategy="fixed-window",
        headers_enabled=True
    )
    logger.info(f"Rate limiting enabled: {default_limits}")
    return limiter
