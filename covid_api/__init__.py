"""Flask application factory with dependency injection."""
import logging
import sys
from typing import Optional

from flask import Flask, jsonify

from covid_api.config.settings import Config, get_config
from covid_api.infrastructure.service_container import ServiceContainer
from covid_api.middleware.cors import init_cors
from covid_api.middleware.rate_limiter import create_rate_limiter
from covid_api.middleware.request_id import RequestIdFilter, register_request_id_middleware
from covid_api.middleware.monitoring import register_metrics_middleware
from covid_api.middleware.error_handler import init_error_handlers
from covid_api.api import countries_blueprint, provinces_blueprint, health_blueprint


def create_app(config_class: Optional[type[Config]] = None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured Flask application
    """
    config = config_class or get_config()

    # Configure logging FIRST (needed for all subsequent operations)
    _configure_logging(config)
    _logger = logging.getLogger(__name__)

    app = Flask(__name__)
    app.config.from_object(config)
    app.json.sort_keys = False

    config.validate()

    app.register_blueprint(countries_blueprint)
    app.register_blueprint(provinces_blueprint)
    app.register_blueprint(health_blueprint)

    @app.route("/", methods=["GET"])
    def root():
        """Root endpoint for testing."""
        return jsonify({
            "status": "ok",
            "service": "covid19-api",
            "message": "Service is running"
        }), 200

    _initialize_middleware(app)
    _initialize_services(app, config)

    _logger.info(f"Application ready - registered blueprints: {[bp.name for bp in app.blueprints.values()]}")
    return app


def _configure_logging(config: type[Config]) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        stream=sys.stdout,
        force=True
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(RequestIdFilter())


def _initialize_middleware(app: Flask) -> None:
    """
    Initialize middleware (request ids, CORS, rate limiting, monitoring, errors).

    Args:
        app: Flask application instance
    """
    # Request correlation id (registered first so every hook sees it)
    register_request_id_middleware(app)

    # Cross-origin access for browser clients
    init_cors(app)

    # Rate limiting
    limiter = create_rate_limiter(app)
    app.extensions['covid_api_limiter'] = limiter

    # Monitoring (Prometheus metrics)
    register_metrics_middleware(app)

    # Error handling (Sentry)
    init_error_handlers(app)


def _initialize_services(app: Flask, config: type[Config]) -> None:
    """
    Initialize application services using Service Container.

    Repositories and the database engine are created lazily on first use.

    Args:
        app: Flask application instance
        config: Configuration class
    """
    ServiceContainer.reset()
    container = ServiceContainer(config)

    # Store container in app config for access in views
    app.config['service_container'] = container
    logging.getLogger(__name__).debug("Services will be initialized on demand via ServiceContainer")
