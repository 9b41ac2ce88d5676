"""Health check endpoints."""
import logging
from flask import Blueprint, current_app, jsonify

from covid_api.infrastructure.database import DatabaseEngineFactory, ping

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Basic health check endpoint.

    Returns:
        JSON response with health status
    """
    return jsonify({
        "status": "healthy",
        "service": "covid19-api"
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks the database).

    Returns:
        JSON response with readiness status
    """
    checks = {
        "database": False,
        "overall": False
    }

    if current_app.config.get("STORAGE_TYPE", "sql").lower() == "memory":
        checks["database"] = True
    else:
        try:
            current_app.config["service_container"].get_repositories()
            checks["database"] = ping(DatabaseEngineFactory.get_engine())
        except Exception as e:
            _logger.error(f"Database health check failed: {e}")
            checks["database"] = False

    # Overall status
    checks["overall"] = checks["database"]

    status_code = 200 if checks["overall"] else 503

    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """
    Liveness check endpoint (for Kubernetes).

    Returns:
        JSON response with liveness status
    """
    return jsonify({
        "status": "alive",
        "service": "covid19-api"
    }), 200
