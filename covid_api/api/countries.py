"""Country endpoints."""
import logging
from typing import Any, Tuple

from flask import Blueprint, current_app, jsonify

from covid_api.api.responses import (
    PAYLOAD_ERROR_MESSAGE,
    error_response,
    read_json_body,
    render_result,
)
from covid_api.application.services.country_service import CountryService
from covid_api.middleware.monitoring import track_api_request


countries_blueprint = Blueprint("countries", __name__, url_prefix="/api/v1")
_logger = logging.getLogger(__name__)


def _get_country_service() -> CountryService:
    """
    Get country service from service container.

    Raises:
        RuntimeError: If service container is not available
    """
    container = current_app.config.get('service_container')
    if not container:
        raise RuntimeError("Service container not available")
    return container.get_country_service()


@countries_blueprint.route("/country/<country_id>", methods=["GET"])
@track_api_request("get_country")
def get_country(country_id: str) -> Tuple[Any, int]:
    """
    Fetch a country with its provinces.

    Returns:
        {"country": {...}} with provinces ordered by descending total,
        404 when the id is unknown
    """
    result = _get_country_service().get_country(country_id)
    return render_result(result, "country")


@countries_blueprint.route("/country", methods=["POST"])
@track_api_request("create_country")
def create_country() -> Tuple[Any, int]:
    """
    Create a country and its provinces.

    Expected payload:
    {
        "name": "Thailand",
        "total": 150,
        "provinces": [{"name": "Bangkok", "total": 100}, ...]
    }
    """
    body = read_json_body()
    if body is None:
        return error_response(PAYLOAD_ERROR_MESSAGE, 422)

    result = _get_country_service().create_country(body)
    return render_result(result, "country")


@countries_blueprint.route("/country/<country_id>", methods=["PUT"])
@track_api_request("edit_country")
def edit_country(country_id: str) -> Tuple[Any, int]:
    """Edit a country's counters and the provinces listed in the body."""
    body = read_json_body()
    if body is None:
        return error_response(PAYLOAD_ERROR_MESSAGE, 422)

    result = _get_country_service().edit_country(body, country_id=country_id)
    return render_result(result, "country")


@countries_blueprint.route("/country/<country_id>", methods=["DELETE"])
@track_api_request("delete_country")
def delete_country(country_id: str) -> Tuple[Any, int]:
    """Delete a country and all of its provinces."""
    result = _get_country_service().delete_country(country_id)
    if not result.success:
        return render_result(result, "country")

    _logger.info(f"Country {result.data.id} deleted via API")
    return jsonify({"success": "country deleted"}), 200
