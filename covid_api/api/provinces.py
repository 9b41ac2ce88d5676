"""Province endpoints."""
from typing import Any, Tuple

from flask import Blueprint, current_app

from covid_api.api.responses import (
    PAYLOAD_ERROR_MESSAGE,
    error_response,
    read_json_body,
    render_result,
)
from covid_api.application.services.province_service import ProvinceService
from covid_api.middleware.monitoring import track_api_request


provinces_blueprint = Blueprint("provinces", __name__, url_prefix="/api/v1")


def _get_province_service() -> ProvinceService:
    container = current_app.config.get('service_container')
    if not container:
        raise RuntimeError("Service container not available")
    return container.get_province_service()


@provinces_blueprint.route("/province/<province_id>", methods=["PUT"])
@track_api_request("update_province")
def update_province(province_id: str) -> Tuple[Any, int]:
    """Update one province's name and counters."""
    body = read_json_body()
    if body is None:
        return error_response(PAYLOAD_ERROR_MESSAGE, 422)

    result = _get_province_service().update_province(body, province_id=province_id)
    return render_result(result, "province")


@provinces_blueprint.route("/province/<province_id>", methods=["GET"])
@track_api_request("get_province")
def get_province(province_id: str) -> Tuple[Any, int]:
    result = _get_province_service().get_province(province_id)
    return render_result(result, "province")


@provinces_blueprint.route("/provinces", methods=["GET"])
@track_api_request("list_provinces")
def list_provinces() -> Tuple[Any, int]:
    """All provinces, ordered by descending total."""
    result = _get_province_service().list_provinces()
    return render_result(result, "provinces")
