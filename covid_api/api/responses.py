"""JSON envelope shared by the API blueprints."""
from typing import Any, Tuple

from flask import jsonify, request

from covid_api.application.services.result import ErrorKind, ServiceResult


PAYLOAD_ERROR_MESSAGE = "request: unable to parse request payload"

STATUS_BY_ERROR_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.PAYLOAD: 422,
    ErrorKind.INTERNAL: 500,
}


def error_response(message: str, status_code: int) -> Tuple[Any, int]:
    return jsonify({"error": message}), status_code


def read_json_body() -> Any:
    """Decoded JSON body, or None when the body is missing or not JSON."""
    return request.get_json(silent=True)


def render_result(result: ServiceResult, key: str) -> Tuple[Any, int]:
    """
    Render a ServiceResult as ``{key: entity}`` or ``{"error": message}``.

    Args:
        result: Service outcome
        key: Envelope key for the entity ("country", "province", ...)

    Returns:
        Tuple of (response, status_code)
    """
    if not result.success:
        status = STATUS_BY_ERROR_KIND.get(result.error.kind, 500)
        return error_response(result.error.message, status)

    data = result.data
    if isinstance(data, list):
        body = [item.to_dict() for item in data]
    else:
        body = data.to_dict()
    return jsonify({key: body}), 200
