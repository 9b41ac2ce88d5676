"""Per-request correlation id carried in the X-Request-ID header."""
import logging
import uuid

from flask import g, has_request_context, request


REQUEST_ID_HEADER = "X-Request-ID"
# Longer inbound ids are replaced rather than echoed
MAX_REQUEST_ID_LENGTH = 128


class RequestIdFilter(logging.Filter):
    """Adds ``request_id`` to every log record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        request_id = "-"
        if has_request_context():
            request_id = g.get("request_id", "-")
        record.request_id = request_id
        return True


def _incoming_request_id() -> str:
    value = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if value and len(value) <= MAX_REQUEST_ID_LENGTH and value.isprintable():
        return value
    return uuid.uuid4().hex


def register_request_id_middleware(app) -> None:
    """
    Echo the caller's X-Request-ID or generate one for each request.

    Args:
        app: Flask application instance
    """

    @app.before_request
    def assign_request_id():
        g.request_id = _incoming_request_id()

    @app.after_request
    def add_request_id_header(response):
        request_id = g.get("request_id") or uuid.uuid4().hex
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
