"""Tests for the request id and CORS middleware."""
import logging

from flask import g

from covid_api import create_app
from covid_api.config.settings import TestingConfig
from covid_api.infrastructure.service_container import ServiceContainer
from covid_api.middleware.request_id import REQUEST_ID_HEADER, RequestIdFilter


class TestRequestId:
    def test_generated_when_missing(self, client) -> None:
        response = client.get("/health")
        request_id = response.headers[REQUEST_ID_HEADER]
        assert len(request_id) == 32
        assert client.get("/health").headers[REQUEST_ID_HEADER] != request_id

    def test_echoes_caller_id(self, client) -> None:
        response = client.get("/health", headers={REQUEST_ID_HEADER: "abc-123"})
        assert response.headers[REQUEST_ID_HEADER] == "abc-123"

    def test_oversized_caller_id_replaced(self, client) -> None:
        response = client.get("/health", headers={REQUEST_ID_HEADER: "x" * 500})
        assert response.headers[REQUEST_ID_HEADER] != "x" * 500

    def test_present_on_error_responses(self, client) -> None:
        response = client.get("/api/v1/country/missing", headers={REQUEST_ID_HEADER: "req-404"})
        assert response.status_code == 404
        assert response.headers[REQUEST_ID_HEADER] == "req-404"

    def test_log_records_carry_request_id(self, app) -> None:
        record = logging.LogRecord("covid_api", logging.INFO, __file__, 1, "msg", None, None)
        with app.test_request_context("/health"):
            g.request_id = "req-log"
            assert RequestIdFilter().filter(record)
        assert record.request_id == "req-log"

    def test_log_records_outside_request(self) -> None:
        record = logging.LogRecord("covid_api", logging.INFO, __file__, 1, "msg", None, None)
        RequestIdFilter().filter(record)
        assert record.request_id == "-"


class TestCors:
    def test_allows_any_origin_by_default(self, client) -> None:
        response = client.get("/health", headers={"Origin": "https://example.org"})
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert REQUEST_ID_HEADER in response.headers["Access-Control-Expose-Headers"]

    def test_preflight(self, client) -> None:
        response = client.options(
            "/api/v1/country",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert "POST" in response.headers["Access-Control-Allow-Methods"]

    def test_restricted_origins(self) -> None:
        config = type("CorsTestingConfig", (TestingConfig,), {"CORS_ORIGINS": "https://a.example"})
        try:
            client = create_app(config).test_client()

            allowed = client.get("/health", headers={"Origin": "https://a.example"})
            assert allowed.headers["Access-Control-Allow-Origin"] == "https://a.example"

            denied = client.get("/health", headers={"Origin": "https://b.example"})
            assert "Access-Control-Allow-Origin" not in denied.headers
        finally:
            ServiceContainer.reset()
