"""API endpoints module.

This module contains all HTTP API endpoints organized by resource.
"""

from covid_api.api.countries import countries_blueprint
from covid_api.api.provinces import provinces_blueprint
from covid_api.api.health import health_blueprint

__all__ = [
    "countries_blueprint",
    "provinces_blueprint",
    "health_blueprint",
]
