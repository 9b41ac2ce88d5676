"""Application services module.

Use cases for the country aggregate and single provinces.
"""
from covid_api.application.services.result import ErrorKind, ServiceError, ServiceResult
from covid_api.application.services.country_service import CountryService
from covid_api.application.services.province_service import ProvinceService

__all__ = [
    "ErrorKind",
    "ServiceError",
    "ServiceResult",
    "CountryService",
    "ProvinceService",
]
