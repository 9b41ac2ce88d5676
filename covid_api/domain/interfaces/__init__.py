"""Domain interfaces following Dependency Inversion Principle."""

from covid_api.domain.interfaces.country_repository import ICountryRepository
from covid_api.domain.interfaces.province_repository import IProvinceRepository

__all__ = [
    "ICountryRepository",
    "IProvinceRepository",
]
