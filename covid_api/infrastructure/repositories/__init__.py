"""Repository implementations (Infrastructure Layer).

Repository implementations for data persistence.
These implement domain interfaces defined in covid_api.domain.interfaces.
"""
from covid_api.infrastructure.repositories.country_repository import SQLCountryRepository
from covid_api.infrastructure.repositories.province_repository import SQLProvinceRepository
from covid_api.infrastructure.repositories.memory_repository import (
    InMemoryStore,
    InMemoryCountryRepository,
    InMemoryProvinceRepository,
)

__all__ = [
    "SQLCountryRepository",
    "SQLProvinceRepository",
    "InMemoryStore",
    "InMemoryCountryRepository",
    "InMemoryProvinceRepository",
]
