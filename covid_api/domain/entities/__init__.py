"""Domain entities - core business objects."""
from covid_api.domain.entities.case_statistics import CaseStatistics, COUNTER_FIELDS
from covid_api.domain.entities.district import District
from covid_api.domain.entities.province import Province
from covid_api.domain.entities.country import Country

__all__ = [
    "CaseStatistics",
    "COUNTER_FIELDS",
    "District",
    "Province",
    "Country",
]
