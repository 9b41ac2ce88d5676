"""Row <-> entity mapping shared by the SQL repositories."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy.engine import Row

from covid_api.domain.entities.case_statistics import COUNTER_FIELDS, CaseStatistics
from covid_api.domain.entities.country import Country
from covid_api.domain.entities.province import Province


def scalar_values(entity: CaseStatistics) -> Dict[str, Any]:
    """Mutable columns of a country or province row."""
    values: Dict[str, Any] = {"name": entity.name}
    values.update(entity.counters())
    values["updated_at"] = entity.updated_at
    return values


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def country_from_row(row: Row) -> Country:
    mapping = row._mapping
    return Country(
        id=mapping["id"],
        name=mapping["name"],
        updated_at=_as_utc(mapping["updated_at"]),
        **{key: mapping[key] for key in COUNTER_FIELDS},
    )


def province_from_row(row: Row) -> Province:
    mapping = row._mapping
    return Province(
        id=mapping["id"],
        name=mapping["name"],
        country_id=mapping["country_id"],
        updated_at=_as_utc(mapping["updated_at"]),
        **{key: mapping[key] for key in COUNTER_FIELDS},
    )
