"""In-memory repositories for tests and storage-less local runs."""
import copy
import logging
import threading
from typing import Dict, List

from covid_api.domain.entities.country import Country
from covid_api.domain.entities.province import Province
from covid_api.domain.exceptions import NotFoundError, StorageError
from covid_api.domain.interfaces.country_repository import ICountryRepository
from covid_api.domain.interfaces.province_repository import IProvinceRepository


def _by_total_desc(provinces: List[Province]) -> List[Province]:
    return sorted(provinces, key=lambda p: (-p.total, p.name))


class InMemoryStore:
    """
    Two dicts standing in for the ``country`` and ``provinces`` tables.

    Entities are copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self):
        self.countries: Dict[str, Country] = {}
        self.provinces: Dict[str, Province] = {}
        self.lock = threading.Lock()


class InMemoryCountryRepository(ICountryRepository):
    """Country aggregate repository over an :class:`InMemoryStore`."""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self._logger = logging.getLogger(__name__)

    def save(self, country: Country) -> Country:
        with self.store.lock:
            new_ids = [p.id for p in country.provinces]
            # checked up front so a failed save leaves nothing behind
            if country.id in self.store.countries:
                raise StorageError(f"country: duplicate id {country.id}")
            if len(set(new_ids)) != len(new_ids) or any(
                pid in self.store.provinces for pid in new_ids
            ):
                raise StorageError(f"province: duplicate id for country {country.id}")

            row = copy.deepcopy(country)
            row.provinces = []
            self.store.countries[country.id] = row
            for province in country.provinces:
                stored = copy.deepcopy(province)
                stored.country_id = country.id
                stored.districts = []
                self.store.provinces[stored.id] = stored

        self._logger.info(f"Saved country {country.id} in memory")
        return country

    def update(self, country: Country) -> None:
        with self.store.lock:
            row = self.store.countries.get(country.id)
            if row is None:
                self._logger.warning(f"Update matched no country row for {country.id}")
                return
            row.name = country.name
            for key, value in country.counters().items():
                setattr(row, key, value)
            row.updated_at = country.updated_at

    def delete(self, country: Country) -> None:
        with self.store.lock:
            for pid in [p.id for p in self.store.provinces.values() if p.country_id == country.id]:
                del self.store.provinces[pid]
            self.store.countries.pop(country.id, None)

    def get_by_id(self, country_id: str) -> Country:
        with self.store.lock:
            row = self.store.countries.get(country_id)
            if row is None:
                raise NotFoundError("country", country_id)
            result = copy.deepcopy(row)
            result.provinces = _by_total_desc([
                copy.deepcopy(p) for p in self.store.provinces.values()
                if p.country_id == country_id
            ])
        return result


class InMemoryProvinceRepository(IProvinceRepository):
    """Province repository over an :class:`InMemoryStore`."""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self._logger = logging.getLogger(__name__)

    def update(self, province: Province) -> None:
        with self.store.lock:
            row = self.store.provinces.get(province.id)
            if row is None:
                self._logger.warning(f"Update matched no province row for {province.id}")
                return
            row.name = province.name
            for key, value in province.counters().items():
                setattr(row, key, value)
            row.updated_at = province.updated_at

    def get_by_id(self, province_id: str) -> Province:
        with self.store.lock:
            row = self.store.provinces.get(province_id)
            if row is None:
                raise NotFoundError("province", province_id)
            return copy.deepcopy(row)

    def get_all(self) -> List[Province]:
        with self.store.lock:
            return _by_total_desc([copy.deepcopy(p) for p in self.store.provinces.values()])
