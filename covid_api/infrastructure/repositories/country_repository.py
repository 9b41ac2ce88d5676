"""Country aggregate repository backed by a relational store (SQLAlchemy Core)."""
import logging
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from covid_api.domain.entities.country import Country
from covid_api.domain.exceptions import NotFoundError, StorageError
from covid_api.domain.interfaces.country_repository import ICountryRepository
from covid_api.infrastructure.database import aggregate_isolation_level
from covid_api.infrastructure.repositories._rows import (
    country_from_row,
    province_from_row,
    scalar_values,
)
from covid_api.infrastructure.schema import country as country_table
from covid_api.infrastructure.schema import provinces as province_table


class SQLCountryRepository(ICountryRepository):
    """
    Repository for the Country aggregate using SQLAlchemy Core.

    Follows Repository Pattern. Aggregate writes (save, delete) run in a
    single transaction at repeatable-read isolation; the scalar update
    runs alone at the driver's default level. No operation is retried.
    """

    def __init__(self, engine: Engine, isolation_level: Optional[str] = None):
        """
        Initialize the country repository.

        Args:
            engine: SQLAlchemy engine (Dependency Injection)
            isolation_level: Override for aggregate transactions
        """
        self.engine = engine
        self.isolation_level = isolation_level or aggregate_isolation_level(engine)
        self._logger = logging.getLogger(__name__)

    def save(self, country: Country) -> Country:
        """Insert the country row, then all province rows in one bulk insert."""
        country_row = {"id": country.id, **scalar_values(country)}
        province_rows = [
            {"id": province.id, "country_id": country.id, **scalar_values(province)}
            for province in country.provinces
        ]

        try:
            with self.engine.connect() as conn:
                conn = conn.execution_options(isolation_level=self.isolation_level)
                with conn.begin():
                    conn.execute(insert(country_table).values(**country_row))
                    if province_rows:
                        conn.execute(insert(province_table), province_rows)
        except SQLAlchemyError as e:
            self._logger.error(f"Error saving country {country.id}: {e}", exc_info=True)
            raise StorageError(f"country: could not save {country.id}") from e

        self._logger.info(
            f"Saved country {country.id} with {len(province_rows)} provinces"
        )
        return country

    def update(self, country: Country) -> None:
        try:
            with self.engine.begin() as conn:
                result = conn.execute(
                    update(country_table)
                    .where(country_table.c.id == country.id)
                    .values(**scalar_values(country))
                )
        except SQLAlchemyError as e:
            self._logger.error(f"Error updating country {country.id}: {e}", exc_info=True)
            raise StorageError(f"country: could not update {country.id}") from e

        if result.rowcount == 0:
            self._logger.warning(f"Update matched no country row for {country.id}")

    def delete(self, country: Country) -> None:
        """Delete provinces, then the country, inside one transaction."""
        try:
            with self.engine.connect() as conn:
                conn = conn.execution_options(isolation_level=self.isolation_level)
                with conn.begin():
                    # children first so the foreign key is never dangling
                    conn.execute(
                        delete(province_table).where(province_table.c.country_id == country.id)
                    )
                    conn.execute(delete(country_table).where(country_table.c.id == country.id))
        except SQLAlchemyError as e:
            self._logger.error(f"Error deleting country {country.id}: {e}", exc_info=True)
            raise StorageError(f"country: could not delete {country.id}") from e

        self._logger.info(f"Deleted country {country.id}")

    def get_by_id(self, country_id: str) -> Country:
        try:
            with self.engine.connect() as conn:
                row = conn.execute(
                    select(country_table).where(country_table.c.id == country_id)
                ).first()
                if row is None:
                    raise NotFoundError("country", country_id)

                province_rows = conn.execute(
                    select(province_table)
                    .where(province_table.c.country_id == country_id)
                    .order_by(province_table.c.total.desc(), province_table.c.name)
                ).all()

                country = country_from_row(row)
                country.provinces = [province_from_row(r) for r in province_rows]
        except SQLAlchemyError as e:
            self._logger.error(f"Error retrieving country {country_id}: {e}", exc_info=True)
            raise StorageError(f"country: could not read {country_id}") from e

        self._logger.debug(
            f"Retrieved country {country_id} with {len(country.provinces)} provinces"
        )
        return country
