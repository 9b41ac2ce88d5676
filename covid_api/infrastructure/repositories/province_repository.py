"""Province repository backed by a relational store (SQLAlchemy Core)."""
import logging
from typing import List

from sqlalchemy import select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from covid_api.domain.entities.province import Province
from covid_api.domain.exceptions import NotFoundError, StorageError
from covid_api.domain.interfaces.province_repository import IProvinceRepository
from covid_api.infrastructure.repositories._rows import province_from_row, scalar_values
from covid_api.infrastructure.schema import provinces as province_table


class SQLProvinceRepository(IProvinceRepository):
    """Repository for single-province reads and updates using SQLAlchemy Core."""

    def __init__(self, engine: Engine):
        """
        Initialize the province repository.

        Args:
            engine: SQLAlchemy engine (Dependency Injection)
        """
        self.engine = engine
        self._logger = logging.getLogger(__name__)

    def update(self, province: Province) -> None:
        """Update name, counters and update time. ``country_id`` never changes."""
        try:
            with self.engine.begin() as conn:
                result = conn.execute(
                    update(province_table)
                    .where(province_table.c.id == province.id)
                    .values(**scalar_values(province))
                )
        except SQLAlchemyError as e:
            self._logger.error(f"Error updating province {province.id}: {e}", exc_info=True)
            raise StorageError(f"province: could not update {province.id}") from e

        if result.rowcount == 0:
            self._logger.warning(f"Update matched no province row for {province.id}")

    def get_by_id(self, province_id: str) -> Province:
        try:
            with self.engine.connect() as conn:
                row = conn.execute(
                    select(province_table).where(province_table.c.id == province_id)
                ).first()
        except SQLAlchemyError as e:
            self._logger.error(f"Error retrieving province {province_id}: {e}", exc_info=True)
            raise StorageError(f"province: could not read {province_id}") from e

        if row is None:
            raise NotFoundError("province", province_id)
        return province_from_row(row)

    def get_all(self) -> List[Province]:
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(
                    select(province_table).order_by(
                        province_table.c.total.desc(), province_table.c.name
                    )
                ).all()
        except SQLAlchemyError as e:
            self._logger.error(f"Error listing provinces: {e}", exc_info=True)
            raise StorageError("province: could not list provinces") from e

        return [province_from_row(row) for row in rows]
