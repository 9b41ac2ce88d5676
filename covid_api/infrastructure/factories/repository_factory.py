"""Factory for creating repository instances (Factory Pattern)."""
import logging
from dataclasses import dataclass
from typing import Optional

from covid_api.config.settings import Config
from covid_api.domain.interfaces.country_repository import ICountryRepository
from covid_api.domain.interfaces.province_repository import IProvinceRepository
from covid_api.infrastructure.database import DatabaseEngineFactory
from covid_api.infrastructure.repositories.country_repository import SQLCountryRepository
from covid_api.infrastructure.repositories.province_repository import SQLProvinceRepository
from covid_api.infrastructure.repositories.memory_repository import (
    InMemoryStore,
    InMemoryCountryRepository,
    InMemoryProvinceRepository,
)


logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """Repositories sharing one storage backend."""
    country: ICountryRepository
    province: IProvinceRepository
    storage_type: str

    def close(self) -> None:
        """Release the storage backend's resources."""
        if self.storage_type == "sql":
            DatabaseEngineFactory.close()


class RepositoryFactory:
    """
    Factory for creating repository instances following Factory Pattern.

    Centralizes storage selection so services only ever see the interfaces.
    """

    @staticmethod
    def create_repositories(
        storage_type: str = "sql",
        config: Optional[type[Config]] = None
    ) -> Repositories:
        """
        Create country and province repositories over one backend.

        Args:
            storage_type: Type of storage ("sql" or "memory")
            config: Configuration class for the SQL engine

        Returns:
            Repositories instance

        Raises:
            ValueError: If storage type is not supported
        """
        storage_type = storage_type.lower()

        if storage_type == "sql":
            engine = DatabaseEngineFactory.get_engine(config or Config)
            return Repositories(
                country=SQLCountryRepository(engine),
                province=SQLProvinceRepository(engine),
                storage_type=storage_type,
            )
        elif storage_type == "memory":
            store = InMemoryStore()
            logger.warning("Using in-memory storage; data will not survive a restart")
            return Repositories(
                country=InMemoryCountryRepository(store),
                province=InMemoryProvinceRepository(store),
                storage_type=storage_type,
            )
        else:
            raise ValueError(f"Unsupported storage type: {storage_type}")
