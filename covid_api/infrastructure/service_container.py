"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from covid_api.config.settings import Config
from covid_api.application.services.country_service import CountryService
from covid_api.application.services.province_service import ProvinceService
from covid_api.infrastructure.factories.repository_factory import Repositories, RepositoryFactory


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    Follows Singleton pattern and Dependency Inversion Principle.
    Uses Factory Pattern to create repositories based on configuration.
    """

    _instance: Optional['ServiceContainer'] = None
    _config: type[Config] = Config
    _repositories: Optional[Repositories] = None
    _country_service: Optional[CountryService] = None
    _province_service: Optional[ProvinceService] = None

    def __new__(cls, config: Optional[type[Config]] = None):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config: Optional[type[Config]] = None):
        """Initialize service container."""
        self._logger = logging.getLogger(__name__)
        if config is not None:
            self._config = config

    def get_repositories(self) -> Repositories:
        """Get or create the repositories for the configured storage."""
        if self._repositories is None:
            storage_type = self._config.STORAGE_TYPE
            try:
                self._repositories = RepositoryFactory.create_repositories(
                    storage_type, self._config
                )
                self._logger.info(f"Repositories created with {storage_type} storage")
            except Exception as e:
                self._logger.error(f"Failed to create repositories: {e}")
                raise
        return self._repositories

    def set_repositories(self, repositories: Repositories) -> None:
        """Replace the repositories, dropping services built on the old ones."""
        self._repositories = repositories
        self._country_service = None
        self._province_service = None

    def get_country_service(self) -> CountryService:
        """Get or create country service instance."""
        if self._country_service is None:
            repositories = self.get_repositories()
            self._country_service = CountryService(
                country_repository=repositories.country,
                province_repository=repositories.province
            )
            self._logger.info("CountryService created")
        return self._country_service

    def get_province_service(self) -> ProvinceService:
        """Get or create province service instance."""
        if self._province_service is None:
            repositories = self.get_repositories()
            self._province_service = ProvinceService(
                province_repository=repositories.province
            )
            self._logger.info("ProvinceService created")
        return self._province_service

    @classmethod
    def reset(cls) -> None:
        """Reset all service instances, releasing storage (useful for testing)."""
        instance = cls._instance
        if instance is not None and instance._repositories is not None:
            instance._repositories.close()
        cls._instance = None
        cls._config = Config
        cls._repositories = None
        cls._country_service = None
        cls._province_service = None
