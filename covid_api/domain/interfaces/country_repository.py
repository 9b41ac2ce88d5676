"""Interface for country aggregate storage (Repository Pattern)."""
from abc import ABC, abstractmethod

from covid_api.domain.entities.country import Country


class ICountryRepository(ABC):
    """
    Interface for Country aggregate storage following Repository Pattern.

    Allows switching storage backends (relational store, in-memory test
    double) without changing business logic.
    """

    @abstractmethod
    def save(self, country: Country) -> Country:
        """
        Persist a new country together with its provinces, atomically.

        Args:
            country: Sanitized and validated country with identifiers assigned

        Returns:
            The same country, unchanged

        Raises:
            StorageError: If any insert fails; nothing is persisted
        """
        pass

    @abstractmethod
    def update(self, country: Country) -> None:
        """
        Update the country's scalar fields, keyed by identifier.

        Provinces are not touched.

        Raises:
            StorageError: If the update fails
        """
        pass

    @abstractmethod
    def delete(self, country: Country) -> None:
        """
        Delete the country and all its provinces, atomically.

        Raises:
            StorageError: If either delete fails; nothing is removed
        """
        pass

    @abstractmethod
    def get_by_id(self, country_id: str) -> Country:
        """
        Fetch a country with its provinces ordered by descending total.

        Args:
            country_id: Country identifier

        Returns:
            Country whose ``provinces`` list is never None

        Raises:
            NotFoundError: If no country has this identifier
            StorageError: If any query or row scan fails
        """
        pass
