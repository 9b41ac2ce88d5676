"""Interface for province storage (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import List

from covid_api.domain.entities.province import Province


class IProvinceRepository(ABC):
    """Interface for Province storage outside of the country aggregate write."""

    @abstractmethod
    def update(self, province: Province) -> None:
        """
        Update one province row's name, counters and update time.

        Raises:
            StorageError: If the update fails
        """
        pass

    @abstractmethod
    def get_by_id(self, province_id: str) -> Province:
        """
        Fetch a single province.

        Raises:
            NotFoundError: If no province has this identifier
            StorageError: If the query fails
        """
        pass

    @abstractmethod
    def get_all(self) -> List[Province]:
        """
        Fetch every province ordered by descending total.

        Raises:
            StorageError: If the query fails
        """
        pass
