"""Country aggregate root."""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from covid_api.domain.entities.case_statistics import CaseStatistics, ensure_list
from covid_api.domain.entities.province import Province


@dataclass
class Country(CaseStatistics):
    """
    Country case statistics together with its provinces.

    A country and its provinces form one aggregate: they are inserted and
    deleted together.
    """

    ENTITY_NAME = "country"

    provinces: List[Province] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "Country":
        """
        Build a country (and its provinces) from a request payload.

        Raises:
            PayloadError: If the payload is structurally invalid
        """
        kwargs = cls._base_kwargs(payload)
        provinces = [
            Province.from_dict(item)
            for item in ensure_list(cls.ENTITY_NAME, payload, "provinces")
        ]
        return cls(provinces=provinces, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data["provinces"] = [province.to_dict() for province in self.provinces]
        return data
