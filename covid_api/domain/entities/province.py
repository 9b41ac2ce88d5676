"""Province domain entity."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from covid_api.domain.entities.case_statistics import CaseStatistics, ensure_list
from covid_api.domain.entities.district import District


@dataclass
class Province(CaseStatistics):
    """
    Province case statistics.

    ``country_id`` is the owning country's identifier. It is set by the
    repository on reads and never taken from an edit payload.
    """

    ENTITY_NAME = "province"

    country_id: Optional[str] = None
    districts: List[District] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "Province":
        """
        Build a province from a request payload.

        Raises:
            PayloadError: If the payload is structurally invalid
        """
        kwargs = cls._base_kwargs(payload)
        districts = [
            District.from_dict(item)
            for item in ensure_list(cls.ENTITY_NAME, payload, "districts")
        ]
        return cls(districts=districts, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data["country_id"] = self.country_id
        data["districts"] = [district.to_dict() for district in self.districts]
        return data
