"""District domain entity."""
from dataclasses import dataclass
from typing import Any, Dict

from covid_api.domain.entities.case_statistics import CaseStatistics


@dataclass
class District(CaseStatistics):
    """Lowest level of the hierarchy. Defined for payloads, not persisted."""

    ENTITY_NAME = "district"

    @classmethod
    def from_dict(cls, payload: Any) -> "District":
        return cls(**cls._base_kwargs(payload))

    def to_dict(self) -> Dict[str, Any]:
        return self._base_dict()
