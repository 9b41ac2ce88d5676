"""Case statistics shared by every level of the geographic hierarchy."""
import html
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from covid_api.domain.exceptions import PayloadError, ValidationError


COUNTER_FIELDS: Tuple[str, ...] = (
    "total",
    "new_case",
    "treated",
    "decovering_case",
    "test_case",
    "dead",
    "negative_case",
)

# Clients of the first API release send and read the misspelt key.
LEGACY_FIELD_ALIASES: Dict[str, str] = {"treaded": "treated"}

# Counters are stored in BIGINT columns.
COUNTER_MIN = -(2 ** 63)
COUNTER_MAX = 2 ** 63 - 1


def sanitize_text(value: str) -> str:
    """
    Trim and HTML-escape free text.

    Existing entities are unescaped first so applying this twice yields
    the same string as applying it once.

    Args:
        value: Raw text from a request payload

    Returns:
        Sanitized text
    """
    return html.escape(html.unescape(value).strip())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def _parse_counter(entity: str, payload: Dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        for legacy_key, canonical in LEGACY_FIELD_ALIASES.items():
            if canonical == key and legacy_key in payload:
                value = payload[legacy_key]
    if value is None:
        return 0
    # bool is an int subclass; JSON true/false is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadError(f"{entity}: {key} must be an integer")
    if not COUNTER_MIN <= value <= COUNTER_MAX:
        raise PayloadError(f"{entity}: {key} must be an integer")
    return value


def _parse_text(entity: str, payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PayloadError(f"{entity}: {key} must be a string")
    return value


def ensure_object(payload: Any) -> Dict[str, Any]:
    """Reject payloads that are not JSON objects."""
    if not isinstance(payload, dict):
        raise PayloadError("request: unable to parse request payload")
    return payload


def ensure_list(entity: str, payload: Dict[str, Any], key: str) -> List[Any]:
    """Return ``payload[key]`` as a list, treating null/missing as empty."""
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise PayloadError(f"{entity}: {key} must be a list")
    return value


@dataclass
class CaseStatistics:
    """
    Base entity holding a named region and its case counters.

    The pipeline stages are explicit methods so callers decide when an
    identifier is generated and when the update time moves:

        entity.sanitize()
        entity.assign_identifier()   # creation only
        entity.stamp()
        entity.validate()
    """

    ENTITY_NAME: ClassVar[str] = "entity"

    id: str = ""
    name: str = ""
    total: int = 0
    new_case: int = 0
    treated: int = 0
    decovering_case: int = 0
    test_case: int = 0
    dead: int = 0
    negative_case: int = 0
    updated_at: Optional[datetime] = None

    def sanitize(self) -> None:
        """Trim and HTML-escape the name in place."""
        self.name = sanitize_text(self.name)

    def assign_identifier(self) -> str:
        """Overwrite the identifier with a fresh UUID4 and return it."""
        self.id = str(uuid.uuid4())
        return self.id

    def stamp(self, now: Optional[datetime] = None) -> None:
        """Set the last-update time (defaults to now, UTC)."""
        self.updated_at = now or utc_now()

    def validate(self) -> None:
        """
        Check required fields.

        Must run after ``sanitize`` since it inspects the cleaned name.

        Raises:
            ValidationError: If the name is empty
        """
        if not self.name:
            raise ValidationError(f"{self.ENTITY_NAME}: name is required")

    def counters(self) -> Dict[str, int]:
        """Counter fields as a column-name mapping."""
        return {key: getattr(self, key) for key in COUNTER_FIELDS}

    @classmethod
    def _base_kwargs(cls, payload: Any) -> Dict[str, Any]:
        payload = ensure_object(payload)
        kwargs: Dict[str, Any] = {
            "id": _parse_text(cls.ENTITY_NAME, payload, "id"),
            "name": _parse_text(cls.ENTITY_NAME, payload, "name"),
        }
        for key in COUNTER_FIELDS:
            kwargs[key] = _parse_counter(cls.ENTITY_NAME, payload, key)
        return kwargs

    def _base_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "name": self.name}
        data.update(self.counters())
        for legacy_key, canonical in LEGACY_FIELD_ALIASES.items():
            data[legacy_key] = data[canonical]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data
