"""Country use cases (Service Layer Pattern).

Each use case is a request-scoped pipeline: parse the payload, run the
entity stages (sanitize, identifier, stamp, validate), then call the
repositories. Validation failures never reach storage.
"""
import logging
from typing import Any, List, Optional

from covid_api.domain.entities.case_statistics import sanitize_text, utc_now
from covid_api.domain.entities.country import Country
from covid_api.domain.exceptions import (
    NotFoundError,
    PayloadError,
    StorageError,
    ValidationError,
)
from covid_api.domain.interfaces.country_repository import ICountryRepository
from covid_api.domain.interfaces.province_repository import IProvinceRepository
from covid_api.application.services.result import ErrorKind, ServiceResult
from covid_api.middleware.monitoring import track_storage_operation


INTERNAL_ERROR_MESSAGE = "Internal server error"
PROVINCE_UPDATE_ERROR_MESSAGE = "Internal server error, could not update province information"


class CountryService:
    """
    Country aggregate use cases: read, create, edit and delete.

    Storage-agnostic: repositories are injected through their interfaces,
    so the same service runs over the relational store or the in-memory
    double.
    """

    def __init__(
        self,
        country_repository: ICountryRepository,
        province_repository: IProvinceRepository
    ):
        """
        Initialize country service.

        Args:
            country_repository: Country aggregate storage
            province_repository: Province storage used by edits
        """
        self.country_repository = country_repository
        self.province_repository = province_repository
        self._logger = logging.getLogger(__name__)

    def get_country(self, country_id: str) -> ServiceResult:
        """
        Fetch a country with its provinces ordered by descending total.

        Args:
            country_id: Country identifier (sanitized before lookup)

        Returns:
            ServiceResult with the Country, or a NOT_FOUND / INTERNAL error
        """
        country_id = sanitize_text(country_id or "")
        try:
            country = self.country_repository.get_by_id(country_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, e.message)
        except StorageError as e:
            track_storage_operation("get_country", False)
            self._logger.error(f"Failed to get country {country_id}: {e}", exc_info=True)
            return ServiceResult.fail(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE)

        track_storage_operation("get_country", True)
        return ServiceResult.ok(country)

    def create_country(self, payload: Any) -> ServiceResult:
        """
        Create a country and its provinces in one atomic write.

        The country and every province are sanitized, given a fresh
        identifier and update time, and validated before anything is
        written; the first invalid entity aborts the whole request.

        Args:
            payload: Decoded JSON request body

        Returns:
            ServiceResult with the stored Country
        """
        try:
            country = Country.from_dict(payload)
        except PayloadError as e:
            return ServiceResult.fail(ErrorKind.PAYLOAD, e.message)

        now = utc_now()
        try:
            self._prepare_new(country, now)
            for province in country.provinces:
                self._prepare_new(province, now)
                province.country_id = country.id
        except ValidationError as e:
            self._logger.info(f"Rejected country create: {e.message}")
            return ServiceResult.fail(ErrorKind.VALIDATION, e.message)

        try:
            self.country_repository.save(country)
        except StorageError as e:
            track_storage_operation("save_country", False)
            self._logger.error(f"Failed to save country {country.id}: {e}", exc_info=True)
            return ServiceResult.fail(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE)

        track_storage_operation("save_country", True)
        self._logger.info(
            f"Created country {country.id} ({country.name}) "
            f"with {len(country.provinces)} provinces"
        )
        return ServiceResult.ok(country)

    def edit_country(self, payload: Any, country_id: Optional[str] = None) -> ServiceResult:
        """
        Edit an existing country and the provinces listed in the payload.

        The identifier is kept from the payload (or taken from
        ``country_id`` when the payload has none) and is never regenerated.
        Every province is validated before any write. Provinces are then
        updated one by one, followed by the country row. These writes are
        not one transaction: if a province update fails, the provinces
        updated before it stay updated and the country row is untouched.

        Args:
            payload: Decoded JSON request body
            country_id: Identifier from the request path, if any

        Returns:
            ServiceResult with the edited Country
        """
        try:
            country = Country.from_dict(payload)
        except PayloadError as e:
            return ServiceResult.fail(ErrorKind.PAYLOAD, e.message)

        if country_id is not None:
            country_id = sanitize_text(country_id)
            if not country.id:
                country.id = country_id
            elif country.id != country_id:
                return ServiceResult.fail(
                    ErrorKind.VALIDATION, "country: id does not match request path"
                )
        if not country.id:
            return ServiceResult.fail(ErrorKind.VALIDATION, "country: id is required")

        now = utc_now()
        try:
            country.sanitize()
            country.stamp(now)
            country.validate()
            for province in country.provinces:
                province.sanitize()
                province.validate()
        except ValidationError as e:
            self._logger.info(f"Rejected country edit for {country.id}: {e.message}")
            return ServiceResult.fail(ErrorKind.VALIDATION, e.message)

        applied: List[str] = []
        for province in country.provinces:
            province.stamp(now)
            try:
                self.province_repository.update(province)
            except StorageError as e:
                track_storage_operation("update_province", False)
                self._logger.error(
                    f"Failed to update province {province.id} while editing country "
                    f"{country.id}; already updated: {applied}: {e}",
                    exc_info=True
                )
                return ServiceResult.fail(ErrorKind.INTERNAL, PROVINCE_UPDATE_ERROR_MESSAGE)
            applied.append(province.id)
            track_storage_operation("update_province", True)

        try:
            self.country_repository.update(country)
        except StorageError as e:
            track_storage_operation("update_country", False)
            self._logger.error(f"Failed to update country {country.id}: {e}", exc_info=True)
            return ServiceResult.fail(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE)

        track_storage_operation("update_country", True)
        self._logger.info(f"Edited country {country.id} and {len(applied)} provinces")
        return ServiceResult.ok(country)

    def delete_country(self, country_id: str) -> ServiceResult:
        """
        Delete a country together with all of its provinces.

        Args:
            country_id: Country identifier

        Returns:
            ServiceResult with the deleted Country, or NOT_FOUND
        """
        found = self.get_country(country_id)
        if not found.success:
            return found

        country = found.data
        try:
            self.country_repository.delete(country)
        except StorageError as e:
            track_storage_operation("delete_country", False)
            self._logger.error(f"Failed to delete country {country.id}: {e}", exc_info=True)
            return ServiceResult.fail(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE)

        track_storage_operation("delete_country", True)
        self._logger.info(f"Deleted country {country.id} and {len(country.provinces)} provinces")
        return ServiceResult.ok(country)

    @staticmethod
    def _prepare_new(entity, now) -> None:
        entity.sanitize()
        entity.assign_identifier()
        entity.stamp(now)
        entity.validate()
