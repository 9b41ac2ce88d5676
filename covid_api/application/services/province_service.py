"""Province use cases (Service Layer Pattern)."""
import logging
from typing import Any, Optional

from covid_api.domain.entities.case_statistics import sanitize_text
from covid_api.domain.entities.province import Province
from covid_api.domain.exceptions import (
    NotFoundError,
    PayloadError,
    StorageError,
    ValidationError,
)
from covid_api.domain.interfaces.province_repository import IProvinceRepository
from covid_api.application.services.result import ErrorKind, ServiceResult
from covid_api.middleware.monitoring import track_storage_operation


INTERNAL_ERROR_MESSAGE = "Internal server error"
PROVINCE_UPDATE_ERROR_MESSAGE = "Internal server error, could not update province information"


class ProvinceService:
    """Province use cases independent of any country aggregate."""

    def __init__(self, province_repository: IProvinceRepository):
        self.province_repository = province_repository
        self._logger = logging.getLogger(__name__)

    def update_province(self, payload: Any, province_id: Optional[str] = None) -> ServiceResult:
        """
        Update a single province: sanitize, stamp, validate, write.

        Args:
            payload: Decoded JSON request body
            province_id: Identifier from the request path, if any

        Returns:
            ServiceResult with the updated Province
        """
        try:
            province = Province.from_dict(payload)
        except PayloadError as e:
            return ServiceResult.fail(ErrorKind.PAYLOAD, e.message)

        if province_id is not None:
            province_id = sanitize_text(province_id)
            if not province.id:
                province.id = province_id
            elif province.id != province_id:
                return ServiceResult.fail(
                    ErrorKind.VALIDATION, "province: id does not match request path"
                )

        try:
            province.sanitize()
            province.stamp()
            province.validate()
        except ValidationError as e:
            return ServiceResult.fail(ErrorKind.VALIDATION, e.message)

        try:
            self.province_repository.update(province)
        except StorageError as e:
            track_storage_operation("update_province", False)
            self._logger.error(f"Failed to update province {province.id}: {e}", exc_info=True)
            return ServiceResult.fail(ErrorKind.INTERNAL, PROVINCE_UPDATE_ERROR_MESSAGE)

        track_storage_operation("update_province", True)
        self._logger.info(f"Updated province {province.id}")
        return ServiceResult.ok(province)

    def get_province(self, province_id: str) -> ServiceResult:
        province_id = sanitize_text(province_id or "")
        try:
            province = self.province_repository.get_by_id(province_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, e.message)
        except StorageError as e:
            track_storage_operation("get_province", False)
            self._logger.error(f"Failed to get province {province_id}: {e}", exc_info=True)
            return ServiceResult.fail(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE)

        track_storage_operation("get_province", True)
        return ServiceResult.ok(province)

    def list_provinces(self) -> ServiceResult:
        try:
            provinces = self.province_repository.get_all()
        except StorageError as e:
            track_storage_operation("list_provinces", False)
            self._logger.error(f"Failed to list provinces: {e}", exc_info=True)
            return ServiceResult.fail(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE)

        track_storage_operation("list_provinces", True)
        return ServiceResult.ok(provinces)
