"""Get phone by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from general_phones.domain.errors import NotFoundError
from general_phones.domain.phone import Phone
from general_phones.ports.phone_catalog_repository import PhoneCatalogRepository


@dataclass(frozen=True, slots=True)
class GetPhoneByIdRequest:
    """Request to get a phone by ID."""

    phone_id: int


@dataclass(frozen=True, slots=True)
class GetPhoneByIdResponse:
    """Response containing the requested phone."""

    phone: Phone


class GetPhoneById:
    """
    Use case for retrieving a single phone by ID.

    Raises NotFoundError if the phone is not in the catalog.
    """

    def __init__(self, phone_catalog_repository: PhoneCatalogRepository) -> None:
        self._repository = phone_catalog_repository

    def execute(self, request: GetPhoneByIdRequest) -> GetPhoneByIdResponse:
        """
        Execute the get phone by ID use case.

        Args:
            request: Request containing phone_id

        Returns:
            GetPhoneByIdResponse with the phone

        Raises:
            NotFoundError: If phone with given ID doesn't exist
        """
        phone = self._repository.get_by_id(request.phone_id)

        if phone is None:
            raise NotFoundError(resource="Phone", identifier=str(request.phone_id))

        return GetPhoneByIdResponse(phone=phone)
