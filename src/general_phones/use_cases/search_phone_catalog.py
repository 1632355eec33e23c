from __future__ import annotations

import logging
from dataclasses import dataclass

from general_phones.domain.phone import CatalogFilters, Phone
from general_phones.ports.phone_catalog_repository import PhoneCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchPhoneCatalogRequest:
    filters: CatalogFilters


@dataclass(frozen=True, slots=True)
class SearchPhoneCatalogResponse:
    phones: list[Phone]
    total_count: int


class SearchPhoneCatalog:
    """
    Phone catalog search by free-text query and brand.

    Filtering itself lives in the repository; the use case only wires the
    request through and reports the visible set.
    """

    def __init__(self, phone_catalog_repository: PhoneCatalogRepository) -> None:
        self._phone_catalog_repository = phone_catalog_repository

    def execute(self, request: SearchPhoneCatalogRequest) -> SearchPhoneCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Search parameters (query and brand)

        Returns:
            Response containing matching phones in catalog order
        """
        result = self._phone_catalog_repository.search(filters=request.filters)

        logger.debug(
            "Catalog searched",
            extra={
                "query": request.filters.query,
                "brand": request.filters.brand,
                "total_count": result.total_count,
            },
        )

        return SearchPhoneCatalogResponse(
            phones=result.phones,
            total_count=result.total_count,
        )
