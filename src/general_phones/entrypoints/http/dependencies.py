"""
Dependency injection for FastAPI routes.

The catalog is read-only and compiled in, so the repository is a cached
singleton. Use cases and pages are built per request: a HomePage holds the
UI state of a single mount and must never be shared.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from general_phones.adapters.in_memory_phone_catalog_repository import (
    InMemoryPhoneCatalogRepository,
)
from general_phones.entrypoints.http.views.home_page import HomePage
from general_phones.infra.catalog_data import PHONES
from general_phones.ports.phone_catalog_repository import PhoneCatalogRepository
from general_phones.use_cases.get_phone_by_id import GetPhoneById
from general_phones.use_cases.list_phone_brands import ListPhoneBrands
from general_phones.use_cases.search_phone_catalog import SearchPhoneCatalog


@lru_cache
def get_phone_catalog_repository() -> PhoneCatalogRepository:
    """Shared repository over the compiled-in catalog."""
    return InMemoryPhoneCatalogRepository(PHONES)


def get_search_catalog_use_case(
    repository: PhoneCatalogRepository = Depends(get_phone_catalog_repository),
) -> SearchPhoneCatalog:
    return SearchPhoneCatalog(phone_catalog_repository=repository)


def get_list_brands_use_case(
    repository: PhoneCatalogRepository = Depends(get_phone_catalog_repository),
) -> ListPhoneBrands:
    return ListPhoneBrands(phone_catalog_repository=repository)


def get_get_phone_by_id_use_case(
    repository: PhoneCatalogRepository = Depends(get_phone_catalog_repository),
) -> GetPhoneById:
    return GetPhoneById(phone_catalog_repository=repository)


def get_home_page(
    repository: PhoneCatalogRepository = Depends(get_phone_catalog_repository),
) -> HomePage:
    """
    Mounts a fresh homepage for one request.

    Args:
        repository: Catalog repository (injected by FastAPI)

    Returns:
        HomePage: Page in its initial state (empty query, "All" brands)
    """
    return HomePage(repository=repository)
