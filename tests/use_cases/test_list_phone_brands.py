from __future__ import annotations

from unittest.mock import Mock

from general_phones.adapters.in_memory_phone_catalog_repository import (
    InMemoryPhoneCatalogRepository,
)
from general_phones.infra.catalog_data import PHONES
from general_phones.ports.phone_catalog_repository import PhoneCatalogRepository
from general_phones.use_cases.list_phone_brands import ListPhoneBrands, ListPhoneBrandsResponse


def test_execute_delegates_to_repository() -> None:
    repository = Mock(spec=PhoneCatalogRepository)
    repository.list_brands.return_value = ["A", "B"]

    response = ListPhoneBrands(repository).execute()

    repository.list_brands.assert_called_once_with()
    assert response == ListPhoneBrandsResponse(brands=["A", "B"])


def test_execute_against_shipped_catalog() -> None:
    response = ListPhoneBrands(InMemoryPhoneCatalogRepository(PHONES)).execute()

    assert response.brands == ["NovaTech", "ZenMobile", "Pocket", "MegaTel"]
