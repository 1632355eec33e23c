"""
Test suite for SearchPhoneCatalog UseCase.

- Delegates filtering to the repository (no filtering logic in the use case)
- Returns a properly structured response
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from general_phones.adapters.in_memory_phone_catalog_repository import (
    InMemoryPhoneCatalogRepository,
)
from general_phones.domain.phone import CatalogFilters, Phone
from general_phones.infra.catalog_data import PHONES
from general_phones.ports.phone_catalog_repository import PhoneCatalogRepository, SearchResult
from general_phones.use_cases.search_phone_catalog import (
    SearchPhoneCatalog,
    SearchPhoneCatalogRequest,
    SearchPhoneCatalogResponse,
)


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock repository for testing UseCase in isolation."""
    return Mock(spec=PhoneCatalogRepository)


@pytest.fixture()
def sample_phones() -> list[Phone]:
    return [
        Phone(
            id=1,
            name="Pulse X1",
            brand="NovaTech",
            price=Decimal("249"),
            rating=Decimal("4.5"),
            image="/images/phone-1.jpg",
            tag="Best seller",
        ),
    ]


# ==============================================================================
# Delegation
# ==============================================================================


def test_execute_delegates_to_repository(mock_repository: Mock, sample_phones: list[Phone]) -> None:
    """UseCase passes the filters through and returns the repository result."""
    mock_repository.search.return_value = SearchResult(phones=sample_phones, total_count=1)
    use_case = SearchPhoneCatalog(mock_repository)
    filters = CatalogFilters(query="pulse", brand="NovaTech")

    response = use_case.execute(SearchPhoneCatalogRequest(filters=filters))

    mock_repository.search.assert_called_once_with(filters=filters)
    assert isinstance(response, SearchPhoneCatalogResponse)
    assert response.phones == sample_phones
    assert response.total_count == 1


def test_execute_returns_repository_results_unfiltered(
    mock_repository: Mock, sample_phones: list[Phone]
) -> None:
    """UseCase does not filter on its own."""
    mock_repository.search.return_value = SearchResult(phones=sample_phones, total_count=1)
    use_case = SearchPhoneCatalog(mock_repository)

    response = use_case.execute(
        SearchPhoneCatalogRequest(filters=CatalogFilters(query="does-not-match"))
    )

    assert response.phones == sample_phones


def test_execute_empty_result(mock_repository: Mock) -> None:
    mock_repository.search.return_value = SearchResult(phones=[], total_count=0)
    use_case = SearchPhoneCatalog(mock_repository)

    response = use_case.execute(SearchPhoneCatalogRequest(filters=CatalogFilters()))

    assert response.phones == []
    assert response.total_count == 0


# ==============================================================================
# Against the shipped catalog
# ==============================================================================


@pytest.mark.parametrize(
    ("query", "brand", "expected"),
    [
        ("", None, ["Pulse X1", "Arc Pro", "MiniGo", "Titan V"]),
        ("arc", None, ["Arc Pro"]),
        ("", "ZenMobile", ["Arc Pro"]),
        ("zzz-no-match", None, []),
        ("premium", None, ["Titan V"]),
        ("pocket mini", None, []),
    ],
)
def test_execute_catalog_scenarios(query: str, brand: str | None, expected: list[str]) -> None:
    use_case = SearchPhoneCatalog(InMemoryPhoneCatalogRepository(PHONES))

    response = use_case.execute(
        SearchPhoneCatalogRequest(filters=CatalogFilters(query=query, brand=brand))
    )

    assert [phone.name for phone in response.phones] == expected
    assert response.total_count == len(expected)
