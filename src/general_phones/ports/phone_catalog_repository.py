from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from general_phones.domain.phone import CatalogFilters, Phone


@dataclass(frozen=True)
class SearchResult:
    """Result from catalog search."""

    phones: list[Phone]
    total_count: int


class PhoneCatalogRepository(ABC):
    """
    Port for phone catalog data access.

    The catalog is read-only: implementations never mutate their source
    records, every search derives a fresh view.
    """

    @abstractmethod
    def search(self, filters: CatalogFilters) -> SearchResult:
        """
        Search catalog with query and brand filters.

        Args:
            filters: Query and brand criteria (AND semantics)

        Returns:
            SearchResult containing matching phones in catalog order
        """
        ...

    @abstractmethod
    def list_brands(self) -> list[str]:
        """Distinct brands in catalog order of first occurrence."""
        ...

    @abstractmethod
    def get_by_id(self, phone_id: int) -> Phone | None: ...
