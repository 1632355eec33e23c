from __future__ import annotations

from typing import Iterable

from general_phones.domain.errors import ValidationError
from general_phones.domain.phone import (
    CatalogFilters,
    Phone,
    distinct_brands,
    filter_phones,
)
from general_phones.ports.phone_catalog_repository import PhoneCatalogRepository, SearchResult


class InMemoryPhoneCatalogRepository(PhoneCatalogRepository):
    """
    Compiled-in catalog backed by a tuple.

    - Stores phones in insertion order
    - Applies AND-semantics filtering over the whole list on every search
    - Never mutates the stored phones
    """

    def __init__(self, phones: Iterable[Phone]) -> None:
        self._phones = tuple(phones)
        self._validate()

    def _validate(self) -> None:
        seen: set[int] = set()
        for phone in self._phones:
            phone.validate()
            if phone.id in seen:
                raise ValidationError(
                    errors=[
                        {
                            "field": "id",
                            "message": f"Duplicate phone id {phone.id}",
                            "code": "DUPLICATE_ID",
                        }
                    ]
                )
            seen.add(phone.id)

    def search(self, filters: CatalogFilters) -> SearchResult:
        matches = filter_phones(self._phones, filters)
        return SearchResult(phones=matches, total_count=len(matches))

    def list_brands(self) -> list[str]:
        return distinct_brands(self._phones)

    def get_by_id(self, phone_id: int) -> Phone | None:
        return next((phone for phone in self._phones if phone.id == phone_id), None)
