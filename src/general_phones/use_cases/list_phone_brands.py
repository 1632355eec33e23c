from __future__ import annotations

from dataclasses import dataclass

from general_phones.ports.phone_catalog_repository import PhoneCatalogRepository


@dataclass(frozen=True, slots=True)
class ListPhoneBrandsResponse:
    brands: list[str]


class ListPhoneBrands:
    """Distinct brands offered by the catalog, in order of first occurrence."""

    def __init__(self, phone_catalog_repository: PhoneCatalogRepository) -> None:
        self._phone_catalog_repository = phone_catalog_repository

    def execute(self) -> ListPhoneBrandsResponse:
        return ListPhoneBrandsResponse(brands=self._phone_catalog_repository.list_brands())
