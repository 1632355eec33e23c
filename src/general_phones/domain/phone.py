from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from general_phones.domain.errors import ValidationError

# Brand option that stands for "no brand filter"
ALL_BRANDS_OPTION = "All"


@dataclass(frozen=True)
class Phone:
    id: int
    name: str
    brand: str
    price: Decimal
    rating: Decimal
    image: str
    tag: str

    def validate(self) -> None:
        """
        Validate phone attributes.

        Raises:
            ValidationError: If the price is negative
        """
        if self.price < 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "price",
                        "message": "Must be greater than or equal to 0",
                        "code": "INVALID_VALUE",
                    }
                ],
                phone_id=self.id,
            )


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    """Current search state: free-text query plus optional brand (None means "All")."""

    query: str = ""
    brand: str | None = None


def search_text(phone: Phone) -> str:
    """Fields a query is matched against, joined in a fixed order."""
    return f"{phone.name} {phone.brand} {phone.tag}"


def matches_query(phone: Phone, query: str) -> bool:
    # Plain substring over the joined text, so a query may span field boundaries
    if query == "":
        return True
    return query.lower() in search_text(phone).lower()


def matches_brand(phone: Phone, brand: str | None) -> bool:
    if brand is None:
        return True
    return phone.brand == brand


def filter_phones(phones: Iterable[Phone], filters: CatalogFilters) -> list[Phone]:
    """
    Derive the visible set for the given filters.

    Both predicates must hold (AND semantics). Catalog order is preserved
    and the input is never mutated.
    """
    return [
        phone
        for phone in phones
        if matches_query(phone, filters.query) and matches_brand(phone, filters.brand)
    ]


def distinct_brands(phones: Iterable[Phone]) -> list[str]:
    """Distinct brands in order of first occurrence."""
    return list(dict.fromkeys(phone.brand for phone in phones))
