"""
Homepage components.

Each component renders its own template. Components with local state
(SearchControl, FilterControl) never touch page state directly; they report
to their owner through the callback they were constructed with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from markupsafe import Markup

from general_phones.domain.phone import ALL_BRANDS_OPTION, Phone
from general_phones.entrypoints.http.views.rendering import render_template
from general_phones.infra.catalog_data import HERO_IMAGE

SORT_OPTIONS = ("Recommended", "Price: Low to High", "Price: High to Low")


class Header:
    def render(self) -> Markup:
        return render_template("header.html")


class SearchControl:
    """Free-text search box.

    Holds the draft text as typed. Submitting trims it and reports the
    result; an empty query is valid and means "no filter".
    """

    def __init__(self, on_search: Callable[[str], None]) -> None:
        self._on_search = on_search
        self.draft = ""

    def set_draft(self, text: str) -> None:
        self.draft = text

    def submit(self) -> str:
        query = self.draft.strip()
        self._on_search(query)
        return query

    def render(self, selected_option: str = ALL_BRANDS_OPTION) -> Markup:
        return render_template(
            "search_control.html",
            draft=self.draft,
            selected_option=selected_option,
        )


class Hero:
    def __init__(self, on_search: Callable[[str], None]) -> None:
        self.search = SearchControl(on_search=on_search)

    def render(self, selected_option: str = ALL_BRANDS_OPTION) -> Markup:
        return render_template(
            "hero.html",
            search_control=self.search.render(selected_option=selected_option),
            hero_image=HERO_IMAGE,
        )


class FilterControl:
    """Brand filter bar: "All" followed by every catalog brand.

    Reports None for "All", otherwise the chosen brand. Re-selecting the
    current option reports it again; there is no toggle-off.
    """

    def __init__(
        self,
        brands: list[str],
        on_filter_change: Callable[[str | None], None],
    ) -> None:
        self.options = [ALL_BRANDS_OPTION, *brands]
        self._on_filter_change = on_filter_change
        self.selected = ALL_BRANDS_OPTION

    def change(self, option: str) -> str | None:
        self.selected = option
        brand = None if option == ALL_BRANDS_OPTION else option
        self._on_filter_change(brand)
        return brand

    def render(self, query: str = "") -> Markup:
        return render_template(
            "filter_control.html",
            options=self.options,
            selected=self.selected,
            query=query,
        )


class SortControl:
    """Sort selector. Rendered for layout only; it does not reorder anything."""

    options = SORT_OPTIONS

    def render(self) -> Markup:
        return render_template("sort_control.html", options=self.options)


@dataclass(frozen=True)
class PhoneCard:
    phone: Phone

    def render(self) -> Markup:
        return render_template("phone_card.html", phone=self.phone)


@dataclass(frozen=True)
class CatalogView:
    """Product grid for the visible set, or the empty-state message."""

    phones: list[Phone] = field(default_factory=list)

    EMPTY_MESSAGE = "No phones match your search."

    @property
    def is_empty(self) -> bool:
        return not self.phones

    def render(self) -> Markup:
        return render_template(
            "catalog_view.html",
            cards=[PhoneCard(phone).render() for phone in self.phones],
            empty_message=self.EMPTY_MESSAGE,
        )


class Footer:
    def __init__(self, year: int | None = None) -> None:
        self.year = year if year is not None else date.today().year

    def render(self) -> Markup:
        return render_template("footer.html", year=self.year)
