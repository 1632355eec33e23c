from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from general_phones.adapters.in_memory_phone_catalog_repository import (
    InMemoryPhoneCatalogRepository,
)
from general_phones.domain.phone import CatalogFilters, Phone
from general_phones.entrypoints.http.views.components import (
    CatalogView,
    FilterControl,
    Footer,
    Header,
    Hero,
    SortControl,
)
from general_phones.entrypoints.http.views.rendering import render_template
from general_phones.infra.catalog_data import PHONES
from general_phones.ports.phone_catalog_repository import PhoneCatalogRepository
from general_phones.use_cases.list_phone_brands import ListPhoneBrands
from general_phones.use_cases.search_phone_catalog import (
    SearchPhoneCatalog,
    SearchPhoneCatalogRequest,
)

logger = logging.getLogger(__name__)

# Prebuilt Tailwind stylesheet, shipped by the asset pipeline like the images
STYLESHEET = "/assets/styles.css"


@dataclass(frozen=True, slots=True)
class PageState:
    query: str = ""
    selected_brand: str | None = None


class HomePage:
    """
    The catalog homepage.

    Owns the UI state for one mount. Controls report into it through
    callbacks; each report swaps in a new PageState, so every render reads
    one consistent snapshot. The visible set is recomputed on every access.
    """

    def __init__(self, repository: PhoneCatalogRepository | None = None) -> None:
        if repository is None:
            repository = InMemoryPhoneCatalogRepository(PHONES)

        self._search_catalog = SearchPhoneCatalog(phone_catalog_repository=repository)
        self.state = PageState()

        self.header = Header()
        self.hero = Hero(on_search=self._on_search)
        self.filters = FilterControl(
            brands=ListPhoneBrands(phone_catalog_repository=repository).execute().brands,
            on_filter_change=self._on_filter_change,
        )
        self.sort = SortControl()
        self.footer = Footer()

    def _on_search(self, query: str) -> None:
        self.state = replace(self.state, query=query)
        logger.debug("Search submitted", extra={"query": query})

    def _on_filter_change(self, brand: str | None) -> None:
        self.state = replace(self.state, selected_brand=brand)
        logger.debug("Brand filter changed", extra={"brand": brand})

    @property
    def visible_phones(self) -> list[Phone]:
        filters = CatalogFilters(query=self.state.query, brand=self.state.selected_brand)
        return self._search_catalog.execute(SearchPhoneCatalogRequest(filters=filters)).phones

    @property
    def catalog_view(self) -> CatalogView:
        return CatalogView(phones=self.visible_phones)

    def render(self) -> str:
        return render_template(
            "home_page.html",
            stylesheet=STYLESHEET,
            header=self.header.render(),
            hero=self.hero.render(selected_option=self.filters.selected),
            filter_control=self.filters.render(query=self.state.query),
            sort_control=self.sort.render(),
            catalog_view=self.catalog_view.render(),
            footer=self.footer.render(),
        )
