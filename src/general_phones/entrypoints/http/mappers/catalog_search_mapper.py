from __future__ import annotations

from general_phones.domain.phone import ALL_BRANDS_OPTION, CatalogFilters, Phone
from general_phones.entrypoints.http.dtos.catalog_search import (
    BrandsResponseDTO,
    PhoneResponseDTO,
    PhonesSearchQueryDTO,
    PhonesSearchResponseDTO,
)
from general_phones.use_cases.list_phone_brands import ListPhoneBrandsResponse
from general_phones.use_cases.search_phone_catalog import (
    SearchPhoneCatalogRequest,
    SearchPhoneCatalogResponse,
)


class CatalogSearchMapper:
    """Maps between REST DTOs and domain models for catalog search."""

    @staticmethod
    def to_domain_filters(dto: PhonesSearchQueryDTO) -> CatalogFilters:
        """
        Converts query params to domain filters.

        The query is trimmed the same way the search box trims it, and the
        "All" option (or an empty brand) maps to no brand filter.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            CatalogFilters: Domain filters
        """
        brand = dto.brand if dto.brand and dto.brand != ALL_BRANDS_OPTION else None
        return CatalogFilters(query=dto.q.strip(), brand=brand)

    @staticmethod
    def to_domain_request(dto: PhonesSearchQueryDTO) -> SearchPhoneCatalogRequest:
        return SearchPhoneCatalogRequest(filters=CatalogSearchMapper.to_domain_filters(dto))

    @staticmethod
    def to_phone_response(phone: Phone) -> PhoneResponseDTO:
        """
        Converts domain Phone entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return PhoneResponseDTO(
            id=phone.id,
            name=phone.name,
            brand=phone.brand,
            price=str(phone.price),
            rating=str(phone.rating),
            image=phone.image,
            tag=phone.tag,
        )

    @staticmethod
    def to_response(
        result: SearchPhoneCatalogResponse,
        filters: CatalogFilters,
    ) -> PhonesSearchResponseDTO:
        """
        Converts domain search result to REST response, echoing the applied filters.

        Args:
            result: Domain search result containing phones and total count
            filters: Filters actually applied (after trimming and "All" mapping)

        Returns:
            PhonesSearchResponseDTO: REST response with phones and filter metadata
        """
        return PhonesSearchResponseDTO(
            phones=[CatalogSearchMapper.to_phone_response(phone) for phone in result.phones],
            total=result.total_count,
            query=filters.query,
            brand=filters.brand,
        )

    @staticmethod
    def to_brands_response(result: ListPhoneBrandsResponse) -> BrandsResponseDTO:
        return BrandsResponseDTO(brands=result.brands)
