from fastapi import APIRouter, Depends

from general_phones.entrypoints.http.dependencies import (
    get_get_phone_by_id_use_case,
    get_list_brands_use_case,
    get_search_catalog_use_case,
)
from general_phones.entrypoints.http.dtos.catalog_search import (
    BrandsResponseDTO,
    PhoneResponseDTO,
    PhonesSearchQueryDTO,
    PhonesSearchResponseDTO,
)
from general_phones.entrypoints.http.error_responses import ErrorResponse
from general_phones.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from general_phones.use_cases.get_phone_by_id import GetPhoneById, GetPhoneByIdRequest
from general_phones.use_cases.list_phone_brands import ListPhoneBrands
from general_phones.use_cases.search_phone_catalog import SearchPhoneCatalog


router = APIRouter(tags=["Phones"])


@router.get(
    "/phones",
    response_model=PhonesSearchResponseDTO,
    summary="Search phone catalog",
    description="""
    Search the phone catalog by free text and brand.

    ## Filters
    - `q`: trimmed, then matched case-insensitively as a substring of
      `"<name> <brand> <tag>"`; empty means no query filter
    - `brand`: case-sensitive exact match; `All` or empty means no brand filter
    - Both filters use AND semantics
    - Results keep catalog order

    ## Example
    ```
    GET /v1/phones?q=pro&brand=ZenMobile
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "phones": [
                            {
                                "id": 2,
                                "name": "Arc Pro",
                                "brand": "ZenMobile",
                                "price": "399",
                                "rating": "4.7",
                                "image": "/images/phone-2.jpg",
                                "tag": "New",
                            }
                        ],
                        "total": 1,
                        "query": "pro",
                        "brand": "ZenMobile",
                    }
                }
            },
        },
    },
)
def get_phones(
    query: PhonesSearchQueryDTO = Depends(),
    use_case: SearchPhoneCatalog = Depends(get_search_catalog_use_case),
) -> PhonesSearchResponseDTO:
    """Search phones endpoint following parse → execute → map → return pattern."""
    request = CatalogSearchMapper.to_domain_request(query)

    result = use_case.execute(request)

    return CatalogSearchMapper.to_response(result=result, filters=request.filters)


@router.get(
    "/phones/{phone_id}",
    response_model=PhoneResponseDTO,
    summary="Get phone by ID",
    responses={
        404: {"model": ErrorResponse, "description": "Phone not found"},
        422: {"model": ErrorResponse, "description": "Invalid phone ID"},
    },
)
def get_phone_by_id(
    phone_id: int,
    use_case: GetPhoneById = Depends(get_get_phone_by_id_use_case),
) -> PhoneResponseDTO:
    result = use_case.execute(GetPhoneByIdRequest(phone_id=phone_id))

    return CatalogSearchMapper.to_phone_response(result.phone)


@router.get(
    "/brands",
    response_model=BrandsResponseDTO,
    summary="List catalog brands",
    description="Distinct brands in the order they first appear in the catalog.",
)
def get_brands(
    use_case: ListPhoneBrands = Depends(get_list_brands_use_case),
) -> BrandsResponseDTO:
    return CatalogSearchMapper.to_brands_response(use_case.execute())
