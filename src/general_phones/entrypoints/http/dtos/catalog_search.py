from pydantic import BaseModel, ConfigDict, Field


class PhoneResponseDTO(BaseModel):
    id: int
    name: str
    brand: str
    price: str
    rating: str
    image: str
    tag: str


class PhonesSearchQueryDTO(BaseModel):
    """Query parameters for searching phones in the catalog."""

    q: str = Field(
        default="",
        description="Free-text search over name, brand and tag (case-insensitive substring, trimmed)",
        examples=["arc"],
    )
    brand: str | None = Field(
        default=None,
        description='Filter by brand (case-sensitive exact match); "All" or empty means no filter',
        examples=["ZenMobile"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "q": "pro",
                "brand": "ZenMobile",
            }
        }
    )


class PhonesSearchResponseDTO(BaseModel):
    phones: list[PhoneResponseDTO]
    total: int
    query: str
    brand: str | None


class BrandsResponseDTO(BaseModel):
    brands: list[str]
