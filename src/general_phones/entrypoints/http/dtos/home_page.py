from pydantic import BaseModel, Field, field_validator

from general_phones.domain.phone import ALL_BRANDS_OPTION


class HomePageQueryDTO(BaseModel):
    """Interactions replayed against a freshly mounted homepage."""

    q: str = Field(
        default="",
        description="Search box text as submitted (trimmed before filtering)",
    )
    brand: str = Field(
        default=ALL_BRANDS_OPTION,
        description=f'Selected brand filter option; "{ALL_BRANDS_OPTION}" or empty means no filter',
    )

    @field_validator("brand")
    @classmethod
    def empty_brand_means_all(cls, value: str) -> str:
        # Same reading as /v1/phones: an empty brand selects nothing
        return value or ALL_BRANDS_OPTION
