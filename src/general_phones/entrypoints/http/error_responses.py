"""REST API error response models.

Structured error responses that provide a consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "phone_id",
                "message": "Input should be a valid integer",
                "code": "int_parsing",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Phone with identifier '9' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field errors:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "phone_id",
                        "message": "Input should be a valid integer",
                        "code": "int_parsing"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Phone with identifier '9' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "phone_id",
                            "message": "Input should be a valid integer",
                            "code": "int_parsing",
                        },
                    ],
                },
            ]
        }
    )
