"""REST API error response models.

Documented in the OpenAPI schema; the handlers in exception_handlers
produce bodies of this shape.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error inside a validation error."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "term_months",
                "message": "Must be between 12 and 60",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Vehicle with identifier 'X' not found", "code": "NOT_FOUND"}

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "term_months", "message": "Must be between 12 and 60",
                     "code": "OUT_OF_RANGE"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier '1PP2A5' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Bank rate API is unavailable: HTTP 502",
                    "code": "DATA_SOURCE_UNAVAILABLE",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "down_payment_percent",
                            "message": "Must be between 30 and 90",
                            "code": "OUT_OF_RANGE",
                        },
                    ],
                },
            ]
        }
    )
