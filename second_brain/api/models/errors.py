"""Error response models."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Every non-2xx response body: ``{"error": "<message>"}``."""

    error: str


def error_body(message: str) -> dict[str, str]:
    return ErrorResponse(error=message).model_dump()
