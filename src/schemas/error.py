"""Error response schema."""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Uniform error body returned by every endpoint."""

    timestamp: datetime
    status: int
    error: str
    message: str
    errors: dict[str, str] | None = Field(
        None, description="Field name to message, present only for validation failures"
    )
