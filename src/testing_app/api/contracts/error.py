"""Error response contract shared by every exception handler."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ...domain.health import format_timestamp, now_seconds


class ErrorResponse(BaseModel):
    """Structured error body returned for any failed request."""

    timestamp: str = Field(default_factory=lambda: format_timestamp(now_seconds()))
    status: int = Field(ge=400, le=599, description="HTTP status code")
    error: str = Field(description="Short label", examples=["Method Not Allowed"])
    message: str = Field(description="Human readable explanation")
    path: str = Field(description="Request URI path", examples=["/v1/healthcheck"])
    field_errors: dict[str, str] | None = Field(
        default=None,
        alias="fieldErrors",
        description="Field name to message, only for validation failures",
    )

    model_config = ConfigDict(populate_by_name=True)

    def to_content(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
