"""RFC 9457 Problem Details body (https://www.rfc-editor.org/rfc/rfc9457).

Every non-2xx response from the API carries this shape, with `errors`
present when specific fields are at fault and `trace_id` echoing the
X-Trace-Id header.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One offending field.

    `field` is the request field for validation problems, the clashing
    attribute for conflicts (for example "freelancer_id" on a duplicate
    application) and "request" when no single field applies.
    """

    field: str = Field(..., examples=["budget_min"])
    code: str = Field(..., examples=["budget_range_invalid"])
    message: str = Field(..., examples=["Minimum budget cannot exceed maximum budget"])


class ProblemDetails(BaseModel):
    type: str = Field(..., examples=["http://localhost:8000/errors/conflict"])
    title: str = Field(..., examples=["Resource Conflict"])
    status: int = Field(..., examples=[409])
    detail: str = Field(..., examples=["Application has already been decided"])
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/v1/projects/0190a8f2-7c1e-7d4b-9a40-5f1b2c3d4e5f/applications"],
    )
    errors: list[ErrorDetail] | None = None
    trace_id: str | None = None
