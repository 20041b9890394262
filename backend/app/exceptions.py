from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


def problem_response(
    status_code: int,
    title: str,
    code: str,
    *,
    detail: Optional[str] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Render a ``ProblemDetail`` as an ``application/problem+json`` response."""

    problem = ProblemDetail(
        title=title,
        detail=detail,
        status=status_code,
        code=code,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(),
        media_type="application/problem+json",
        headers=headers,
    )
