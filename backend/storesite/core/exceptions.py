"""RFC 7807 Problem Details error handling."""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ProblemDetailError(Exception):
    """Raise for RFC 7807 problem+json responses."""

    def __init__(
        self,
        status: int,
        title: str,
        detail: str,
        error_type: str | None = None,
        extensions: dict | None = None,
    ):
        super().__init__(detail)
        self.status = status
        self.title = title
        self.detail = detail
        self.error_type = error_type or "about:blank"
        self.extensions = extensions or {}


class ValidationFailed(ProblemDetailError):
    """One or more input fields are missing or invalid.

    ``errors`` always lists every offending field, never just the first.
    """

    def __init__(self, errors: list[dict], detail: str = "Please fill in all required fields correctly."):
        super().__init__(400, "Validation Error", detail, extensions={"errors": errors})
        self.errors = errors

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]

    @classmethod
    def from_pydantic(cls, exc, detail: str | None = None) -> "ValidationFailed":
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]) or "__root__", "message": err["msg"]}
            for err in exc.errors()
        ]
        if detail is None:
            return cls(errors)
        return cls(errors, detail=detail)


class NotFoundError(ProblemDetailError):
    def __init__(self, detail: str):
        super().__init__(404, "Not Found", detail)


class StorageUnavailableError(ProblemDetailError):
    """The database could not be reached. Retryable."""

    def __init__(self, detail: str = "Database connection unavailable"):
        super().__init__(503, "Service Unavailable", detail)


class ExternalServiceError(ProblemDetailError):
    """A third-party call (OpenAI, Unsplash, S3) failed."""

    def __init__(self, detail: str, service: str | None = None):
        super().__init__(500, "External Service Error", detail)
        self.service = service


class QuotaExceededError(ExternalServiceError):
    """Rate limit or quota exhaustion on an external service."""


async def problem_detail_handler(request: Request, exc: ProblemDetailError) -> JSONResponse:
    if exc.status >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status, exc.detail)
    return JSONResponse(
        status_code=exc.status,
        content={
            "type": exc.error_type,
            "title": exc.title,
            "status": exc.status,
            "detail": exc.detail,
            "instance": str(request.url.path),
            **exc.extensions,
        },
        media_type="application/problem+json",
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "type": "about:blank",
            "title": exc.detail if isinstance(exc.detail, str) else "Error",
            "status": exc.status_code,
            "detail": exc.detail,
            "instance": str(request.url.path),
        },
        media_type="application/problem+json",
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "type": "about:blank",
            "title": "Validation Error",
            "status": 422,
            "detail": exc.errors(),
            "instance": str(request.url.path),
        },
        media_type="application/problem+json",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "type": "about:blank",
            "title": "Internal Server Error",
            "status": 500,
            "detail": "Internal server error",
            "instance": str(request.url.path),
        },
        media_type="application/problem+json",
    )
