# /student-records/app/error_handlers.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import is_development
from .models.common_model import ApiResponse
from .utils.logger import get_logger

logger = get_logger(__name__)


def _describe(errors) -> str:
    parts = []
    for err in errors:
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    return "; ".join(parts)


def add_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies, paths or query values are client errors: 400, not 422.
        body = ApiResponse(success=False, message="Invalid request data", error=_describe(exc.errors()))
        return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        body = ApiResponse(
            success=False,
            message="Server error",
            error=str(exc) if is_development() else None,
        )
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))
