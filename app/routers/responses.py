# /student-records/app/routers/responses.py

from fastapi.responses import JSONResponse

from ..config import is_development
from ..models.common_model import ApiResponse
from ..services.errors import StudentRecordsError, StoreError
from ..utils.logger import get_logger

logger = get_logger(__name__)


def error_response(exc: Exception, operation: str) -> JSONResponse:
    """
    Translates a failed operation into the error envelope.

    Expected errors (validation, not found, conflict) keep their own status
    and message. Anything else is a 500 reported as "Failed to <operation>";
    the underlying detail is only exposed in development.
    """
    if isinstance(exc, StudentRecordsError) and not isinstance(exc, StoreError):
        body = ApiResponse(success=False, message=exc.message)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))

    logger.error(f"Error trying to {operation}: {exc}", exc_info=not isinstance(exc, StoreError))
    body = ApiResponse(
        success=False,
        message=f"Failed to {operation}",
        error=str(exc) if is_development() else None,
    )
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))
