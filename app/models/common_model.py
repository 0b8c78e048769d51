# /student-records/app/models/common_model.py

from pydantic import BaseModel, Field
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Pagination(BaseModel):
    """Descriptor returned alongside a page of students."""
    currentPage: int = Field(..., ge=1)
    totalPages: int = Field(..., ge=0)
    totalCount: int = Field(..., ge=0)
    limit: int = Field(..., ge=1)


class ApiResponse(BaseModel, Generic[T]):
    """
    The uniform envelope every endpoint answers with. Keys that were never set
    are left out of the JSON body, so a successful read carries only
    `success` and `data` (and `pagination` for the student list).
    """
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[Any] = None
    pagination: Optional[Pagination] = None


def blank_to_none(value: Any) -> Any:
    """HTML forms submit untouched optional inputs as empty strings."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
