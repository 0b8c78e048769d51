# /student-records/app/services/student_service.py

"""
This service module is the business logic layer for student records.

It validates incoming payloads, performs the existence and uniqueness
pre-checks, computes pagination, and delegates persistence to the
`DatabaseService`. Every failure is raised as one of the errors from
`app.services.errors`, which the routers translate into response envelopes.
"""

from typing import Any, Dict, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError as PydanticValidationError

from ..models import student_model
from .database_service import DatabaseService
from .database_helpers.student_repository_sql import EMAIL_CONFLICT_MESSAGE
from .errors import ConflictError, NotFoundError, ValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

REQUIRED_FIELDS = ("first_name", "last_name", "email")

_email_adapter = TypeAdapter(EmailStr)


# --- Helpers ---

def _coerce_positive_int(value: Any, default: int) -> int:
    """
    Reads a page/limit query value. Anything absent, non-numeric or below 1
    falls back to `default`.
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_email(email: str) -> str:
    try:
        _email_adapter.validate_python(email)
    except PydanticValidationError:
        raise ValidationError("A valid email address is required")
    return email


def _as_dict(obj) -> Dict:
    return {c.name: getattr(obj, c.name) for c in obj.__table__.columns}


def build_pagination(page: int, limit: int, total_count: int) -> Dict:
    return {
        "currentPage": page,
        "totalPages": (total_count + limit - 1) // limit,
        "totalCount": total_count,
        "limit": limit,
    }


# --- Public Service Functions ---

def list_students(db: DatabaseService, page: Any = None, limit: Any = None) -> Dict:
    """
    Returns one page of students ordered by id plus its pagination
    descriptor. A page past the end yields an empty list, not an error.
    """
    page = _coerce_positive_int(page, DEFAULT_PAGE)
    limit = _coerce_positive_int(limit, DEFAULT_LIMIT)
    offset = (page - 1) * limit

    total_count = db.count_students()
    if offset >= total_count:
        students = []
    else:
        # The caller's limit may exceed what the driver can bind; no page
        # can hold more rows than the table anyway.
        students = db.get_students_page(offset=offset, limit=min(limit, total_count))

    return {
        "students": students,
        "pagination": build_pagination(page, limit, total_count),
    }


def get_student(student_id: int, db: DatabaseService) -> Dict:
    """Assembles a student and its marks, each with the subject's name and code."""
    student = db.get_student_by_id(student_id)
    if not student:
        raise NotFoundError("Student not found")

    student_record = _as_dict(student)
    student_record["marks"] = db.get_marks_with_subject_by_student(student_id)
    return student_record


def create_student(student_data: student_model.StudentCreate, db: DatabaseService):
    if any(_is_blank(getattr(student_data, field)) for field in REQUIRED_FIELDS):
        raise ValidationError("First name, last name, and email are required")

    record = student_data.model_dump()
    for field in REQUIRED_FIELDS:
        record[field] = record[field].strip()
    _check_email(record["email"])

    if db.get_student_by_email(record["email"]):
        raise ConflictError(EMAIL_CONFLICT_MESSAGE)

    return db.add_student(record)


def update_student(student_id: int, student_update: student_model.StudentUpdate, db: DatabaseService):
    """
    Partially updates a student. Only fields present (and not null) in the
    payload are written; everything else keeps its stored value.
    """
    if not db.get_student_by_id(student_id):
        raise NotFoundError("Student not found")

    update_data = student_update.model_dump(exclude_none=True)
    for field in REQUIRED_FIELDS:
        if field in update_data:
            if _is_blank(update_data[field]):
                raise ValidationError(f"{field.replace('_', ' ').capitalize()} cannot be empty")
            update_data[field] = update_data[field].strip()

    if "email" in update_data:
        _check_email(update_data["email"])
        if db.get_student_by_email(update_data["email"], exclude_id=student_id):
            raise ConflictError(EMAIL_CONFLICT_MESSAGE)

    return db.update_student(student_id, update_data)


def delete_student(student_id: int, db: DatabaseService) -> None:
    """Deletes a student; the store cascades the delete to its marks."""
    if not db.delete_student(student_id):
        raise NotFoundError("Student not found")
