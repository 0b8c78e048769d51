# /student-records/app/services/subject_service.py

from typing import List

from ..models import subject_model
from .database_service import DatabaseService
from .database_helpers.subject_repository_sql import CODE_CONFLICT_MESSAGE
from .errors import ConflictError, NotFoundError, ValidationError


def list_subjects(db: DatabaseService) -> List:
    return db.get_all_subjects()


def get_subject(subject_id: int, db: DatabaseService):
    subject = db.get_subject_by_id(subject_id)
    if not subject:
        raise NotFoundError("Subject not found")
    return subject


def create_subject(subject_data: subject_model.SubjectCreate, db: DatabaseService):
    """Creates a subject after checking that its code is not taken."""
    name, code = subject_data.name, subject_data.code
    if not name or not name.strip() or not code or not code.strip():
        raise ValidationError("Name and code are required")

    record = {"name": name.strip(), "code": code.strip()}
    if db.get_subject_by_code(record["code"]):
        raise ConflictError(CODE_CONFLICT_MESSAGE)

    return db.add_subject(record)
