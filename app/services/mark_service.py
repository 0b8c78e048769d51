# /student-records/app/services/mark_service.py

"""
Business logic for marks. A mark may only be recorded against an existing
student and an existing subject, and at most once per (student, subject)
pair.
"""

from typing import Dict, List

from ..models import mark_model
from .database_service import DatabaseService
from .database_helpers.mark_repository_sql import PAIR_CONFLICT_MESSAGE
from .errors import ConflictError, NotFoundError, ValidationError


def create_mark(mark_data: mark_model.MarkCreate, db: DatabaseService):
    if mark_data.student_id is None or mark_data.subject_id is None or mark_data.score is None:
        raise ValidationError("Student ID, subject ID, and score are required")

    # The student is checked first, then the subject.
    if not db.get_student_by_id(mark_data.student_id):
        raise NotFoundError("Student not found")
    if not db.get_subject_by_id(mark_data.subject_id):
        raise NotFoundError("Subject not found")

    if db.get_mark_for_pair(mark_data.student_id, mark_data.subject_id):
        raise ConflictError(PAIR_CONFLICT_MESSAGE)

    return db.add_mark(mark_data.model_dump())


def update_mark(mark_id: int, mark_update: mark_model.MarkUpdate, db: DatabaseService):
    """Updates the score and/or exam date; omitted fields keep their value."""
    if not db.get_mark_by_id(mark_id):
        raise NotFoundError("Mark not found")
    return db.update_mark(mark_id, mark_update.model_dump(exclude_none=True))


def delete_mark(mark_id: int, db: DatabaseService) -> None:
    if not db.delete_mark(mark_id):
        raise NotFoundError("Mark not found")


def list_marks_by_student(student_id: int, db: DatabaseService) -> List[Dict]:
    if not db.get_student_by_id(student_id):
        raise NotFoundError("Student not found")
    return db.get_marks_with_subject_by_student(student_id)
