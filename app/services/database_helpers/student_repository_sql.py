# /student-records/app/services/database_helpers/student_repository_sql.py

"""
This module contains the raw SQLAlchemy queries for the `students` table.
It is the direct interface to the database for student records; validation
and existence rules live one layer up, in `student_service`.
"""

from typing import List, Dict, Optional
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from app.db.models.student_models import Student
from app.utils.logger import get_logger
from .base_repository_sql import BaseRepositorySQL

logger = get_logger(__name__)

EMAIL_CONFLICT_MESSAGE = "Email already exists"


class StudentRepositorySQL(BaseRepositorySQL):
    def __init__(self, db_session: Session):
        super().__init__(db_session)

    # --- Read Methods ---

    def count_students(self) -> int:
        """Total number of student rows, used for pagination."""
        with self._store_guard("count students"):
            return self.db.query(func.count(Student.id)).scalar() or 0

    def get_students_page(self, offset: int, limit: int) -> List[Student]:
        """Returns one page of students in ascending id order."""
        with self._store_guard("get students"):
            return (
                self.db.query(Student)
                .order_by(Student.id.asc())
                .offset(offset)
                .limit(limit)
                .all()
            )

    def get_student_by_id(self, student_id: int) -> Optional[Student]:
        with self._store_guard("get student"):
            return self.db.query(Student).filter(Student.id == student_id).first()

    def get_student_by_email(self, email: str, exclude_id: Optional[int] = None) -> Optional[Student]:
        """
        Fetches the student owning `email`. When `exclude_id` is given, that
        student is ignored, which is how an update checks for a clash with a
        *different* student.
        """
        with self._store_guard("look up student email"):
            query = self.db.query(Student).filter(Student.email == email)
            if exclude_id is not None:
                query = query.filter(Student.id != exclude_id)
            return query.first()

    # --- Write Methods ---

    def add_student(self, record: Dict) -> Student:
        """Creates a new Student record and returns it with id and timestamps."""
        new_student = Student(**record)
        self.db.add(new_student)
        self._commit(conflict_message=EMAIL_CONFLICT_MESSAGE)
        with self._store_guard("reload created student"):
            self.db.refresh(new_student)
        logger.info(f"Created student #{new_student.id}")
        return new_student

    def update_student(self, student_id: int, data: Dict) -> Optional[Student]:
        """
        Applies `data` to the student and always refreshes `updated_at`, even
        when no column actually changed.
        """
        db_student = self.get_student_by_id(student_id)
        if db_student:
            for key, value in data.items():
                setattr(db_student, key, value)
            db_student.updated_at = func.now()
            self._commit(conflict_message=EMAIL_CONFLICT_MESSAGE)
            with self._store_guard("reload updated student"):
                self.db.refresh(db_student)
        return db_student

    def delete_student(self, student_id: int) -> bool:
        """
        Deletes a student. Its marks are removed by the `ON DELETE CASCADE`
        rule on `marks.student_id`, in the same statement.
        """
        db_student = self.get_student_by_id(student_id)
        if db_student:
            self.db.delete(db_student)
            self._commit()
            logger.info(f"Deleted student #{student_id} and its marks")
            return True
        return False
