# /student-records/app/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.student_repository_sql import StudentRepositorySQL
from .database_helpers.subject_repository_sql import SubjectRepositorySQL
from .database_helpers.mark_repository_sql import MarkRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Initializes the DatabaseService over an explicitly injected session.
        Every repository shares that one session, so a request works against
        a single connection taken from the engine's pool.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.student_repo = StudentRepositorySQL(db_session)
        self.subject_repo = SubjectRepositorySQL(db_session)
        self.mark_repo = MarkRepositorySQL(db_session)

    # --- STUDENT METHODS (DELEGATED) ---
    def count_students(self) -> int: return self.student_repo.count_students()
    def get_students_page(self, offset: int, limit: int) -> List: return self.student_repo.get_students_page(offset, limit)
    def get_student_by_id(self, student_id: int): return self.student_repo.get_student_by_id(student_id)
    def get_student_by_email(self, email: str, exclude_id: Optional[int] = None): return self.student_repo.get_student_by_email(email, exclude_id=exclude_id)
    def add_student(self, student_record: Dict): return self.student_repo.add_student(student_record)
    def update_student(self, student_id: int, student_update_data: Dict): return self.student_repo.update_student(student_id, student_update_data)
    def delete_student(self, student_id: int) -> bool: return self.student_repo.delete_student(student_id)

    # --- SUBJECT METHODS (DELEGATED) ---
    def get_all_subjects(self) -> List: return self.subject_repo.get_all_subjects()
    def get_subject_by_id(self, subject_id: int): return self.subject_repo.get_subject_by_id(subject_id)
    def get_subject_by_code(self, code: str): return self.subject_repo.get_subject_by_code(code)
    def add_subject(self, subject_record: Dict): return self.subject_repo.add_subject(subject_record)

    # --- MARK METHODS (DELEGATED) ---
    def get_mark_by_id(self, mark_id: int): return self.mark_repo.get_mark_by_id(mark_id)
    def get_mark_for_pair(self, student_id: int, subject_id: int): return self.mark_repo.get_mark_for_pair(student_id, subject_id)
    def get_marks_with_subject_by_student(self, student_id: int) -> List[Dict]: return self.mark_repo.get_marks_with_subject_by_student(student_id)
    def add_mark(self, mark_record: Dict): return self.mark_repo.add_mark(mark_record)
    def update_mark(self, mark_id: int, mark_update_data: Dict): return self.mark_repo.update_mark(mark_id, mark_update_data)
    def delete_mark(self, mark_id: int) -> bool: return self.mark_repo.delete_mark(mark_id)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the
    request's session.
    """
    yield DatabaseService(db_session=db)
