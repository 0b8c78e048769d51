# /student-records/app/services/database_helpers/mark_repository_sql.py

"""
This module contains the raw SQLAlchemy queries for the `marks` table,
including the mark-plus-subject join used by the student detail view.
"""

from typing import List, Dict, Optional
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from app.db.models.student_models import Mark, Subject
from app.utils.logger import get_logger
from .base_repository_sql import BaseRepositorySQL

logger = get_logger(__name__)

PAIR_CONFLICT_MESSAGE = "Mark already exists for this student and subject"


class MarkRepositorySQL(BaseRepositorySQL):
    def __init__(self, db_session: Session):
        super().__init__(db_session)

    # --- Read Methods ---

    def get_mark_by_id(self, mark_id: int) -> Optional[Mark]:
        with self._store_guard("get mark"):
            return self.db.query(Mark).filter(Mark.id == mark_id).first()

    def get_mark_for_pair(self, student_id: int, subject_id: int) -> Optional[Mark]:
        with self._store_guard("look up mark"):
            return (
                self.db.query(Mark)
                .filter(Mark.student_id == student_id, Mark.subject_id == subject_id)
                .first()
            )

    def get_marks_with_subject_by_student(self, student_id: int) -> List[Dict]:
        """
        Returns the student's marks joined with their subject, one dictionary
        per mark, ordered by mark id.
        """
        with self._store_guard("get marks"):
            rows = (
                self.db.query(Mark, Subject.name, Subject.code)
                .join(Subject, Mark.subject_id == Subject.id)
                .filter(Mark.student_id == student_id)
                .order_by(Mark.id.asc())
                .all()
            )
        return [
            {
                "id": mark.id,
                "student_id": mark.student_id,
                "subject_id": mark.subject_id,
                "score": mark.score,
                "exam_date": mark.exam_date,
                "subject_name": subject_name,
                "subject_code": subject_code,
            }
            for mark, subject_name, subject_code in rows
        ]

    # --- Write Methods ---

    def add_mark(self, record: Dict) -> Mark:
        new_mark = Mark(**record)
        self.db.add(new_mark)
        self._commit(conflict_message=PAIR_CONFLICT_MESSAGE)
        with self._store_guard("reload created mark"):
            self.db.refresh(new_mark)
        logger.info(f"Created mark #{new_mark.id} for student #{new_mark.student_id}, subject #{new_mark.subject_id}")
        return new_mark

    def update_mark(self, mark_id: int, data: Dict) -> Optional[Mark]:
        db_mark = self.get_mark_by_id(mark_id)
        if db_mark:
            for key, value in data.items():
                setattr(db_mark, key, value)
            db_mark.updated_at = func.now()
            self._commit()
            with self._store_guard("reload updated mark"):
                self.db.refresh(db_mark)
        return db_mark

    def delete_mark(self, mark_id: int) -> bool:
        db_mark = self.get_mark_by_id(mark_id)
        if db_mark:
            self.db.delete(db_mark)
            self._commit()
            logger.info(f"Deleted mark #{mark_id}")
            return True
        return False
