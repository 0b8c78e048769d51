# /student-records/app/services/database_helpers/subject_repository_sql.py

from typing import List, Dict, Optional
from sqlalchemy.orm import Session

from app.db.models.student_models import Subject
from app.utils.logger import get_logger
from .base_repository_sql import BaseRepositorySQL

logger = get_logger(__name__)

CODE_CONFLICT_MESSAGE = "Subject code already exists"


class SubjectRepositorySQL(BaseRepositorySQL):
    def __init__(self, db_session: Session):
        super().__init__(db_session)

    def get_all_subjects(self) -> List[Subject]:
        """Retrieves every subject, alphabetically by name."""
        with self._store_guard("get subjects"):
            return self.db.query(Subject).order_by(Subject.name.asc(), Subject.id.asc()).all()

    def get_subject_by_id(self, subject_id: int) -> Optional[Subject]:
        with self._store_guard("get subject"):
            return self.db.query(Subject).filter(Subject.id == subject_id).first()

    def get_subject_by_code(self, code: str) -> Optional[Subject]:
        with self._store_guard("look up subject code"):
            return self.db.query(Subject).filter(Subject.code == code).first()

    def add_subject(self, record: Dict) -> Subject:
        new_subject = Subject(**record)
        self.db.add(new_subject)
        self._commit(conflict_message=CODE_CONFLICT_MESSAGE)
        with self._store_guard("reload created subject"):
            self.db.refresh(new_subject)
        logger.info(f"Created subject #{new_subject.id} ({new_subject.code})")
        return new_subject
