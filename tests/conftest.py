# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.database import enable_sqlite_foreign_keys, get_db
from app.main import app
from app.models.mark_model import MarkCreate
from app.models.student_model import StudentCreate
from app.models.subject_model import SubjectCreate
from app.services import mark_service, student_service, subject_service
from app.services.database_service import DatabaseService


@pytest.fixture
def engine():
    """
    A fresh in-memory SQLite database for EACH test function. StaticPool keeps
    the single connection alive so every session sees the same data, and
    foreign keys are switched on so ON DELETE CASCADE behaves like PostgreSQL.
    """
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def db_service(db_session):
    """Provides a DatabaseService bound to the test session."""
    return DatabaseService(db_session=db_session)


@pytest.fixture
def client(session_factory):
    """
    A TestClient whose requests use the in-memory database. The client is not
    entered as a context manager, so the startup hook never touches the
    configured DATABASE_URL.
    """
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# --- Record factories ---

@pytest.fixture
def make_student(db_service):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        fields = {
            "first_name": "Student",
            "last_name": f"Number{counter['n']}",
            "email": f"student{counter['n']}@school.org",
        }
        fields.update(overrides)
        return student_service.create_student(StudentCreate(**fields), db=db_service)

    return _make


@pytest.fixture
def make_subject(db_service):
    def _make(name="Mathematics", code="MTH1"):
        return subject_service.create_subject(SubjectCreate(name=name, code=code), db=db_service)

    return _make


@pytest.fixture
def make_mark(db_service):
    def _make(student_id, subject_id, score=75, exam_date=None):
        payload = MarkCreate(student_id=student_id, subject_id=subject_id, score=score, exam_date=exam_date)
        return mark_service.create_mark(payload, db=db_service)

    return _make
