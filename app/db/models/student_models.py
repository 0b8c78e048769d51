# /student-records/app/db/models/student_models.py

"""
This module defines the SQLAlchemy ORM models for the `Student`, `Subject`
and `Mark` entities.

A Student exclusively owns its Marks: the `marks.student_id` foreign key is
declared `ON DELETE CASCADE`, so removing a student removes its marks inside
the store itself. A Subject is only referenced by marks and is never deleted
through them.
"""

from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Student(Base):
    """
    SQLAlchemy model representing a single enrolled student.
    """
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    # The unique constraint is the authoritative guard against duplicate
    # emails; the service-level pre-check only produces a friendlier error.
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(20), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # passive_deletes leaves unloaded marks to the database's ON DELETE CASCADE
    # instead of having the ORM load and delete them one by one.
    marks = relationship(
        "Mark",
        back_populates="student",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Subject(Base):
    """
    SQLAlchemy model representing a subject marks can be recorded against.
    Subjects are immutable once created.
    """
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    code = Column(String(20), unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    marks = relationship("Mark", back_populates="subject")


class Mark(Base):
    """
    SQLAlchemy model representing one student's score in one subject.
    """
    __table_args__ = (
        UniqueConstraint("student_id", "subject_id", name="uq_marks_student_subject"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)
    score = Column(Float, nullable=False)
    exam_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    student = relationship("Student", back_populates="marks")
    subject = relationship("Subject", back_populates="marks")
