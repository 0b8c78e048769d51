# /student-records/app/models/mark_model.py

from datetime import date, datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional

from .common_model import blank_to_none


class MarkCreate(BaseModel):
    """
    Payload for recording a mark. `score` is expected to be 0-100 but only
    its presence is enforced.
    """
    student_id: Optional[int] = None
    subject_id: Optional[int] = None
    score: Optional[float] = None
    exam_date: Optional[date] = None

    @field_validator("exam_date", mode="before")
    @classmethod
    def _blank_exam_date(cls, v):
        return blank_to_none(v)


class MarkUpdate(BaseModel):
    """Only the score and the exam date of a mark can change."""
    score: Optional[float] = None
    exam_date: Optional[date] = None

    @field_validator("exam_date", mode="before")
    @classmethod
    def _blank_exam_date(cls, v):
        return blank_to_none(v)


class Mark(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    subject_id: int
    score: float
    exam_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime


class MarkWithSubject(BaseModel):
    """A mark enriched with the name and code of its subject."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    subject_id: int
    score: float
    exam_date: Optional[date] = None
    subject_name: str
    subject_code: str
