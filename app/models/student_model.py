# /student-records/app/models/student_model.py

# --- Core Imports ---
from datetime import date, datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional

from .common_model import blank_to_none
from .mark_model import MarkWithSubject

# --- Model Definitions ---

class StudentCreate(BaseModel):
    """
    The payload for creating a student. Required fields are declared optional
    here on purpose: their absence is reported by the student service as a
    400 with a readable message rather than as a schema error.
    """
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    date_of_birth: Optional[date] = Field(default=None)

    @field_validator("phone", "date_of_birth", mode="before")
    @classmethod
    def _blank_optional_fields(cls, v):
        return blank_to_none(v)


class StudentUpdate(StudentCreate):
    """
    The model for updating a student. Any field left out (or sent as null)
    keeps its stored value.
    """
    pass


class Student(BaseModel):
    """
    The full representation of a Student resource, as it is stored in the
    database and returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="The server-generated identifier for the student.")
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    created_at: datetime
    updated_at: datetime


class StudentDetails(Student):
    """A student together with every mark recorded for them."""
    marks: List[MarkWithSubject] = Field(default_factory=list)
