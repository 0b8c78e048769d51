# /student-records/app/models/subject_model.py

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class SubjectCreate(BaseModel):
    """Payload for creating a subject. Presence is checked by the service."""
    name: Optional[str] = Field(default=None, max_length=100)
    code: Optional[str] = Field(default=None, max_length=20)


class Subject(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    code: str
    created_at: datetime
