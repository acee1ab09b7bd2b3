"""
Schémas Pydantic pour les entretiens et leurs participants.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from placement_tracker.schemas.common import NameRef, reject_null, strip_not_empty

INTERVIEW_TYPES = {"Technical", "HR", "Group Discussion", "Aptitude", "Final"}
DEFAULT_PARTICIPANT_STATUS = "Scheduled"


def _check_type(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in INTERVIEW_TYPES:
        raise ValueError(f"Invalid interview type. Accepted values: {sorted(INTERVIEW_TYPES)}")
    return v


class InterviewCreate(BaseModel):
    company_id: uuid.UUID
    interview_date: datetime
    interview_type: str
    location: str
    notes: Optional[str] = None

    @field_validator("interview_type")
    @classmethod
    def valid_type(cls, v: str) -> str:
        return _check_type(v)

    @field_validator("location")
    @classmethod
    def location_not_empty(cls, v: str) -> str:
        return strip_not_empty(v)


class InterviewUpdate(BaseModel):
    company_id: Optional[uuid.UUID] = None
    interview_date: Optional[datetime] = None
    interview_type: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("company_id", "interview_date", "interview_type", "location", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("interview_type")
    @classmethod
    def valid_type(cls, v: Optional[str]) -> Optional[str]:
        return _check_type(v)

    @field_validator("location")
    @classmethod
    def location_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return strip_not_empty(v)


class InterviewResponse(BaseModel):
    id: uuid.UUID
    company_id: uuid.UUID
    interview_date: datetime
    interview_type: str
    location: str
    notes: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    companies: NameRef


class InterviewStudentCreate(BaseModel):
    """Corps de requête pour convoquer un élève à un entretien."""
    interview_id: uuid.UUID
    student_id: uuid.UUID
    status: str = DEFAULT_PARTICIPANT_STATUS

    @field_validator("status")
    @classmethod
    def status_default_if_blank(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            return DEFAULT_PARTICIPANT_STATUS
        return v.strip()


class InterviewStudentResponse(BaseModel):
    id: uuid.UUID
    interview_id: uuid.UUID
    student_id: uuid.UUID
    status: str

    model_config = {"from_attributes": True}


class InterviewStudentDetail(BaseModel):
    """Participant d'un entretien avec le nom de l'élève (GET /interviews/{id}/students)."""
    id: uuid.UUID
    student_id: uuid.UUID
    status: str
    students: NameRef
