"""
Schémas Pydantic pour les élèves.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator

from placement_tracker.schemas.common import reject_null, round_cents, strip_not_empty

CGPA_MIN = Decimal("0")
CGPA_MAX = Decimal("10")


def _check_cgpa(v: Optional[Decimal]) -> Optional[Decimal]:
    v = round_cents(v)
    if v is not None and not (CGPA_MIN <= v <= CGPA_MAX):
        raise ValueError("CGPA must be between 0 and 10")
    return v


class StudentCreate(BaseModel):
    """Schéma de création d'un élève (POST /students)."""
    name: str
    email: EmailStr
    phone: str
    department: str
    graduation_year: int
    cgpa: Decimal

    @field_validator("name", "phone", "department")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return strip_not_empty(v)

    @field_validator("cgpa")
    @classmethod
    def cgpa_in_range(cls, v: Decimal) -> Decimal:
        return _check_cgpa(v)


class StudentUpdate(BaseModel):
    """Schéma de mise à jour d'un élève (PUT /students/{id}). Les champs absents ne sont pas modifiés."""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    graduation_year: Optional[int] = None
    cgpa: Optional[Decimal] = None

    @field_validator("name", "email", "phone", "department", "graduation_year", "cgpa", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("name", "phone", "department")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        return strip_not_empty(v)

    @field_validator("cgpa")
    @classmethod
    def cgpa_in_range(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _check_cgpa(v)


class StudentResponse(BaseModel):
    """Schéma de réponse pour un élève (GET /students)."""
    id: uuid.UUID
    name: str
    email: str
    phone: str
    department: str
    graduation_year: int
    cgpa: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
