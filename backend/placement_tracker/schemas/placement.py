"""
Schémas Pydantic pour les placements.

Note : on importe datetime en tant que module (dt) pour éviter le conflit de nommage
entre le champ `placement_date` et le type `datetime.date` dans Pydantic v2.
"""

import uuid
import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, field_validator

from placement_tracker.schemas.common import NameRef, reject_null, round_cents, strip_not_empty

PLACEMENT_STATUSES = {"Confirmed", "Pending", "Rejected"}
CONFIRMED = "Confirmed"


def _check_package(v: Optional[Decimal]) -> Optional[Decimal]:
    v = round_cents(v)
    if v is not None and v <= 0:
        raise ValueError("Package must be greater than 0")
    return v


def _check_status(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in PLACEMENT_STATUSES:
        raise ValueError(f"Invalid status. Accepted values: {sorted(PLACEMENT_STATUSES)}")
    return v


class PlacementCreate(BaseModel):
    student_id: uuid.UUID
    company_id: uuid.UUID
    position: str
    package: Decimal
    placement_date: dt.date
    status: str = CONFIRMED

    @field_validator("position")
    @classmethod
    def position_not_empty(cls, v: str) -> str:
        return strip_not_empty(v)

    @field_validator("package")
    @classmethod
    def package_positive(cls, v: Decimal) -> Decimal:
        return _check_package(v)

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        return _check_status(v)


class PlacementUpdate(BaseModel):
    student_id: Optional[uuid.UUID] = None
    company_id: Optional[uuid.UUID] = None
    position: Optional[str] = None
    package: Optional[Decimal] = None
    placement_date: Optional[dt.date] = None
    status: Optional[str] = None

    @field_validator(
        "student_id", "company_id", "position", "package", "placement_date", "status",
        mode="before",
    )
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("position")
    @classmethod
    def position_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return strip_not_empty(v)

    @field_validator("package")
    @classmethod
    def package_positive(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _check_package(v)

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: Optional[str]) -> Optional[str]:
        return _check_status(v)


class PlacementResponse(BaseModel):
    id: uuid.UUID
    student_id: uuid.UUID
    company_id: uuid.UUID
    position: str
    package: float
    placement_date: dt.date
    status: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    students: NameRef
    companies: NameRef
