"""
Schémas Pydantic pour les entreprises.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator

from placement_tracker.schemas.common import reject_null, strip_not_empty


def _blank_to_none(v: Optional[str]) -> Optional[str]:
    # Le formulaire envoie "" quand le site n'est pas renseigné
    if v is not None and not v.strip():
        return None
    return v.strip() if v else v


class CompanyCreate(BaseModel):
    name: str
    industry: str
    location: str
    website: Optional[str] = None
    contact_person: str
    contact_email: EmailStr
    contact_phone: str

    @field_validator("name", "industry", "location", "contact_person", "contact_phone")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return strip_not_empty(v)

    @field_validator("website")
    @classmethod
    def blank_website_is_none(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class CompanyUpdate(BaseModel):
    name: Optional[str] = None
    industry: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    contact_person: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None

    @field_validator(
        "name", "industry", "location", "contact_person", "contact_email", "contact_phone",
        mode="before",
    )
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("name", "industry", "location", "contact_person", "contact_phone")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        return strip_not_empty(v)

    @field_validator("website")
    @classmethod
    def blank_website_is_none(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class CompanyResponse(BaseModel):
    id: uuid.UUID
    name: str
    industry: str
    location: str
    website: Optional[str]
    contact_person: str
    contact_email: str
    contact_phone: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
