"""
Schémas Pydantic pour l'authentification.
"""

import uuid

from pydantic import BaseModel, EmailStr, field_validator

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72


class Credentials(BaseModel):
    """Corps de requête commun à l'inscription et à la connexion."""
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def password_long_enough(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        # bcrypt ne hache que les 72 premiers octets
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class UserInfo(BaseModel):
    id: uuid.UUID
    email: str

    model_config = {"from_attributes": True}


class SessionResponse(BaseModel):
    user: UserInfo


class TokenResponse(BaseModel):
    user: UserInfo
    access_token: str
    token_type: str = "bearer"
