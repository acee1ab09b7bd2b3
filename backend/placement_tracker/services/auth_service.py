"""
Service d'authentification : hachage bcrypt des mots de passe et jetons JWT.
"""

import uuid
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from placement_tracker.config import settings
from placement_tracker.models.user import User
from placement_tracker.schemas.auth import Credentials

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def create_access_token(user_id: uuid.UUID, expires_delta: Optional[timedelta] = None) -> str:
    """Crée un JWT signé dont le `sub` est l'identifiant de l'utilisateur."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {"sub": str(user_id), "exp": expire}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[uuid.UUID]:
    """Retourne l'identifiant porté par le jeton, ou None si le jeton est invalide ou expiré."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    sub = payload.get("sub")
    if not sub:
        return None
    try:
        return uuid.UUID(sub)
    except ValueError:
        return None


def register_user(db: Session, data: Credentials) -> User:
    """
    Crée un compte utilisateur.
    Lève une ValueError si l'email est déjà utilisé.
    """
    email = data.email.lower()
    existing = db.execute(select(User.id).where(User.email == email)).scalar()
    if existing:
        raise ValueError("Email already registered")

    user = User(email=email, password_hash=hash_password(data.password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError("Email already registered")
    db.refresh(user)
    logger.info("Utilisateur inscrit : %s", user.id)
    return user


def authenticate_user(db: Session, data: Credentials) -> Optional[User]:
    """Retourne l'utilisateur si l'email et le mot de passe correspondent, sinon None."""
    user = db.execute(
        select(User).where(User.email == data.email.lower())
    ).scalar_one_or_none()
    if user is None or not verify_password(data.password, user.password_hash):
        return None
    return user
