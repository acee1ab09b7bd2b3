"""
Dépendances FastAPI d'authentification.

Chaque route métier reçoit explicitement l'identifiant du propriétaire via
`get_current_user_id` ; aucune donnée n'est lue tant que le jeton n'est pas validé.
"""

import uuid
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from placement_tracker.database import get_db
from placement_tracker.models.user import User
from placement_tracker.services.auth_service import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Retourne l'utilisateur porteur du jeton Bearer, ou lève une 401."""
    if credentials is None:
        raise _unauthorized("Authentication required")

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise _unauthorized("Invalid or expired token")

    user = db.get(User, user_id)
    if user is None:
        raise _unauthorized("Invalid or expired token")
    return user


def get_current_user_id(user: User = Depends(get_current_user)) -> uuid.UUID:
    """Identifiant du propriétaire utilisé pour filtrer toutes les requêtes."""
    return user.id
