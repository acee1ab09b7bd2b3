"""
Router d'authentification : inscription, connexion et session courante.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from placement_tracker.auth import get_current_user
from placement_tracker.database import get_db
from placement_tracker.models.user import User
from placement_tracker.schemas.auth import Credentials, SessionResponse, TokenResponse, UserInfo
from placement_tracker.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(
        user=UserInfo.model_validate(user),
        access_token=auth_service.create_access_token(user.id),
    )


@router.post("/signup", response_model=TokenResponse, status_code=201, summary="Créer un compte")
def signup(data: Credentials, db: Session = Depends(get_db)):
    try:
        user = auth_service.register_user(db, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _token_response(user)


@router.post("/signin", response_model=TokenResponse, summary="Se connecter")
def signin(data: Credentials, db: Session = Depends(get_db)):
    """Retourne un jeton Bearer à inclure dans l'en-tête Authorization des requêtes suivantes."""
    user = auth_service.authenticate_user(db, data)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return _token_response(user)


@router.get("/session", response_model=SessionResponse, summary="Session courante")
def session(user: User = Depends(get_current_user)):
    return {"user": UserInfo.model_validate(user)}
