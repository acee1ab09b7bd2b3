"""
Point d'entrée principal de l'API Placement Tracker.
Démarrage : uvicorn placement_tracker.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

import placement_tracker.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata avant les routers
from placement_tracker.config import settings
from placement_tracker.database import get_db, init_db
from placement_tracker.routers import auth, companies, interviews, placements, stats, students
from placement_tracker.schemas.common import MISSING_FIELDS

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : crée les tables au démarrage si demandé."""
    if settings.CREATE_TABLES_ON_STARTUP:
        init_db()
    yield


app = FastAPI(
    title="Placement Tracker API",
    description="API de suivi des placements : élèves, entreprises, entretiens et statistiques",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS — autorise les origines localhost en développement (à restreindre en production via CORS_ORIGIN_REGEX).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(auth.router)
app.include_router(students.router)
app.include_router(companies.router)
app.include_router(placements.router)
app.include_router(interviews.router)
app.include_router(stats.router)


def _validation_message(exc: RequestValidationError) -> str:
    """Message lisible pour la première erreur de validation de la requête."""
    errors = exc.errors()
    if not errors:
        return MISSING_FIELDS
    first = errors[0]
    if first.get("type") == "missing":
        return MISSING_FIELDS
    # Erreurs levées par nos field_validator : on renvoie le message d'origine
    ctx_error = (first.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Les erreurs de validation sont renvoyées en 400 avec un message lisible, sans écriture partielle."""
    return JSONResponse(status_code=400, content={"error": _validation_message(exc)})


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Erreur de stockage : journalisée côté serveur, jamais détaillée au client."""
    logger.error("Erreur base de données sur %s %s : %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


@app.get("/api/health", tags=["Health"])
def health_check(db: Session = Depends(get_db)):
    """Vérifie que l'API et la base de données sont opérationnelles."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Base de données injoignable : %s", exc)
        return JSONResponse(
            status_code=500,
            content={"status": "unhealthy", "database": "disconnected"},
        )
    return {"status": "healthy", "database": "connected"}
