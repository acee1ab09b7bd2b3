"""
Router pour les statistiques du tableau de bord.
"""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from placement_tracker.auth import get_current_user_id
from placement_tracker.database import get_db
from placement_tracker.schemas.stats import StatsResponse
from placement_tracker.services import stats_service

router = APIRouter(prefix="/api/stats", tags=["Statistics"])


@router.get("", response_model=StatsResponse, summary="Statistiques de placement")
def get_stats(db: Session = Depends(get_db), owner_id: uuid.UUID = Depends(get_current_user_id)):
    """
    Retourne le résumé du tableau de bord : effectifs, taux de placement,
    package moyen, entretiens à venir, top 5 des entreprises et 5 derniers placements.
    Seuls les placements au statut Confirmed sont pris en compte.
    """
    return stats_service.get_stats(db, owner_id)
