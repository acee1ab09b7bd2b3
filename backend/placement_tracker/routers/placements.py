"""
Router pour les placements.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from placement_tracker.auth import get_current_user_id
from placement_tracker.database import get_db
from placement_tracker.schemas.common import MessageResponse
from placement_tracker.schemas.placement import PlacementCreate, PlacementResponse, PlacementUpdate
from placement_tracker.services import placement_service

router = APIRouter(prefix="/api/placements", tags=["Placements"])


@router.get("", response_model=List[PlacementResponse], summary="Lister les placements")
def list_placements(db: Session = Depends(get_db), owner_id: uuid.UUID = Depends(get_current_user_id)):
    """Retourne tous les placements, quel que soit leur statut, avec les noms liés."""
    return placement_service.get_placements(db, owner_id)


@router.post("", response_model=PlacementResponse, status_code=201, summary="Enregistrer un placement")
def create_placement(
    data: PlacementCreate,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    """
    Enregistre un placement. Contraintes :
    - package strictement positif
    - statut parmi Confirmed, Pending, Rejected (Confirmed par défaut)
    """
    try:
        return placement_service.create_placement(db, owner_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{placement_id}", response_model=PlacementResponse, summary="Modifier un placement")
def update_placement(
    placement_id: uuid.UUID,
    data: PlacementUpdate,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    try:
        result = placement_service.update_placement(db, owner_id, placement_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if result is None:
        raise HTTPException(status_code=404, detail="Placement not found")
    return result


@router.delete("/{placement_id}", response_model=MessageResponse, summary="Supprimer un placement")
def delete_placement(
    placement_id: uuid.UUID,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    if not placement_service.delete_placement(db, owner_id, placement_id):
        raise HTTPException(status_code=404, detail="Placement not found")
    return {"message": "Placement deleted successfully"}
