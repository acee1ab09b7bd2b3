"""
Router pour les entretiens et la convocation des élèves.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from placement_tracker.auth import get_current_user_id
from placement_tracker.database import get_db
from placement_tracker.schemas.common import MessageResponse
from placement_tracker.schemas.interview import (
    InterviewCreate,
    InterviewResponse,
    InterviewStudentCreate,
    InterviewStudentDetail,
    InterviewStudentResponse,
    InterviewUpdate,
)
from placement_tracker.services import interview_service

router = APIRouter(prefix="/api/interviews", tags=["Interviews"])


@router.get("", response_model=List[InterviewResponse], summary="Lister les entretiens")
def list_interviews(db: Session = Depends(get_db), owner_id: uuid.UUID = Depends(get_current_user_id)):
    """Retourne les entretiens par date croissante avec le nom de l'entreprise."""
    return interview_service.get_interviews(db, owner_id)


@router.post("", response_model=InterviewResponse, status_code=201, summary="Planifier un entretien")
def create_interview(
    data: InterviewCreate,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    try:
        return interview_service.create_interview(db, owner_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# --- Convocations ---
# Déclarées avant /{interview_id} pour que "students" ne soit pas lu comme un identifiant.

@router.post(
    "/students",
    response_model=InterviewStudentResponse,
    status_code=201,
    summary="Convoquer un élève",
)
def add_interview_student(
    data: InterviewStudentCreate,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    """Ajoute un élève à un entretien (statut Scheduled par défaut). Un couple entretien-élève est unique."""
    try:
        link = interview_service.add_interview_student(db, owner_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if link is None:
        raise HTTPException(status_code=404, detail="Interview not found")
    return link


@router.delete(
    "/students/{link_id}",
    response_model=MessageResponse,
    summary="Retirer un élève d'un entretien",
)
def remove_interview_student(
    link_id: uuid.UUID,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    if not interview_service.remove_interview_student(db, owner_id, link_id):
        raise HTTPException(status_code=404, detail="Interview student record not found")
    return {"message": "Student removed from interview successfully"}


@router.get(
    "/{interview_id}/students",
    response_model=List[InterviewStudentDetail],
    summary="Élèves convoqués à un entretien",
)
def list_interview_students(
    interview_id: uuid.UUID,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    students = interview_service.get_interview_students(db, owner_id, interview_id)
    if students is None:
        raise HTTPException(status_code=404, detail="Interview not found")
    return students


@router.put("/{interview_id}", response_model=InterviewResponse, summary="Modifier un entretien")
def update_interview(
    interview_id: uuid.UUID,
    data: InterviewUpdate,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    try:
        result = interview_service.update_interview(db, owner_id, interview_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if result is None:
        raise HTTPException(status_code=404, detail="Interview not found")
    return result


@router.delete("/{interview_id}", response_model=MessageResponse, summary="Supprimer un entretien")
def delete_interview(
    interview_id: uuid.UUID,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    """Supprime un entretien et ses convocations."""
    if not interview_service.delete_interview(db, owner_id, interview_id):
        raise HTTPException(status_code=404, detail="Interview not found")
    return {"message": "Interview deleted successfully"}
