"""
Router pour les élèves.
GET /api/students, POST /api/students, PUT /api/students/{id}, DELETE /api/students/{id}
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from placement_tracker.auth import get_current_user_id
from placement_tracker.database import get_db
from placement_tracker.schemas.common import MessageResponse
from placement_tracker.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from placement_tracker.services import student_service

router = APIRouter(prefix="/api/students", tags=["Students"])


@router.get("", response_model=List[StudentResponse], summary="Lister les élèves")
def list_students(db: Session = Depends(get_db), owner_id: uuid.UUID = Depends(get_current_user_id)):
    """Retourne les élèves de l'utilisateur, du plus récent au plus ancien."""
    return student_service.get_students(db, owner_id)


@router.post("", response_model=StudentResponse, status_code=201, summary="Créer un élève")
def create_student(
    data: StudentCreate,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    return student_service.create_student(db, owner_id, data)


@router.put("/{student_id}", response_model=StudentResponse, summary="Modifier un élève")
def update_student(
    student_id: uuid.UUID,
    data: StudentUpdate,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    """Met à jour les champs fournis. Les champs absents ne sont pas modifiés."""
    try:
        student = student_service.update_student(db, owner_id, student_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.delete("/{student_id}", response_model=MessageResponse, summary="Supprimer un élève")
def delete_student(
    student_id: uuid.UUID,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    """Supprime définitivement un élève. Ses placements et convocations sont supprimés en cascade."""
    if not student_service.delete_student(db, owner_id, student_id):
        raise HTTPException(status_code=404, detail="Student not found")
    return {"message": "Student deleted successfully"}
