"""
Service métier pour les élèves.
Toutes les opérations sont limitées aux élèves du propriétaire `owner_id`.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from placement_tracker.models.student import Student
from placement_tracker.schemas.student import StudentCreate, StudentUpdate
from placement_tracker.services.integrity import commit_or_raise

logger = logging.getLogger(__name__)


def get_students(db: Session, owner_id: uuid.UUID) -> list[Student]:
    """Retourne les élèves du propriétaire, du plus récent au plus ancien."""
    return db.execute(
        select(Student)
        .where(Student.user_id == owner_id)
        .order_by(Student.created_at.desc())
    ).scalars().all()


def get_student(db: Session, owner_id: uuid.UUID, student_id: uuid.UUID) -> Optional[Student]:
    """Retourne un élève, ou None s'il n'existe pas ou appartient à un autre utilisateur."""
    return db.execute(
        select(Student).where(Student.id == student_id, Student.user_id == owner_id)
    ).scalar_one_or_none()


def create_student(db: Session, owner_id: uuid.UUID, data: StudentCreate) -> Student:
    student = Student(user_id=owner_id, **data.model_dump())
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info("Élève créé : %s (%s)", student.name, student.id)
    return student


def update_student(
    db: Session, owner_id: uuid.UUID, student_id: uuid.UUID, data: StudentUpdate
) -> Optional[Student]:
    """
    Met à jour les champs fournis d'un élève. Les champs absents ne sont pas modifiés.
    Lève une ValueError si une contrainte de la base est violée.
    """
    student = get_student(db, owner_id, student_id)
    if student is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(student, field, value)

    commit_or_raise(db)
    db.refresh(student)
    return student


def delete_student(db: Session, owner_id: uuid.UUID, student_id: uuid.UUID) -> bool:
    """
    Supprime définitivement un élève.
    Ses placements et convocations sont supprimés en cascade.
    Retourne True si supprimé, False si introuvable.
    """
    student = get_student(db, owner_id, student_id)
    if student is None:
        return False

    db.delete(student)
    db.commit()
    logger.info("Élève supprimé : %s", student_id)
    return True
