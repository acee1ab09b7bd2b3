"""
Service métier pour les placements.
Les réponses embarquent le nom de l'élève et de l'entreprise (`students: {name}`, `companies: {name}`).
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from placement_tracker.models.company import Company
from placement_tracker.models.placement import Placement
from placement_tracker.models.student import Student
from placement_tracker.schemas.common import NameRef
from placement_tracker.schemas.placement import PlacementCreate, PlacementResponse, PlacementUpdate
from placement_tracker.services.integrity import commit_or_raise

logger = logging.getLogger(__name__)

INVALID_REFERENCE = "Referenced student or company does not exist"


def get_placements(db: Session, owner_id: uuid.UUID) -> list[PlacementResponse]:
    """Retourne les placements du propriétaire (plus récents d'abord) avec les noms liés."""
    rows = db.execute(
        select(Placement, Student.name, Company.name)
        .outerjoin(Student, Student.id == Placement.student_id)
        .outerjoin(Company, Company.id == Placement.company_id)
        .where(Placement.user_id == owner_id)
        .order_by(Placement.created_at.desc())
    ).all()
    return [_build_response(p, student_name, company_name) for p, student_name, company_name in rows]


def get_placement(db: Session, owner_id: uuid.UUID, placement_id: uuid.UUID) -> Optional[Placement]:
    return db.execute(
        select(Placement).where(Placement.id == placement_id, Placement.user_id == owner_id)
    ).scalar_one_or_none()


def create_placement(db: Session, owner_id: uuid.UUID, data: PlacementCreate) -> PlacementResponse:
    """
    Enregistre un placement (statut Confirmed par défaut).
    Lève une ValueError si l'élève ou l'entreprise référencé n'existe pas.
    """
    placement = Placement(user_id=owner_id, **data.model_dump())
    db.add(placement)
    commit_or_raise(db, foreign_key_message=INVALID_REFERENCE)
    db.refresh(placement)
    logger.info(
        "Placement créé : %s (élève %s, entreprise %s, %s)",
        placement.id, placement.student_id, placement.company_id, placement.status,
    )
    return _to_response(db, placement)


def update_placement(
    db: Session, owner_id: uuid.UUID, placement_id: uuid.UUID, data: PlacementUpdate
) -> Optional[PlacementResponse]:
    """Met à jour les champs fournis d'un placement. Retourne None si introuvable."""
    placement = get_placement(db, owner_id, placement_id)
    if placement is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(placement, field, value)

    commit_or_raise(db, foreign_key_message=INVALID_REFERENCE)
    db.refresh(placement)
    return _to_response(db, placement)


def delete_placement(db: Session, owner_id: uuid.UUID, placement_id: uuid.UUID) -> bool:
    placement = get_placement(db, owner_id, placement_id)
    if placement is None:
        return False

    db.delete(placement)
    db.commit()
    logger.info("Placement supprimé : %s", placement_id)
    return True


def _to_response(db: Session, placement: Placement) -> PlacementResponse:
    """Construit le schéma de réponse en chargeant les noms de l'élève et de l'entreprise."""
    student_name = db.execute(
        select(Student.name).where(Student.id == placement.student_id)
    ).scalar()
    company_name = db.execute(
        select(Company.name).where(Company.id == placement.company_id)
    ).scalar()
    return _build_response(placement, student_name, company_name)


def _build_response(
    placement: Placement, student_name: Optional[str], company_name: Optional[str]
) -> PlacementResponse:
    return PlacementResponse(
        id=placement.id,
        student_id=placement.student_id,
        company_id=placement.company_id,
        position=placement.position,
        package=float(placement.package),
        placement_date=placement.placement_date,
        status=placement.status,
        created_at=placement.created_at,
        updated_at=placement.updated_at,
        students=NameRef(name=student_name),
        companies=NameRef(name=company_name),
    )
