"""
Service métier pour les entreprises partenaires.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from placement_tracker.models.company import Company
from placement_tracker.schemas.company import CompanyCreate, CompanyUpdate
from placement_tracker.services.integrity import commit_or_raise

logger = logging.getLogger(__name__)


def get_companies(db: Session, owner_id: uuid.UUID) -> list[Company]:
    """Retourne les entreprises du propriétaire, de la plus récente à la plus ancienne."""
    return db.execute(
        select(Company)
        .where(Company.user_id == owner_id)
        .order_by(Company.created_at.desc())
    ).scalars().all()


def get_company(db: Session, owner_id: uuid.UUID, company_id: uuid.UUID) -> Optional[Company]:
    return db.execute(
        select(Company).where(Company.id == company_id, Company.user_id == owner_id)
    ).scalar_one_or_none()


def create_company(db: Session, owner_id: uuid.UUID, data: CompanyCreate) -> Company:
    company = Company(user_id=owner_id, **data.model_dump())
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("Entreprise créée : %s (%s)", company.name, company.id)
    return company


def update_company(
    db: Session, owner_id: uuid.UUID, company_id: uuid.UUID, data: CompanyUpdate
) -> Optional[Company]:
    company = get_company(db, owner_id, company_id)
    if company is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(company, field, value)

    commit_or_raise(db)
    db.refresh(company)
    return company


def delete_company(db: Session, owner_id: uuid.UUID, company_id: uuid.UUID) -> bool:
    """Supprime une entreprise ainsi que ses entretiens et placements (cascade)."""
    company = get_company(db, owner_id, company_id)
    if company is None:
        return False

    db.delete(company)
    db.commit()
    logger.info("Entreprise supprimée : %s", company_id)
    return True
