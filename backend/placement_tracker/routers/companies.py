"""
Router pour les entreprises partenaires.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from placement_tracker.auth import get_current_user_id
from placement_tracker.database import get_db
from placement_tracker.schemas.common import MessageResponse
from placement_tracker.schemas.company import CompanyCreate, CompanyResponse, CompanyUpdate
from placement_tracker.services import company_service

router = APIRouter(prefix="/api/companies", tags=["Companies"])


@router.get("", response_model=List[CompanyResponse], summary="Lister les entreprises")
def list_companies(db: Session = Depends(get_db), owner_id: uuid.UUID = Depends(get_current_user_id)):
    return company_service.get_companies(db, owner_id)


@router.post("", response_model=CompanyResponse, status_code=201, summary="Créer une entreprise")
def create_company(
    data: CompanyCreate,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    """Crée une entreprise. Le site web est optionnel, tous les autres champs sont obligatoires."""
    return company_service.create_company(db, owner_id, data)


@router.put("/{company_id}", response_model=CompanyResponse, summary="Modifier une entreprise")
def update_company(
    company_id: uuid.UUID,
    data: CompanyUpdate,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    try:
        company = company_service.update_company(db, owner_id, company_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if company is None:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.delete("/{company_id}", response_model=MessageResponse, summary="Supprimer une entreprise")
def delete_company(
    company_id: uuid.UUID,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_current_user_id),
):
    if not company_service.delete_company(db, owner_id, company_id):
        raise HTTPException(status_code=404, detail="Company not found")
    return {"message": "Company deleted successfully"}
