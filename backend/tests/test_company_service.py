"""
Tests unitaires pour le service des entreprises.
"""

import uuid
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from placement_tracker.schemas.company import CompanyCreate, CompanyUpdate
from placement_tracker.services.company_service import (
    create_company,
    delete_company,
    update_company,
)

OWNER = uuid.uuid4()


def make_db_mock(company=None):
    db = MagicMock()
    db.execute.return_value.scalar_one_or_none.return_value = company
    return db


def test_create_company_associe_le_proprietaire():
    db = make_db_mock()
    data = CompanyCreate(
        name="Wipro",
        industry="IT",
        location="Hyderabad",
        contact_person="Ravi",
        contact_email="ravi@wipro.com",
        contact_phone="040-555",
    )

    company = create_company(db, OWNER, data)

    assert company.user_id == OWNER
    assert company.website is None
    db.add.assert_called_once_with(company)
    db.commit.assert_called_once()


def test_update_company_vide_site_web():
    company = MagicMock()
    company.website = "https://old.example.com"
    db = make_db_mock(company)

    update_company(db, OWNER, uuid.uuid4(), CompanyUpdate(website=""))

    assert company.website is None
    db.commit.assert_called_once()


def test_update_company_introuvable():
    db = make_db_mock(None)
    assert update_company(db, OWNER, uuid.uuid4(), CompanyUpdate(name="X")) is None
    db.commit.assert_not_called()


def test_delete_company_introuvable():
    db = make_db_mock(None)
    assert delete_company(db, OWNER, uuid.uuid4()) is False
    db.delete.assert_not_called()


def test_delete_company_existante():
    company = MagicMock()
    db = make_db_mock(company)
    assert delete_company(db, OWNER, uuid.uuid4()) is True
    db.delete.assert_called_once_with(company)


def test_update_company_contrainte_violee():
    company = MagicMock()
    db = make_db_mock(company)
    db.commit.side_effect = IntegrityError("not null", None, None)

    with pytest.raises(ValueError, match="a database constraint was violated"):
        update_company(db, OWNER, uuid.uuid4(), CompanyUpdate(location="Pune"))
    db.rollback.assert_called_once()
    db.refresh.assert_not_called()


@pytest.mark.parametrize(
    "field", ["name", "industry", "location", "contact_person", "contact_email", "contact_phone"]
)
def test_update_champ_obligatoire_null_rejete(field):
    with pytest.raises(ValidationError, match="All required fields must be provided"):
        CompanyUpdate(**{field: None})


def test_update_site_web_null_accepte():
    assert CompanyUpdate(website=None).model_dump(exclude_unset=True) == {"website": None}
