"""
Tests unitaires pour le service des élèves.
"""

import uuid
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from placement_tracker.models.student import Student
from placement_tracker.schemas.student import StudentCreate, StudentUpdate
from placement_tracker.services.student_service import (
    create_student,
    delete_student,
    get_students,
    update_student,
)

OWNER = uuid.uuid4()


# --- Helpers ---

def make_create(**kwargs) -> StudentCreate:
    data = {
        "name": "Priya Sharma",
        "email": "priya@college.edu",
        "phone": "9876543210",
        "department": "CSE",
        "graduation_year": 2025,
        "cgpa": "8.50",
    }
    data.update(kwargs)
    return StudentCreate(**data)


def make_db_mock(student=None):
    db = MagicMock()
    db.execute.return_value.scalar_one_or_none.return_value = student
    db.execute.return_value.scalars.return_value.all.return_value = []
    return db


# --- Validation des schémas ---

@pytest.mark.parametrize("cgpa", ["0", "0.00", "7.25", "10", "10.00"])
def test_cgpa_bornes_acceptees(cgpa):
    assert make_create(cgpa=cgpa).cgpa == Decimal(cgpa)


@pytest.mark.parametrize("cgpa", ["-0.01", "10.01", "11"])
def test_cgpa_hors_bornes_rejetee(cgpa):
    with pytest.raises(ValidationError, match="CGPA must be between 0 and 10"):
        make_create(cgpa=cgpa)


def test_nom_strip():
    assert make_create(name="  Priya  ").name == "Priya"


def test_update_nom_vide_rejete():
    with pytest.raises(ValidationError):
        StudentUpdate(name="  ")


@pytest.mark.parametrize(
    "field", ["name", "email", "phone", "department", "graduation_year", "cgpa"]
)
def test_update_champ_obligatoire_null_rejete(field):
    with pytest.raises(ValidationError, match="All required fields must be provided"):
        StudentUpdate(**{field: None})


def test_cgpa_arrondi_au_centieme():
    assert make_create(cgpa="8.755").cgpa == Decimal("8.76")


def test_cgpa_hors_bornes_apres_arrondi_rejete():
    with pytest.raises(ValidationError, match="CGPA must be between 0 and 10"):
        make_create(cgpa="10.005")


# --- create / list ---

def test_create_student_associe_le_proprietaire():
    db = make_db_mock()
    student = create_student(db, OWNER, make_create(cgpa="10.00"))

    assert isinstance(student, Student)
    assert student.user_id == OWNER
    assert student.cgpa == Decimal("10.00")
    db.add.assert_called_once_with(student)
    db.commit.assert_called_once()
    db.refresh.assert_called_once_with(student)


def test_get_students_vide():
    db = make_db_mock()
    assert get_students(db, OWNER) == []
    db.execute.assert_called_once()


# --- update ---

def test_update_student_partiel():
    student = MagicMock()
    student.name = "Priya"
    student.cgpa = Decimal("8.00")
    db = make_db_mock(student)

    result = update_student(db, OWNER, uuid.uuid4(), StudentUpdate(cgpa=Decimal("9.50")))

    assert result is student
    assert student.cgpa == Decimal("9.50")
    assert student.name == "Priya"
    db.commit.assert_called_once()


def test_update_student_introuvable():
    db = make_db_mock(None)
    assert update_student(db, OWNER, uuid.uuid4(), StudentUpdate(name="X")) is None
    db.commit.assert_not_called()


def test_update_student_contrainte_violee():
    student = MagicMock()
    db = make_db_mock(student)
    db.commit.side_effect = IntegrityError("not null", None, None)

    with pytest.raises(ValueError, match="a database constraint was violated"):
        update_student(db, OWNER, uuid.uuid4(), StudentUpdate(department="ECE"))
    db.rollback.assert_called_once()
    db.refresh.assert_not_called()


# --- delete ---

def test_delete_student_existant():
    student = MagicMock()
    db = make_db_mock(student)
    assert delete_student(db, OWNER, uuid.uuid4()) is True
    db.delete.assert_called_once_with(student)
    db.commit.assert_called_once()


def test_delete_student_autre_proprietaire():
    """Un élève d'un autre utilisateur est indistinguable d'un élève inexistant."""
    db = make_db_mock(None)
    assert delete_student(db, OWNER, uuid.uuid4()) is False
    db.delete.assert_not_called()
