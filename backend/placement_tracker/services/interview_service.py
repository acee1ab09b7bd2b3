"""
Service métier pour les entretiens et la convocation des élèves.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from placement_tracker.models.company import Company
from placement_tracker.models.interview import Interview, InterviewStudent
from placement_tracker.models.student import Student
from placement_tracker.schemas.common import NameRef
from placement_tracker.schemas.interview import (
    InterviewCreate,
    InterviewResponse,
    InterviewStudentCreate,
    InterviewStudentDetail,
    InterviewUpdate,
)
from placement_tracker.services.integrity import commit_or_raise

logger = logging.getLogger(__name__)

ALREADY_ADDED = "Student already added to this interview"
UNKNOWN_COMPANY = "Referenced company does not exist"
UNKNOWN_STUDENT = "Referenced student does not exist"


def get_interviews(db: Session, owner_id: uuid.UUID) -> list[InterviewResponse]:
    """Retourne les entretiens du propriétaire par date croissante, avec le nom de l'entreprise."""
    rows = db.execute(
        select(Interview, Company.name)
        .outerjoin(Company, Company.id == Interview.company_id)
        .where(Interview.user_id == owner_id)
        .order_by(Interview.interview_date.asc())
    ).all()
    return [_build_response(interview, company_name) for interview, company_name in rows]


def get_interview(db: Session, owner_id: uuid.UUID, interview_id: uuid.UUID) -> Optional[Interview]:
    return db.execute(
        select(Interview).where(Interview.id == interview_id, Interview.user_id == owner_id)
    ).scalar_one_or_none()


def create_interview(db: Session, owner_id: uuid.UUID, data: InterviewCreate) -> InterviewResponse:
    """Planifie un entretien. Lève une ValueError si l'entreprise n'existe pas."""
    interview = Interview(user_id=owner_id, **data.model_dump())
    db.add(interview)
    commit_or_raise(db, foreign_key_message=UNKNOWN_COMPANY)
    db.refresh(interview)
    logger.info(
        "Entretien créé : %s (%s, %s)",
        interview.id, interview.interview_type, interview.interview_date,
    )
    return _to_response(db, interview)


def update_interview(
    db: Session, owner_id: uuid.UUID, interview_id: uuid.UUID, data: InterviewUpdate
) -> Optional[InterviewResponse]:
    interview = get_interview(db, owner_id, interview_id)
    if interview is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(interview, field, value)

    commit_or_raise(db, foreign_key_message=UNKNOWN_COMPANY)
    db.refresh(interview)
    return _to_response(db, interview)


def delete_interview(db: Session, owner_id: uuid.UUID, interview_id: uuid.UUID) -> bool:
    """Supprime un entretien et ses convocations (cascade)."""
    interview = get_interview(db, owner_id, interview_id)
    if interview is None:
        return False

    db.delete(interview)
    db.commit()
    logger.info("Entretien supprimé : %s", interview_id)
    return True


# --- Convocations ---

def get_interview_students(
    db: Session, owner_id: uuid.UUID, interview_id: uuid.UUID
) -> Optional[list[InterviewStudentDetail]]:
    """Retourne les élèves convoqués à un entretien, ou None si l'entretien est introuvable."""
    if get_interview(db, owner_id, interview_id) is None:
        return None

    rows = db.execute(
        select(InterviewStudent, Student.name)
        .outerjoin(Student, Student.id == InterviewStudent.student_id)
        .where(InterviewStudent.interview_id == interview_id)
    ).all()
    return [
        InterviewStudentDetail(
            id=link.id,
            student_id=link.student_id,
            status=link.status,
            students=NameRef(name=student_name),
        )
        for link, student_name in rows
    ]


def add_interview_student(
    db: Session, owner_id: uuid.UUID, data: InterviewStudentCreate
) -> Optional[InterviewStudent]:
    """
    Convoque un élève à un entretien.
    Retourne None si l'entretien est introuvable ; lève une ValueError si le couple
    (entretien, élève) existe déjà.
    """
    if get_interview(db, owner_id, data.interview_id) is None:
        return None

    existing = db.execute(
        select(InterviewStudent.id).where(
            InterviewStudent.interview_id == data.interview_id,
            InterviewStudent.student_id == data.student_id,
        )
    ).scalar()
    if existing:
        raise ValueError(ALREADY_ADDED)

    link = InterviewStudent(
        interview_id=data.interview_id,
        student_id=data.student_id,
        status=data.status,
    )
    db.add(link)
    # Insertion concurrente du même couple : la contrainte d'unicité tranche
    commit_or_raise(db, foreign_key_message=UNKNOWN_STUDENT, unique_message=ALREADY_ADDED)
    db.refresh(link)
    return link


def remove_interview_student(db: Session, owner_id: uuid.UUID, link_id: uuid.UUID) -> bool:
    """Retire une convocation. Retourne False si elle n'existe pas ou concerne l'entretien d'un autre utilisateur."""
    link = db.execute(
        select(InterviewStudent)
        .join(Interview, Interview.id == InterviewStudent.interview_id)
        .where(InterviewStudent.id == link_id, Interview.user_id == owner_id)
    ).scalar_one_or_none()
    if link is None:
        return False

    db.delete(link)
    db.commit()
    return True


def _to_response(db: Session, interview: Interview) -> InterviewResponse:
    company_name = db.execute(
        select(Company.name).where(Company.id == interview.company_id)
    ).scalar()
    return _build_response(interview, company_name)


def _build_response(interview: Interview, company_name: Optional[str]) -> InterviewResponse:
    return InterviewResponse(
        id=interview.id,
        company_id=interview.company_id,
        interview_date=interview.interview_date,
        interview_type=interview.interview_type,
        location=interview.location,
        notes=interview.notes,
        created_at=interview.created_at,
        updated_at=interview.updated_at,
        companies=NameRef(name=company_name),
    )
