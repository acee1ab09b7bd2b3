"""
Modèles SQLAlchemy pour les entretiens et leurs participants.
"""

import uuid
from sqlalchemy import Column, DateTime, ForeignKey, String, Text, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import UUID

from placement_tracker.database import Base


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    company_id = Column(UUID(as_uuid=True), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    interview_date = Column(DateTime, nullable=False)
    interview_type = Column(String(50), nullable=False)  # Technical, HR, Group Discussion, Aptitude, Final
    location = Column(String(255), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class InterviewStudent(Base):
    """Association entretien ↔ élèves convoqués, avec un statut par couple."""
    __tablename__ = "interview_students"
    __table_args__ = (
        UniqueConstraint("interview_id", "student_id", name="uq_interview_students_pair"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    interview_id = Column(UUID(as_uuid=True), ForeignKey("interviews.id", ondelete="CASCADE"), nullable=False)
    student_id = Column(UUID(as_uuid=True), ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    status = Column(String(50), nullable=False, default="Scheduled")
    created_at = Column(DateTime, server_default=func.now())
