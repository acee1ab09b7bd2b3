"""
Modèle SQLAlchemy pour les placements (offres acceptées, en attente ou refusées).
Le package est un NUMERIC(12,2) : aucune perte de précision à la somme.
"""

import uuid
from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Numeric, String, func
from sqlalchemy.dialects.postgresql import UUID

from placement_tracker.database import Base


class Placement(Base):
    __tablename__ = "placements"
    __table_args__ = (
        CheckConstraint("package > 0", name="ck_placements_package_positive"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(UUID(as_uuid=True), ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    company_id = Column(UUID(as_uuid=True), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    position = Column(String(255), nullable=False)
    package = Column(Numeric(12, 2), nullable=False)
    placement_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default="Confirmed")  # Confirmed, Pending, Rejected
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
