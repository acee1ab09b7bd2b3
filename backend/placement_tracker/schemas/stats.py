"""
Schémas Pydantic pour les statistiques de placement (GET /stats).

Les clés JSON de premier niveau sont en camelCase (contrat du tableau de bord),
celles des placements récents restent en snake_case.
"""

import uuid
import datetime as dt
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ConfirmedPlacement(BaseModel):
    """Ligne de placement confirmé déjà jointe aux noms de l'élève et de l'entreprise."""
    student_id: uuid.UUID
    student_name: Optional[str] = None
    company_name: Optional[str] = None
    position: str
    package: Decimal
    placement_date: dt.date


class CompanyCount(BaseModel):
    name: str
    count: int


class RecentPlacement(BaseModel):
    student_name: str
    company_name: str
    position: str
    package: float
    date: dt.date


class StatsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_students: int
    total_companies: int
    total_placements: int
    unique_students_placed: int
    placement_rate: float
    average_package: float
    upcoming_interviews: int
    top_companies: List[CompanyCount]
    recent_placements: List[RecentPlacement]
