"""
Service de statistiques de placement (tableau de bord).

`aggregate_stats` est une réduction pure sur des lignes déjà chargées : aucune
requête, aucune erreur possible, des zéros et des listes vides sur une entrée vide.
`get_stats` charge les quatre jeux de données du propriétaire puis délègue l'agrégation.
"""

import uuid
import logging
from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from placement_tracker.models.company import Company
from placement_tracker.models.interview import Interview
from placement_tracker.models.placement import Placement
from placement_tracker.models.student import Student
from placement_tracker.schemas.placement import CONFIRMED
from placement_tracker.schemas.stats import (
    CompanyCount,
    ConfirmedPlacement,
    RecentPlacement,
    StatsResponse,
)

logger = logging.getLogger(__name__)

TOP_COMPANIES_LIMIT = 5
RECENT_PLACEMENTS_LIMIT = 5
UNKNOWN = "Unknown"
TWO_PLACES = Decimal("0.01")


def _round2(value: Decimal) -> float:
    return float(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def aggregate_stats(
    total_students: int,
    total_companies: int,
    placements: Sequence[ConfirmedPlacement],
    upcoming_interviews: int,
) -> StatsResponse:
    """
    Calcule le résumé du tableau de bord à partir des placements confirmés.

    - placementRate : élèves distincts placés / total élèves × 100, non plafonné
      (un placement peut viser un élève hors de la population comptée)
    - averagePackage : somme en Decimal / nombre de placements
    - topCompanies : 5 entreprises les plus représentées, égalités dans l'ordre
      de première apparition
    - recentPlacements : 5 plus récents par date décroissante, égalités dans l'ordre d'entrée
    """
    total_placements = len(placements)
    unique_students_placed = len({p.student_id for p in placements})

    if total_students > 0:
        placement_rate = Decimal(unique_students_placed) * 100 / Decimal(total_students)
    else:
        placement_rate = Decimal(0)

    if total_placements > 0:
        package_sum = sum((Decimal(p.package) for p in placements), Decimal(0))
        average_package = package_sum / total_placements
    else:
        average_package = Decimal(0)

    # Counter conserve l'ordre d'insertion et most_common() trie de façon stable
    company_counts = Counter(p.company_name or UNKNOWN for p in placements)
    top_companies = [
        CompanyCount(name=name, count=count)
        for name, count in company_counts.most_common(TOP_COMPANIES_LIMIT)
    ]

    recent = sorted(placements, key=lambda p: p.placement_date, reverse=True)
    recent_placements = [
        RecentPlacement(
            student_name=p.student_name or UNKNOWN,
            company_name=p.company_name or UNKNOWN,
            position=p.position,
            package=float(p.package),
            date=p.placement_date,
        )
        for p in recent[:RECENT_PLACEMENTS_LIMIT]
    ]

    return StatsResponse(
        total_students=total_students,
        total_companies=total_companies,
        total_placements=total_placements,
        unique_students_placed=unique_students_placed,
        placement_rate=_round2(placement_rate),
        average_package=_round2(average_package),
        upcoming_interviews=upcoming_interviews,
        top_companies=top_companies,
        recent_placements=recent_placements,
    )


def get_stats(db: Session, owner_id: uuid.UUID) -> StatsResponse:
    """
    Charge les compteurs et les placements confirmés du propriétaire puis les agrège.
    Toute erreur de lecture remonte telle quelle : pas de résumé partiel.
    """
    total_students = db.execute(
        select(func.count())
        .select_from(Student)
        .where(Student.user_id == owner_id)
    ).scalar() or 0

    total_companies = db.execute(
        select(func.count())
        .select_from(Company)
        .where(Company.user_id == owner_id)
    ).scalar() or 0

    rows = db.execute(
        select(
            Placement.student_id,
            Student.name.label("student_name"),
            Company.name.label("company_name"),
            Placement.position,
            Placement.package,
            Placement.placement_date,
        )
        .outerjoin(Student, Student.id == Placement.student_id)
        .outerjoin(Company, Company.id == Placement.company_id)
        .where(
            Placement.user_id == owner_id,
            Placement.status == CONFIRMED,
        )
        .order_by(Placement.placement_date.desc())
    ).all()

    upcoming_interviews = db.execute(
        select(func.count())
        .select_from(Interview)
        .where(
            Interview.user_id == owner_id,
            Interview.interview_date >= func.now(),
        )
    ).scalar() or 0

    placements = [ConfirmedPlacement.model_validate(row, from_attributes=True) for row in rows]
    logger.debug(
        "Statistiques %s : %d élèves, %d placements confirmés",
        owner_id, total_students, len(placements),
    )
    return aggregate_stats(total_students, total_companies, placements, upcoming_interviews)
