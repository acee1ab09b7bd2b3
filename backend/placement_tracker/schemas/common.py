"""
Schémas Pydantic partagés entre les entités.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import BaseModel


class NameRef(BaseModel):
    """Référence imbriquée vers une entité liée, réduite à son nom (ex: `companies: {name}`)."""
    name: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


MISSING_FIELDS = "All required fields must be provided"


def reject_null(v):
    """Mise à jour partielle : un champ absent est ignoré, mais un champ obligatoire envoyé à null est refusé."""
    if v is None:
        raise ValueError(MISSING_FIELDS)
    return v


def strip_not_empty(v: Optional[str]) -> Optional[str]:
    """Supprime les espaces ; refuse une chaîne vide. None passe tel quel (mise à jour partielle)."""
    if v is None:
        return v
    if not v.strip():
        raise ValueError(MISSING_FIELDS)
    return v.strip()


def round_cents(v: Optional[Decimal]) -> Optional[Decimal]:
    """Arrondit à deux décimales (demi vers le haut), la précision des colonnes NUMERIC(_, 2)."""
    if v is None:
        return v
    return v.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
