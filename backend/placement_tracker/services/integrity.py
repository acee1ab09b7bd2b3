"""
Validation des transactions d'écriture.
Une violation de contrainte SQL devient une ValueError, renvoyée en 400 par les routers.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

# Codes SQLSTATE PostgreSQL (psycopg2 : exc.orig.pgcode)
FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"

CONSTRAINT_VIOLATED = "Invalid data: a database constraint was violated"


def commit_or_raise(
    db: Session,
    foreign_key_message: str = CONSTRAINT_VIOLATED,
    unique_message: str = CONSTRAINT_VIOLATED,
) -> None:
    """
    Valide la transaction. En cas d'IntegrityError, annule et lève une ValueError
    dont le message dépend du type de violation (clé étrangère, unicité, autre).
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        code = getattr(exc.orig, "pgcode", None)
        logger.warning("Contrainte violée (SQLSTATE %s) : %s", code, exc.orig)
        if code == FOREIGN_KEY_VIOLATION:
            raise ValueError(foreign_key_message)
        if code == UNIQUE_VIOLATION:
            raise ValueError(unique_message)
        raise ValueError(CONSTRAINT_VIOLATED)
