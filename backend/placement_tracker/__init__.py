"""Placement Tracker : API de suivi des placements (FastAPI + SQLAlchemy)."""
