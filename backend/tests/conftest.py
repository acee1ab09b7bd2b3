"""
Configuration partagée pour tous les tests.
Override la dépendance get_db pour éviter toute connexion réelle à PostgreSQL,
et get_current_user_id pour authentifier les requêtes sous un propriétaire fixe.
"""

import uuid

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from placement_tracker.auth import get_current_user_id
from placement_tracker.database import get_db
from placement_tracker.main import app

OWNER_ID = uuid.UUID("11111111-1111-1111-1111-111111111111")


@pytest.fixture
def owner_id():
    return OWNER_ID


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(mock_db):
    """Client HTTP de test authentifié, avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[get_current_user_id] = lambda: OWNER_ID
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(mock_db):
    """Client HTTP de test sans override d'authentification."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
