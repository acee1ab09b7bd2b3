"""
Tests d'intégration API pour les entreprises.
"""

import uuid
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import patch

VALID_COMPANY = {
    "name": "Infosys",
    "industry": "IT Services",
    "location": "Bengaluru",
    "website": "https://www.infosys.com",
    "contact_person": "Anita Rao",
    "contact_email": "anita.rao@infosys.com",
    "contact_phone": "080-1234567",
}


def make_company(**kwargs):
    data = {**VALID_COMPANY, **kwargs}
    return SimpleNamespace(
        id=kwargs.get("id", uuid.uuid4()),
        created_at=datetime.now(),
        updated_at=datetime.now(),
        **{k: v for k, v in data.items() if k != "id"},
    )


# ============================================================
# GET / POST /api/companies
# ============================================================

def test_list_companies_succes(client, owner_id):
    with patch("placement_tracker.routers.companies.company_service.get_companies") as mock:
        mock.return_value = [make_company(), make_company(name="TCS")]
        response = client.get("/api/companies")

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Infosys", "TCS"]
    assert mock.call_args.args[1] == owner_id


def test_create_company_succes(client):
    with patch("placement_tracker.routers.companies.company_service.create_company") as mock:
        mock.return_value = make_company()
        response = client.post("/api/companies", json=VALID_COMPANY)

    assert response.status_code == 201
    assert response.json()["website"] == "https://www.infosys.com"


def test_create_company_sans_site_web(client):
    """Site web optionnel : une chaîne vide est enregistrée comme null."""
    with patch("placement_tracker.routers.companies.company_service.create_company") as mock:
        mock.return_value = make_company(website=None)
        response = client.post("/api/companies", json={**VALID_COMPANY, "website": ""})

    assert response.status_code == 201
    assert response.json()["website"] is None
    assert mock.call_args.args[2].website is None


def test_create_company_champ_obligatoire_manquant(client, mock_db):
    payload = {k: v for k, v in VALID_COMPANY.items() if k != "contact_person"}
    response = client.post("/api/companies", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "All required fields must be provided"}
    mock_db.add.assert_not_called()


def test_create_company_champ_vide(client):
    response = client.post("/api/companies", json={**VALID_COMPANY, "industry": " "})
    assert response.status_code == 400


# ============================================================
# PUT / DELETE /api/companies/{id}
# ============================================================

def test_update_company_succes(client):
    cid = uuid.uuid4()
    with patch("placement_tracker.routers.companies.company_service.update_company") as mock:
        mock.return_value = make_company(id=cid, location="Pune")
        response = client.put(f"/api/companies/{cid}", json={"location": "Pune"})

    assert response.status_code == 200
    assert response.json()["location"] == "Pune"


def test_update_company_introuvable(client):
    with patch("placement_tracker.routers.companies.company_service.update_company") as mock:
        mock.return_value = None
        response = client.put(f"/api/companies/{uuid.uuid4()}", json={"location": "Pune"})

    assert response.status_code == 404
    assert response.json() == {"error": "Company not found"}


def test_update_company_champ_obligatoire_null(client, mock_db):
    """Un champ obligatoire envoyé à null → 400, aucune écriture."""
    with patch("placement_tracker.routers.companies.company_service.update_company") as mock:
        response = client.put(f"/api/companies/{uuid.uuid4()}", json={"industry": None})

    assert response.status_code == 400
    assert response.json() == {"error": "All required fields must be provided"}
    mock.assert_not_called()
    mock_db.commit.assert_not_called()


def test_update_company_contrainte_violee(client):
    with patch("placement_tracker.routers.companies.company_service.update_company") as mock:
        mock.side_effect = ValueError("Invalid data: a database constraint was violated")
        response = client.put(f"/api/companies/{uuid.uuid4()}", json={"location": "Pune"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid data: a database constraint was violated"}


def test_delete_company_succes(client):
    with patch("placement_tracker.routers.companies.company_service.delete_company") as mock:
        mock.return_value = True
        response = client.delete(f"/api/companies/{uuid.uuid4()}")

    assert response.status_code == 200
    assert response.json() == {"message": "Company deleted successfully"}


def test_delete_company_introuvable(client):
    with patch("placement_tracker.routers.companies.company_service.delete_company") as mock:
        mock.return_value = False
        response = client.delete(f"/api/companies/{uuid.uuid4()}")

    assert response.status_code == 404