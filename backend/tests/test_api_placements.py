"""
Tests d'intégration API pour les placements.
"""

import uuid
from datetime import date, datetime
from unittest.mock import patch

from placement_tracker.schemas.common import NameRef
from placement_tracker.schemas.placement import PlacementResponse


def make_placement_response(**kwargs) -> PlacementResponse:
    return PlacementResponse(
        id=kwargs.get("id", uuid.uuid4()),
        student_id=uuid.uuid4(),
        company_id=uuid.uuid4(),
        position=kwargs.get("position", "Software Engineer"),
        package=kwargs.get("package", 12.5),
        placement_date=date(2024, 6, 1),
        status=kwargs.get("status", "Confirmed"),
        created_at=datetime.now(),
        updated_at=datetime.now(),
        students=NameRef(name="Priya"),
        companies=NameRef(name="Infosys"),
    )


def valid_payload(**kwargs) -> dict:
    payload = {
        "student_id": str(uuid.uuid4()),
        "company_id": str(uuid.uuid4()),
        "position": "Software Engineer",
        "package": 12.5,
        "placement_date": "2024-06-01",
    }
    payload.update(kwargs)
    return payload


def test_list_placements_format_imbrique(client):
    with patch("placement_tracker.routers.placements.placement_service.get_placements") as mock:
        mock.return_value = [make_placement_response()]
        response = client.get("/api/placements")

    assert response.status_code == 200
    item = response.json()[0]
    assert item["students"] == {"name": "Priya"}
    assert item["companies"] == {"name": "Infosys"}
    assert item["package"] == 12.5


def test_create_placement_succes(client, owner_id):
    with patch("placement_tracker.routers.placements.placement_service.create_placement") as mock:
        mock.return_value = make_placement_response()
        response = client.post("/api/placements", json=valid_payload())

    assert response.status_code == 201
    data = mock.call_args.args[2]
    assert data.status == "Confirmed"
    assert mock.call_args.args[1] == owner_id


def test_create_placement_package_nul(client, mock_db):
    response = client.post("/api/placements", json=valid_payload(package=0))

    assert response.status_code == 400
    assert response.json() == {"error": "Package must be greater than 0"}
    mock_db.add.assert_not_called()


def test_create_placement_package_inferieur_au_centime(client, mock_db):
    """0.001 arrondi à 0.00 → même message que package = 0."""
    response = client.post("/api/placements", json=valid_payload(package=0.001))

    assert response.status_code == 400
    assert response.json() == {"error": "Package must be greater than 0"}
    mock_db.add.assert_not_called()


def test_update_placement_champ_obligatoire_null(client):
    with patch("placement_tracker.routers.placements.placement_service.update_placement") as mock:
        response = client.put(f"/api/placements/{uuid.uuid4()}", json={"package": None})

    assert response.status_code == 400
    assert response.json() == {"error": "All required fields must be provided"}
    mock.assert_not_called()


def test_create_placement_statut_invalide(client):
    response = client.post("/api/placements", json=valid_payload(status="Accepted"))
    assert response.status_code == 400
    assert "Invalid status" in response.json()["error"]


def test_create_placement_champ_manquant(client):
    payload = valid_payload()
    del payload["position"]
    response = client.post("/api/placements", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "All required fields must be provided"}


def test_create_placement_reference_inexistante(client):
    with patch("placement_tracker.routers.placements.placement_service.create_placement") as mock:
        mock.side_effect = ValueError("Referenced student or company does not exist")
        response = client.post("/api/placements", json=valid_payload())

    assert response.status_code == 400
    assert "does not exist" in response.json()["error"]


def test_update_placement_succes(client):
    pid = uuid.uuid4()
    with patch("placement_tracker.routers.placements.placement_service.update_placement") as mock:
        mock.return_value = make_placement_response(id=pid, status="Rejected")
        response = client.put(f"/api/placements/{pid}", json={"status": "Rejected"})

    assert response.status_code == 200
    assert response.json()["status"] == "Rejected"


def test_update_placement_introuvable(client):
    with patch("placement_tracker.routers.placements.placement_service.update_placement") as mock:
        mock.return_value = None
        response = client.put(f"/api/placements/{uuid.uuid4()}", json={"position": "Lead"})

    assert response.status_code == 404
    assert response.json() == {"error": "Placement not found"}


def test_delete_placement_succes(client):
    with patch("placement_tracker.routers.placements.placement_service.delete_placement") as mock:
        mock.return_value = True
        response = client.delete(f"/api/placements/{uuid.uuid4()}")

    assert response.status_code == 200
    assert response.json() == {"message": "Placement deleted successfully"}


def test_delete_placement_introuvable(client):
    with patch("placement_tracker.routers.placements.placement_service.delete_placement") as mock:
        mock.return_value = False
        response = client.delete(f"/api/placements/{uuid.uuid4()}")

    assert response.status_code == 404
