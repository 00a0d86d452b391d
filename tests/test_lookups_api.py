"""
Travel statuses and priority levels: unique labels, restricted deletes
"""
import pytest
from sqlalchemy import update

from app.models import Destination, TravelStatus


def test_default_lookups_are_listed(client):
    statuses = client.get("/api/travel-statuses").json()
    priorities = client.get("/api/travel-priority-levels").json()

    assert "Planned" in [s["label"] for s in statuses]
    assert [p["label"] for p in priorities] == ["Low", "Medium", "High"]


def test_create_status(client):
    response = client.post("/api/travel-statuses", json={"label": "On Hold", "colour": "#000000"})

    assert response.status_code == 201
    assert response.json()["label"] == "On Hold"


def test_duplicate_label_is_a_conflict(client):
    response = client.post("/api/travel-statuses", json={"label": "planned"})

    assert response.status_code == 409
    assert "label" in response.json()["fieldErrors"]


@pytest.mark.parametrize("label", ["Plan%", "Plann_d", "%"])
def test_wildcard_characters_in_label_are_literal(client, label):
    response = client.post("/api/travel-statuses", json={"label": label})

    assert response.status_code == 201
    assert response.json()["label"] == label


def test_rename_to_existing_label_is_a_conflict(client):
    response = client.put("/api/travel-priority-levels/1", json={"label": "High"})

    assert response.status_code == 409


def test_delete_unused_status(client):
    created = client.post("/api/travel-statuses", json={"label": "Temporary"}).json()

    assert client.delete(f"/api/travel-statuses/{created['id']}").status_code == 204
    assert client.get(f"/api/travel-statuses/{created['id']}").status_code == 404


def test_delete_referenced_status_is_restricted(client, destination, trip_payload):
    """Rejected with 409; the status and its rows are untouched"""
    trip = client.post("/api/trips", json={**trip_payload, "statusId": 1}).json()

    response = client.delete("/api/travel-statuses/1")

    assert response.status_code == 409
    assert response.json()["code"] == "RESOURCE_IN_USE"
    assert client.get("/api/travel-statuses/1").status_code == 200
    assert client.get(f"/api/destinations/{destination['id']}").json() == destination
    assert client.get(f"/api/trips/{trip['id']}").json() == trip


def test_delete_referenced_priority_is_restricted(client, destination):
    response = client.delete("/api/travel-priority-levels/1")

    assert response.status_code == 409
    assert response.json()["code"] == "RESOURCE_IN_USE"


def test_status_id_change_cascades(db_session, destination):
    """ON UPDATE CASCADE carries a renumbered status to referencing rows"""
    db_session.execute(update(TravelStatus).where(TravelStatus.id == 1).values(id=100))
    db_session.commit()
    db_session.expire_all()

    assert db_session.get(Destination, destination["id"]).status_id == 100
