"""
Destination endpoints, including delete cascades
"""
from app.models import Activity, Accommodation, TripDestination


def test_create_destination_assigns_id(client, destination_payload):
    response = client.post("/api/destinations", json=destination_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["id"] > 0
    assert data["name"] == "Paris"
    assert data["statusId"] == 1
    assert data["description"] == ""
    assert data["userId"] is None


def test_create_then_list_includes_record(client, destination):
    response = client.get("/api/destinations")

    assert response.status_code == 200
    assert [d["id"] for d in response.json()] == [destination["id"]]


def test_get_missing_destination_is_404(client):
    response = client.get("/api/destinations/999")

    assert response.status_code == 404
    assert response.json()["code"] == "RESOURCE_NOT_FOUND"


def test_non_positive_id_is_rejected(client):
    response = client.get("/api/destinations/0")

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_invalid_payload_returns_field_errors(client, destination_payload):
    response = client.post(
        "/api/destinations",
        json={**destination_payload, "name": "", "image": "not-a-url", "statusId": 0},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert set(body["fieldErrors"]) == {"name", "image", "statusId"}


def test_unknown_status_is_a_field_error(client, destination_payload):
    response = client.post("/api/destinations", json={**destination_payload, "statusId": 999})

    assert response.status_code == 400
    assert response.json()["fieldErrors"] == {"statusId": ["Travel status 999 does not exist"]}


def test_update_round_trip_keeps_other_fields(client, destination):
    """update(id, {name}) then get(id) changes only the name"""
    response = client.put(f"/api/destinations/{destination['id']}", json={"name": "X"})
    assert response.status_code == 200

    fetched = client.get(f"/api/destinations/{destination['id']}").json()
    assert fetched == {**destination, "name": "X"}


def test_update_rejects_null_on_required_column(client, destination):
    response = client.put(f"/api/destinations/{destination['id']}", json={"country": None})

    assert response.status_code == 400
    assert "country" in response.json()["fieldErrors"]


def test_delete_destination(client, destination):
    response = client.delete(f"/api/destinations/{destination['id']}")

    assert response.status_code == 204
    assert client.get(f"/api/destinations/{destination['id']}").status_code == 404
    assert client.delete(f"/api/destinations/{destination['id']}").status_code == 404


def test_delete_cascades_to_children_and_links(client, db_session, destination, activity_payload,
                                                accommodation_payload, trip_payload):
    """Activities, accommodations and trip links go with the destination; the trip stays"""
    activity = client.post("/api/activities", json=activity_payload).json()
    accommodation = client.post("/api/accommodations", json=accommodation_payload).json()
    trip = client.post("/api/trips", json=trip_payload).json()
    link = client.post(f"/api/trips/{trip['id']}/destinations", json={"destinationId": destination["id"]})
    assert link.status_code == 201

    assert client.delete(f"/api/destinations/{destination['id']}").status_code == 204

    assert client.get(f"/api/activities/{activity['id']}").status_code == 404
    assert client.get(f"/api/accommodations/{accommodation['id']}").status_code == 404
    assert client.get(f"/api/trips/{trip['id']}").status_code == 200
    assert client.get(f"/api/trips/{trip['id']}/destinations").json() == []

    db_session.expire_all()
    assert db_session.query(Activity).count() == 0
    assert db_session.query(Accommodation).count() == 0
    assert db_session.query(TripDestination).count() == 0


def test_paris_scenario(client):
    """Create Paris, add the Eiffel Tower, delete Paris: the activity is gone"""
    paris = client.post("/api/destinations", json={
        "name": "Paris", "country": "France", "region": "Europe",
        "image": "https://x/1.jpg", "statusId": 1, "priorityId": 1,
    })
    assert paris.status_code == 201
    paris_id = paris.json()["id"]

    eiffel = client.post("/api/activities", json={
        "name": "Eiffel Tower Visit", "description": "...", "category": "Sightseeing",
        "destinationId": paris_id, "statusId": 1, "priorityId": 1,
    })
    assert eiffel.status_code == 201

    client.delete(f"/api/destinations/{paris_id}")

    assert client.get(f"/api/activities/{eiffel.json()['id']}").status_code == 404


def test_responses_carry_request_id(client):
    response = client.get("/api/destinations", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
