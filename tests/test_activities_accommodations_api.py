"""
Activity and accommodation endpoints
"""
import pytest


@pytest.mark.parametrize("path, payload_fixture", [
    ("/api/activities", "activity_payload"),
    ("/api/accommodations", "accommodation_payload"),
])
def test_crud_cycle(client, request, path, payload_fixture):
    payload = request.getfixturevalue(payload_fixture)

    created = client.post(path, json=payload)
    assert created.status_code == 201
    item = created.json()

    assert [row["id"] for row in client.get(path).json()] == [item["id"]]

    updated = client.put(f"{path}/{item['id']}", json={"name": "Renamed"})
    assert updated.status_code == 200
    assert updated.json() == {**item, "name": "Renamed"}

    assert client.delete(f"{path}/{item['id']}").status_code == 204
    assert client.get(path).json() == []


@pytest.mark.parametrize("path, payload_fixture", [
    ("/api/activities", "activity_payload"),
    ("/api/accommodations", "accommodation_payload"),
])
def test_unknown_destination_is_a_field_error(client, request, path, payload_fixture):
    payload = request.getfixturevalue(payload_fixture)

    response = client.post(path, json={**payload, "destinationId": 999})

    assert response.status_code == 400
    assert response.json()["fieldErrors"] == {"destinationId": ["Destination 999 does not exist"]}


def test_filter_by_destination(client, destination_payload, activity_payload):
    other = client.post("/api/destinations", json={**destination_payload, "name": "Tokyo"}).json()
    client.post("/api/activities", json=activity_payload)
    tokyo_activity = client.post(
        "/api/activities", json={**activity_payload, "name": "Skytree", "destinationId": other["id"]}
    ).json()

    response = client.get("/api/activities", params={"destinationId": other["id"]})

    assert response.status_code == 200
    assert [a["id"] for a in response.json()] == [tokyo_activity["id"]]
    assert len(client.get("/api/activities").json()) == 2


def test_activity_address_fields_round_trip(client, activity_payload):
    payload = {**activity_payload, "addressCity": "Paris", "addressPostcode": "75007"}

    activity = client.post("/api/activities", json=payload).json()

    assert activity["addressCity"] == "Paris"
    assert activity["addressPostcode"] == "75007"
    assert activity["addressStreet"] is None


def test_accommodation_empty_image_is_accepted(client, accommodation_payload):
    response = client.post("/api/accommodations", json={**accommodation_payload, "image": ""})

    assert response.status_code == 201
    assert response.json()["image"] is None


def test_accommodation_malformed_image_is_rejected(client, accommodation_payload):
    response = client.post("/api/accommodations", json={**accommodation_payload, "image": "not-a-url"})

    assert response.status_code == 400
    assert list(response.json()["fieldErrors"]) == ["image"]


@pytest.mark.parametrize("field", ["name", "description", "category", "destinationId", "statusId", "priorityId"])
def test_activity_required_fields(client, activity_payload, field):
    payload = {k: v for k, v in activity_payload.items() if k != field}

    response = client.post("/api/activities", json=payload)

    assert response.status_code == 400
    assert response.json()["fieldErrors"] == {field: ["This field is required"]}
