"""
Dashboard selections and the stats endpoint
"""
from datetime import date
from types import SimpleNamespace

from app.services.dashboard import next_upcoming_trip, planned_status_id, recent_trips

TODAY = date(2030, 1, 10)
PLANNED = 2


def trip(trip_id, start, status_id=PLANNED):
    return SimpleNamespace(id=trip_id, start_date=start, status_id=status_id)


def test_planned_status_is_matched_by_label():
    statuses = [SimpleNamespace(id=1, label="Wishlist"), SimpleNamespace(id=7, label=" PLANNED ")]

    assert planned_status_id(statuses) == 7
    assert planned_status_id(statuses[:1]) is None


def test_next_upcoming_trip_is_earliest_future_planned():
    trips = [
        trip(1, date(2030, 3, 1)),
        trip(2, date(2030, 2, 1), status_id=5),  # earlier but not planned
        trip(3, date(2030, 1, 10)),  # starts today, not in the future
        trip(4, date(2030, 2, 15)),
        trip(5, date(2029, 12, 1)),
    ]

    assert next_upcoming_trip(trips, PLANNED, TODAY).id == 4


def test_next_upcoming_trip_without_candidates():
    assert next_upcoming_trip([trip(1, date(2029, 1, 1))], PLANNED, TODAY) is None
    assert next_upcoming_trip([trip(1, date(2031, 1, 1))], None, TODAY) is None


def test_recent_trips_keeps_list_order():
    trips = [trip(i, date(2030, 1, 1)) for i in (9, 3, 7, 1)]

    assert [t.id for t in recent_trips(trips)] == [9, 3, 7]
    assert recent_trips(trips[:2]) == trips[:2]


def test_stats_endpoint(client, destination, activity_payload, trip_payload):
    client.post("/api/activities", json=activity_payload)
    client.post("/api/trips", json=trip_payload)  # planned, 2030
    client.post("/api/trips", json={**trip_payload, "statusId": 5})
    client.post("/api/trips", json={**trip_payload, "startDate": "2001-01-01", "endDate": "2001-01-02"})

    response = client.get("/api/dashboard/stats")

    assert response.status_code == 200
    assert response.json() == {
        "upcomingTripsCount": 1,
        "destinationsCount": 1,
        "activitiesCount": 1,
        "accommodationsCount": 0,
    }
