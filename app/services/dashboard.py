"""
Dashboard views derived from already-fetched collections.

The selection functions are pure and work on anything with ``start_date``
and ``status_id`` attributes (ORM rows or API response models), so the
server stats endpoint and the Python client share them.
"""
from datetime import date
from typing import Iterable, List, Optional, Sequence

from sqlalchemy.orm import Session

from app.models.accommodation import Accommodation
from app.models.activity import Activity
from app.models.destination import Destination
from app.models.lookup import TravelStatus
from app.models.trip import Trip
from app.schemas.dashboard import DashboardStats

PLANNED_STATUS_LABEL = "planned"
RECENT_TRIPS_LIMIT = 3


def planned_status_id(statuses: Iterable) -> Optional[int]:
    """Id of the status labelled "planned" (case-insensitive), if any."""
    for status in statuses:
        if status.label.strip().lower() == PLANNED_STATUS_LABEL:
            return status.id
    return None


def upcoming_trips(trips: Iterable, planned_id: Optional[int], today: Optional[date] = None) -> List:
    today = today or date.today()
    if planned_id is None:
        return []
    return [trip for trip in trips if trip.start_date > today and trip.status_id == planned_id]


def next_upcoming_trip(trips: Iterable, planned_id: Optional[int], today: Optional[date] = None):
    """Earliest planned trip starting after ``today``; list order breaks ties."""
    candidates = upcoming_trips(trips, planned_id, today)
    return min(candidates, key=lambda trip: trip.start_date, default=None)


def recent_trips(trips: Sequence, limit: int = RECENT_TRIPS_LIMIT) -> List:
    # List order stands in for recency; the API lists trips by ascending id
    return list(trips[:limit])


def dashboard_stats(db: Session, today: Optional[date] = None) -> DashboardStats:
    statuses = db.query(TravelStatus).all()
    trips = db.query(Trip).all()

    return DashboardStats(
        upcoming_trips_count=len(upcoming_trips(trips, planned_status_id(statuses), today)),
        destinations_count=db.query(Destination).count(),
        activities_count=db.query(Activity).count(),
        accommodations_count=db.query(Accommodation).count(),
    )
