from typing import List, Optional

from app.schemas.common import CamelModel
from app.schemas.trip import TripResponse


class DashboardStats(CamelModel):
    upcoming_trips_count: int = 0
    destinations_count: int = 0
    activities_count: int = 0
    accommodations_count: int = 0


class DashboardOverview(CamelModel):
    """What the dashboard page shows, assembled client-side."""

    stats: DashboardStats
    next_upcoming_trip: Optional[TripResponse] = None
    recent_trips: List[TripResponse] = []
