import asyncio
from datetime import date
from typing import Any, Optional

import httpx

from app.client.cache import QueryCache
from app.client.errors import ApiError, error_from_response
from app.client.resources import (
    AccommodationsClient,
    ActivitiesClient,
    DestinationsClient,
    PriorityLevelsClient,
    TravelStatusesClient,
    TripsClient,
    validate_input,
)
from app.core.config import settings
from app.core.logging import get_logger
from app.schemas.common import to_payload
from app.schemas.dashboard import DashboardOverview, DashboardStats
from app.schemas.user import PreferencesResponse, PreferencesUpdate, Token, UserResponse
from app.services.dashboard import next_upcoming_trip, planned_status_id, recent_trips

logger = get_logger(__name__)


class TravelClient:
    """
    Async client for the Travel Planner API.

    Usage:
        async with TravelClient() as client:
            trips = await client.trips.list()
    """

    def __init__(
            self,
            base_url: Optional[str] = None,
            token: Optional[str] = None,
            timeout: Optional[float] = None,
            transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._http = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.CLIENT_TIMEOUT_SECONDS,
            headers=headers,
            transport=transport,
        )
        self.cache = QueryCache()

        self.destinations = DestinationsClient(self)
        self.activities = ActivitiesClient(self)
        self.accommodations = AccommodationsClient(self)
        self.trips = TripsClient(self)
        self.travel_statuses = TravelStatusesClient(self)
        self.priority_levels = PriorityLevelsClient(self)

    async def __aenter__(self) -> "TravelClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(self, method: str, url: str, json: Any = None, params: Optional[dict] = None) -> Any:
        """
        Send one request and return the decoded JSON body (None when empty).

        Raises:
            ApiError: On network failure (status 0) or a non-2xx response
            ServerValidationError: On a 4xx response carrying field errors
        """
        try:
            response = await self._http.request(method, url, json=json, params=params)
        except httpx.RequestError as e:
            logger.warning("Request failed", extra={"method": method, "url": url, "error": str(e)})
            raise ApiError(0, str(e) or e.__class__.__name__)

        if response.is_error:
            error = error_from_response(response)
            logger.info(
                "API error response",
                extra={"method": method, "url": url, "status_code": response.status_code},
            )
            raise error

        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        return response.json()

    async def login(self, username: str, password: str) -> Token:
        """Log in and send the returned bearer token on every later request."""
        data = await self.request("POST", "/api/login", json={"username": username, "password": password})
        token = Token.model_validate(data)
        self._http.headers["Authorization"] = f"Bearer {token.access_token}"
        return token

    async def dashboard_stats(self) -> DashboardStats:
        return DashboardStats.model_validate(await self.request("GET", "/api/dashboard/stats"))

    async def dashboard(self, today: Optional[date] = None) -> DashboardOverview:
        """Fetch stats, trips and statuses concurrently and derive the dashboard views."""
        stats, trips, statuses = await asyncio.gather(
            self.dashboard_stats(),
            self.trips.list(),
            self.travel_statuses.list(),
        )

        return DashboardOverview(
            stats=stats,
            next_upcoming_trip=next_upcoming_trip(trips, planned_status_id(statuses), today),
            recent_trips=recent_trips(trips),
        )

    async def current_user(self) -> UserResponse:
        return UserResponse.model_validate(await self.request("GET", "/api/user"))

    async def preferences(self) -> PreferencesResponse:
        return PreferencesResponse.model_validate(await self.request("GET", "/api/user/preferences"))

    async def update_preferences(self, data) -> PreferencesResponse:
        model = validate_input(PreferencesUpdate, data)
        updated = await self.request("PUT", "/api/user/preferences", json=to_payload(model, partial=True))
        return PreferencesResponse.model_validate(updated)
