"""
Per-entity access to the travel API with a shared query cache.

Reads are cached under tuple keys rooted at the collection path, so a
write to one entity type only ever invalidates keys under its own path.
Input is checked against the same pydantic schemas the server uses, and
ids are checked before any request is built.
"""
from typing import TYPE_CHECKING, Any, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from app.client.cache import QueryKey
from app.client.errors import ClientValidationError, InvalidIdentifierError
from app.core.logging import get_logger
from app.schemas.accommodation import AccommodationCreate, AccommodationResponse, AccommodationUpdate
from app.schemas.activity import ActivityCreate, ActivityResponse, ActivityUpdate
from app.schemas.common import PayloadValidationError, is_valid_id, to_payload, validate_payload
from app.schemas.destination import DestinationCreate, DestinationResponse, DestinationUpdate
from app.schemas.lookup import LookupResponse
from app.schemas.trip import (
    TripCreate,
    TripDestinationCreate,
    TripDestinationResponse,
    TripResponse,
    TripUpdate,
)

if TYPE_CHECKING:
    from app.client.api import TravelClient

logger = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)
Payload = Union[BaseModel, dict]


def coerce_id(value: Any) -> Optional[int]:
    """Positive int for ``value`` (ints or digit strings), else None."""
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    return value if is_valid_id(value) else None


def require_id(value: Any) -> int:
    obj_id = coerce_id(value)
    if obj_id is None:
        raise InvalidIdentifierError(value)
    return obj_id


def validate_input(schema: Type[BaseModel], data: Payload) -> BaseModel:
    try:
        return validate_payload(schema, data)
    except PayloadValidationError as e:
        raise ClientValidationError(e.field_errors, e.message)


class ReadOnlyResourceClient(Generic[ResponseT]):
    """``list`` and ``get`` for one collection path."""

    path: str
    response_schema: Type[ResponseT]

    def __init__(self, api: "TravelClient"):
        self.api = api
        self.cache = api.cache

    def list_key(self) -> QueryKey:
        return (self.path,)

    def detail_key(self, obj_id: int) -> QueryKey:
        return (self.path, obj_id)

    def query_enabled(self, obj_id: Any) -> bool:
        """Whether ``get(obj_id)`` would reach the network at all."""
        return coerce_id(obj_id) is not None

    async def _fetch(self, key: QueryKey, url: str, schema: Type[BaseModel], many: bool, params=None):
        if key in self.cache:
            return self.cache.get(key)

        data = await self.api.request("GET", url, params=params)
        if many:
            result = [schema.model_validate(item) for item in data]
        else:
            result = schema.model_validate(data)

        self.cache.set(key, result)
        logger.debug("Fetched %s", url, extra={"entity": self.path})
        return result

    async def list(self) -> List[ResponseT]:
        return await self._fetch(self.list_key(), self.path, self.response_schema, many=True)

    async def get(self, obj_id: Any) -> ResponseT:
        obj_id = require_id(obj_id)
        return await self._fetch(
            self.detail_key(obj_id), f"{self.path}/{obj_id}", self.response_schema, many=False
        )


class ResourceClient(ReadOnlyResourceClient[ResponseT]):
    """Full CRUD for one entity collection."""

    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]

    def invalidate_lists(self) -> None:
        self.cache.invalidate(self.list_key())

    async def create(self, data: Payload) -> ResponseT:
        model = validate_input(self.create_schema, data)
        created = await self.api.request("POST", self.path, json=to_payload(model))

        self.invalidate_lists()
        return self.response_schema.model_validate(created)

    async def update(self, obj_id: Any, data: Payload) -> ResponseT:
        obj_id = require_id(obj_id)
        model = validate_input(self.update_schema, data)
        updated = await self.api.request("PUT", f"{self.path}/{obj_id}", json=to_payload(model, partial=True))

        self.invalidate_lists()
        self.cache.invalidate(self.detail_key(obj_id))
        return self.response_schema.model_validate(updated)

    async def delete(self, obj_id: Any) -> None:
        obj_id = require_id(obj_id)
        await self.api.request("DELETE", f"{self.path}/{obj_id}")

        self.invalidate_lists()
        self.cache.remove(self.detail_key(obj_id))


class _DestinationChildClient(ResourceClient[ResponseT]):
    """Activities and accommodations can also be listed per destination."""

    def destination_key(self, destination_id: int) -> QueryKey:
        return (self.path, "destination", destination_id)

    def invalidate_lists(self) -> None:
        super().invalidate_lists()
        self.cache.invalidate((self.path, "destination"), exact=False)

    async def list_for_destination(self, destination_id: Any) -> List[ResponseT]:
        destination_id = require_id(destination_id)
        return await self._fetch(
            self.destination_key(destination_id),
            self.path,
            self.response_schema,
            many=True,
            params={"destinationId": destination_id},
        )


class DestinationsClient(ResourceClient[DestinationResponse]):
    path = "/api/destinations"
    response_schema = DestinationResponse
    create_schema = DestinationCreate
    update_schema = DestinationUpdate


class ActivitiesClient(_DestinationChildClient[ActivityResponse]):
    path = "/api/activities"
    response_schema = ActivityResponse
    create_schema = ActivityCreate
    update_schema = ActivityUpdate


class AccommodationsClient(_DestinationChildClient[AccommodationResponse]):
    path = "/api/accommodations"
    response_schema = AccommodationResponse
    create_schema = AccommodationCreate
    update_schema = AccommodationUpdate


class TripsClient(ResourceClient[TripResponse]):
    path = "/api/trips"
    response_schema = TripResponse
    create_schema = TripCreate
    update_schema = TripUpdate

    def destinations_key(self, trip_id: int) -> QueryKey:
        return (self.path, trip_id, "destinations")

    async def delete(self, obj_id: Any) -> None:
        await super().delete(obj_id)
        self.cache.remove(self.destinations_key(coerce_id(obj_id)))

    async def destinations(self, trip_id: Any) -> List[TripDestinationResponse]:
        """Destination links of one trip."""
        trip_id = require_id(trip_id)
        return await self._fetch(
            self.destinations_key(trip_id),
            f"{self.path}/{trip_id}/destinations",
            TripDestinationResponse,
            many=True,
        )

    async def add_destination(self, trip_id: Any, destination_id: Any) -> TripDestinationResponse:
        trip_id = require_id(trip_id)
        model = validate_input(TripDestinationCreate, {"destinationId": destination_id})
        link = await self.api.request("POST", f"{self.path}/{trip_id}/destinations", json=to_payload(model))

        self.cache.invalidate(self.destinations_key(trip_id))
        return TripDestinationResponse.model_validate(link)

    async def remove_destination(self, trip_id: Any, destination_id: Any) -> None:
        trip_id = require_id(trip_id)
        destination_id = require_id(destination_id)
        await self.api.request("DELETE", f"{self.path}/{trip_id}/destinations/{destination_id}")

        self.cache.invalidate(self.destinations_key(trip_id))


class TravelStatusesClient(ReadOnlyResourceClient[LookupResponse]):
    path = "/api/travel-statuses"
    response_schema = LookupResponse


class PriorityLevelsClient(ReadOnlyResourceClient[LookupResponse]):
    path = "/api/travel-priority-levels"
    response_schema = LookupResponse
