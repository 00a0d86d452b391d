from typing import List, Optional

from app.core.exceptions import DuplicateError, NotFoundError, ValidationFailedError
from app.core.logging import get_logger
from app.models.accommodation import Accommodation
from app.models.activity import Activity
from app.models.destination import Destination
from app.models.trip import Trip, TripDestination
from app.services.crud import STATUS_PRIORITY_REFERENCES, CRUDService

logger = get_logger(__name__)

DESTINATION_REFERENCE = {"destination_id": (Destination, "Destination")}


class DestinationService(CRUDService):
    model = Destination
    entity_name = "destination"


class _DestinationChildService(CRUDService):
    references = {**STATUS_PRIORITY_REFERENCES, **DESTINATION_REFERENCE}

    def list(self, destination_id: Optional[int] = None) -> List:
        query = self._query()
        if destination_id is not None:
            query = query.filter(self.model.destination_id == destination_id)
        return query.order_by(self.model.id).all()


class ActivityService(_DestinationChildService):
    model = Activity
    entity_name = "activity"


class AccommodationService(_DestinationChildService):
    model = Accommodation
    entity_name = "accommodation"


class TripService(CRUDService):
    """Trips plus their destination links."""

    model = Trip
    entity_name = "trip"

    def update(self, obj_id: int, data) -> Trip:
        # A partial update may move one end of the date range past the other
        trip = self.get(obj_id)
        fields = data.model_fields_set
        start_date = data.start_date if "start_date" in fields else trip.start_date
        end_date = data.end_date if "end_date" in fields else trip.end_date
        if end_date < start_date:
            raise ValidationFailedError(
                "Invalid trip data",
                field_errors={"endDate": ["End date cannot be before start date"]},
            )
        return super().update(obj_id, data)

    def list_destinations(self, trip_id: int) -> List[TripDestination]:
        self.get(trip_id)
        return (
            self.db.query(TripDestination)
            .filter(TripDestination.trip_id == trip_id)
            .order_by(TripDestination.id)
            .all()
        )

    def add_destination(self, trip_id: int, destination_id: int) -> TripDestination:
        trip = self.get(trip_id)
        destination = self.db.get(Destination, destination_id)
        if destination is None:
            raise NotFoundError(f"Destination with ID {destination_id} not found")

        existing = self.db.query(TripDestination).filter(
            TripDestination.trip_id == trip.id,
            TripDestination.destination_id == destination.id,
        ).first()
        if existing:
            raise DuplicateError(
                f"{destination.name} is already part of {trip.name}",
                field_errors={"destinationId": ["Destination already added to this trip"]},
            )

        link = TripDestination(trip_id=trip.id, destination_id=destination.id)
        self.db.add(link)
        self.commit()
        self.db.refresh(link)

        logger.info(
            "Added destination to trip",
            extra={"entity": "trip", "entity_id": trip.id, "destination_id": destination.id},
        )
        return link

    def remove_destination(self, trip_id: int, destination_id: int) -> None:
        link = self.db.query(TripDestination).filter(
            TripDestination.trip_id == trip_id,
            TripDestination.destination_id == destination_id,
        ).first()
        if link is None:
            raise NotFoundError("Trip destination not found")

        self.db.delete(link)
        self.commit()

        logger.info(
            "Removed destination from trip",
            extra={"entity": "trip", "entity_id": trip_id, "destination_id": destination_id},
        )
