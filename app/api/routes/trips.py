from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.security import get_optional_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.trip import (
    TripCreate,
    TripDestinationCreate,
    TripDestinationResponse,
    TripResponse,
    TripUpdate,
)
from app.services.travel import TripService

router = APIRouter(prefix="/trips", tags=["Trips"])


@router.get("", response_model=List[TripResponse])
def get_trips(db: Session = Depends(get_db)):
    """Get all trips in creation order."""
    return TripService(db).list()


@router.get("/{trip_id}", response_model=TripResponse)
def get_trip(trip_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return TripService(db).get(trip_id)


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
def create_trip(
        trip: TripCreate,
        db: Session = Depends(get_db),
        current_user: Optional[User] = Depends(get_optional_current_user),
):
    """Create a trip, owned by the caller when logged in."""
    return TripService(db).create(trip, user_id=current_user.id if current_user else None)


@router.put("/{trip_id}", response_model=TripResponse)
def update_trip(
        trip_data: TripUpdate,
        trip_id: int = Path(..., gt=0),
        db: Session = Depends(get_db),
):
    """Partially update a trip; the resulting date range must stay ordered."""
    return TripService(db).update(trip_id, trip_data)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trip(trip_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Delete a trip and its destination links (the destinations remain)."""
    TripService(db).delete(trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{trip_id}/destinations", response_model=List[TripDestinationResponse])
def get_trip_destinations(trip_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return TripService(db).list_destinations(trip_id)


@router.post(
    "/{trip_id}/destinations",
    response_model=TripDestinationResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_trip_destination(
        link: TripDestinationCreate,
        trip_id: int = Path(..., gt=0),
        db: Session = Depends(get_db),
):
    """Link an existing destination to a trip."""
    return TripService(db).add_destination(trip_id, link.destination_id)


@router.delete("/{trip_id}/destinations/{destination_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_trip_destination(
        trip_id: int = Path(..., gt=0),
        destination_id: int = Path(..., gt=0),
        db: Session = Depends(get_db),
):
    TripService(db).remove_destination(trip_id, destination_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
