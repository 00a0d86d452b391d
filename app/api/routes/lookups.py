from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import List

from app.db.session import get_db
from app.schemas.lookup import LookupCreate, LookupResponse, LookupUpdate
from app.services.lookups import PriorityLevelService, TravelStatusService

statuses_router = APIRouter(prefix="/travel-statuses", tags=["Travel Statuses"])
priorities_router = APIRouter(prefix="/travel-priority-levels", tags=["Travel Priority Levels"])


@statuses_router.get("", response_model=List[LookupResponse])
def get_travel_statuses(db: Session = Depends(get_db)):
    """All statuses, for form select options."""
    return TravelStatusService(db).list()


@statuses_router.get("/{status_id}", response_model=LookupResponse)
def get_travel_status(status_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return TravelStatusService(db).get(status_id)


@statuses_router.post("", response_model=LookupResponse, status_code=status.HTTP_201_CREATED)
def create_travel_status(travel_status: LookupCreate, db: Session = Depends(get_db)):
    return TravelStatusService(db).create(travel_status)


@statuses_router.put("/{status_id}", response_model=LookupResponse)
def update_travel_status(
        travel_status: LookupUpdate,
        status_id: int = Path(..., gt=0),
        db: Session = Depends(get_db),
):
    return TravelStatusService(db).update(status_id, travel_status)


@statuses_router.delete("/{status_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_travel_status(status_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Delete a status; rejected with 409 while any row still uses it."""
    TravelStatusService(db).delete(status_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@priorities_router.get("", response_model=List[LookupResponse])
def get_priority_levels(db: Session = Depends(get_db)):
    """All priority levels, for form select options."""
    return PriorityLevelService(db).list()


@priorities_router.get("/{priority_id}", response_model=LookupResponse)
def get_priority_level(priority_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return PriorityLevelService(db).get(priority_id)


@priorities_router.post("", response_model=LookupResponse, status_code=status.HTTP_201_CREATED)
def create_priority_level(priority_level: LookupCreate, db: Session = Depends(get_db)):
    return PriorityLevelService(db).create(priority_level)


@priorities_router.put("/{priority_id}", response_model=LookupResponse)
def update_priority_level(
        priority_level: LookupUpdate,
        priority_id: int = Path(..., gt=0),
        db: Session = Depends(get_db),
):
    return PriorityLevelService(db).update(priority_id, priority_level)


@priorities_router.delete("/{priority_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_priority_level(priority_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Delete a priority level; rejected with 409 while any row still uses it."""
    PriorityLevelService(db).delete(priority_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
