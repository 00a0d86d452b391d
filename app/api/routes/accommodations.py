from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.security import get_optional_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.accommodation import AccommodationCreate, AccommodationResponse, AccommodationUpdate
from app.services.travel import AccommodationService

router = APIRouter(prefix="/accommodations", tags=["Accommodations"])


@router.get("", response_model=List[AccommodationResponse])
def get_accommodations(
        destination_id: Optional[int] = Query(None, alias="destinationId", gt=0),
        db: Session = Depends(get_db),
):
    """Get all accommodations, optionally only those of one destination."""
    return AccommodationService(db).list(destination_id=destination_id)


@router.get("/{accommodation_id}", response_model=AccommodationResponse)
def get_accommodation(accommodation_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return AccommodationService(db).get(accommodation_id)


@router.post("", response_model=AccommodationResponse, status_code=status.HTTP_201_CREATED)
def create_accommodation(
        accommodation: AccommodationCreate,
        db: Session = Depends(get_db),
        current_user: Optional[User] = Depends(get_optional_current_user),
):
    """Create an accommodation at an existing destination."""
    return AccommodationService(db).create(accommodation, user_id=current_user.id if current_user else None)


@router.put("/{accommodation_id}", response_model=AccommodationResponse)
def update_accommodation(
        accommodation_data: AccommodationUpdate,
        accommodation_id: int = Path(..., gt=0),
        db: Session = Depends(get_db),
):
    return AccommodationService(db).update(accommodation_id, accommodation_data)


@router.delete("/{accommodation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_accommodation(accommodation_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    AccommodationService(db).delete(accommodation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
