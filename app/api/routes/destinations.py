from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.security import get_optional_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.destination import DestinationCreate, DestinationResponse, DestinationUpdate
from app.services.travel import DestinationService

router = APIRouter(prefix="/destinations", tags=["Destinations"])


@router.get("", response_model=List[DestinationResponse])
def get_destinations(db: Session = Depends(get_db)):
    """Get all destinations."""
    return DestinationService(db).list()


@router.get("/{destination_id}", response_model=DestinationResponse)
def get_destination(destination_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Get a specific destination by ID."""
    return DestinationService(db).get(destination_id)


@router.post("", response_model=DestinationResponse, status_code=status.HTTP_201_CREATED)
def create_destination(
        destination: DestinationCreate,
        db: Session = Depends(get_db),
        current_user: Optional[User] = Depends(get_optional_current_user),
):
    """Create a destination, owned by the caller when logged in."""
    return DestinationService(db).create(destination, user_id=current_user.id if current_user else None)


@router.put("/{destination_id}", response_model=DestinationResponse)
def update_destination(
        destination_data: DestinationUpdate,
        destination_id: int = Path(..., gt=0),
        db: Session = Depends(get_db),
):
    """Update the fields present in the body; the rest stay unchanged."""
    return DestinationService(db).update(destination_id, destination_data)


@router.delete("/{destination_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_destination(destination_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Delete a destination with its activities, accommodations and trip links."""
    DestinationService(db).delete(destination_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
