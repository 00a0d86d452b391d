from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.security import get_optional_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.activity import ActivityCreate, ActivityResponse, ActivityUpdate
from app.services.travel import ActivityService

router = APIRouter(prefix="/activities", tags=["Activities"])


@router.get("", response_model=List[ActivityResponse])
def get_activities(
        destination_id: Optional[int] = Query(None, alias="destinationId", gt=0),
        db: Session = Depends(get_db),
):
    """Get all activities, optionally only those of one destination."""
    return ActivityService(db).list(destination_id=destination_id)


@router.get("/{activity_id}", response_model=ActivityResponse)
def get_activity(activity_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Get a specific activity by ID."""
    return ActivityService(db).get(activity_id)


@router.post("", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
def create_activity(
        activity: ActivityCreate,
        db: Session = Depends(get_db),
        current_user: Optional[User] = Depends(get_optional_current_user),
):
    """Create an activity at an existing destination."""
    return ActivityService(db).create(activity, user_id=current_user.id if current_user else None)


@router.put("/{activity_id}", response_model=ActivityResponse)
def update_activity(
        activity_data: ActivityUpdate,
        activity_id: int = Path(..., gt=0),
        db: Session = Depends(get_db),
):
    """Partially update an activity."""
    return ActivityService(db).update(activity_id, activity_data)


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_activity(activity_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    ActivityService(db).delete(activity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
