from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.rate_limiter import auth_limiter
from app.core.security import create_access_token, get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import (
    PasswordChange,
    PreferencesResponse,
    PreferencesUpdate,
    Token,
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
)
from app.services import users

router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(auth_limiter)],
)
def register_user(user_data: UserCreate, db: Session = Depends(get_db)):
    return users.register_user(db, user_data)


@router.post("/login", response_model=Token, dependencies=[Depends(auth_limiter)])
def login_for_access_token(credentials: UserLogin, db: Session = Depends(get_db)):
    """Exchange username/password for a bearer token; counts the login."""
    user = users.login_user(db, credentials.username, credentials.password)

    access_token, expires_at = create_access_token(data={"sub": str(user.id), "username": user.username})

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_at": expires_at,
        "user_id": user.id,
    }


@router.get("/user", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/user", response_model=UserResponse)
def update_current_user(
        user_update: UserUpdate,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
):
    return users.update_profile(db, current_user, user_update)


@router.post("/user/change-password", status_code=status.HTTP_200_OK)
def change_password(
        data: PasswordChange,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
):
    users.change_password(db, current_user, data)
    return {"message": "Password updated successfully"}


@router.get("/user/preferences", response_model=PreferencesResponse)
def read_preferences(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return users.get_preferences(db, current_user)


@router.put("/user/preferences", response_model=PreferencesResponse)
def update_preferences(
        data: PreferencesUpdate,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
):
    return users.update_preferences(db, current_user, data)
