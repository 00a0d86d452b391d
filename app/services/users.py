from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, DuplicateError, UnauthorizedError
from app.core.logging import get_logger
from app.core.security import (
    authenticate_user,
    get_password_hash,
    get_user_by_email,
    get_user_by_username,
    verify_password,
)
from app.models.user import User, UserPreferences
from app.schemas.user import PasswordChange, PreferencesUpdate, UserCreate, UserUpdate

logger = get_logger(__name__)


def _commit_user(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with another registration for the same username/email
        db.rollback()
        raise DuplicateError("Username or email already registered")


def register_user(db: Session, user_data: UserCreate) -> User:
    """Create a user; username and email must both be unused."""
    field_errors = {}
    if get_user_by_username(db, user_data.username):
        field_errors["username"] = ["Username already exists"]
    if get_user_by_email(db, user_data.email):
        field_errors["email"] = ["Email already exists"]
    if field_errors:
        raise DuplicateError("User already exists", field_errors=field_errors)

    values = user_data.model_dump(exclude={"password"})
    db_user = User(**values, password=get_password_hash(user_data.password))
    db.add(db_user)
    _commit_user(db)
    db.refresh(db_user)

    logger.info("Registered user", extra={"user_id": db_user.id})
    return db_user


def login_user(db: Session, username: str, password: str) -> User:
    """Check credentials and record the login (last_login, login_count)."""
    user = authenticate_user(db, username, password)
    if not user:
        logger.warning("Failed login", extra={"username": username})
        raise UnauthorizedError("Incorrect username or password")

    user.last_login = datetime.now(timezone.utc).replace(tzinfo=None)
    user.login_count = (user.login_count or 0) + 1
    db.commit()
    db.refresh(user)

    logger.info("User logged in", extra={"user_id": user.id, "login_count": user.login_count})
    return user


def update_profile(db: Session, user: User, user_update: UserUpdate) -> User:
    values = user_update.model_dump(exclude_unset=True)

    email = values.get("email")
    if email and email != user.email:
        other = get_user_by_email(db, email)
        if other and other.id != user.id:
            raise DuplicateError("Email already in use", field_errors={"email": ["Email already in use"]})

    for field, value in values.items():
        setattr(user, field, value)

    _commit_user(db)
    db.refresh(user)
    return user


def change_password(db: Session, user: User, data: PasswordChange) -> None:
    if not verify_password(data.current_password, user.password):
        raise BadRequestError(
            "Current password is incorrect",
            field_errors={"currentPassword": ["Current password is incorrect"]},
        )

    user.password = get_password_hash(data.new_password)
    db.commit()
    logger.info("Password changed", extra={"user_id": user.id})


def get_preferences(db: Session, user: User) -> UserPreferences:
    """Return the user's preferences, creating the default record on first use."""
    preferences = db.query(UserPreferences).filter(UserPreferences.user_id == user.id).first()
    if preferences is None:
        preferences = UserPreferences(user_id=user.id)
        db.add(preferences)
        db.commit()
        db.refresh(preferences)
    return preferences


def update_preferences(db: Session, user: User, data: PreferencesUpdate) -> UserPreferences:
    preferences = get_preferences(db, user)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(preferences, field, value)

    db.commit()
    db.refresh(preferences)

    logger.info("Updated preferences", extra={"user_id": user.id})
    return preferences
