from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
from typing import Optional, Tuple

from app.core.config import settings
from app.core.exceptions import UnauthorizedError
from app.db.session import get_db
from app.models.user import User

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# Bearer token; optional so anonymous requests still reach public routes
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/login", auto_error=False)


# Password functions
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


# User functions
def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
    """Return the user when the credentials match, otherwise None."""
    user = get_user_by_username(db, username)
    if not user:
        return None
    if not verify_password(password, user.password):
        return None
    return user


# Token functions
def create_access_token(data: dict, expires_delta: timedelta = None) -> Tuple[str, datetime]:
    """
    Create a JWT access token.

    Args:
        data: Claims to encode in the token
        expires_delta: Token lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Tuple of (encoded_jwt, expiration_datetime)
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt, expire


def _user_from_token(token: str, db: Session) -> User:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        user_id = payload.get("sub")
    except JWTError:
        raise UnauthorizedError("Invalid authentication credentials")

    if user_id is None:
        raise UnauthorizedError("Invalid authentication credentials")

    user = db.get(User, int(user_id))
    if user is None:
        raise UnauthorizedError("User not found")

    return user


# Dependency for routes that require authentication
def get_current_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    """
    Get the current user from the bearer token.

    Raises:
        UnauthorizedError: If the token is missing, invalid or the user is gone
    """
    if not token:
        raise UnauthorizedError("Not authenticated")
    return _user_from_token(token, db)


# Routes that work with or without a logged-in user
def get_optional_current_user(
        token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Get the current user if a valid token was sent, otherwise None.
    Used to stamp ownership on rows created by logged-in users.
    """
    if not token:
        return None
    try:
        return _user_from_token(token, db)
    except UnauthorizedError:
        return None
