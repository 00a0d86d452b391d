from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from app.schemas.common import CamelModel, OptionalImageUrl, RequiredText


class UserProfileFields(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    avatar: OptionalImageUrl = None


class UserCreate(UserProfileFields):
    username: RequiredText = Field(..., min_length=3)
    email: EmailStr
    password: str = Field(..., min_length=8)


class UserUpdate(UserProfileFields):
    email: EmailStr = None


class UserResponse(UserProfileFields):
    id: int
    username: str
    email: EmailStr
    created_at: datetime
    last_login: Optional[datetime] = None
    login_count: int = 0


class UserLogin(CamelModel):
    username: RequiredText
    password: RequiredText


class PasswordChange(CamelModel):
    current_password: RequiredText
    new_password: str = Field(..., min_length=8)


class Token(BaseModel):
    access_token: str
    token_type: str
    expires_at: datetime
    user_id: int


class PreferencesBase(CamelModel):
    theme: Literal["light", "dark"] = "light"
    language: str = "en"
    time_format: Literal["12h", "24h"] = "12h"

    email_notifications: bool = True
    push_notifications: bool = True
    trip_reminders: bool = True
    marketing_emails: bool = False

    show_profile: bool = True
    share_trips: bool = False
    allow_friend_requests: bool = True

    two_factor_enabled: bool = False
    receive_login_alerts: bool = True


class PreferencesUpdate(CamelModel):
    theme: Literal["light", "dark"] = None
    language: RequiredText = None
    time_format: Literal["12h", "24h"] = None

    email_notifications: bool = None
    push_notifications: bool = None
    trip_reminders: bool = None
    marketing_emails: bool = None

    show_profile: bool = None
    share_trips: bool = None
    allow_friend_requests: bool = None

    two_factor_enabled: bool = None
    receive_login_alerts: bool = None


class PreferencesResponse(PreferencesBase):
    user_id: int
