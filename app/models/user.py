from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    avatar = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    last_login = Column(DateTime, nullable=True)
    login_count = Column(Integer, nullable=False, default=0, server_default="0")

    # Owned rows survive the user; the database clears user_id
    trips = relationship("Trip", back_populates="user", passive_deletes=True)
    preferences = relationship(
        "UserPreferences",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserPreferences(Base):
    """Per-user application settings (appearance, notifications, privacy, security)."""

    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    theme = Column(String, nullable=False, default="light")
    language = Column(String, nullable=False, default="en")
    time_format = Column(String, nullable=False, default="12h")

    email_notifications = Column(Boolean, nullable=False, default=True)
    push_notifications = Column(Boolean, nullable=False, default=True)
    trip_reminders = Column(Boolean, nullable=False, default=True)
    marketing_emails = Column(Boolean, nullable=False, default=False)

    show_profile = Column(Boolean, nullable=False, default=True)
    share_trips = Column(Boolean, nullable=False, default=False)
    allow_friend_requests = Column(Boolean, nullable=False, default=True)

    two_factor_enabled = Column(Boolean, nullable=False, default=False)
    receive_login_alerts = Column(Boolean, nullable=False, default=True)

    user = relationship("User", back_populates="preferences")
