from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.mixins import OwnerMixin, StatusPriorityMixin


class Destination(StatusPriorityMixin, OwnerMixin, Base):
    __tablename__ = "destinations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    country = Column(String, nullable=False)
    region = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="", server_default="")
    image = Column(String, nullable=False)

    # Children go with the destination (ON DELETE CASCADE in the database too)
    activities = relationship(
        "Activity", back_populates="destination", cascade="all, delete-orphan", passive_deletes=True
    )
    accommodations = relationship(
        "Accommodation", back_populates="destination", cascade="all, delete-orphan", passive_deletes=True
    )
    trip_links = relationship(
        "TripDestination", back_populates="destination", cascade="all, delete-orphan", passive_deletes=True
    )
