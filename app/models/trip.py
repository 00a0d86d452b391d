from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.mixins import OwnerMixin, StatusPriorityMixin


class Trip(StatusPriorityMixin, OwnerMixin, Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="", server_default="")
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    image = Column(String, nullable=True)

    destination_links = relationship(
        "TripDestination", back_populates="trip", cascade="all, delete-orphan", passive_deletes=True
    )
    user = relationship("User", back_populates="trips")


class TripDestination(Base):
    """Link row for the many-to-many Trip <-> Destination relationship."""

    __tablename__ = "trip_destinations"
    __table_args__ = (
        UniqueConstraint("trip_id", "destination_id", name="trip_destinations_trip_destination_unique"),
    )

    id = Column(Integer, primary_key=True, index=True)
    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    destination_id = Column(
        Integer, ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False, index=True
    )

    trip = relationship("Trip", back_populates="destination_links")
    destination = relationship("Destination", back_populates="trip_links")
