from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.mixins import AddressMixin, OwnerMixin, StatusPriorityMixin


class Accommodation(StatusPriorityMixin, OwnerMixin, AddressMixin, Base):
    __tablename__ = "accommodations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)  # Hotel, Resort, Hostel, Apartment, ...
    destination_id = Column(
        Integer, ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image = Column(String, nullable=True)
    description = Column(Text, nullable=False, default="", server_default="")
    notes = Column(Text, nullable=True)

    destination = relationship("Destination", back_populates="accommodations")
