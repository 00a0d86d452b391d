from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.mixins import AddressMixin, OwnerMixin, StatusPriorityMixin


class Activity(StatusPriorityMixin, OwnerMixin, AddressMixin, Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False)
    destination_id = Column(
        Integer, ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image = Column(String, nullable=True)

    destination = relationship("Destination", back_populates="activities")
