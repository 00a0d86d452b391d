from sqlalchemy import Column, Integer, String, Text

from app.db.session import Base


class TravelStatus(Base):
    """Lifecycle state shared by trips, destinations, activities and accommodations."""

    __tablename__ = "travel_statuses"

    id = Column(Integer, primary_key=True, index=True)
    label = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    colour = Column(String, nullable=True)


class TravelPriorityLevel(Base):
    """Priority ranking shared by trips, destinations, activities and accommodations."""

    __tablename__ = "travel_priority_levels"

    id = Column(Integer, primary_key=True, index=True)
    label = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    colour = Column(String, nullable=True)
