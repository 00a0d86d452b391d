from datetime import date, timedelta
from typing import Dict, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.logging import get_logger
from app.db.session import Base, engine
from app.models import (
    Accommodation,
    Activity,
    Destination,
    TravelPriorityLevel,
    TravelStatus,
    Trip,
    TripDestination,
)

logger = get_logger(__name__)

DEFAULT_STATUSES = [
    ("Wishlist", "Somewhere you would like to go one day", "#8b5cf6"),
    ("Planned", "Dates or bookings are being arranged", "#3b82f6"),
    ("Booked", "Travel and stays are confirmed", "#0ea5e9"),
    ("Visited", "Already been there", "#22c55e"),
    ("Completed", "The trip is over", "#64748b"),
    ("Cancelled", "No longer happening", "#ef4444"),
]

DEFAULT_PRIORITY_LEVELS = [
    ("Low", "Nice to have", "#94a3b8"),
    ("Medium", "Worth fitting in", "#f59e0b"),
    ("High", "Must do", "#dc2626"),
]


def create_tables(bind: Optional[Engine] = None):
    """Create database tables."""
    Base.metadata.create_all(bind=bind or engine)


def initialize_lookups(db: Session):
    """Insert the default statuses and priority levels that are missing."""
    for model, rows in ((TravelStatus, DEFAULT_STATUSES), (TravelPriorityLevel, DEFAULT_PRIORITY_LEVELS)):
        existing = {label for (label,) in db.query(model.label).all()}
        for label, description, colour in rows:
            if label not in existing:
                db.add(model(label=label, description=description, colour=colour))
    db.commit()


def _ids_by_label(db: Session, model) -> Dict[str, int]:
    return {row.label.lower(): row.id for row in db.query(model).all()}


def initialize_sample_data(db: Session, today: Optional[date] = None):
    """Seed a small travel catalogue if no destinations exist yet."""
    if db.query(Destination).count() > 0:
        return

    today = today or date.today()
    status = _ids_by_label(db, TravelStatus)
    priority = _ids_by_label(db, TravelPriorityLevel)
    medium = priority["medium"]

    def destination(name, country, region, image, status_label):
        return Destination(
            name=name,
            country=country,
            region=region,
            image=f"https://images.unsplash.com/{image}",
            status_id=status[status_label],
            priority_id=medium,
        )

    paris = destination("Paris", "France", "Europe", "photo-1502602898657-3e91760cbb34", "visited")
    tokyo = destination("Tokyo", "Japan", "Asia", "photo-1536098561742-ca998e48cbcc", "planned")
    sydney = destination("Sydney", "Australia", "Oceania", "photo-1506973035872-a4ec16b8e8d9", "wishlist")
    venice = destination("Venice", "Italy", "Europe", "photo-1523906834658-6e24ef2386f9", "visited")
    santorini = destination("Santorini", "Greece", "Europe", "photo-1570077188670-e3a8d69ac5ff", "wishlist")
    machu_picchu = destination(
        "Machu Picchu", "Peru", "South America", "photo-1526392060635-9d6019884377", "planned"
    )
    db.add_all([paris, tokyo, sydney, venice, santorini, machu_picchu])
    db.flush()

    wishlist = status["wishlist"]
    db.add_all([
        Activity(name="Eiffel Tower Visit", description="Visit the iconic Eiffel Tower", category="Sightseeing",
                 destination_id=paris.id, status_id=wishlist, priority_id=medium,
                 image="https://images.unsplash.com/photo-1543349689-9a4d426bee8e"),
        Activity(name="Louvre Museum", description="Explore art at the Louvre", category="Culture",
                 destination_id=paris.id, status_id=wishlist, priority_id=medium,
                 image="https://images.unsplash.com/photo-1565783795132-13a333cdcd75"),
        Activity(name="Tokyo Skytree", description="Visit one of the tallest towers in the world",
                 category="Sightseeing", destination_id=tokyo.id, status_id=wishlist, priority_id=medium,
                 image="https://images.unsplash.com/photo-1536984456083-d957495fb197"),
        Activity(name="Sydney Opera House Tour", description="Tour the famous Sydney Opera House",
                 category="Culture", destination_id=sydney.id, status_id=wishlist, priority_id=medium,
                 image="https://images.unsplash.com/photo-1510162548618-d50a4c4c8d18"),
    ])

    db.add_all([
        Accommodation(name="Hotel de Paris", type="Hotel", destination_id=paris.id,
                      status_id=wishlist, priority_id=medium,
                      image="https://images.unsplash.com/photo-1566073771259-6a8506099945"),
        Accommodation(name="Tokyo Bay Resort", type="Resort", destination_id=tokyo.id,
                      status_id=wishlist, priority_id=medium,
                      image="https://images.unsplash.com/photo-1520250497591-112f2f40a3f4"),
        Accommodation(name="Sydney Harbor View", type="Apartment", destination_id=sydney.id,
                      status_id=wishlist, priority_id=medium,
                      image="https://images.unsplash.com/photo-1522708323590-d24dbb6b0267"),
        Accommodation(name="Venice Canal House", type="Guesthouse", destination_id=venice.id,
                      status_id=wishlist, priority_id=medium,
                      image="https://images.unsplash.com/photo-1516455590571-18256e5bb9ff"),
    ])

    next_month = today + timedelta(days=30)
    last_month = today - timedelta(days=30)
    two_months_ago = today - timedelta(days=60)
    trips = [
        (Trip(name="Japan Adventure", start_date=next_month, end_date=next_month + timedelta(days=14),
              status_id=status["planned"], priority_id=priority["high"]), tokyo),
        (Trip(name="Bali Getaway", start_date=two_months_ago, end_date=two_months_ago + timedelta(days=10),
              status_id=status["completed"], priority_id=medium), paris),
        (Trip(name="Swiss Alps Adventure", start_date=last_month, end_date=last_month + timedelta(days=8),
              status_id=status["completed"], priority_id=medium), venice),
        (Trip(name="New York City Trip", start_date=last_month - timedelta(days=30),
              end_date=last_month - timedelta(days=24),
              status_id=status["completed"], priority_id=priority["low"]), sydney),
    ]
    db.add_all([trip for trip, _ in trips])
    db.flush()
    db.add_all([TripDestination(trip_id=trip.id, destination_id=dest.id) for trip, dest in trips])

    db.commit()
    logger.info("Seeded sample travel data", extra={"destinations": 6, "trips": len(trips)})


def init_db(db: Session, bind: Optional[Engine] = None):
    """Initialize database (create tables, lookups and optional sample data)."""
    create_tables(bind)
    initialize_lookups(db)
    if settings.SEED_SAMPLE_DATA:
        initialize_sample_data(db)
