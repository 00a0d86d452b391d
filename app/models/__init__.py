# Import all models here for easy access and to ensure they're loaded before Base.metadata.create_all()

from app.models.lookup import TravelStatus, TravelPriorityLevel
from app.models.user import User, UserPreferences
from app.models.destination import Destination
from app.models.activity import Activity
from app.models.accommodation import Accommodation
from app.models.trip import Trip, TripDestination
