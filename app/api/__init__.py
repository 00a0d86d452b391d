from fastapi import APIRouter, Depends

from app.api.routes import accommodations, activities, auth, dashboard, destinations, lookups, trips
from app.core.rate_limiter import api_limiter

# Everything under the API prefix shares the general rate limit
api_router = APIRouter(dependencies=[Depends(api_limiter)])

api_router.include_router(auth.router)
api_router.include_router(lookups.statuses_router)
api_router.include_router(lookups.priorities_router)
api_router.include_router(destinations.router)
api_router.include_router(activities.router)
api_router.include_router(accommodations.router)
api_router.include_router(trips.router)
api_router.include_router(dashboard.router)
