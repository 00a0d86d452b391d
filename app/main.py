from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uuid
import time

from app.api import api_router
from app.api.routes import health
from app.core.config import settings
from app.core.error_handlers import register_error_handlers
from app.core.logging import request_id_var, setup_logging
from app.core.rate_limiter import add_rate_limit_headers
from app.db.init_db import init_db
from app.db.session import SessionLocal

# Setup structured logging
logger = setup_logging("app", settings.LOG_LEVEL)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
    Travel Planner API.

    ## Features

    * Plan trips and link the destinations they visit
    * Keep destinations with their activities and accommodations
    * Track every item with a travel status and a priority level
    * Dashboard stats for upcoming trips

    ## Authentication

    Anonymous requests may read and write travel data. Register and login
    to obtain a JWT bearer token; rows created with a token are owned by
    that user, and the profile and preferences routes require one.
    """,
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    token = request_id_var.set(request_id)
    request.state.request_id = request_id

    logger.info(
        "Request started",
        extra={
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
        },
    )

    start_time = time.time()
    try:
        response = await call_next(request)
        process_time = time.time() - start_time

        add_rate_limit_headers(request, response)
        response.headers["X-Request-ID"] = request_id

        # Security headers
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        logger.info(
            "Request completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(process_time * 1000),
            },
        )
        return response
    finally:
        request_id_var.reset(token)


# API routes live under the prefix; health checks stay at the root for probes
app.include_router(api_router, prefix=settings.API_PREFIX)
app.include_router(health.router)


@app.get("/")
async def root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME}"}


# Initialize database on startup
@app.on_event("startup")
def startup_event():
    """Create tables and seed lookup (and optionally sample) data."""
    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()
