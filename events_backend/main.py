"""FastAPI application entry point."""
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from events_backend.config import settings
from events_backend.database import Base, engine
from events_backend.errors import AuthenticationError, ServiceError

# Import routers
from events_backend.routers import attendance, auth, events, school, users

# Import all models so Base.metadata knows about them
from events_backend.models.user import User                # noqa: F401
from events_backend.models.event import Event              # noqa: F401
from events_backend.models.attendee import Attendee        # noqa: F401
from events_backend.models.school import Subject, Teacher  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Events Backend",
    description="Events, attendees and a school directory over REST",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(attendance.router, prefix="/api/me/events-attendance", tags=["Attendance"])
app.include_router(school.router, prefix="/api/school", tags=["School"])


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Translate service exceptions into HTTP responses."""
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("events_backend.main:app", host="0.0.0.0", port=8081, reload=True)
