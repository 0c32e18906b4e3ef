"""FastAPI application entry point."""
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sosrelay.config import settings
from sosrelay.database import Base, engine
from sosrelay.errors import InternalError, field_error

# Import routers
from sosrelay.routers import emergency_requests, emergency_types, positioning, users

# Import all models so Base.metadata knows about them
from sosrelay.models.emergency_request import EmergencyRequest  # noqa: F401
from sosrelay.models.user import User                            # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SOS Relay",
    description="Emergency assistance intake with a typed request lifecycle and beacon relay",
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
app.include_router(emergency_requests.router, prefix="/api/emergency-requests", tags=["EmergencyRequests"])
app.include_router(emergency_types.router, prefix="/api/emergency-types", tags=["EmergencyTypes"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(positioning.router, prefix="/api/galileo-sar", tags=["Positioning"])


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed ids and bodies are a 400, listed like any other validation failure."""
    errors = [field_error(tuple(err["loc"]), err["msg"]) for err in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": "Invalid request", "errors": errors}},
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": InternalError().detail},
    )


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.STORAGE_BACKEND == "sql" and settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
