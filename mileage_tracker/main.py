# mileage_tracker/main.py
"""
FastAPI application entry point.
Includes request logging middleware, error handlers that produce the
{success, data?, error?} envelope, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from mileage_tracker.routers import vehicles, supervisors, mileage_entries, reports, notifications, health
from mileage_tracker.database import create_tables
from mileage_tracker.config import settings
from mileage_tracker.exceptions import MileageTrackerError
from mileage_tracker.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Security Vehicle Mileage Tracker API",
    description="Shift mileage logging, vehicle/supervisor rosters and mileage reports.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (the PWA is served from its own origin) ────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


# ── Domain Errors (validation / conflict / not found) ────────────────────────
@app.exception_handler(MileageTrackerError)
async def domain_exception_handler(request: Request, exc: MileageTrackerError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return _error(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path"))
    message = f"{field}: {first.get('msg')}" if field else str(first.get("msg", "Invalid request"))
    logger.info(f"{request.method} {request.url.path} invalid input: {message}")
    return _error(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail))


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(vehicles.router,        prefix="/api", tags=["🚓 Vehicles"])
app.include_router(supervisors.router,     prefix="/api", tags=["👮 Supervisors"])
app.include_router(mileage_entries.router, prefix="/api", tags=["📝 Mileage Entries"])
app.include_router(reports.router,         prefix="/api", tags=["📊 Reports"])
app.include_router(notifications.router,   prefix="/api", tags=["🔔 Notifications"])
app.include_router(health.router,          prefix="/api", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Mileage Tracker starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    logger.info(f"🕔 Shifts: first from {settings.FIRST_SHIFT_START_HOUR}:00, "
                f"second from {settings.SECOND_SHIFT_START_HOUR}:00")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Mileage Tracker shutting down...")
