"""
Userboard Backend - FastAPI Application

User accounts, login recording and aggregate feeds for the usage dashboard.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from userboard import __version__
from userboard.config import get_settings
from userboard.core.exceptions import StorageUnavailable, UserboardError
from userboard.database.store import DocumentStore
from userboard.routers import auth, dashboard, debug, health, users

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("userboard")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the document store (created on first access)

    Shutdown:
    - Nothing to release; every write is already durable
    """
    logger.info("Starting up Userboard Backend...")

    store = DocumentStore(get_settings().data_file)
    app.state.store = store
    try:
        store.load()
        logger.info(f"Document store ready at {store.path}")
    except StorageUnavailable as e:
        # Keep serving; requests report the storage error themselves
        logger.warning(f"Document store unavailable at startup: {e.message}")

    yield

    logger.info("Shutting down Userboard Backend...")


app = FastAPI(
    title=settings.app_name,
    description="""
## Usage Dashboard API

Record keeping behind the usage dashboard.

### Features
- **Users**: Create, list, update and delete accounts (unique username and email)
- **Login**: Plain username/password check; each success is recorded
- **Dashboard**: Summary counters, usage series, activity, anomalies and system status

All state lives in a single JSON document on disk.
    """,
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== Error Handlers ====================


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": code, "detail": message},
    )


@app.exception_handler(UserboardError)
async def userboard_error_handler(request: Request, exc: UserboardError):
    """Map domain errors to their HTTP status."""
    if isinstance(exc, StorageUnavailable):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error_response(exc.status_code, exc.code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 with a readable message."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{field}: {error.get('msg')}" if field else error.get("msg"))
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "validation_error",
        "; ".join(problems) or "Invalid request",
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Anything else still answers with a structured 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "Internal server error",
    )


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(dashboard.router)
app.include_router(debug.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
