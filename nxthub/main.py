"""
NxtHub Campaign Desk - FastAPI Application
Main entry point with all routes configured.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nxthub import __version__
from nxthub.config import settings
from nxthub.core.exceptions import NxtHubException
from nxthub.database import get_store, init_db
from nxthub.repositories.record_store import RecordStore
from nxthub.schemas.common import HealthResponse

# Import all API routers
from nxthub.api import auth, campaigns, dashboard, influencers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    if settings.STORAGE_BACKEND == "sql":
        await init_db()
    store = app.dependency_overrides.get(get_store, get_store)()
    await RecordStore(store).initialize()
    yield
    # Shutdown


app = FastAPI(
    title="NxtHub Campaign Desk API",
    description="Influencer campaign tracking across departments",
    version=__version__,
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NxtHubException)
async def nxthub_exception_handler(request: Request, exc: NxtHubException):
    """Turn core failures into user-visible notices."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include all routers
app.include_router(auth.router)
app.include_router(dashboard.router)
app.include_router(campaigns.router)
app.include_router(influencers.router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "message": f"{settings.APP_NAME} API is running",
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Detailed health check."""
    return HealthResponse(version=__version__)
