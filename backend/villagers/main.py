"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .database import init_db
from .wiring.bootstrap import close_search_backend

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting Villager API...")
    logger.info("Database: %s", settings.database_url)
    logger.info("Search backend: %s/%s", settings.elasticsearch_url, settings.elasticsearch_index)

    init_db()
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down Villager API...")
    close_search_backend()


# Create FastAPI application
app = FastAPI(
    title="Villager API",
    description="Paginated, filterable, searchable villager listing",
    version="0.1.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Villager API",
        "version": "0.1.0",
        "docs": "/docs",
        "status": "running"
    }


@app.get("/livez")
async def liveness():
    """Liveness probe - zero dependencies, confirms process is responsive."""
    return {"status": "ok"}


# Include API routers
from .api.v1.router import router as api_router  # noqa: E402
from .api.v1.villagers import router as villagers_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
# Unversioned mount matching the page links emitted in pageUrlPrefix.
app.include_router(villagers_router, prefix="/villagers", include_in_schema=False)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "villagers.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True
    )
