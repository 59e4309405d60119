# uastats/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from uastats.catalog import catalog
from uastats.config import settings
from uastats.routes import router
import logging

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""

    # Startup
    logger.info("Starting User Agent Stats API...")
    logger.info(
        f"Pattern catalog loaded: {len(catalog.bot_categories)} bot categories, "
        f"{len(catalog.browsers)} browsers, {len(catalog.operating_systems)} operating systems"
    )

    yield

    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title="User Agent Stats API",
    description="Classifies user agents and aggregates access log statistics",
    version="1.0.0",
    lifespan=lifespan,
)

# Register routes
app.include_router(router)
