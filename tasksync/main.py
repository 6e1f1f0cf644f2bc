"""Main FastAPI application"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tasksync import __version__
from tasksync.api import projects, repositories, sync, tasks, users, webhooks
from tasksync.config import settings
from tasksync.models.base import init_db

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info("Starting GitHub Task Sync Service")
    init_db()
    yield
    # Shutdown
    logger.info("Stopping GitHub Task Sync Service")


app = FastAPI(
    title="GitHub Task Sync Service",
    description="Mirror GitHub issues into project tasks",
    version=__version__,
    lifespan=lifespan,
)

# Include API routers
app.include_router(webhooks.router)
app.include_router(users.router)
app.include_router(projects.router)
app.include_router(repositories.router)
app.include_router(tasks.router)
app.include_router(sync.router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "GitHub Task Sync"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tasksync.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
