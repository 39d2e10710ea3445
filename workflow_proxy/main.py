"""
Community Workflow Proxy - FastAPI Application
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from workflow_proxy import __version__
from workflow_proxy.api import router
from workflow_proxy.api.schemas import RootResponse
from workflow_proxy.config import settings
from workflow_proxy.upstream import CommunityWorkflowsClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared upstream client and close it on shutdown."""
    logger.info(f"Starting {settings.app_name}...")
    app.state.workflows_client = CommunityWorkflowsClient.from_settings(settings)
    logger.info(f"Proxying community workflows from {settings.community_workflows_api_url}")
    yield
    await app.state.workflows_client.aclose()
    logger.info(f"Shutting down {settings.app_name}...")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Proxy for the hosted community workflows API",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.include_router(router, prefix="/api")

    @app.get("/", response_model=RootResponse)
    async def root():
        return RootResponse(
            project=settings.app_name,
            version=__version__,
            docs="/docs",
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "workflow_proxy.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
