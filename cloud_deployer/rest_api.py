"""
Pipeline Deployer REST API.

This is the main FastAPI application entry point. Registry and template
store are initialized once at startup and shared read-only by all requests.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from cloud_deployer import __version__
from cloud_deployer.api import pipeline
from cloud_deployer.core.bootstrap import bootstrap
from cloud_deployer.logger import logger
from cloud_deployer.settings import get_settings


# --------- Lifespan context manager ----------
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    app.state.settings = settings
    app.state.store = bootstrap(settings)
    logger.info(f"API Startup. Templates: {app.state.store.providers()}")
    yield
    # Shutdown


# --------- Initialize FastAPI app ----------
app = FastAPI(
    title="Pipeline Deployer API",
    version=__version__,
    description="API for rendering provider pod manifests and running the Checkout -> Build -> Deploy pipeline.",
    openapi_tags=[
        {
            "name": "Providers",
            "description": "Registered deployment strategies and manifest templates."
        },
        {
            "name": "Manifest",
            "description": "Render the execution-environment manifest for a run configuration."
        },
        {
            "name": "Pipeline",
            "description": "Run the three-stage pipeline for a run configuration."
        },
    ],
    lifespan=lifespan
)

# Include Routers
app.include_router(pipeline.router)
