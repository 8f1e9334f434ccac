from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from cloud_deployer.api.dependencies import (
    RunConfigRequest,
    RunPipelineRequest,
    error_detail,
    get_app_settings,
    get_pipeline_runner,
    get_store,
    to_run_config,
)
from cloud_deployer.core.exceptions import ConfigurationError
from cloud_deployer.core.manifest import render_manifest
from cloud_deployer.core.registry import ProviderRegistry
from cloud_deployer.core.templates import TemplateStore
from cloud_deployer.logger import logger, print_stack_trace
from cloud_deployer.settings import Settings

router = APIRouter()


@router.get("/providers", tags=["Providers"])
def list_providers(store: TemplateStore = Depends(get_store)):
    """
    Lists provider keys with a registered deployment strategy and with a manifest template.
    """
    return {
        "strategies": ProviderRegistry.list_providers(),
        "templates": store.providers(),
    }


@router.post("/manifest", tags=["Manifest"])
def render_manifest_endpoint(
    request: RunConfigRequest,
    store: TemplateStore = Depends(get_store)
):
    """
    Renders the pod manifest for a run configuration without running the pipeline.
    """
    config = to_run_config(request)
    try:
        manifest = render_manifest(config, store)
    except ConfigurationError as e:
        logger.error(str(e))
        raise HTTPException(status_code=400, detail=error_detail(e))
    return {"provider": config.cloud_provider, "manifest": manifest}


@router.post("/pipeline/run", tags=["Pipeline"])
def run_pipeline_endpoint(
    request: RunPipelineRequest,
    store: TemplateStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
    runner: Callable = Depends(get_pipeline_runner)
):
    """
    Runs Checkout -> Build -> Deploy and returns the terminal status.

    Both Succeeded and Failed runs return 200; the outcome is in the body.
    """
    config = to_run_config(request.config)
    try:
        result = runner(config, store, settings, credentials=request.credentials)
    except Exception as e:
        print_stack_trace()
        logger.error(f"Pipeline execution error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
    return result.to_dict()
