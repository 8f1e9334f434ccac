"""
API Dependencies - Shared request models and providers for API endpoints.
"""

from typing import Callable, Dict, Optional

from fastapi import HTTPException, Request
from pydantic import BaseModel, Field

from cloud_deployer.core.config import RunConfig
from cloud_deployer.core.config_loader import run_config_from_dict
from cloud_deployer.core.exceptions import ConfigurationError, error_kind
from cloud_deployer.core.templates import TemplateStore
from cloud_deployer.factory import run_pipeline
from cloud_deployer.settings import Settings


class RunConfigRequest(BaseModel):
    label: str
    defaultContainer: str
    repoUrl: str
    language: str
    cloudProvider: str
    appLabel: Optional[str] = None
    containerName: Optional[str] = None
    javaVersion: Optional[str] = None
    nodeVersion: Optional[str] = None


class RunPipelineRequest(BaseModel):
    config: RunConfigRequest
    credentials: Dict[str, Dict[str, str]] = Field(default_factory=dict)


def to_run_config(request: RunConfigRequest) -> RunConfig:
    """
    Convert a request body into a RunConfig.

    Raises:
        HTTPException: 400 with the error kind if the configuration is invalid.
    """
    try:
        return run_config_from_dict(request.model_dump(exclude_none=True))
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=error_detail(e))


def error_detail(error: Exception) -> dict:
    return {"error_kind": error_kind(error), "detail": str(error)}


def get_store(request: Request) -> TemplateStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pipeline_runner() -> Callable:
    """The function used to execute runs; overridden in tests."""
    return run_pipeline
