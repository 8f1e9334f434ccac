"""
Core abstractions for the pipeline deployer.

This package holds everything that decides, from a single RunConfig, which
manifest template to load, how to bind its variables, and which deployment
strategy to invoke.

Modules:
    config: RunConfig value type
    config_loader: JSON configuration and credential loading
    protocols: Strategy and collaborator interfaces
    context: ExecutionContext passed to strategies
    registry: ProviderRegistry for strategy lookup
    templates: TemplateStore for provider manifests
    binder / renderer / manifest: manifest rendering
    dispatcher: DeploymentDispatcher
    bootstrap: process-wide initialization
    exceptions: error hierarchy

Usage:
    from cloud_deployer.core import bootstrap, render_manifest, DeploymentDispatcher

    store = bootstrap()
    manifest = render_manifest(config, store)
    DeploymentDispatcher().dispatch(config, context)
"""

from .binder import bind
from .bootstrap import bootstrap, check_consistency
from .config import RunConfig, TemplateBinding
from .context import ExecutionContext
from .dispatcher import DeploymentDispatcher
from .exceptions import (
    BuildError,
    ConfigurationError,
    DeploymentError,
    FetchError,
    PipelineCancelledError,
    ProviderError,
    UnboundVariableError,
    UnknownProviderError,
    UnsupportedLanguageError,
    UnsupportedProviderError,
)
from .manifest import render_manifest
from .protocols import DeploymentStrategy
from .registry import ProviderRegistry
from .renderer import find_placeholders, render
from .templates import TemplateStore

__all__ = [
    # Config
    "RunConfig",
    "TemplateBinding",
    "ExecutionContext",
    # Rendering
    "TemplateStore",
    "bind",
    "render",
    "find_placeholders",
    "render_manifest",
    # Dispatch
    "DeploymentStrategy",
    "ProviderRegistry",
    "DeploymentDispatcher",
    "bootstrap",
    "check_consistency",
    # Exceptions
    "DeploymentError",
    "ConfigurationError",
    "UnknownProviderError",
    "UnsupportedProviderError",
    "UnboundVariableError",
    "UnsupportedLanguageError",
    "FetchError",
    "BuildError",
    "ProviderError",
    "PipelineCancelledError",
]
