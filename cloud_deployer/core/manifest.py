"""Manifest rendering for the execution environment of a run."""

from .binder import bind
from .config import RunConfig
from .renderer import render
from .templates import TemplateStore


def render_manifest(config: RunConfig, store: TemplateStore) -> str:
    """
    Render the pod manifest for a configuration.

    Raises:
        UnknownProviderError: If the store has no template for the provider.
        UnboundVariableError: If the template references an unbound placeholder.
    """
    template = store.resolve_template(config.cloud_provider)
    return render(template, bind(config))
