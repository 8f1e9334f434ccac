"""
Process-wide initialization.

Registers the built-in provider strategies, loads the template store,
checks that templates and strategies agree, and freezes the registry.
Both the CLI and the REST API call bootstrap() once at startup.
"""

from pathlib import Path
from typing import Optional, Type

from cloud_deployer.logger import configure_logger, logger
from cloud_deployer.settings import Settings, get_settings
from .exceptions import ConfigurationError
from .registry import ProviderRegistry
from .templates import TemplateStore


def load_template_store(settings: Settings) -> TemplateStore:
    """Load templates from ``settings.template_dir`` or the packaged defaults."""
    if settings.template_dir:
        return TemplateStore.from_directory(Path(settings.template_dir))
    return TemplateStore.from_package()


def check_consistency(
    store: TemplateStore,
    registry: Type[ProviderRegistry] = ProviderRegistry
) -> list[str]:
    """
    Compare template keys with registered strategy keys.

    Returns:
        One message per provider key that has a template but no strategy,
        or a strategy but no template. Empty when both sides agree.
    """
    templates = set(store.providers())
    strategies = set(registry.list_providers())

    problems = []
    for key in sorted(templates - strategies):
        problems.append(f"Provider '{key}' has a template but no deployment strategy")
    for key in sorted(strategies - templates):
        problems.append(f"Provider '{key}' has a deployment strategy but no template")
    return problems


def bootstrap(settings: Optional[Settings] = None) -> TemplateStore:
    """
    Initialize registry and template store for this process.

    Args:
        settings: Process settings; read from the environment when omitted

    Returns:
        The loaded, read-only TemplateStore

    Raises:
        ConfigurationError: If the template directory is missing, or if
            ``strict_registry`` is set and templates and strategies disagree.
    """
    settings = settings or get_settings()
    if settings.debug:
        configure_logger(debug_mode=True)

    if not ProviderRegistry.is_frozen():
        # providers imports core at module level
        from cloud_deployer.providers import register_builtin_providers
        register_builtin_providers()

    store = load_template_store(settings)

    problems = check_consistency(store)
    for problem in problems:
        logger.warning(problem)
    if problems and settings.strict_registry:
        raise ConfigurationError(
            f"Provider registry is inconsistent: {'; '.join(problems)}"
        )

    ProviderRegistry.freeze()
    logger.debug(
        f"Initialized providers {ProviderRegistry.list_providers()} "
        f"with templates {store.providers()}"
    )
    return store
