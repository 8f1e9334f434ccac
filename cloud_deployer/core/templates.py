"""
Template store for provider pod manifests.

Templates live under ``podtemplates/<provider>.yaml``, either inside the
installed package or in a directory given by settings. The store reads them
once at construction and exposes them through a read-only mapping, so runs
can share one store without locking.
"""

from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.logger import logger
from .exceptions import ConfigurationError, UnknownProviderError


class TemplateStore:
    """
    Read-only repository of manifest templates keyed by provider key.

    Example:
        store = TemplateStore.from_package()
        text = store.resolve_template("aws")
    """

    __slots__ = ("_templates",)

    def __init__(self, templates: Mapping[str, str]):
        # Copy first so later changes to the caller's dict are not visible
        object.__setattr__(self, "_templates", MappingProxyType(dict(templates)))

    def __setattr__(self, name, value):
        raise AttributeError("TemplateStore is read-only")

    @classmethod
    def from_directory(cls, directory: Path) -> "TemplateStore":
        """
        Load every ``*.yaml`` file in a directory, keyed by file stem.

        Raises:
            ConfigurationError: If the directory does not exist.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ConfigurationError(
                f"Template directory does not exist: {directory}"
            )

        templates = {}
        for path in sorted(directory.glob(f"*{CONSTANTS.TEMPLATE_SUFFIX}")):
            templates[path.stem] = path.read_text(encoding="utf-8")
            logger.debug(f"Loaded template '{path.stem}' from {path}")
        return cls(templates)

    @classmethod
    def from_package(cls) -> "TemplateStore":
        """Load the templates shipped with the package."""
        root = resources.files(CONSTANTS.TEMPLATE_PACKAGE).joinpath(CONSTANTS.TEMPLATE_DIR_NAME)
        templates = {}
        for entry in sorted(root.iterdir(), key=lambda e: e.name):
            if entry.is_file() and entry.name.endswith(CONSTANTS.TEMPLATE_SUFFIX):
                key = entry.name[: -len(CONSTANTS.TEMPLATE_SUFFIX)]
                templates[key] = entry.read_text(encoding="utf-8")
        return cls(templates)

    def resolve_template(self, provider_key: str) -> str:
        """
        Return the template text for a provider key.

        Raises:
            UnknownProviderError: If no template is registered for the key.
        """
        try:
            return self._templates[provider_key]
        except KeyError:
            raise UnknownProviderError(provider_key, self.providers()) from None

    def has_template(self, provider_key: str) -> bool:
        return provider_key in self._templates

    def providers(self) -> list[str]:
        """List provider keys with a template, sorted alphabetically."""
        return sorted(self._templates.keys())
