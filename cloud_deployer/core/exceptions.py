"""
Custom exceptions for the pipeline deployer.

This module defines the hierarchy of exceptions raised while preparing and
running a pipeline. Every class carries a ``kind`` which is the name reported
to the invoker in a ``Failed(stage, kind, detail)`` result.

Exception Hierarchy:
    DeploymentError (base)
    ├── ConfigurationError - Invalid run configuration (detected before side effects)
    │   ├── UnknownProviderError - No template registered for the provider key
    │   ├── UnsupportedProviderError - No strategy registered for the provider key
    │   ├── UnboundVariableError - Template placeholder without a binding
    │   ├── UnsupportedLanguageError - No build command for the language
    │   └── RegistryFrozenError - Registration attempted after startup
    ├── CollaboratorError - External operation reported failure
    │   ├── FetchError - Repository checkout failed
    │   ├── BuildError - Language build failed
    │   └── ProviderError - Provider CLI execution failed
    └── PipelineCancelledError - Run aborted between stages
"""

from typing import Optional


class DeploymentError(Exception):
    """
    Base exception for all pipeline-related errors.

    Attributes:
        message: Human-readable error description
        provider: Optional provider key where the error occurred
        stage: Optional pipeline stage name where the error occurred
    """

    kind = "DeploymentError"

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        stage: Optional[str] = None
    ):
        self.message = message
        self.provider = provider
        self.stage = stage
        super().__init__(message)

    def __str__(self) -> str:
        # Built lazily so that tags added after construction show up
        details = []
        if self.provider:
            details.append(f"provider={self.provider}")
        if self.stage:
            details.append(f"stage={self.stage}")

        if details:
            return f"{self.message} [{', '.join(details)}]"
        return self.message


class ConfigurationError(DeploymentError):
    """
    Raised when the run configuration is invalid or incomplete.

    This typically occurs when:
    - The configuration file is missing or has invalid JSON
    - A required field is missing or empty
    - A field has the wrong type
    """

    kind = "ConfigurationError"

    def __init__(self, message: str, config_file: Optional[str] = None, **kwargs):
        self.config_file = config_file
        if config_file:
            message = f"{message} (file: {config_file})"
        super().__init__(message, **kwargs)


class UnknownProviderError(ConfigurationError):
    """
    Raised when no manifest template is registered for a provider key.

    Example:
        >>> store.resolve_template("oracle")
        UnknownProviderError: No template registered for provider 'oracle'. Available: ['aws', 'azure', 'gcp']
    """

    kind = "UnknownProvider"

    def __init__(self, provider_key: str, available_providers: list[str]):
        self.provider_key = provider_key
        self.available_providers = available_providers
        message = (
            f"No template registered for provider '{provider_key}'. "
            f"Available: {available_providers}"
        )
        super().__init__(message, provider=provider_key)


class UnsupportedProviderError(ConfigurationError):
    """
    Raised when no deployment strategy is registered for a provider key.

    This is the single source of the "unsupported cloud provider" error and
    is always raised before any provider-specific side effect.

    Example:
        >>> dispatcher.resolve("oracle")
        UnsupportedProviderError: Unsupported cloud provider 'oracle'. Available: ['aws', 'azure', 'gcp']
    """

    kind = "UnsupportedProvider"

    def __init__(self, provider_key: str, available_providers: list[str]):
        self.provider_key = provider_key
        self.available_providers = available_providers
        message = (
            f"Unsupported cloud provider '{provider_key}'. "
            f"Available: {available_providers}"
        )
        super().__init__(message, provider=provider_key)


class UnboundVariableError(ConfigurationError):
    """
    Raised when a template references a placeholder with no binding.

    Attributes:
        name: The first unbound placeholder in template order
        missing: All unbound placeholders in template order
    """

    kind = "UnboundVariable"

    def __init__(self, name: str, missing: Optional[list[str]] = None):
        self.name = name
        self.missing = missing or [name]
        message = f"Template placeholder '${{{name}}}' has no binding"
        if len(self.missing) > 1:
            message += f" (all unbound: {self.missing})"
        super().__init__(message)


class UnsupportedLanguageError(ConfigurationError):
    """Raised when no build command is registered for a language."""

    kind = "UnsupportedLanguage"

    def __init__(self, language: str, available_languages: list[str]):
        self.language = language
        self.available_languages = available_languages
        message = (
            f"Unsupported language '{language}'. "
            f"Available: {available_languages}"
        )
        super().__init__(message)


class RegistryFrozenError(ConfigurationError):
    """Raised when a strategy is registered after process initialization."""

    kind = "RegistryFrozen"

    def __init__(self, provider_key: str):
        self.provider_key = provider_key
        super().__init__(
            f"Cannot register provider '{provider_key}': registry is frozen",
            provider=provider_key
        )


class CollaboratorError(DeploymentError):
    """
    Raised when an external collaborator reports a failure.

    The collaborator's detail is passed through verbatim.

    Attributes:
        detail: Opaque failure detail reported by the collaborator
        original_error: The underlying exception, if any
    """

    kind = "CollaboratorError"

    def __init__(
        self,
        detail: str,
        original_error: Optional[Exception] = None,
        **kwargs
    ):
        self.detail = detail
        self.original_error = original_error
        super().__init__(detail, **kwargs)


class FetchError(CollaboratorError):
    """Raised when the repository could not be fetched."""

    kind = "FetchError"


class BuildError(CollaboratorError):
    """Raised when the language build fails."""

    kind = "BuildError"


class ProviderError(CollaboratorError):
    """Raised when a provider command fails."""

    kind = "ProviderError"


class PipelineCancelledError(DeploymentError):
    """Raised when a run is aborted at a stage boundary."""

    kind = "Cancelled"

    def __init__(self, stage: Optional[str] = None):
        super().__init__("Pipeline run was cancelled", stage=stage)


def error_kind(error: BaseException) -> str:
    """
    Return the reported kind for any exception.

    Exceptions outside the hierarchy report their class name.
    """
    return getattr(error, "kind", type(error).__name__)
