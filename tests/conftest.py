"""
Shared test configuration and fixtures.

Provides recording fakes for the three external collaborators, so no test
ever touches git, a build tool or a cloud CLI.
"""

import pytest

from cloud_deployer.core.config import RunConfig
from cloud_deployer.core.context import ExecutionContext
from cloud_deployer.core.exceptions import BuildError, FetchError, ProviderError
from cloud_deployer.core.registry import ProviderRegistry
from cloud_deployer.core.templates import TemplateStore
from cloud_deployer.providers import register_builtin_providers


class RecordingFetcher:
    """Checkout fake. Records URLs; raises ``error`` when set."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def fetch_repository(self, url):
        self.calls.append(url)
        if self.error:
            raise self.error


class RecordingBuilder:
    """Build fake. Records BuildCommands; raises ``error`` when set."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def run_build(self, build):
        self.calls.append(build)
        if self.error:
            raise self.error


class RecordingExecutor:
    """Provider CLI fake. Records (provider, command, env); raises ``error`` when set."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def execute(self, provider_key, command, env):
        self.calls.append((provider_key, list(command), dict(env)))
        if self.error:
            raise self.error


@pytest.fixture(autouse=True)
def reset_registry():
    """Give every test an unfrozen registry with the built-in providers."""
    ProviderRegistry.clear()
    register_builtin_providers()
    yield
    ProviderRegistry.clear()
    register_builtin_providers()


@pytest.fixture
def make_config():
    """Factory for RunConfig with sensible required fields."""
    def _make(**overrides):
        values = {
            "label": "ci-agent",
            "default_container": "cloud-cli",
            "repo_url": "https://github.com/example/shop.git",
            "language": "java",
            "cloud_provider": "aws",
        }
        values.update(overrides)
        return RunConfig(**values)
    return _make


@pytest.fixture
def store():
    return TemplateStore.from_package()


@pytest.fixture
def fetcher():
    return RecordingFetcher()


@pytest.fixture
def builder():
    return RecordingBuilder()


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def make_executor():
    """Factory for independent RecordingExecutors."""
    return RecordingExecutor


@pytest.fixture
def context(executor):
    return ExecutionContext(
        executor=executor,
        credentials={
            "aws": {
                "aws_access_key_id": "AKIATEST",
                "aws_secret_access_key": "secret",
                "aws_region": "eu-central-1",
            }
        },
        run_label="ci-agent",
    )


@pytest.fixture
def failing_fetcher():
    return RecordingFetcher(error=FetchError("repository not found"))


@pytest.fixture
def failing_builder():
    return RecordingBuilder(error=BuildError("mvn exited with 1"))


@pytest.fixture
def failing_executor():
    return RecordingExecutor(error=ProviderError("kubectl rollout failed"))
