"""
Language -> build command lookup.

Every supported language maps to exactly one build description. Any other
language raises UnsupportedLanguageError, which is the only failure path.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.core.binder import bind
from cloud_deployer.core.config import RunConfig
from cloud_deployer.core.exceptions import UnsupportedLanguageError


@dataclass(frozen=True)
class BuildCommand:
    """
    What the build collaborator runs for one language.

    Attributes:
        language: Language key (e.g., "java")
        tool: Build tool name, for logging (e.g., "maven")
        commands: Command lines, run in order
        tool_version: Runtime version from the binding (javaVersion / nodeVersion)
    """

    language: str
    tool: str
    commands: Tuple[Tuple[str, ...], ...]
    tool_version: str


@dataclass(frozen=True)
class _BuildSpec:
    tool: str
    commands: Tuple[Tuple[str, ...], ...]
    version_variable: str


BUILD_COMMANDS = MappingProxyType({
    CONSTANTS.LANGUAGE_JAVA: _BuildSpec(
        tool="maven",
        commands=(("mvn", "-B", "clean", "package"),),
        version_variable="javaVersion",
    ),
    CONSTANTS.LANGUAGE_NODE: _BuildSpec(
        tool="npm",
        commands=(("npm", "ci"), ("npm", "run", "build")),
        version_variable="nodeVersion",
    ),
})


def supported_languages() -> list[str]:
    return sorted(BUILD_COMMANDS.keys())


def resolve_build(config: RunConfig) -> BuildCommand:
    """
    Select the build command for ``config.language``.

    Raises:
        UnsupportedLanguageError: If the language has no entry.
    """
    spec = BUILD_COMMANDS.get(config.language)
    if spec is None:
        raise UnsupportedLanguageError(config.language, supported_languages())

    return BuildCommand(
        language=config.language,
        tool=spec.tool,
        commands=spec.commands,
        tool_version=bind(config)[spec.version_variable],
    )
