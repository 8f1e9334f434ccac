"""
Template renderer.

Placeholders use the ``${name}`` syntax. ``$${name}`` renders as the literal
text ``${name}`` and is not treated as a placeholder. Substitution is purely
textual: the renderer does not parse or validate the manifest.
"""

import re
from typing import Mapping

from .exceptions import UnboundVariableError

# Group 1 set -> escaped literal, group 2 -> placeholder name.
# Any text up to the closing brace is a name; names that no binding can
# hold (e.g. "java-version", " appLabel ") are reported as unbound.
PLACEHOLDER_PATTERN = re.compile(r"\$(\$)?\{([^}]*)\}")


def find_placeholders(template: str) -> list[str]:
    """
    List the placeholder names in a template.

    Returns:
        Names in order of first appearance, without duplicates.
    """
    names = []
    for match in PLACEHOLDER_PATTERN.finditer(template):
        if match.group(1):
            continue
        name = match.group(2)
        if name not in names:
            names.append(name)
    return names


def render(template: str, binding: Mapping[str, str]) -> str:
    """
    Substitute bound values into a template.

    Extra keys in ``binding`` are ignored. Output depends only on the inputs.

    Raises:
        UnboundVariableError: If a placeholder has no key in ``binding``.
            ``name`` is the first one in template order.
    """
    missing = [name for name in find_placeholders(template) if name not in binding]
    if missing:
        raise UnboundVariableError(missing[0], missing)

    def replace(match: re.Match) -> str:
        if match.group(1):
            return "${" + match.group(2) + "}"
        return str(binding[match.group(2)])

    return PLACEHOLDER_PATTERN.sub(replace, template)
