"""
Template placeholders for seed data.

Migrations may embed ``{#Key}`` tokens in string values. They are filled in
from configuration right before the documents are written.
"""

import re
from typing import Any, Mapping, Set

from artdb.exceptions import UnknownPlaceholderError

PLACEHOLDER_RE = re.compile(r"\{#(\w+)\}")


def render(value: Any, variables: Mapping[str, str]) -> Any:
    """Return a copy of ``value`` with every placeholder substituted.

    Dicts and lists are walked recursively; dict keys are left alone.
    """
    if isinstance(value, str):
        def _sub(match):
            key = match.group(1)
            if key not in variables:
                raise UnknownPlaceholderError(key)
            return str(variables[key])
        return PLACEHOLDER_RE.sub(_sub, value)
    if isinstance(value, dict):
        return {k: render(v, variables) for k, v in value.items()}
    if isinstance(value, list):
        return [render(item, variables) for item in value]
    return value


def find_placeholders(value: Any) -> Set[str]:
    if isinstance(value, str):
        return set(PLACEHOLDER_RE.findall(value))
    if isinstance(value, dict):
        values = value.values()
    elif isinstance(value, list):
        values = value
    else:
        return set()
    keys = set()
    for item in values:
        keys |= find_placeholders(item)
    return keys
