"""
Nested variable resolution.

Substitutes ``${NAME}`` references with values known when the line is
processed: first the store being loaded, then the ambient environment as it
was before the load started.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from envkit.exceptions import NestedVariableNotFoundError
from envkit.store import EnvironmentStore
from envkit.values import render_scalar

NESTED_MARKER = "${"
_REFERENCE_RE = re.compile(r"\$\{([a-zA-Z0-9_.]+)\}")

# Sentinel distinguishing "absent" from stored falsy values
_MISSING = object()


@dataclass(frozen=True)
class Reference:
    """A ``${NAME}`` occurrence and the text replacing it."""

    start: int
    end: int
    name: str
    replacement: str


def lookup(name: str, store: EnvironmentStore, ambient: Mapping[str, str]) -> str | None:
    """Return the string form of ``name`` from the store, else the ambient environment."""
    value = store.get(name, _MISSING)
    if value is not _MISSING:
        return render_scalar(value)
    return ambient.get(name)


def collect_references(value: str, store: EnvironmentStore, ambient: Mapping[str, str]) -> list[Reference]:
    """
    Find every reference in ``value`` and resolve it.

    Raises:
        NestedVariableNotFoundError: On the first name found in neither source
    """
    references = []
    for match in _REFERENCE_RE.finditer(value):
        name = match.group(1)
        replacement = lookup(name, store, ambient)
        if replacement is None:
            raise NestedVariableNotFoundError(name)
        references.append(Reference(match.start(), match.end(), name, replacement))
    return references


def apply_references(value: str, references: list[Reference]) -> str:
    """Replace each collected span, left to right."""
    parts = []
    last = 0
    for ref in references:
        parts.append(value[last : ref.start])
        parts.append(ref.replacement)
        last = ref.end
    parts.append(value[last:])
    return "".join(parts)


def resolve_nested(value: str, store: EnvironmentStore, ambient: Mapping[str, str]) -> str:
    """
    Resolve all ``${NAME}`` references in a value.

    An unclosed ``${`` is not a reference and is left as literal text.
    """
    if NESTED_MARKER not in value:
        return value
    return apply_references(value, collect_references(value, store, ambient))
