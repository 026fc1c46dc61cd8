"""
Required-variable validation.
"""

from __future__ import annotations

from collections.abc import Sequence

from envkit.exceptions import MissingRequiredVariablesError
from envkit.store import EnvironmentStore


def find_missing(names: Sequence[str], store: EnvironmentStore) -> list[str]:
    """Return the names absent from the store, in their original order."""
    return [name for name in names if name not in store]


def check_required(names: Sequence[str], store: EnvironmentStore) -> None:
    """
    Ensure every name exists in the store.

    Args:
        names: Required variable names (case-sensitive, duplicates allowed)
        store: Store to check

    Raises:
        MissingRequiredVariablesError: Listing the missing names in order
    """
    missing = find_missing(names, store)
    if missing:
        raise MissingRequiredVariablesError(missing)
