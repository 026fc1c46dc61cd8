"""
Environment stores.

The loader reads already-committed values from, and writes resolved values
into, an injectable store. ``MemoryStore`` is a plain isolated store;
``ProcessStore`` is the process-wide one behind the ``envkit.env`` proxy.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import Any, Protocol

from envkit.values import Scalar


class EnvironmentStore(Protocol):
    """Case-sensitive mapping of variable names to typed scalars."""

    def __contains__(self, name: object) -> bool: ...

    def get(self, name: str, default: Any = None) -> Any: ...

    def set(self, name: str, value: Scalar) -> None: ...

    def items(self) -> Any: ...


class MemoryStore:
    """Dict-backed store, used for isolated loads and in tests."""

    def __init__(self, values: dict[str, Scalar] | None = None):
        self._values: dict[str, Scalar] = dict(values or {})

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __getitem__(self, name: str) -> Scalar:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def set(self, name: str, value: Scalar) -> None:
        self._values[name] = value

    def items(self):
        return self._values.items()

    def as_dict(self) -> dict[str, Scalar]:
        """Return a copy of the stored values."""
        return dict(self._values)


class ProcessStore:
    """Process-wide store singleton manager."""

    _values: dict[str, Scalar] = {}
    _lock = threading.Lock()

    def __contains__(self, name: object) -> bool:
        return name in ProcessStore._values

    def __getitem__(self, name: str) -> Scalar:
        return ProcessStore._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(list(ProcessStore._values))

    def __len__(self) -> int:
        return len(ProcessStore._values)

    def get(self, name: str, default: Any = None) -> Any:
        return ProcessStore._values.get(name, default)

    def set(self, name: str, value: Scalar) -> None:
        with ProcessStore._lock:
            ProcessStore._values[name] = value

    def items(self):
        return list(ProcessStore._values.items())

    @classmethod
    def reset(cls) -> None:
        """Forget every process-wide value (for testing)."""
        with cls._lock:
            cls._values.clear()


def get_store() -> ProcessStore:
    """
    Get the process-wide store.

    Returns:
        ProcessStore instance sharing state with every other instance
    """
    return ProcessStore()


class EnvProxy:
    """
    Read-only, dict-like access to the process-wide store.

    Usage:
        from envkit import env
        port = env["DB_PORT"]
        debug = env.get("DEBUG", False)
    """

    def __getitem__(self, name: str) -> Scalar:
        store = get_store()
        if name not in store:
            raise KeyError(f"Env variable '{name}' not loaded")
        return store[name]

    def __contains__(self, name: str) -> bool:
        return name in get_store()

    def get(self, name: str, default: Any = None) -> Any:
        return get_store().get(name, default)

    def __iter__(self) -> Iterator[str]:
        return iter(get_store())

    def __len__(self) -> int:
        return len(get_store())

    def keys(self):
        return list(get_store())

    def items(self):
        return get_store().items()


# Global env proxy instance
env = EnvProxy()
