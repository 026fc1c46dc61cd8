"""
envkit exception hierarchy.

All domain-specific exceptions inherit from EnvkitError, so bootstrap code can
catch any loader failure with a single base class while still allowing
fine-grained handling when needed.

Hierarchy::

    EnvkitError
    ├── FileNotReadableError            - dotenv path missing or unreadable
    ├── ParseError                      - load aborted mid-file
    │   ├── UnterminatedQuoteError      - opening " never closed
    │   └── NestedVariableNotFoundError - ${NAME} reference not resolvable
    ├── MissingRequiredVariablesError   - required names absent from the store
    └── ConfigurationError              - envkit.yaml loading / validation
"""

from __future__ import annotations

from collections.abc import Sequence


class EnvkitError(Exception):
    """Base exception for all envkit errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Files -------------------------------------------------------------------


class FileNotReadableError(EnvkitError):
    """Raised when a dotenv path is not an existing, readable file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Dotenv file does not exist or is not readable: {path}", details={"path": path})
        self.path = path


# --- Parsing -----------------------------------------------------------------


class ParseError(EnvkitError):
    """Raised when a load is aborted by a malformed assignment."""


class UnterminatedQuoteError(ParseError):
    """Raised when a double-quoted value has no closing quote before end of file."""

    def __init__(self, variable: str) -> None:
        super().__init__(
            f'Value of variable {variable} opens a double quote (") that is never closed',
            details={"variable": variable},
        )
        self.variable = variable


class NestedVariableNotFoundError(ParseError):
    """Raised when a ${NAME} reference matches neither a loaded nor an ambient variable."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Nested variable not found: {name}", details={"name": name})
        self.name = name


# --- Validation --------------------------------------------------------------


class MissingRequiredVariablesError(EnvkitError):
    """Raised when required variables are absent from the environment store."""

    def __init__(self, names: Sequence[str]) -> None:
        missing = list(names)
        super().__init__(f"Missing env variables: {', '.join(missing)}", details={"names": missing})
        self.names = missing


# --- Configuration -----------------------------------------------------------


class ConfigurationError(EnvkitError):
    """Raised when envkit.yaml loading, parsing, or validation fails."""
