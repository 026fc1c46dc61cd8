"""
Dotenv loading.

Reads a dotenv file, resolves quoted spans and ``${NAME}`` references, coerces
each value to a scalar and commits it to an environment store. The first
assignment of a name wins, within a file and across loads.
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping, Sequence
from pathlib import Path

from envkit.exceptions import FileNotReadableError, ParseError
from envkit.parser.classifier import classify_line
from envkit.parser.cursor import LineCursor, read_lines
from envkit.parser.nested import NESTED_MARKER, resolve_nested
from envkit.parser.quotes import QUOTE, resolve_quote_span
from envkit.store import EnvironmentStore, get_store
from envkit.utils.logging import get_logger
from envkit.validation import check_required
from envkit.values import Scalar, coerce

logger = get_logger("envkit.dotenv")


class Dotenv:
    """
    Loader for a single dotenv file.

    Usage:
        Dotenv(".env").load().required(["DB_HOST", "DB_PORT"])
    """

    def __init__(
        self,
        path: str | Path,
        *,
        store: EnvironmentStore | None = None,
        environ: MutableMapping[str, str] | None = None,
    ):
        """
        Args:
            path: Path to the dotenv file
            store: Store receiving typed values (default: process-wide store)
            environ: Ambient environment mirrored with string values (default: os.environ)

        Raises:
            FileNotReadableError: If path is not an existing, readable file
        """
        self.path = Path(path)
        if not str(path) or not self.path.is_file() or not os.access(self.path, os.R_OK):
            raise FileNotReadableError(str(path))

        self.store = store if store is not None else get_store()
        self.environ = environ if environ is not None else os.environ
        self.committed: dict[str, Scalar] = {}
        self.discarded: list[str] = []

    def load(self) -> Dotenv:
        """
        Load the file into the store.

        Assignments committed before a failing line stay committed.

        Returns:
            self, for chaining

        Raises:
            FileNotReadableError: If the file cannot be read
            UnterminatedQuoteError: If a quoted value is never closed
            NestedVariableNotFoundError: If a ${NAME} reference cannot be resolved
        """
        self.committed = {}
        self.discarded = []

        lines = read_lines(self.path)
        # References see the ambient environment as it was before this load
        ambient = dict(self.environ)
        cursor = LineCursor(lines)

        while not cursor.exhausted:
            line = cursor.peek()
            assignment = classify_line(line.text)
            if assignment is None:
                cursor.advance()
                continue

            value = assignment.raw_value
            consumed = 0
            try:
                if value.startswith(QUOTE):
                    span = resolve_quote_span(assignment, cursor)
                    value, consumed = span.value, span.consumed
                if NESTED_MARKER in value:
                    value = resolve_nested(value, self.store, ambient)
            except ParseError as e:
                logger.error(f"{self.path}:{line.index + 1}: {e.message}")
                raise

            self._commit(assignment.name, value)
            cursor.advance(1 + consumed)

        logger.info(
            f"Loaded {len(self.committed)} variable(s) from {self.path}"
            + (f", {len(self.discarded)} already set" if self.discarded else "")
        )
        return self

    def _commit(self, name: str, value: str) -> None:
        """Write a resolved value unless the name is already set."""
        if name in self.store:
            logger.debug(f"Skipping {name}: already set")
            self.discarded.append(name)
            return

        resolved = coerce(value)
        # Render before writing so store and environ never diverge
        text = str(resolved)
        self.store.set(name, resolved.value)
        self.environ[name] = text
        self.committed[name] = resolved.value
        logger.debug(f"Set {name} ({resolved.type.value})")

    def required(self, names: Sequence[str]) -> Dotenv:
        """
        Ensure the given variables exist in the store.

        Raises:
            MissingRequiredVariablesError: Listing every missing name in order
        """
        check_required(names, self.store)
        return self


def load_dotenv(
    path: str | Path,
    *,
    required: Sequence[str] | None = None,
    store: EnvironmentStore | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> Dotenv:
    """
    Load a dotenv file and optionally validate required names.

    Args:
        path: Path to the dotenv file
        required: Names that must exist after loading
        store: Store receiving typed values (default: process-wide store)
        environ: Ambient environment (default: os.environ)

    Returns:
        The loaded Dotenv instance
    """
    dotenv = Dotenv(path, store=store, environ=environ).load()
    if required:
        dotenv.required(required)
    return dotenv
