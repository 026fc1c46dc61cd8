"""
Line source and cursor.

The whole dotenv file is read up front into RawLine objects; the loader walks
them with a LineCursor so multi-line values can look ahead without mutating
the position mid-iteration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from envkit.exceptions import FileNotReadableError


@dataclass(frozen=True)
class RawLine:
    """A physical line of a dotenv file (0-based index after filtering)."""

    index: int
    text: str


def split_lines(content: str) -> list[RawLine]:
    """Split file content into RawLines, dropping empty lines and line terminators."""
    texts = [text.removesuffix("\r") for text in content.split("\n")]
    return [RawLine(index, text) for index, text in enumerate(t for t in texts if t)]


def read_lines(path: str | Path) -> list[RawLine]:
    """
    Read a dotenv file into memory.

    Args:
        path: Path to the dotenv file

    Returns:
        Ordered RawLines, blank lines removed

    Raises:
        FileNotReadableError: If the file cannot be opened or decoded as UTF-8
    """
    try:
        content = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FileNotReadableError(str(path)) from e
    return split_lines(content)


class LineCursor:
    """Forward-only cursor over RawLines with bounded lookahead."""

    def __init__(self, lines: list[RawLine]):
        self._lines = lines
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self._lines)

    def peek(self, offset: int = 0) -> RawLine | None:
        """Return the line ``offset`` places after the current one, or None past the end."""
        index = self.position + offset
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def advance(self, n: int = 1) -> None:
        self.position += n
