"""
Line classification.

Turns one raw line into a candidate ``NAME=value`` assignment, or None when
the line is a comment or carries no assignment.
"""

from __future__ import annotations

from dataclasses import dataclass

COMMENT_CHAR = "#"
INLINE_COMMENT = " #"


@dataclass(frozen=True)
class CandidateAssignment:
    """Name and unprocessed value of one assignment line."""

    name: str
    raw_value: str


def strip_inline_comment(text: str) -> str:
    """Drop everything from the first `` #`` on, then trailing whitespace."""
    pos = text.find(INLINE_COMMENT)
    if pos == -1:
        return text
    return text[:pos].rstrip()


def classify_line(text: str) -> CandidateAssignment | None:
    """
    Classify a raw dotenv line.

    Args:
        text: Line content without its terminator

    Returns:
        CandidateAssignment split on the first ``=``, or None for comments,
        lines without ``=`` and lines with an empty name
    """
    if text.startswith(COMMENT_CHAR):
        return None

    name, sep, raw_value = strip_inline_comment(text).partition("=")
    if not sep or not name:
        return None
    return CandidateAssignment(name, raw_value)
