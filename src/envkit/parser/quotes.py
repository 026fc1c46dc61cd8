"""
Double-quoted value spans.

A value opening with ``"`` runs until the next ``"``, possibly on a later
line. Text inside the span is literal: ``=``, ``#`` and newlines are kept.
"""

from __future__ import annotations

from dataclasses import dataclass

from envkit.exceptions import UnterminatedQuoteError
from envkit.parser.classifier import CandidateAssignment
from envkit.parser.cursor import LineCursor

QUOTE = '"'


@dataclass(frozen=True)
class QuoteSpan:
    """Assembled value and the number of lines consumed after the opening one."""

    value: str
    consumed: int


def resolve_quote_span(assignment: CandidateAssignment, cursor: LineCursor) -> QuoteSpan:
    """
    Assemble a quoted value starting at the cursor's current line.

    The cursor is only peeked; the caller advances it by ``1 + consumed``.

    Raises:
        UnterminatedQuoteError: If the input ends before a closing quote
    """
    value = assignment.raw_value[1:]

    if value.endswith(QUOTE):
        return QuoteSpan(value[:-1], 0)

    parts = [value]
    offset = 1
    while (line := cursor.peek(offset)) is not None:
        closing, found, _ = line.text.partition(QUOTE)
        parts.append(closing)
        if found:
            return QuoteSpan("\n".join(parts), offset)
        offset += 1

    raise UnterminatedQuoteError(assignment.name)
