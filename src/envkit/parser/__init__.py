"""
Dotenv parsing: line source, classification, quote spans and nested references.
"""

from envkit.parser.classifier import CandidateAssignment, classify_line
from envkit.parser.cursor import LineCursor, RawLine, read_lines, split_lines
from envkit.parser.nested import resolve_nested
from envkit.parser.quotes import QuoteSpan, resolve_quote_span

__all__ = [
    "CandidateAssignment",
    "classify_line",
    "LineCursor",
    "RawLine",
    "read_lines",
    "split_lines",
    "resolve_nested",
    "QuoteSpan",
    "resolve_quote_span",
]
