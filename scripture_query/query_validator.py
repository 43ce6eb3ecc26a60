# scripture_query/query_validator.py
"""
Query splitting and segment validation.

A query holds one segment per book, separated by ';'. Each segment is checked
with cheap textual rules before any parsing is attempted.
"""

import re
from typing import List

QUERY_SEPARATOR = ";"

# Anything outside ASCII letters/digits, space and , – ; — : -
_DISALLOWED_CHAR_RE = re.compile(r'[^A-Za-z0-9 ,–;—:-]')

# No book number exceeds III
_ROMAN_RUN_RE = re.compile(r'I{4,}', re.IGNORECASE)

# "1::1", "1,-2", "1: ,2"
_ADJACENT_PUNCT_RE = re.compile(r'[,:;-]\s*[,:;-]')

# "1:2, Galatians 1:8" joins books with a comma instead of ';'
_COMMA_NOT_DIGIT_RE = re.compile(r',(?![0-9])')

_RULES = (
    _DISALLOWED_CHAR_RE,
    _ROMAN_RUN_RE,
    _ADJACENT_PUNCT_RE,
    _COMMA_NOT_DIGIT_RE,
)


def split_query_by_books(query: str) -> List[str]:
    """Split a query on ';', trimming segments and dropping empty ones."""
    segments = (part.strip() for part in query.split(QUERY_SEPARATOR))
    return [segment for segment in segments if segment]


def is_valid_query(segment: str) -> bool:
    """Return True if segment passes every textual rule."""
    return not any(rule.search(segment) for rule in _RULES)
