# scripture_query/book_name.py
"""
Book-name extraction for a single query segment.

Numbered books can be written several ways:
- Ordinals: "1 John", "1st John", "First John", "1John"
- Roman numerals: "I John", "IIIJohn"

Both are rewritten to a "<digit> " prefix before the name is split from the
chapter/verse part, so "IIIJohn1" becomes "3 John1" -> ("3 John", "1").

Words that merely begin with "I" are handled by ROMAN_EXCEPTIONS, which is
consulted before the generic numeral rule.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

# Longest spelling first so "1st" wins over "1"
ORDINAL_PREFIXES: Tuple[Tuple[str, int], ...] = (
    ("second", 2),
    ("first", 1),
    ("third", 3),
    ("1st", 1),
    ("2nd", 2),
    ("3rd", 3),
    ("1", 1),
    ("2", 2),
    ("3", 3),
)

ROMAN_NUMERALS: Tuple[Tuple[str, int], ...] = (
    ("iii", 3),
    ("ii", 2),
    ("i", 1),
)

# (lowercase prefix, number replacing the leading "I" or None to leave as-is).
# First match wins.
ROMAN_EXCEPTIONS: Tuple[Tuple[str, Optional[int]], ...] = (
    # "I Samuel" written without the space
    ("isamuel", 1),
    ("isam", 1),
    ("ism", 1),
    # Isaiah
    ("isaiah", None),
    ("isa", None),
    ("is", None),
)

_ORDINALS = dict(ORDINAL_PREFIXES)

_ORDINAL_RE = re.compile(
    r'^(' + '|'.join(re.escape(word) for word, _ in ORDINAL_PREFIXES) + r')(?![0-9]) *',
    re.IGNORECASE,
)


@dataclass
class BookNameMatch:
    """
    Result of splitting a segment into book name and reference part.

    Attributes:
        book_name: Raw name with single spaces (e.g., "1 John", "song of solomon")
        chapter_begin_index: Index in the scanned string where references start;
            len(string) when the segment names a whole book
    """
    book_name: str
    chapter_begin_index: int


def replace_ordinal_prefix(query: str) -> str:
    """
    Rewrite a leading ordinal to "<digit> ".

    "First John 1" -> "1 John 1", "2nd Kings" -> "2 Kings", "1Kings1:2" -> "1 Kings1:2"
    """
    match = _ORDINAL_RE.match(query)
    if not match:
        return query
    number = _ORDINALS[match.group(1).lower()]
    return f"{number} {query[match.end():]}"


def replace_roman_numbers(query: str) -> str:
    """
    Rewrite a leading roman numeral (I, II, III) to "<digit> ".

    "III John" -> "3 John", "Isam 1" -> "1 sam 1", "Isaiah 1" -> "Isaiah 1".
    Strings already starting with a digit are returned unchanged.
    """
    lowered = query.lower()

    for prefix, number in ROMAN_EXCEPTIONS:
        if lowered.startswith(prefix):
            if number is None:
                return query
            return f"{number} {query[1:]}"

    for numeral, number in ROMAN_NUMERALS:
        if lowered.startswith(numeral):
            return f"{number} {query[len(numeral):].lstrip(' ')}"

    return query


def normalize_book_prefix(query: str) -> str:
    """Apply ordinal then roman numeral rewriting."""
    return replace_roman_numbers(replace_ordinal_prefix(query))


def parse_book_name(query: str) -> BookNameMatch:
    """
    Split a (prefix-normalized) segment into book name and reference start.

    A single leading digit is the book's sequence number and stays part of
    the name; the next digit marks where chapter references begin. Runs of
    spaces collapse to one.

    Examples:
        "Genesis 1:1"  -> ("Genesis", 8)
        "1   John  1"  -> ("1 John", 10)
        "Genesis"      -> ("Genesis", 7)
    """
    book_name = ""

    for i, char in enumerate(query):
        if char == " ":
            if book_name and not book_name.endswith(" "):
                book_name += " "
            continue

        if char.isdigit():
            if not book_name and char != "0":
                book_name = f"{char} "
                continue
            return BookNameMatch(book_name.strip(), i)

        book_name += char

    return BookNameMatch(book_name.strip(), len(query))
