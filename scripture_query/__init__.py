# scripture_query/__init__.py
"""
Scripture query parsing.

This package provides:
- parse_query: Parse "1 Kings 1:2; III John 1" into structured book data
- parse_book: Parse a single book segment (raises on failure)
- BookData / ChapterData / VerseRange / QueryResult: Result dataclasses
- BookCatalog / get_catalog / validate_book_name: Canonical names and aliases
- Lower-level steps (splitting, validation, book-name and reference parsing)
"""

from .errors import (
    ScriptureQueryError,
    ReferenceParseError,
    InvalidChapterNumberError,
    InvalidVerseNumberError,
    InvalidQueryError,
    UnknownBookError,
    CatalogError,
)
from .models import (
    VerseRange,
    ChapterData,
    BookData,
    QueryResult,
)
from .book_catalog import (
    BOOKS,
    BookEntry,
    BookCatalog,
    get_catalog,
    reload_catalog,
    validate_book_name,
)
from .query_validator import (
    QUERY_SEPARATOR,
    split_query_by_books,
    is_valid_query,
)
from .book_name import (
    BookNameMatch,
    replace_ordinal_prefix,
    replace_roman_numbers,
    normalize_book_prefix,
    parse_book_name,
)
from .reference_lexer import (
    Token,
    TokenKind,
    tokenize_references,
)
from .reference_parser import (
    Priority,
    is_valid_positive_number,
    parse_chapter_number,
    parse_verse_range,
    query_priority_is_by_verse,
    parse_reference_with_verse_priority,
    parse_reference_with_chapter_priority,
    parse_references,
)
from .query_service import (
    parse_book,
    parse_query,
)

__all__ = [
    # Entry points (primary interface)
    "parse_query",
    "parse_book",
    # Results
    "VerseRange",
    "ChapterData",
    "BookData",
    "QueryResult",
    # Errors
    "ScriptureQueryError",
    "ReferenceParseError",
    "InvalidChapterNumberError",
    "InvalidVerseNumberError",
    "InvalidQueryError",
    "UnknownBookError",
    "CatalogError",
    # Catalog
    "BOOKS",
    "BookEntry",
    "BookCatalog",
    "get_catalog",
    "reload_catalog",
    "validate_book_name",
    # Splitting / validation
    "QUERY_SEPARATOR",
    "split_query_by_books",
    "is_valid_query",
    # Book names
    "BookNameMatch",
    "replace_ordinal_prefix",
    "replace_roman_numbers",
    "normalize_book_prefix",
    "parse_book_name",
    # References
    "Token",
    "TokenKind",
    "tokenize_references",
    "Priority",
    "is_valid_positive_number",
    "parse_chapter_number",
    "parse_verse_range",
    "query_priority_is_by_verse",
    "parse_reference_with_verse_priority",
    "parse_reference_with_chapter_priority",
    "parse_references",
]
