# scripture_query/query_service.py
"""
Query entry points.

parse_query() handles a full multi-book query and never raises for bad input:
each failing segment is recorded in QueryResult.errors and the rest of the
query is still parsed.

Usage:
    result = parse_query("1 Kings 1:2; III John 1")
    for book in result.books:
        print(book.normalized)     # "1 Kings 1:2", "3 John 1"
    print(result.errors)           # []
"""

import logging
from typing import Optional

from .book_catalog import BookCatalog, validate_book_name
from .book_name import normalize_book_prefix, parse_book_name
from .errors import (
    InvalidQueryError,
    ReferenceParseError,
    UnknownBookError,
)
from .models import BookData, QueryResult
from .query_validator import is_valid_query, split_query_by_books
from .reference_parser import parse_references

logger = logging.getLogger(__name__)


def parse_book(segment: str, catalog: Optional[BookCatalog] = None) -> BookData:
    """
    Parse a single book segment, e.g. "1Kings1:2" or "Genesis 1:1-2,4".

    Args:
        segment: One segment of a query (no ';')
        catalog: Catalog to resolve book names against (defaults to get_catalog())

    Returns:
        BookData with the canonical name and parsed references

    Raises:
        InvalidQueryError: if the segment fails validation
        UnknownBookError: if the book name is not in the catalog
        ReferenceParseError: if a chapter or verse number is invalid
    """
    if not is_valid_query(segment):
        raise InvalidQueryError(segment)

    normalized = normalize_book_prefix(segment)
    match = parse_book_name(normalized)

    # "0 John 1" leaves no name to report
    if not match.book_name:
        raise UnknownBookError(segment)

    name = validate_book_name(match.book_name, catalog)
    if name is None:
        raise UnknownBookError(match.book_name)

    references = parse_references(normalized[match.chapter_begin_index:])
    return BookData(name, references)


def parse_query(query: str, catalog: Optional[BookCatalog] = None) -> QueryResult:
    """
    Parse a ';'-separated scripture query.

    Args:
        query: Raw query, e.g. "Genesis 1:10-12; song of solomon"
        catalog: Catalog to resolve book names against (defaults to get_catalog())

    Returns:
        QueryResult with parsed books and per-segment errors, both in input order
    """
    result = QueryResult()

    for segment in split_query_by_books(query):
        try:
            result.books.append(parse_book(segment, catalog))
        except InvalidQueryError as e:
            logger.debug(f"Rejected segment {segment!r}: invalid text")
            result.errors.append(e.segment)
        except UnknownBookError as e:
            logger.debug(f"Rejected segment {segment!r}: unknown book {e.book_name!r}")
            result.errors.append(e.book_name)
        except ReferenceParseError as e:
            logger.debug(f"Rejected segment {segment!r}: {e}")
            result.errors.append(str(e))

    return result
