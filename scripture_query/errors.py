# scripture_query/errors.py
"""
Exception hierarchy for scripture query parsing.

parse_book() raises these; parse_query() catches the per-segment ones and
records them in QueryResult.errors so a single bad segment never aborts a
whole query.
"""


class ScriptureQueryError(Exception):
    """Base exception for scripture query parsing."""
    pass


class ReferenceParseError(ScriptureQueryError):
    """Raised when the chapter/verse part of a segment cannot be parsed."""

    label = "reference"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid {self.label}: {text}")


class InvalidChapterNumberError(ReferenceParseError):
    """Raised when a chapter token is not a positive integer."""

    label = "chapter number"


class InvalidVerseNumberError(ReferenceParseError):
    """Raised when a verse range token holds a non-positive or non-numeric bound."""

    label = "verse number"


class InvalidQueryError(ScriptureQueryError):
    """Raised when a segment fails character-set or punctuation validation."""

    def __init__(self, segment: str):
        self.segment = segment
        super().__init__(f"Invalid query: {segment}")


class UnknownBookError(ScriptureQueryError):
    """Raised when a book name matches no catalog entry or alias."""

    def __init__(self, book_name: str):
        self.book_name = book_name
        super().__init__(f"Unknown book: {book_name}")


class CatalogError(ScriptureQueryError):
    """Raised when the book catalog is inconsistent (e.g. colliding aliases)."""
    pass
