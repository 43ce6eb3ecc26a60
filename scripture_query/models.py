# scripture_query/models.py
"""
Structured results of a scripture query.

A query yields a QueryResult holding one BookData per successfully parsed
segment. Each BookData lists ChapterData entries, each of which lists
VerseRange entries. Empty lists mean "whole book" / "whole chapter".
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class VerseRange:
    """
    A single verse or a range of verses within a chapter.

    Attributes:
        start: First verse (always >= 1)
        end: Last verse, or None for a single verse / open-ended range.
             end < start is kept as given.
    """
    start: int
    end: Optional[int] = None

    @property
    def normalized(self) -> str:
        """Return normalized range string (e.g., '4' or '4-6')."""
        if self.end is None:
            return str(self.start)
        return f"{self.start}-{self.end}"

    def to_dict(self) -> dict:
        return {"from": self.start, "to": self.end}


@dataclass
class ChapterData:
    """
    A chapter reference with the verses requested from it.

    Attributes:
        chapter: Chapter number
        verses: Requested verse ranges, in input order. Empty = whole chapter.
    """
    chapter: int
    verses: List[VerseRange] = field(default_factory=list)

    @property
    def is_whole_chapter(self) -> bool:
        return not self.verses

    @property
    def normalized(self) -> str:
        """Return normalized chapter string (e.g., '3' or '3:1-2,4')."""
        if self.is_whole_chapter:
            return str(self.chapter)
        return f"{self.chapter}:" + ",".join(v.normalized for v in self.verses)

    def to_dict(self) -> dict:
        return {
            "chapter": self.chapter,
            "verses": [v.to_dict() for v in self.verses],
        }


@dataclass
class BookData:
    """
    All references requested from a single book.

    Attributes:
        name: Canonical book name (e.g., "Genesis", "1 John")
        references: Chapters requested, in input order. Empty = whole book.
    """
    name: str
    references: List[ChapterData] = field(default_factory=list)

    @property
    def is_whole_book(self) -> bool:
        return not self.references

    @property
    def normalized(self) -> str:
        """Return normalized reference string (e.g., 'Genesis 1:10-12; 2')."""
        if self.is_whole_book:
            return self.name
        return f"{self.name} " + "; ".join(c.normalized for c in self.references)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "references": [c.to_dict() for c in self.references],
        }


@dataclass
class QueryResult:
    """
    Outcome of parsing a full query string.

    Attributes:
        books: Successfully parsed segments, in input order
        errors: Raw failing segment text, unresolved book names, or
                grammar error messages, in input order
    """
    books: List[BookData] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every segment parsed."""
        return not self.errors

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "books": [b.to_dict() for b in self.books],
            "errors": list(self.errors),
        }
