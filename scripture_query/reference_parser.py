# scripture_query/reference_parser.py
"""
Chapter/verse grammar for the part of a segment after the book name.

Two readings exist for a comma, chosen by whichever separator comes first:

- Chapter priority (',' first, or no ':' at all): a comma starts a new chapter.
      "1,2:1,3"   -> 1, 2(v1), 3
- Verse priority (':' first): a comma continues the current chapter's verses,
  and a number followed by ':' opens the next chapter.
      "1:1-2,4-6" -> 1(v1-2, v4-6)
      "1:1-2,2:1" -> 1(v1-2), 2(v1)

A trailing ':' requests the whole chapter from verse 1 ("1:" -> 1(v1)).
"""

import re
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .errors import InvalidChapterNumberError, InvalidVerseNumberError
from .models import ChapterData, VerseRange
from .reference_lexer import Token, TokenKind, tokenize_references

_DIGITS_RE = re.compile(r'[0-9]+')


class Priority(Enum):
    VERSE = 0
    CHAPTER = 1


class ScanState(Enum):
    EXPECT_CHAPTER = "expect_chapter"
    CHAPTER_OPEN_NO_VERSE = "chapter_open_no_verse"
    EXPECT_VERSE_TOKEN = "expect_verse_token"


def is_valid_positive_number(n: str) -> bool:
    """Return True if n is a run of ASCII digits with value > 0."""
    return bool(_DIGITS_RE.fullmatch(n)) and int(n) > 0


def parse_chapter_number(s: str) -> int:
    """
    Parse a chapter token.

    Raises:
        InvalidChapterNumberError: if s is not a positive integer
    """
    if not is_valid_positive_number(s):
        raise InvalidChapterNumberError(s)
    return int(s)


def parse_verse_range(range_string: str) -> VerseRange:
    """
    Parse "N", "N-M" or "N-" into a VerseRange.

    "3-" is an open range and reads the same as "3". "5-3" is kept as given.

    Raises:
        InvalidVerseNumberError: if either bound is not a positive integer
    """
    parts = range_string.split("-")
    if len(parts) > 2 or not is_valid_positive_number(parts[0]):
        raise InvalidVerseNumberError(range_string)

    end = None
    if len(parts) == 2 and parts[1]:
        if not is_valid_positive_number(parts[1]):
            raise InvalidVerseNumberError(range_string)
        end = int(parts[1])

    return VerseRange(int(parts[0]), end)


def query_priority_is_by_verse(query: str) -> bool:
    """
    Decide how commas are read.

    "1,2,3:1,4"   -> False (chapters 1, 2, 3(v1), 4)
    "1:1,2,3:1,4" -> True  (chapter 1(v1, v2), chapter 3(v1, v4))
    """
    first_comma = query.find(",")
    first_colon = query.find(":")

    if first_colon < 0:
        return False
    if first_comma < 0:
        return True
    return first_colon < first_comma


class ReferenceScanner:
    """
    State machine over reference tokens.

    Text tokens are held as pending until a separator (or end of input)
    decides whether they are a chapter or a verse range. The action taken for
    each (priority, state, separator) comes from TRANSITIONS; end of input is
    handled by FINISH.
    """

    def __init__(self, priority: Priority):
        self.priority = priority
        self.state = ScanState.EXPECT_CHAPTER
        self.pending: Optional[Token] = None
        self.current: Optional[ChapterData] = None
        self.refs: List[ChapterData] = []

    def feed(self, token: Token) -> None:
        if not token.is_separator:
            self.pending = token
            return

        action, next_state = TRANSITIONS[(self.priority, self.state, token.kind)]
        action(self)
        self.state = next_state

    def finish(self) -> List[ChapterData]:
        FINISH[(self.priority, self.state)](self)
        return self.refs

    def _take(self) -> str:
        text = self.pending.text if self.pending else ""
        self.pending = None
        return text

    def _close_chapter(self) -> None:
        if self.current is not None:
            self.refs.append(self.current)
            self.current = None

    # -- separator actions --

    def open_chapter(self) -> None:
        chapter = parse_chapter_number(self._take())
        self._close_chapter()
        self.current = ChapterData(chapter)

    def add_verse(self) -> None:
        verse = parse_verse_range(self._take())
        if self.current is not None:
            self.current.verses.append(verse)

    def add_verse_and_close(self) -> None:
        self.add_verse()
        self._close_chapter()

    def add_bare_chapter(self) -> None:
        self.refs.append(ChapterData(parse_chapter_number(self._take())))

    # -- end-of-input actions --

    def flush_bare_chapter(self) -> None:
        if self.pending is not None:
            self.add_bare_chapter()

    def flush_verse(self) -> None:
        if self.pending is not None:
            self.add_verse()
        self._close_chapter()

    def flush_open_chapter(self) -> None:
        if self.pending is None and self.current is not None:
            self.current.verses.append(VerseRange(1))
        self.flush_verse()

    def discard(self) -> None:
        self.pending = None


_Action = Callable[[ReferenceScanner], None]

TRANSITIONS: Dict[Tuple[Priority, ScanState, TokenKind], Tuple[_Action, ScanState]] = {
    (Priority.VERSE, ScanState.EXPECT_CHAPTER, TokenKind.COMMA):
        (ReferenceScanner.add_verse, ScanState.EXPECT_CHAPTER),
    (Priority.VERSE, ScanState.CHAPTER_OPEN_NO_VERSE, TokenKind.COMMA):
        (ReferenceScanner.add_verse, ScanState.EXPECT_VERSE_TOKEN),
    (Priority.VERSE, ScanState.EXPECT_VERSE_TOKEN, TokenKind.COMMA):
        (ReferenceScanner.add_verse, ScanState.EXPECT_VERSE_TOKEN),

    (Priority.CHAPTER, ScanState.EXPECT_CHAPTER, TokenKind.COMMA):
        (ReferenceScanner.add_bare_chapter, ScanState.EXPECT_CHAPTER),
    (Priority.CHAPTER, ScanState.CHAPTER_OPEN_NO_VERSE, TokenKind.COMMA):
        (ReferenceScanner.add_verse_and_close, ScanState.EXPECT_CHAPTER),
}

# ':' always opens a chapter
for _priority in Priority:
    for _state in ScanState:
        TRANSITIONS[(_priority, _state, TokenKind.COLON)] = (
            ReferenceScanner.open_chapter,
            ScanState.CHAPTER_OPEN_NO_VERSE,
        )

FINISH: Dict[Tuple[Priority, ScanState], _Action] = {
    (Priority.VERSE, ScanState.EXPECT_CHAPTER): ReferenceScanner.discard,
    (Priority.VERSE, ScanState.CHAPTER_OPEN_NO_VERSE): ReferenceScanner.flush_open_chapter,
    (Priority.VERSE, ScanState.EXPECT_VERSE_TOKEN): ReferenceScanner.flush_verse,

    (Priority.CHAPTER, ScanState.EXPECT_CHAPTER): ReferenceScanner.flush_bare_chapter,
    (Priority.CHAPTER, ScanState.CHAPTER_OPEN_NO_VERSE): ReferenceScanner.flush_open_chapter,
}


def _scan(query: str, priority: Priority) -> List[ChapterData]:
    scanner = ReferenceScanner(priority)
    for token in tokenize_references(query):
        scanner.feed(token)
    return scanner.finish()


def parse_reference_with_verse_priority(query: str) -> List[ChapterData]:
    """Parse where commas continue the current chapter's verse list."""
    return _scan(query, Priority.VERSE)


def parse_reference_with_chapter_priority(query: str) -> List[ChapterData]:
    """Parse where top-level commas start new chapters."""
    return _scan(query, Priority.CHAPTER)


def parse_references(query: str) -> List[ChapterData]:
    """
    Parse a reference string into chapters, picking the priority mode.

    Args:
        query: Text after the book name, e.g. "1:1-2,4-6" (may be empty)

    Returns:
        List of ChapterData; empty for a whole-book request

    Raises:
        ReferenceParseError: on an invalid chapter or verse number
    """
    if query_priority_is_by_verse(query):
        return parse_reference_with_verse_priority(query)
    return parse_reference_with_chapter_priority(query)
