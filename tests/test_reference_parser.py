# tests/test_reference_parser.py
"""
Tests for reference_lexer.py and reference_parser.py - the chapter/verse grammar.
"""

import pytest

from scripture_query.errors import InvalidChapterNumberError, InvalidVerseNumberError
from scripture_query.models import ChapterData, VerseRange
from scripture_query.reference_lexer import TokenKind, tokenize_references
from scripture_query.reference_parser import (
    is_valid_positive_number,
    parse_chapter_number,
    parse_reference_with_chapter_priority,
    parse_reference_with_verse_priority,
    parse_references,
    parse_verse_range,
    query_priority_is_by_verse,
)


def _kinds(query):
    return [token.kind for token in tokenize_references(query)]


# =============================================================================
# Lexer
# =============================================================================

def test_tokenize_references():
    """Test token kinds and text."""
    tokens = tokenize_references("1:1-2, 4")
    assert [t.kind for t in tokens] == [
        TokenKind.NUMBER, TokenKind.COLON, TokenKind.RANGE, TokenKind.COMMA, TokenKind.NUMBER,
    ]
    assert [t.text for t in tokens] == ["1", ":", "1-2", ",", "4"]
    print("✓ tokenize_references: kinds and text")


def test_tokenize_references_spaces_and_dashes():
    """Test that spaces are dropped and dashes become hyphens."""
    assert [t.text for t in tokenize_references("1 0 : 3 – 5")] == ["10", ":", "3-5"]
    assert [t.text for t in tokenize_references("2:3—")] == ["2", ":", "3-"]
    assert _kinds("3-") == [TokenKind.RANGE]
    assert _kinds("abc") == [TokenKind.WORD]
    assert _kinds("") == []
    print("✓ tokenize_references: spaces dropped, dashes normalized")


# =============================================================================
# Numbers and ranges
# =============================================================================

def test_is_valid_positive_number():
    """Test positive integer detection."""
    for n in ["1", "2", "10", "15", "100", "150"]:
        assert is_valid_positive_number(n) is True, f"Failed for {n!r}"
    for n in ["0", "-1", "a", "-10", "-500", "", "1a", "00"]:
        assert is_valid_positive_number(n) is False, f"Failed for {n!r}"
    print("✓ is_valid_positive_number")


def test_parse_chapter_number():
    """Test chapter parsing and its error message."""
    assert parse_chapter_number("12") == 12

    with pytest.raises(InvalidChapterNumberError) as exc_info:
        parse_chapter_number("x")
    assert str(exc_info.value) == "Invalid chapter number: x"
    assert exc_info.value.text == "x"
    print("✓ parse_chapter_number")


def test_parse_verse_range():
    """Test single verses, ranges and open ranges."""
    cases = [
        {"input": "1", "expected": VerseRange(1, None)},
        {"input": "1-5", "expected": VerseRange(1, 5)},
        {"input": "10-20", "expected": VerseRange(10, 20)},
        {"input": "3-", "expected": VerseRange(3, None)},
        {"input": "5-3", "expected": VerseRange(5, 3)},
    ]

    for case in cases:
        assert parse_verse_range(case["input"]) == case["expected"], f"Failed for {case['input']!r}"
    assert parse_verse_range("1-5").to_dict() == {"from": 1, "to": 5}
    print("✓ parse_verse_range")


def test_parse_verse_range_invalid():
    """Test that bad verse tokens raise."""
    for text in ["", "0", "a", "-3", "1-a", "1-2-3", "1-0"]:
        with pytest.raises(InvalidVerseNumberError):
            parse_verse_range(text)
    print("✓ parse_verse_range: rejects bad tokens")


# =============================================================================
# Priority decision
# =============================================================================

def test_query_priority_is_by_verse():
    """Test which separator decides the mode."""
    cases = [
        {"input": "1,2,3:1,4", "expected": False},
        {"input": "1:1,2,3:1,4", "expected": True},
        {"input": "", "expected": False},
        {"input": "1", "expected": False},
        {"input": "1,2", "expected": False},
        {"input": "1:2", "expected": True},
    ]

    for case in cases:
        assert query_priority_is_by_verse(case["input"]) is case["expected"], f"Failed for {case['input']!r}"
    print("✓ query_priority_is_by_verse")


# =============================================================================
# Grammar
# =============================================================================

def test_parse_reference_with_verse_priority():
    """Test verse-priority parsing."""
    cases = [
        {"input": "1:1", "expected": [ChapterData(1, [VerseRange(1)])]},
        {"input": "1:", "expected": [ChapterData(1, [VerseRange(1)])]},
        {"input": "1:1-2", "expected": [ChapterData(1, [VerseRange(1, 2)])]},
        {"input": "1:1-2,4-6", "expected": [ChapterData(1, [VerseRange(1, 2), VerseRange(4, 6)])]},
        {"input": "1:1-2,4-6,", "expected": [ChapterData(1, [VerseRange(1, 2), VerseRange(4, 6)])]},
        {"input": "1:1-2,2:1", "expected": [
            ChapterData(1, [VerseRange(1, 2)]),
            ChapterData(2, [VerseRange(1)]),
        ]},
        {"input": "1:1,2,3:1,4", "expected": [
            ChapterData(1, [VerseRange(1), VerseRange(2)]),
            ChapterData(3, [VerseRange(1), VerseRange(4)]),
        ]},
        {"input": "1,2:3", "expected": [ChapterData(2, [VerseRange(3)])]},
        {"input": "", "expected": []},
    ]

    for case in cases:
        assert parse_reference_with_verse_priority(case["input"]) == case["expected"], f"Case ({case['input']})"
    print("✓ parse_reference_with_verse_priority")


def test_verse_priority_tokens_before_first_chapter():
    """Test that verses before any chapter are checked, then dropped."""
    assert parse_reference_with_verse_priority("1,2:3") == [ChapterData(2, [VerseRange(3)])]
    assert parse_reference_with_verse_priority("4-5,1:2") == [ChapterData(1, [VerseRange(2)])]

    with pytest.raises(InvalidVerseNumberError) as exc_info:
        parse_reference_with_verse_priority("x,2:3")
    assert exc_info.value.text == "x"
    print("✓ verse priority: pre-chapter verses validated and dropped")


def test_parse_reference_with_chapter_priority():
    """Test chapter-priority parsing."""
    cases = [
        {"input": "1,2:1,3", "expected": [
            ChapterData(1), ChapterData(2, [VerseRange(1)]), ChapterData(3),
        ]},
        {"input": "1,2:1,3:1-2,4", "expected": [
            ChapterData(1),
            ChapterData(2, [VerseRange(1)]),
            ChapterData(3, [VerseRange(1, 2)]),
            ChapterData(4),
        ]},
        {"input": "1", "expected": [ChapterData(1)]},
        {"input": "1,2,", "expected": [ChapterData(1), ChapterData(2)]},
        {"input": "2,1:", "expected": [ChapterData(2), ChapterData(1, [VerseRange(1)])]},
        {"input": "", "expected": []},
    ]

    for case in cases:
        assert parse_reference_with_chapter_priority(case["input"]) == case["expected"], f"Case ({case['input']})"
    print("✓ parse_reference_with_chapter_priority")


def test_chapter_priority_second_colon_keeps_open_chapter():
    """Test that a chapter opened by ':' is not lost when another ':' follows."""
    assert parse_reference_with_chapter_priority("1,2:3:4") == [
        ChapterData(1),
        ChapterData(2),
        ChapterData(3, [VerseRange(4)]),
    ]
    print("✓ chapter priority: open chapter kept")


def test_parse_references():
    """Test mode selection end to end."""
    cases = [
        {"input": "1:", "expected": [ChapterData(1, [VerseRange(1)])]},
        {"input": "1:1", "expected": [ChapterData(1, [VerseRange(1)])]},
        {"input": "1:1-2", "expected": [ChapterData(1, [VerseRange(1, 2)])]},
        {"input": "1:1-2,4-6", "expected": [ChapterData(1, [VerseRange(1, 2), VerseRange(4, 6)])]},
        {"input": "1:1-2,4-6,", "expected": [ChapterData(1, [VerseRange(1, 2), VerseRange(4, 6)])]},
        {"input": "1,2:1,3", "expected": [
            ChapterData(1), ChapterData(2, [VerseRange(1)]), ChapterData(3),
        ]},
        {"input": "1:1-2,2:1", "expected": [
            ChapterData(1, [VerseRange(1, 2)]),
            ChapterData(2, [VerseRange(1)]),
        ]},
        {"input": "1,2:1,3:1-2,4", "expected": [
            ChapterData(1),
            ChapterData(2, [VerseRange(1)]),
            ChapterData(3, [VerseRange(1, 2)]),
            ChapterData(4),
        ]},
        {"input": "1", "expected": [ChapterData(1)]},
        {"input": "", "expected": []},
        {"input": "10:1–3", "expected": [ChapterData(10, [VerseRange(1, 3)])]},
    ]

    for case in cases:
        assert parse_references(case["input"]) == case["expected"], f"Case ({case['input']})"
    print("✓ parse_references")


def test_parse_references_errors():
    """Test that bad numbers raise with the offending literal."""
    with pytest.raises(InvalidChapterNumberError) as exc_info:
        parse_references("0:1")
    assert str(exc_info.value) == "Invalid chapter number: 0"

    with pytest.raises(InvalidChapterNumberError) as exc_info:
        parse_references("1,x")
    assert exc_info.value.text == "x"

    with pytest.raises(InvalidChapterNumberError):
        parse_references("::1")

    with pytest.raises(InvalidVerseNumberError) as exc_info:
        parse_references("1:0")
    assert str(exc_info.value) == "Invalid verse number: 0"
    print("✓ parse_references: errors carry the literal")
