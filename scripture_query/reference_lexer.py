# scripture_query/reference_lexer.py
"""
Tokenizer for the chapter/verse part of a segment.

"1:1-2, 4" -> NUMBER(1) COLON RANGE(1-2) COMMA NUMBER(4)

Spaces are dropped entirely, so "1 0:1" reads as "10:1". En and em dashes
are read as hyphens.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List


class TokenKind(Enum):
    NUMBER = "number"
    RANGE = "range"
    WORD = "word"
    COLON = "colon"
    COMMA = "comma"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    @property
    def is_separator(self) -> bool:
        return self.kind in (TokenKind.COLON, TokenKind.COMMA)


_SEPARATORS = {":": TokenKind.COLON, ",": TokenKind.COMMA}
_DASHES = str.maketrans({"–": "-", "—": "-"})

_NUMBER_RE = re.compile(r'[0-9]+')
_RANGE_RE = re.compile(r'[0-9]+-[0-9]*')


def _classify(text: str) -> TokenKind:
    if _NUMBER_RE.fullmatch(text):
        return TokenKind.NUMBER
    if _RANGE_RE.fullmatch(text):
        return TokenKind.RANGE
    return TokenKind.WORD


def tokenize_references(query: str) -> List[Token]:
    """Split a reference string into separator and text tokens."""
    tokens: List[Token] = []
    buffer = ""

    def flush():
        if buffer:
            tokens.append(Token(_classify(buffer), buffer))

    for char in query.translate(_DASHES):
        if char == " ":
            continue

        kind = _SEPARATORS.get(char)
        if kind is not None:
            flush()
            buffer = ""
            tokens.append(Token(kind, char))
            continue

        buffer += char

    flush()
    return tokens
