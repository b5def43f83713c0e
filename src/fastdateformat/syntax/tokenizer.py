"""Date pattern tokenizer.

Splits a legacy date pattern into field tokens and literal tokens.

Grammar (informal):
    pattern  := token*
    token    := field | literal
    field    := L+            (maximal run of one ASCII letter L)
    literal  := (char | "''" | "'" quoted "'")+
    quoted   := (char | "''")*

Quoting:
    - A lone single quote toggles the quoted state; letters inside quotes
      are literal text.
    - Two consecutive single quotes produce one literal quote, inside or
      outside a quoted span.
    - An unterminated quote runs to the end of the pattern.

Only ASCII letters start fields. Other alphabetic characters (CJK, accented
Latin) are literal text, as in CLDR patterns like "y年M月d日".

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

__all__ = [
    "PatternToken",
    "ScanState",
    "TokenKind",
    "is_pattern_letter",
    "next_token",
    "tokenize",
]

_QUOTE = "'"


class TokenKind(Enum):
    """Kind of pattern token."""

    FIELD = auto()
    LITERAL = auto()


class ScanState(Enum):
    """Literal scanner state."""

    UNQUOTED = auto()
    QUOTED = auto()


@dataclass(frozen=True, slots=True)
class PatternToken:
    """One token of a date pattern.

    Attributes:
        kind: FIELD for a letter run, LITERAL for copied text
        text: Letter run (FIELD) or unquoted literal text (LITERAL)
        position: Offset of the token's first character in the pattern

    Example:
        >>> PatternToken(TokenKind.FIELD, "yyyy", 0).letter
        'y'
    """

    kind: TokenKind
    text: str
    position: int = 0

    @property
    def letter(self) -> str:
        """Leading character (the field letter for FIELD tokens)."""
        return self.text[:1]

    def __len__(self) -> int:
        return len(self.text)


def is_pattern_letter(ch: str) -> bool:
    """Check whether ch starts a field (ASCII A-Z or a-z).

    str.isalpha() is not used: it accepts non-ASCII letters.
    """
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def next_token(pattern: str, index: int) -> tuple[PatternToken | None, int]:
    """Read the token starting at index.

    Args:
        pattern: Full pattern string
        index: Offset to start reading at

    Returns:
        (token, next_index). token is None at end of pattern.

    Example:
        >>> next_token("yyyy-MM", 0)
        (PatternToken(kind=<TokenKind.FIELD: 1>, text='yyyy', position=0), 4)
        >>> next_token("yyyy-MM", 4)
        (PatternToken(kind=<TokenKind.LITERAL: 2>, text='-', position=4), 5)
    """
    length = len(pattern)
    if index >= length:
        return None, index

    ch = pattern[index]
    if is_pattern_letter(ch):
        end = index + 1
        while end < length and pattern[end] == ch:
            end += 1
        return PatternToken(TokenKind.FIELD, pattern[index:end], index), end

    return _scan_literal(pattern, index)


def _scan_literal(pattern: str, start: int) -> tuple[PatternToken, int]:
    length = len(pattern)
    state = ScanState.UNQUOTED
    out: list[str] = []
    i = start

    while i < length:
        ch = pattern[i]
        if ch == _QUOTE:
            if i + 1 < length and pattern[i + 1] == _QUOTE:
                out.append(_QUOTE)
                i += 2
                continue
            state = ScanState.QUOTED if state is ScanState.UNQUOTED else ScanState.UNQUOTED
            i += 1
            continue
        if state is ScanState.UNQUOTED and is_pattern_letter(ch):
            break
        out.append(ch)
        i += 1

    return PatternToken(TokenKind.LITERAL, "".join(out), start), i


def tokenize(pattern: str) -> Iterator[PatternToken]:
    """Yield every token of pattern in order.

    Example:
        >>> [t.text for t in tokenize("yyyy-MM-dd'T'HH")]
        ['yyyy', '-', 'MM', '-', 'dd', 'T', 'HH']
    """
    index = 0
    while True:
        token, index = next_token(pattern, index)
        if token is None:
            return
        yield token
