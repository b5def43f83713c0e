"""Date pattern syntax package.

Tokenizer for the legacy date pattern grammar. The compiler lives in
fastdateformat.syntax.compiler and is imported from there directly: it
depends on runtime rules, which in turn use this tokenizer.

Python 3.13+.
"""

from .tokenizer import (
    PatternToken,
    ScanState,
    TokenKind,
    is_pattern_letter,
    next_token,
    tokenize,
)

__all__ = [
    "PatternToken",
    "ScanState",
    "TokenKind",
    "is_pattern_letter",
    "next_token",
    "tokenize",
]
