"""Tests for the date pattern tokenizer.

Covers field runs, literal runs, quoting and the doubled-quote escape.
"""

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from fastdateformat.syntax import (
    PatternToken,
    TokenKind,
    is_pattern_letter,
    next_token,
    tokenize,
)


def _texts(pattern: str) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.text) for token in tokenize(pattern)]


class TestFieldTokens:
    """Letter runs become FIELD tokens."""

    def test_run_of_same_letter(self) -> None:
        """A maximal run of one letter is one token."""
        token, index = next_token("yyyyMM", 0)
        assert token == PatternToken(TokenKind.FIELD, "yyyy", 0)
        assert index == 4

    def test_adjacent_different_letters_split(self) -> None:
        """A letter change starts a new token."""
        assert _texts("yyMMdd") == [
            (TokenKind.FIELD, "yy"),
            (TokenKind.FIELD, "MM"),
            (TokenKind.FIELD, "dd"),
        ]

    def test_letter_property(self) -> None:
        """letter is the leading character."""
        token, _ = next_token("EEEE", 0)
        assert token is not None
        assert token.letter == "E"
        assert len(token) == 4

    def test_position_recorded(self) -> None:
        """Tokens remember where they start."""
        positions = [token.position for token in tokenize("yyyy-MM-dd")]
        assert positions == [0, 4, 5, 7, 8]


class TestLiteralTokens:
    """Non-letters and quoted text become LITERAL tokens."""

    def test_punctuation_run(self) -> None:
        """Consecutive non-letters form one literal."""
        assert _texts("HH:mm:ss") == [
            (TokenKind.FIELD, "HH"),
            (TokenKind.LITERAL, ":"),
            (TokenKind.FIELD, "mm"),
            (TokenKind.LITERAL, ":"),
            (TokenKind.FIELD, "ss"),
        ]

    def test_quoted_letters_are_literal(self) -> None:
        """Letters inside quotes do not start fields."""
        assert _texts("yyyy'T'HH") == [
            (TokenKind.FIELD, "yyyy"),
            (TokenKind.LITERAL, "T"),
            (TokenKind.FIELD, "HH"),
        ]

    def test_quoted_text_merges_with_surrounding_literal(self) -> None:
        """Quoted and unquoted literal text form one token."""
        assert _texts("h 'o''clock' a") == [
            (TokenKind.FIELD, "h"),
            (TokenKind.LITERAL, " o'clock "),
            (TokenKind.FIELD, "a"),
        ]

    def test_doubled_quote_outside_quotes(self) -> None:
        """'' outside quotes is one literal quote."""
        assert _texts("HH''mm") == [
            (TokenKind.FIELD, "HH"),
            (TokenKind.LITERAL, "'"),
            (TokenKind.FIELD, "mm"),
        ]

    def test_lone_quote_is_empty_literal(self) -> None:
        """A pattern of one quote yields one empty literal."""
        assert _texts("'") == [(TokenKind.LITERAL, "")]

    def test_unterminated_quote_runs_to_end(self) -> None:
        """An unclosed quote makes the rest of the pattern literal."""
        assert _texts("yy'abc") == [(TokenKind.FIELD, "yy"), (TokenKind.LITERAL, "abc")]

    def test_non_ascii_letters_are_literal(self) -> None:
        """CJK and accented letters never start fields."""
        assert _texts("y年M月") == [
            (TokenKind.FIELD, "y"),
            (TokenKind.LITERAL, "年"),
            (TokenKind.FIELD, "M"),
            (TokenKind.LITERAL, "月"),
        ]


class TestEndOfPattern:
    """End of input."""

    def test_next_token_at_end_returns_none(self) -> None:
        """Reading past the end yields None and the same index."""
        assert next_token("yy", 2) == (None, 2)

    def test_empty_pattern_has_no_tokens(self) -> None:
        """The empty pattern tokenizes to nothing."""
        assert list(tokenize("")) == []


class TestIsPatternLetter:
    """ASCII-only letter classification."""

    @pytest.mark.parametrize("ch", ["a", "z", "A", "Z", "y"])
    def test_ascii_letters(self, ch: str) -> None:
        """ASCII letters qualify."""
        assert is_pattern_letter(ch)

    @pytest.mark.parametrize("ch", ["é", "年", "1", "-", "'", " "])
    def test_other_characters(self, ch: str) -> None:
        """Everything else does not."""
        assert not is_pattern_letter(ch)


class TestTokenizerProperties:
    """Properties over generated patterns."""

    @given(st.text(alphabet="yMdHms-: /.,T", max_size=30))
    @example("yyyy-MM-dd HH:mm")
    @example("")
    def test_unquoted_reconstruction_without_quotes(self, pattern: str) -> None:
        """Tokens of a quote-free pattern concatenate back to the pattern."""
        assert "".join(token.text for token in tokenize(pattern)) == pattern

    @given(st.text(max_size=40))
    def test_tokenizer_terminates_and_advances(self, pattern: str) -> None:
        """Every token starts strictly after the previous one."""
        positions = [token.position for token in tokenize(pattern)]
        assert positions == sorted(set(positions))
        assert all(0 <= p < len(pattern) for p in positions)

    @given(st.text(alphabet="abcXYZ", min_size=1, max_size=20))
    def test_field_tokens_are_single_letter_runs(self, pattern: str) -> None:
        """Unquoted letter-only patterns split into same-letter runs."""
        tokens = list(tokenize(pattern))
        assert all(token.kind is TokenKind.FIELD for token in tokens)
        assert all(set(token.text) == {token.letter} for token in tokens)
        assert "".join(token.text for token in tokens) == pattern
