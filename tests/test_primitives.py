"""
Primitive parser tests

Tests literal, single-character and end-of-input parsers in isolation.
"""

import pytest

from barrage.exceptions import LiteralMismatch, PredicateMismatch, TrailingInput, UnexpectedEndOfInput
from barrage.lib.primitives import end, literal, match_char_where, numeric
from barrage.models.parser import Success


class TestLiteral:
    """Exact prefix matching"""

    def test_prefix_match(self):
        """Matched span is the output, the rest is remaining"""
        result = literal("abc").parse("abcdef")

        assert result.output == "abc"
        assert result.remaining == "def"

    def test_whole_input(self):
        """Matching the whole input leaves nothing"""
        assert literal("hello").parse("hello") == Success("hello", "")

    def test_mismatch(self):
        """A different prefix fails and quotes the literal"""
        with pytest.raises(LiteralMismatch) as exc:
            literal("abc").parse("xyz")

        assert exc.value.expected == "abc"
        assert "`abc`" in str(exc.value)

    def test_input_shorter_than_literal(self):
        """Input that is a strict prefix of the literal fails"""
        with pytest.raises(LiteralMismatch):
            literal("goodbye").parse("good")

    def test_empty_literal(self):
        """Empty literal always matches without consuming"""
        assert literal("").parse("abc") == Success("", "abc")

    def test_call_is_parse(self):
        """Calling a parser is the same as parse()"""
        assert literal("a")("ab") == literal("a").parse("ab")


class TestNumeric:
    """Single decimal digit"""

    def test_first_digit(self):
        """Only one digit is consumed"""
        result = numeric().parse("123")

        assert result.output == "1"
        assert result.remaining == "23"

    def test_unicode_decimal_digit(self):
        """Digits from other scripts are decimal digits too"""
        assert numeric().parse("٣x") == Success("٣", "x")

    def test_superscript_is_not_decimal(self):
        """Numeric-but-not-decimal characters are rejected"""
        with pytest.raises(PredicateMismatch):
            numeric().parse("²")

    def test_non_digit(self):
        """Non-digit reports the offending character"""
        with pytest.raises(PredicateMismatch) as exc:
            numeric().parse("a1")

        assert exc.value.char == "a"
        assert "non-numeric character" in str(exc.value)

    def test_empty_input(self):
        """Empty input is a distinct failure"""
        with pytest.raises(UnexpectedEndOfInput):
            numeric().parse("")


class TestMatchCharWhere:
    """Generic single-character predicate"""

    def test_predicate_match(self):
        """Character satisfying the predicate is consumed"""
        upper = match_char_where(str.isupper)

        assert upper.parse("Ab") == Success("A", "b")

    def test_predicate_mismatch_default_wording(self):
        """Default description mentions the predicate"""
        with pytest.raises(PredicateMismatch) as exc:
            match_char_where(str.isupper).parse("ab")

        assert str(exc.value) == "`a` does not satisfy predicate"

    def test_single_codepoint(self):
        """Multi-byte characters are consumed as one codepoint"""
        assert match_char_where(lambda c: c == "é").parse("éa") == Success("é", "a")


class TestEnd:
    """End of input"""

    def test_empty_input(self):
        """Empty input succeeds"""
        assert end().parse("") == Success(None, "")

    def test_non_empty_input(self):
        """Anything left over fails"""
        with pytest.raises(TrailingInput) as exc:
            end().parse("x")

        assert exc.value.remaining == "x"
        assert str(exc.value) == "not end of input"
