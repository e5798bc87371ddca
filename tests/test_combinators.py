"""
Combinator tests

Tests sequencing, mapping, end enforcement, repetition, alternation and
error context chaining.
"""

import dataclasses

import pytest

from barrage.exceptions import (
    EmptyRepetition,
    LiteralMismatch,
    NoAlternativeMatched,
    ParseContextError,
    PredicateMismatch,
    TrailingInput,
)
from barrage.lib.combinators import (
    FunctionParser,
    as_parser,
    map_one_of,
    n_or_more,
    one_of,
    one_or_more,
    parser,
    zero_or_more,
)
from barrage.lib.primitives import Literal, end, literal, numeric
from barrage.models.parser import Success


class TestThen:
    """Sequencing"""

    def test_both_succeed(self):
        """Output is the pair, remaining is what the second parser left"""
        result = literal("ab").then(literal("cd")).parse("abcdef")

        assert result == Success(("ab", "cd"), "ef")

    def test_string_is_a_literal(self):
        """A plain string can be sequenced directly"""
        result = numeric().then("ms").parse("5ms")

        assert result == Success(("5", "ms"), "")

    def test_first_failure_context(self):
        """First parser failure is wrapped with its stage"""
        with pytest.raises(ParseContextError) as exc:
            literal("ab").then("cd").parse("xxcd")

        assert str(exc.value) == "first parser unsuccessful"
        assert isinstance(exc.value.__cause__, LiteralMismatch)

    def test_second_failure_context(self):
        """Second parser failure is wrapped with its stage"""
        with pytest.raises(ParseContextError) as exc:
            literal("ab").then("cd").parse("abxx")

        assert str(exc.value) == "second parser unsuccessful"
        assert exc.value.__cause__.expected == "cd"

    def test_nested_chain(self):
        """Each level of nesting adds exactly one context layer"""
        sequence = literal("a").then(literal("b").then("c"))

        with pytest.raises(ParseContextError) as exc:
            sequence.parse("abx")

        assert exc.value.chain() == [
            "second parser unsuccessful",
            "second parser unsuccessful",
            "expected literal `c` not found in input",
        ]
        assert isinstance(exc.value.root_cause, LiteralMismatch)


class TestMap:
    """Output transformation"""

    def test_transform_output(self):
        """Function is applied, remaining untouched"""
        assert numeric().map(int).parse("7x") == Success(7, "x")

    def test_failure_unchanged(self):
        """Failure passes through without an extra context layer"""
        with pytest.raises(PredicateMismatch):
            numeric().map(int).parse("x")

    def test_function_error_propagates(self):
        """Errors from the mapping function are not turned into parse errors"""
        with pytest.raises(ZeroDivisionError):
            numeric().map(lambda c: int(c) / 0).parse("1")


class TestEndMethod:
    """Whole-input enforcement"""

    def test_consumes_everything(self):
        """Parser consuming the whole input passes"""
        assert literal("abc").end().parse("abc") == Success("abc", "")

    def test_trailing_input(self):
        """Trailing input fails"""
        with pytest.raises(TrailingInput) as exc:
            literal("abc").end().parse("abcd")

        assert exc.value.remaining == "d"

    def test_inner_failure_unchanged(self):
        """Inner failure propagates as-is"""
        with pytest.raises(LiteralMismatch):
            literal("abc").end().parse("xyz")


class TestRepetition:
    """zero_or_more, one_or_more and n_or_more"""

    def test_zero_or_more_none(self):
        """No match is an empty success"""
        assert zero_or_more(numeric()).parse("abc") == Success([], "abc")

    def test_zero_or_more_some(self):
        """Outputs are collected in order"""
        assert zero_or_more(numeric()).parse("12a") == Success(["1", "2"], "a")

    def test_zero_or_more_empty_input(self):
        """Empty input is an empty success"""
        assert zero_or_more(numeric()).parse("") == Success([], "")

    def test_zero_width_match_terminates(self):
        """A parser that never consumes does not loop forever"""
        always = parser(lambda text: Success("x", text))

        assert zero_or_more(always).parse("abc") == Success([], "abc")
        assert zero_or_more(end()).parse("") == Success([], "")

    def test_one_or_more(self):
        """All leading digits are collected"""
        assert one_or_more(numeric()).parse("123abc") == Success(["1", "2", "3"], "abc")

    def test_one_or_more_empty(self):
        """Zero matches is an error"""
        with pytest.raises(EmptyRepetition) as exc:
            one_or_more(numeric()).parse("abc")

        assert str(exc.value) == "parser did not find any values it could consume"

    def test_n_or_more_stops_at_n(self):
        """At most n repetitions are applied"""
        assert n_or_more(2, numeric()).parse("123") == Success(["1", "2"], "3")

    def test_n_or_more_fewer_than_n(self):
        """Fewer than n matches still succeeds"""
        assert n_or_more(5, numeric()).parse("12x") == Success(["1", "2"], "x")

    def test_n_or_more_none(self):
        """No match at all fails"""
        with pytest.raises(EmptyRepetition):
            n_or_more(3, numeric()).parse("x")

    def test_n_or_more_zero_times(self):
        """Zero repetitions can never produce a value"""
        with pytest.raises(EmptyRepetition):
            n_or_more(0, numeric()).parse("1")

    def test_n_or_more_negative(self):
        """Negative count is rejected at construction"""
        with pytest.raises(ValueError):
            n_or_more(-1, numeric())


class TestAlternation:
    """one_of and map_one_of"""

    def test_first_success(self):
        """Matching candidate is returned"""
        assert one_of("s", "ms", "ns", "us").parse("ms") == Success("ms", "")

    def test_first_match_wins(self):
        """Order decides between ambiguous prefixes"""
        assert one_of("a", "ab").parse("abc") == Success("a", "bc")
        assert one_of("ab", "a").parse("abc") == Success("ab", "c")

    def test_no_candidate(self):
        """All failures are kept for diagnostics"""
        with pytest.raises(NoAlternativeMatched) as exc:
            one_of("s", "ms").parse("x")

        assert str(exc.value) == "none of provided options matched"
        assert [err.expected for err in exc.value.attempts] == ["s", "ms"]

    def test_parser_candidates(self):
        """Candidates may be arbitrary parsers"""
        digit_or_dash = one_of(numeric(), "-")

        assert digit_or_dash.parse("-1") == Success("-", "1")
        assert digit_or_dash.parse("1-") == Success("1", "-")

    def test_map_one_of(self):
        """The matched literal selects the mapped value"""
        switch = map_one_of({"on": True, "off": False})

        assert switch.parse("off!") == Success(False, "!")
        with pytest.raises(NoAlternativeMatched):
            switch.parse("maybe")


class TestParserCapability:
    """Adapters, immutability and purity"""

    def test_as_parser(self):
        """Strings, callables and parsers are all accepted"""
        lit = literal("x")

        assert as_parser(lit) is lit
        assert as_parser("x") == Literal("x")
        assert isinstance(as_parser(lambda text: Success(text, "")), FunctionParser)

    def test_as_parser_rejects(self):
        """Other values are not parsers"""
        with pytest.raises(TypeError):
            as_parser(42)

    def test_decorated_function(self):
        """A decorated function composes like any parser"""

        @parser
        def rest(text: str) -> Success[str]:
            return Success(text, "")

        assert literal("a").then(rest).parse("abc") == Success(("a", "bc"), "")

    def test_frozen(self):
        """Combinators cannot be modified after construction"""
        sequence = literal("a").then("b")

        with pytest.raises(dataclasses.FrozenInstanceError):
            sequence.first = literal("z")

    def test_repeat_parse_is_identical(self):
        """Parsing twice gives equal results"""
        composed = one_or_more(numeric()).then(one_of("s", "ms")).end()

        assert composed.parse("42ms") == composed.parse("42ms")

    def test_shared_child(self):
        """One parser instance can serve several combinators"""
        digit = numeric()
        pair = digit.then(digit)

        assert pair.parse("12") == Success(("1", "2"), "")
