"""
Parser capability and the combinators that compose it

A parser is any object with a ``parse(text)`` method returning a Success
(typed output plus the unconsumed suffix of ``text``) or raising a
ParseError. Parsers never hold a cursor: position is expressed purely by
handing the remaining suffix to the next parser.

Every combinator here is a frozen dataclass owning its child parsers, so a
composed parser can be shared freely and re-used across inputs.

Example:
    >>> from barrage.lib.primitives import numeric, literal
    >>> digits = one_or_more(numeric()).map("".join)
    >>> digits.then(literal("ms")).end().parse("500ms").output
    ('500', 'ms')
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, List, Mapping, Tuple, TypeVar, Union

from ..exceptions import EmptyRepetition, NoAlternativeMatched, ParseContextError, ParseError, TrailingInput
from ..models.parser import Success


O = TypeVar("O")
O2 = TypeVar("O2")
V = TypeVar("V")


class Parser(ABC, Generic[O]):
    """
    Something that consumes a prefix of a string and yields a typed value

    Subclasses implement parse(); the chaining helpers below build new
    parsers and never modify this one.
    """

    @abstractmethod
    def parse(self, text: str) -> Success[O]:
        """
        Consume a prefix of ``text``

        Args:
            text: Input to parse

        Returns:
            Success holding the output and the unconsumed suffix of ``text``

        Raises:
            ParseError: if the input does not match
        """

    def __call__(self, text: str) -> Success[O]:
        return self.parse(text)

    def then(self, second: "ParserLike[O2]") -> "Parser[Tuple[O, O2]]":
        """Parse with this parser, then the remaining input with ``second``"""
        return Then(self, as_parser(second))

    def map(self, transform: Callable[[O], O2]) -> "Parser[O2]":
        """Apply a total function to the output on success"""
        return Map(self, transform)

    def end(self) -> "Parser[O]":
        """Require that this parser consumes the whole input"""
        return End(self)


ParserLike = Union[Parser[O], str, Callable[[str], Success[O]]]


def as_parser(candidate: ParserLike[O]) -> Parser[O]:
    """
    Coerce a parser-like value to a Parser

    Strings become literal parsers and plain callables are wrapped in a
    FunctionParser; anything already a Parser is returned unchanged.

    Raises:
        TypeError: if ``candidate`` is none of the above
    """
    if isinstance(candidate, Parser):
        return candidate
    if isinstance(candidate, str):
        from .primitives import Literal
        return Literal(candidate)  # type: ignore[return-value]
    if callable(candidate):
        return FunctionParser(candidate)
    raise TypeError(f"cannot use {candidate!r} as a parser")


@dataclass(frozen=True)
class FunctionParser(Parser[O]):
    """Adapter turning a plain ``(text) -> Success`` function into a Parser"""
    function: Callable[[str], Success[O]]

    def parse(self, text: str) -> Success[O]:
        return self.function(text)


def parser(function: Callable[[str], Success[O]]) -> Parser[O]:
    """
    Decorator form of FunctionParser

    Example:
        @parser
        def anything(text: str) -> Success[str]:
            return Success(text, "")
    """
    return FunctionParser(function)


@dataclass(frozen=True)
class Then(Parser[Tuple[O, O2]]):
    """Sequence two parsers left to right, without backtracking"""
    first: Parser[O]
    second: Parser[O2]

    def parse(self, text: str) -> Success[Tuple[O, O2]]:
        try:
            head = self.first.parse(text)
        except ParseError as err:
            raise ParseContextError("first parser unsuccessful") from err
        try:
            tail = self.second.parse(head.remaining)
        except ParseError as err:
            raise ParseContextError("second parser unsuccessful") from err
        return Success((head.output, tail.output), tail.remaining)


@dataclass(frozen=True)
class Map(Parser[O2]):
    """Transform the output of a parser; failures pass through unchanged"""
    inner: Parser[O]
    transform: Callable[[O], O2]

    def parse(self, text: str) -> Success[O2]:
        result = self.inner.parse(text)
        return Success(self.transform(result.output), result.remaining)


@dataclass(frozen=True)
class End(Parser[O]):
    """Succeed only when the wrapped parser leaves no input behind"""
    inner: Parser[O]

    def parse(self, text: str) -> Success[O]:
        result = self.inner.parse(text)
        if result.remaining:
            raise TrailingInput(result.remaining)
        return result


def _repeat(inner: Parser[O], text: str, limit: int | None) -> Success[List[O]]:
    # Stops at the first failure, at ``limit`` matches, or at a match that
    # consumed nothing (which would otherwise repeat forever).
    outputs: List[O] = []
    remaining = text
    while limit is None or len(outputs) < limit:
        try:
            result = inner.parse(remaining)
        except ParseError:
            break
        if len(result.remaining) >= len(remaining):
            break
        outputs.append(result.output)
        remaining = result.remaining
    return Success(outputs, remaining)


@dataclass(frozen=True)
class ZeroOrMore(Parser[List[O]]):
    """Apply a parser until it fails; an empty match is a success"""
    inner: Parser[O]

    def parse(self, text: str) -> Success[List[O]]:
        return _repeat(self.inner, text, None)


@dataclass(frozen=True)
class OneOrMore(Parser[List[O]]):
    """Apply a parser until it fails; at least one match is required"""
    inner: Parser[O]

    def parse(self, text: str) -> Success[List[O]]:
        result = _repeat(self.inner, text, None)
        if not result.output:
            raise EmptyRepetition()
        return result


@dataclass(frozen=True)
class NOrMore(Parser[List[O]]):
    """
    Apply a parser up to ``times`` times, stopping early on failure

    Despite the name this is "up to N": the parse fails only when no
    repetition matched at all.
    """
    times: int
    inner: Parser[O]

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError(f"repetition count cannot be negative: {self.times}")

    def parse(self, text: str) -> Success[List[O]]:
        result = _repeat(self.inner, text, self.times)
        if not result.output:
            raise EmptyRepetition()
        return result


@dataclass(frozen=True)
class OneOf(Parser[O]):
    """Try candidates in order at the same position; first success wins"""
    candidates: Tuple[Parser[O], ...]

    def parse(self, text: str) -> Success[O]:
        attempts: List[ParseError] = []
        for candidate in self.candidates:
            try:
                return candidate.parse(text)
            except ParseError as err:
                attempts.append(err)
        raise NoAlternativeMatched(attempts)


def zero_or_more(inner: ParserLike[O]) -> Parser[List[O]]:
    return ZeroOrMore(as_parser(inner))


def one_or_more(inner: ParserLike[O]) -> Parser[List[O]]:
    return OneOrMore(as_parser(inner))


def n_or_more(times: int, inner: ParserLike[O]) -> Parser[List[O]]:
    return NOrMore(times, as_parser(inner))


def one_of(*candidates: ParserLike[O]) -> Parser[O]:
    """
    Alternation over an ordered list of candidates

    Strings are matched as literals. Callers must list a candidate before
    any other candidate it is a prefix of (``"ms"`` before ``"m"``).
    """
    return OneOf(tuple(as_parser(candidate) for candidate in candidates))


def map_one_of(mapping: Mapping[str, V]) -> Parser[V]:
    """
    Alternation over literal keys, producing the value mapped to the match

    Keys are tried in the mapping's iteration order.

    Example:
        >>> map_one_of({"on": True, "off": False}).parse("off!").output
        False
    """
    table = dict(mapping)
    return one_of(*table).map(table.__getitem__)
