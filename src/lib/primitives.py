"""
Primitive parsers

The atomic building blocks every other parser is composed from: exact
literal match, single-character classification, and end of input.
"""

from dataclasses import dataclass
from typing import Callable

from ..exceptions import LiteralMismatch, PredicateMismatch, TrailingInput, UnexpectedEndOfInput
from ..models.parser import Success
from .combinators import Parser


@dataclass(frozen=True)
class Literal(Parser[str]):
    """Match ``expected`` exactly at the start of the input"""
    expected: str

    def parse(self, text: str) -> Success[str]:
        if not text.startswith(self.expected):
            raise LiteralMismatch(self.expected)
        return Success(text[: len(self.expected)], text[len(self.expected):])


@dataclass(frozen=True)
class MatchCharWhere(Parser[str]):
    """
    Match a single codepoint satisfying ``predicate``

    Attributes:
        predicate: Classification applied to the first character
        description: Wording used in the mismatch error after the character
    """
    predicate: Callable[[str], bool]
    description: str = "does not satisfy predicate"

    def parse(self, text: str) -> Success[str]:
        if not text:
            raise UnexpectedEndOfInput()
        char = text[0]
        if not self.predicate(char):
            raise PredicateMismatch(char, self.description)
        return Success(char, text[1:])


@dataclass(frozen=True)
class EndOfInput(Parser[None]):
    """Match only the empty input"""

    def parse(self, text: str) -> Success[None]:
        if text:
            raise TrailingInput(text)
        return Success(None, text)


def literal(expected: str) -> Parser[str]:
    return Literal(expected)


def match_char_where(predicate: Callable[[str], bool], description: str = "does not satisfy predicate") -> Parser[str]:
    return MatchCharWhere(predicate, description)


def numeric() -> Parser[str]:
    """
    Match one decimal digit

    Classification is Unicode aware (category Nd, e.g. ``"٣"``), and every
    character accepted here is also accepted by ``int()``.
    """
    return MatchCharWhere(str.isdecimal, "is a non-numeric character")


def end() -> Parser[None]:
    return EndOfInput()
