"""
Parser-specific data models

Type-safe structures returned by the parser engine.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar


O = TypeVar("O", covariant=True)


@dataclass(frozen=True)
class Success(Generic[O]):
    """
    Result of a successful parse

    Returned by every Parser.parse() call that consumed its input without
    error. Failures are raised as ParseError instead.

    Attributes:
        output: The typed value produced by the parser
        remaining: Unconsumed input; always a suffix of the parsed text

    Example:
        literal("abc").parse("abcdef")
        Success(output="abc", remaining="def")
    """
    output: O
    remaining: str
