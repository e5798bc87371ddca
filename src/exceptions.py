"""
Exception hierarchy for barrage

Every failure raised by the parser engine derives from ParseError, so a
caller can catch one type and still inspect the full cause chain.

Hierarchy:
    BarrageError
    └── ParseError
        ├── LiteralMismatch
        ├── PredicateMismatch
        ├── UnexpectedEndOfInput
        ├── NoAlternativeMatched
        ├── EmptyRepetition
        ├── TrailingInput
        ├── IntegerOverflow
        └── ParseContextError
            └── DurationParseError

Combinators add context by raising a ParseContextError *from* the child
error, so the chain is the ordinary ``__cause__`` chain.
"""

from typing import List, Sequence


class BarrageError(Exception):
    """Base exception for all barrage errors"""


class ParseError(BarrageError):
    """
    A parser could not consume its input

    Attributes:
        reason: Human-readable description of this layer of the failure
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def chain(self) -> List[str]:
        """
        Collect the messages of this error and every error it was raised from

        Returns:
            Messages ordered outermost first, root cause last

        Example:
            >>> err.chain()
            ['cannot parse to duration value', 'first parser unsuccessful',
             'parser did not find any values it could consume']
        """
        messages: List[str] = []
        current: BaseException | None = self
        while current is not None:
            messages.append(str(current))
            current = current.__cause__
        return messages

    @property
    def root_cause(self) -> BaseException:
        """The innermost error of the chain"""
        current: BaseException = self
        while current.__cause__ is not None:
            current = current.__cause__
        return current

    def chain_format(self) -> str:
        """
        Render the chain for display on a terminal

        Example:
            cannot parse to duration value

            Caused by:
                0: second parser unsuccessful
                1: none of provided options matched
        """
        head, *causes = self.chain()
        if not causes:
            return head
        lines = [head, "", "Caused by:"]
        lines.extend(f"    {i}: {message}" for i, message in enumerate(causes))
        return "\n".join(lines)


class LiteralMismatch(ParseError):
    """Expected literal was not found at the current position"""

    def __init__(self, expected: str) -> None:
        super().__init__(f"expected literal `{expected}` not found in input")
        self.expected = expected


class PredicateMismatch(ParseError):
    """The next character failed a classification predicate"""

    def __init__(self, char: str, description: str = "does not satisfy predicate") -> None:
        super().__init__(f"`{char}` {description}")
        self.char = char


class UnexpectedEndOfInput(ParseError):
    """Input ran out where a character was required"""

    def __init__(self) -> None:
        super().__init__("unexpected end of input")


class NoAlternativeMatched(ParseError):
    """
    Every candidate of an alternation failed

    Attributes:
        attempts: The failure of each candidate, in the order they were tried
    """

    def __init__(self, attempts: Sequence[ParseError] = ()) -> None:
        super().__init__("none of provided options matched")
        self.attempts = tuple(attempts)


class EmptyRepetition(ParseError):
    """A one-or-more style repetition matched nothing"""

    def __init__(self) -> None:
        super().__init__("parser did not find any values it could consume")


class TrailingInput(ParseError):
    """Input remained where the end of input was required"""

    def __init__(self, remaining: str) -> None:
        super().__init__("not end of input")
        self.remaining = remaining


class IntegerOverflow(ParseError):
    """A digit span does not fit the target integer width"""

    def __init__(self, digits: str, bits: int) -> None:
        super().__init__(f"`{digits}` does not fit in an unsigned {bits}-bit integer")
        self.digits = digits
        self.bits = bits


class ParseContextError(ParseError):
    """One layer of context wrapped around the error it was raised from"""


class DurationParseError(ParseContextError):
    """Text could not be parsed to a Duration"""

    def __init__(self, reason: str = "cannot parse to duration value") -> None:
        super().__init__(reason)
