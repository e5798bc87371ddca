"""
Derived parsers for integers and durations

Built entirely from the primitives and combinators:

    uint      := one_or_more(numeric)            -> int (fits in 64 bits)
    duration  := uint then one_of(unit suffixes) -> Duration

parse_duration() is the public entry point used by the command line.
"""

from typing import Iterable, List, Tuple

from ..exceptions import DurationParseError, IntegerOverflow, ParseError
from ..models.duration import Duration
from ..models.units import DURATION_UNITS, TimeUnit
from .combinators import Parser, map_one_of, one_or_more
from .log import LOG
from .primitives import numeric


UINT_BITS = 64
UINT_MAX = 2 ** UINT_BITS - 1
UINT_MAX_DIGITS = len(str(UINT_MAX))


def _digits_toInt(digits: List[str]) -> int:
    # Width is checked on the significant digits before int(), which
    # refuses very long spans outright.
    for index, digit in enumerate(digits):
        if int(digit) != 0:
            significant = digits[index:]
            break
    else:
        significant = []
    span = "".join(significant)
    if len(significant) > UINT_MAX_DIGITS:
        raise IntegerOverflow(span, UINT_BITS)
    value = int(span) if span else 0
    if value > UINT_MAX:
        raise IntegerOverflow(span, UINT_BITS)
    return value


def uint() -> Parser[int]:
    """
    Parse one or more decimal digits as an unsigned 64-bit integer

    Raises (on parse):
        EmptyRepetition: if the input does not start with a digit
        IntegerOverflow: if the digits exceed 2**64 - 1
    """
    return one_or_more(numeric()).map(_digits_toInt)


def _duration_build(parsed: Tuple[int, TimeUnit]) -> Duration:
    amount, unit = parsed
    return Duration.from_unit(amount, unit)


def duration(units: Iterable[TimeUnit] = DURATION_UNITS) -> Parser[Duration]:
    """
    Parse ``<digits><unit>`` into a Duration

    Args:
        units: Suffixes to accept, tried in the given order

    Example:
        >>> duration().parse("500ms rest")
        Success(output=Duration(nanos=500000000), remaining=' rest')
    """
    suffixes = map_one_of({unit.value: unit for unit in units})
    return uint().then(suffixes).map(_duration_build)


def parse_duration(text: str) -> Duration:
    """
    Parse the whole of ``text`` as a duration such as ``"500ms"``

    Accepts exactly one or more decimal digits followed by one of
    ``s``, ``ms``, ``ns`` or ``us``; no whitespace, sign or fraction.

    Raises:
        DurationParseError: chained to the underlying ParseError
    """
    LOG(f"Parsing duration from {text!r}", level=3)
    try:
        return duration().end().parse(text).output
    except ParseError as err:
        raise DurationParseError() from err
