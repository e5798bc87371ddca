"""
Parser engine, ticker and logging for barrage
"""

from .combinators import (
    Parser,
    FunctionParser,
    as_parser,
    parser,
    zero_or_more,
    one_or_more,
    n_or_more,
    one_of,
    map_one_of,
)
from .primitives import literal, match_char_where, numeric, end
from .duration import uint, duration, parse_duration
from .ticker import JitterInterval
from .log import LOG, state_connectToLogger

__all__ = [
    "Parser",
    "FunctionParser",
    "as_parser",
    "parser",
    "zero_or_more",
    "one_or_more",
    "n_or_more",
    "one_of",
    "map_one_of",
    "literal",
    "match_char_where",
    "numeric",
    "end",
    "uint",
    "duration",
    "parse_duration",
    "JitterInterval",
    "LOG",
    "state_connectToLogger",
]
