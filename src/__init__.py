"""
barrage - periodically emit a JSON payload on a jittered interval

Built around a small parser-combinator engine used to read interval
values such as "500ms".
"""

__version__ = "1.0.0"

from .lib import Parser, parse_duration, JitterInterval, LOG, state_connectToLogger
from .models import Duration
from .exceptions import ParseError

__all__ = [
    "Parser",
    "parse_duration",
    "JitterInterval",
    "Duration",
    "ParseError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
