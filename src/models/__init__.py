"""
Models package for barrage

Contains data structures shared by the parser engine, the ticker and the
command-line pipeline.
"""

from .state import ProgramState, pipeline
from .duration import Duration
from .units import TimeUnit, DURATION_UNITS
from .parser import Success

__all__ = [
    "ProgramState",
    "pipeline",
    "Duration",
    "TimeUnit",
    "DURATION_UNITS",
    "Success",
]
