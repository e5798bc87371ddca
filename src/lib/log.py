"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current ProgramState's
verbosity level without requiring explicit state passing.

Features:
- Context-aware logging tied to ProgramState verbosity
- Timestamped, colored output on stderr so stdout carries only payloads
- Safe across asyncio tasks using contextvars

Usage:
    from barrage.lib.log import LOG, state_connectToLogger

    # Once, before running the pipeline:
    state_connectToLogger(state)

    # Anywhere in that context (including tasks spawned from it):
    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Ticker details appear if verbosity >= 2", level=2)
    LOG("Per-tick and parser traces appear if verbosity >= 3", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss.SSS}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <12}</cyan>:"
    "<cyan>{function: <18}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    asyncio tasks copy the current context when they are created, so
    connecting before asyncio.run() makes the verbosity visible inside the
    ticker loop as well.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Without a connected state (library use, tests) nothing is logged.
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
