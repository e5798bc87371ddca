"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from argparse import Namespace
from typing import Any, Callable, Optional, Type, TypeVar
from dataclasses import dataclass, field, fields
from functools import reduce

from .duration import Duration


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the command-line pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: data, every, jitter, count, verbosity
        - options_check: optionsOK
        - payload_render: payload
        - ticks_emit: tickCount, cancelled
        - results_report: (no additions, terminal stage)

    Attributes:
        data: JSON value decoded from --data
        every: Base interval parsed from --every
        jitter: Jitter factor for the ticker (None = from settings)
        count: Stop after this many ticks (None = until interrupted)
        verbosity: Logging verbosity level (1-3)
        optionsOK: Option validation passed
        payload: Rendered text printed on every tick
        tickCount: Number of ticks emitted
        cancelled: Loop was stopped by an interrupt
    """

    # CLI arguments
    data: Any = field(default=None)
    every: Optional[Duration] = field(default=None)
    jitter: Optional[float] = field(default=None)
    count: Optional[int] = field(default=None)
    verbosity: int = field(default=1)

    # Pipeline state
    optionsOK: bool = field(default=False)
    payload: str = field(default="")
    tickCount: int = field(default=0)
    cancelled: bool = field(default=False)

    @classmethod
    def state_createFromNamespace(cls: Type[PS], options: Namespace) -> PS:
        """
        Create ProgramState from an argparse Namespace.

        Options without a matching field are ignored.

        Args:
            options: Parsed CLI arguments

        Returns:
            ProgramState instance with all known CLI options as attributes
        """
        valid_fields = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in vars(options).items() if k in valid_fields})

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(state, options_check, payload_render, ticks_emit)

    is equivalent to ticks_emit(payload_render(options_check(state))) but
    reads left-to-right.
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
