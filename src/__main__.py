#!/usr/bin/env python3
"""
barrage - periodically emit a JSON payload on a jittered interval

Prints the payload given with --data once per tick of a jittered interval
timer until interrupted (Ctrl-C) or until --count ticks were emitted.

Interval values are read by barrage's parser-combinator engine and accept
exactly <digits><unit> with unit one of s, ms, us, ns.

Usage:
    barrage --data JSON --every DURATION [--jitter FACTOR] [--count N]

Examples:
    # Print {"ping":1} roughly every half second
    barrage --data '{"ping": 1}' --every 500ms

    # No randomisation beyond the uniform sample, three ticks only
    barrage --data '[1, 2]' --every 2s --jitter 0 --count 3

    # Verbose output (ticker configuration on stderr)
    barrage --data '"hi"' --every 100ms -vv
"""

import asyncio
import json
import math
import signal
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace, ArgumentDefaultsHelpFormatter
from typing import Any, List, Optional

from . import __version__
from .config import appsettings
from .exceptions import ParseError
from .lib import JitterInterval, parse_duration, LOG, state_connectToLogger
from .models import Duration, ProgramState, pipeline


DISPLAY_TITLE = r"""
  barrage
  jittered JSON emitter
"""


def duration_argParse(text: str) -> Duration:
    """argparse type for --every; reports the whole parse error chain"""
    try:
        return parse_duration(text)
    except ParseError as err:
        raise ArgumentTypeError(err.chain_format()) from err


def json_argParse(text: str) -> Any:
    """argparse type for --data"""
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        raise ArgumentTypeError(f"invalid JSON payload: {err}") from err


# Define CLI arguments
parser = ArgumentParser(
    prog="barrage",
    description="barrage - periodically emit a JSON payload on a jittered interval",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "-d", "--data", required=True, type=json_argParse, help="JSON payload to emit on every tick"
)

parser.add_argument(
    "--every",
    required=True,
    type=duration_argParse,
    help='How often to emit the payload (Ex. "500ms"); units: s, ms, us, ns',
)

parser.add_argument(
    "--jitter",
    default=None,
    type=float,
    help="Jitter factor: each tick waits every * (U + factor), U uniform in [0, 1). "
    "Defaults to BARRAGE_JITTER_FACTOR or 0.5",
)

parser.add_argument(
    "--count",
    default=None,
    type=int,
    help="Stop after this many ticks instead of running until interrupted",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def options_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate numeric options and fill in configured defaults.

    Exits:
        1 if --jitter is negative, non-finite or too large, or --count is not positive
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    if state.jitter is None:
        state.jitter = appsettings.jitter_factor
        LOG(f"Jitter factor from settings: {state.jitter}", level=2)

    if not math.isfinite(state.jitter) or state.jitter < 0:
        print(f"Error: --jitter must be a finite number >= 0, got {state.jitter}", file=sys.stderr)
        sys.exit(1)

    try:
        state.every.scale(1 + state.jitter)
    except ValueError:
        print(f"Error: --jitter {state.jitter} is too large for --every {state.every}", file=sys.stderr)
        sys.exit(1)

    if state.count is not None and state.count < 1:
        print(f"Error: --count must be >= 1, got {state.count}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Interval: {state.every}, jitter: {state.jitter}, count: {state.count}", level=2)
    state.optionsOK = True
    return state


def payload_render(inputstate: ProgramState) -> ProgramState:
    """Render the JSON payload once; every tick prints the same text."""
    state = inputstate.copy()
    state.payload = appsettings.payload_render(state.data)
    LOG(f"Payload is {len(state.payload)} characters", level=2)
    return state


async def ticks_loop(state: ProgramState, stop: Optional[asyncio.Event] = None) -> ProgramState:
    """
    Print the payload on every tick until stopped.

    The ticker is raced against ``stop``; SIGINT sets ``stop`` when no
    event is supplied by the caller.

    Args:
        state: Program state with every, jitter, count and payload set
        stop: Event that ends the loop when set

    Returns:
        The same state with tickCount and cancelled updated
    """
    loop = asyncio.get_running_loop()
    handle_sigint = stop is None
    if stop is None:
        stop = asyncio.Event()
        loop.add_signal_handler(signal.SIGINT, stop.set)

    ticker = JitterInterval(state.every, state.jitter)
    stopper = asyncio.ensure_future(stop.wait())
    try:
        while state.count is None or state.tickCount < state.count:
            tick = asyncio.ensure_future(ticker.tick())
            await asyncio.wait({tick, stopper}, return_when=asyncio.FIRST_COMPLETED)
            if stopper.done():
                tick.cancel()
                state.cancelled = True
                break
            print(state.payload, flush=True)
            state.tickCount += 1
    finally:
        stopper.cancel()
        if handle_sigint:
            loop.remove_signal_handler(signal.SIGINT)
    return state


def ticks_emit(inputstate: ProgramState) -> ProgramState:
    """Run the tick loop to completion on a fresh event loop."""
    state = inputstate.copy()
    LOG("Starting tick loop...", level=2)
    return asyncio.run(ticks_loop(state))


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Report how the loop ended.

    Prints the cancellation message on stdout when interrupted.
    """
    state = inputstate.copy()
    if state.cancelled:
        print(appsettings.cancel_message)
    LOG(f"Emitted {state.tickCount} ticks", level=2)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - emit the payload until interrupted.

    Orchestrates the pipeline:
        1. options_check: Validate options, apply configured defaults
        2. payload_render: Serialize the payload
        3. ticks_emit: Print the payload on every tick
        4. results_report: Report cancellation and tick count

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    options: Namespace = parser.parse_args(argv)
    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, options_check, payload_render, ticks_emit, results_report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
