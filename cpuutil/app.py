"""The sampling loop and the command entry point."""

from __future__ import annotations

import sys
import time
from typing import Callable, Protocol, Sequence

from .cpustat import CpuStat
from .parameters import ParameterError, Parameters, parse_parameters, print_help
from .printer import Printer
from .reader import CpuStatReader, CpuStatReadError
from .state import CpuUtilState
from .timer import ElapsedTimer


class _Reader(Protocol):
    def read(self) -> list[CpuStat]: ...


def run(
    parameters: Parameters,
    *,
    reader: _Reader | None = None,
    printer: Printer | None = None,
    timer: ElapsedTimer | None = None,
    sleep: Callable[[float], None] = time.sleep,
    max_steps: int | None = None,
) -> int:
    """Sample the counters until a read fails or ``max_steps`` steps are done.

    Returns 1 when reading failed and 0 when the step limit was reached.
    """
    reader = reader if reader is not None else CpuStatReader()
    printer = printer if printer is not None else Printer(parameters)
    timer = timer if timer is not None else ElapsedTimer()

    state: CpuUtilState | None = None
    previous: list[CpuStat] = []
    expected_usec = 0
    step = 0

    while max_steps is None or step < max_steps:
        try:
            current = reader.read()
        except CpuStatReadError:
            return 1

        # The first read holds totals since boot, so it only primes the state.
        if state is None:
            state = CpuUtilState(len(current))
        else:
            state.update(current, previous)

        state.step_number = step
        state.execution_time_usec = timer.elapsed_usec()
        printer.print(state)

        previous = current
        expected_usec += parameters.sleep_interval_usec
        sleep(max(0, expected_usec - timer.elapsed_usec()) / 1_000_000)
        step += 1

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run until interrupted or a read fails."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        parameters = parse_parameters(args)
    except ParameterError as error:
        print(error, file=sys.stderr)
        return 1

    if parameters.print_help:
        print_help()
        return 0

    try:
        return run(parameters)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())