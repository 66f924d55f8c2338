"""Tabular output of utilization state."""

from __future__ import annotations

import sys
from typing import TextIO

from .parameters import Parameters
from .state import CpuUtilState

_WARNING = (
    "WARN: reading too fast! Some counters haven't been updated since the "
    "last read. Increase the read interval.\n"
)


def _columns(parameters: Parameters, current: str, average: str) -> str:
    text = ""
    if parameters.print_current_utilization:
        text += current
    if parameters.print_average_utilization:
        text += average
    return text + "  "


def format_header(parameters: Parameters, items_count: int) -> str:
    """The two header lines, without a trailing newline."""
    names = _columns(parameters, "   ALL", "   ALL") + "".join(
        _columns(parameters, f" CPU{index:02d}", f" CPU{index:02d}")
        for index in range(items_count - 1)
    )
    kinds = (
        _columns(parameters, "  CURR", "   AVG") * items_count
        + "       STEP       TIME"
    )
    return f"{names}\n{kinds}"


def format_row(parameters: Parameters, state: CpuUtilState) -> str:
    """One line of utilization figures, without a trailing newline."""
    cells = "".join(
        _columns(parameters, f" {current * 100:5.1f}", f" {average.value * 100.0:5.1f}")
        for current, average in zip(state.last_utilizations, state.averages)
    )
    seconds = 0.000001 * state.execution_time_usec
    return f"{cells}     {state.step_number:6d}     {seconds:6.2f}"


class Printer:
    """Writes the header on step zero and a row on every later step."""

    def __init__(
        self,
        parameters: Parameters,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.parameters = parameters
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def print(self, state: CpuUtilState) -> None:
        """Write the line (or lines) that belong to this step."""
        if state.step_number == 0:
            text = format_header(self.parameters, state.items_count)
        else:
            if state.utilization_invalid:
                self.err.write(_WARNING)
            text = format_row(self.parameters, state)
        self.out.write(text + "\n")
        self.out.flush()