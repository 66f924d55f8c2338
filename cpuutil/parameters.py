"""Command-line parameters."""

from __future__ import annotations

import getopt
import math
import re
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

SEC_TO_USEC = 1_000_000

_OPTIONS = "AChs:"
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_HELP = (
    "cpuutil - print CPU utilization percentage over time\n"
    "\n"
    "Example: cpuutil [-ACh] [-s N]\n"
    "\n"
    "Parameters:\n"
    "-A\tdo not calculate and do not print average utilization\n"
    "-C\tdo not print current utilization\n"
    "-h\tprint this message and exit\n"
    "-s N\tread interval in seconds, default 1.0\n"
)


class ParameterError(Exception):
    """The command line could not be accepted."""


@dataclass
class Parameters:
    """What to print and how often to read."""

    print_average_utilization: bool = True
    print_current_utilization: bool = True
    print_help: bool = False
    sleep_interval_usec: int = SEC_TO_USEC


def _parse_seconds(text: str) -> float:
    """Read the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _option_error(option: str) -> ParameterError:
    if option == "s":
        return ParameterError(f"Option -{option} requires an argument.")
    if option.isprintable():
        return ParameterError(f"Unknown option `-{option}'.")
    return ParameterError(
        "Unknown option character `"
        + "".join(f"\\x{ord(char):x}" for char in option)
        + "'."
    )


def parse_parameters(argv: Sequence[str]) -> Parameters:
    """Parse the arguments that follow the program name."""
    try:
        options, operands = getopt.gnu_getopt(list(argv), _OPTIONS)
    except getopt.GetoptError as error:
        raise _option_error(error.opt) from error

    parameters = Parameters()
    for option, value in options:
        if option == "-A":
            parameters.print_average_utilization = False
        elif option == "-C":
            parameters.print_current_utilization = False
        elif option == "-h":
            parameters.print_help = True
        elif option == "-s":
            seconds = _parse_seconds(value) * SEC_TO_USEC
            if not math.isfinite(seconds):
                raise ParameterError(f"Invalid read interval {value}.")
            parameters.sleep_interval_usec = int(seconds)

    if not (
        parameters.print_average_utilization or parameters.print_current_utilization
    ):
        raise ParameterError("Arguments 'A' and 'C' cannot be used together.")

    if operands:
        raise ParameterError(
            "\n".join(f"Non-option argument {operand}" for operand in operands)
        )

    return parameters


def help_text() -> str:
    """The usage message."""
    return _HELP


def print_help(stream: TextIO | None = None) -> None:
    """Write the usage message, to standard error unless told otherwise."""
    (stream if stream is not None else sys.stderr).write(_HELP)