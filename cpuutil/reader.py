"""Reading per-CPU counters from /proc/stat."""

from __future__ import annotations

import os
from itertools import islice, takewhile
from pathlib import Path
from typing import Iterable

from .cpustat import CpuStat

PROC_STAT = "/proc/stat"


class CpuStatReadError(Exception):
    """The counters could not be read."""


def count_cpu_lines(lines: Iterable[str]) -> int:
    """Count the leading lines that start with 'cpu'."""
    return sum(1 for _ in takewhile(lambda line: line.startswith("cpu"), lines))


def parse_cpustats(lines: Iterable[str], count: int) -> list[CpuStat]:
    """Parse the first ``count`` lines as CPU counters."""
    selected = list(islice(lines, count))
    if len(selected) < count:
        raise CpuStatReadError(
            f"expected {count} cpu lines, found {len(selected)}"
        )
    try:
        return [CpuStat.from_line(line) for line in selected]
    except ValueError as error:
        raise CpuStatReadError(str(error)) from error


class CpuStatReader:
    """Reads the same number of cpu lines on every call.

    The number of lines is taken from the first read and kept afterwards.
    """

    def __init__(self, path: str | os.PathLike[str] = PROC_STAT) -> None:
        self.path = Path(path)
        self._cpu_count: int | None = None

    @property
    def cpu_count(self) -> int | None:
        """Number of cpu lines read each time, once known."""
        return self._cpu_count

    def _read_lines(self) -> list[str]:
        try:
            with self.path.open("r") as stream:
                return stream.readlines()
        except OSError as error:
            raise CpuStatReadError(f"cannot read {self.path}: {error}") from error

    def read(self) -> list[CpuStat]:
        """Return the counters of the aggregate line and of each CPU."""
        if self._cpu_count is None:
            count = count_cpu_lines(self._read_lines())
            if count == 0:
                raise CpuStatReadError(f"no cpu lines in {self.path}")
            self._cpu_count = count
        return parse_cpustats(self._read_lines(), self._cpu_count)