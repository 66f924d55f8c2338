"""Utilization state kept between reads."""

from __future__ import annotations

from typing import Sequence

from .average import Average
from .cpustat import CpuStat


class CpuUtilState:
    """Last and average utilization of each CPU line, plus step bookkeeping."""

    def __init__(self, items_count: int) -> None:
        if items_count < 0:
            raise ValueError("items_count must not be negative")
        self.step_number = 0
        self.averages = [Average() for _ in range(items_count)]
        self.last_utilizations = [0.0] * items_count
        self.utilization_invalid = False
        self.execution_time_usec = 0

    @property
    def items_count(self) -> int:
        """Number of CPU lines tracked."""
        return len(self.averages)

    def update(self, current: Sequence[CpuStat], previous: Sequence[CpuStat]) -> None:
        """Fold the difference between two reads into the state.

        A line whose counters did not move keeps its last utilization and
        marks the state as invalid for this step.
        """
        if len(current) != self.items_count or len(previous) != self.items_count:
            raise ValueError(
                f"expected {self.items_count} cpu stats, got "
                f"{len(current)} and {len(previous)}"
            )
        self.utilization_invalid = False
        for index, (now, before) in enumerate(zip(current, previous)):
            utilization = (now - before).utilization()
            if utilization is None:
                self.utilization_invalid = True
                utilization = self.last_utilizations[index]
            self.last_utilizations[index] = utilization
            self.averages[index].add(utilization)