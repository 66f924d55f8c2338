"""CPU time counters as found on a cpu line of /proc/stat."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

COUNTERS = (
    "user",
    "nice",
    "system",
    "idle",
    "iowait",
    "irq",
    "softirq",
    "steal",
    "guest",
    "guest_nice",
)


@dataclass(frozen=True)
class CpuStat:
    """Jiffy counters of one CPU (or of all CPUs together)."""

    name: str
    user: int = 0
    nice: int = 0
    system: int = 0
    idle: int = 0
    iowait: int = 0
    irq: int = 0
    softirq: int = 0
    steal: int = 0
    guest: int = 0
    guest_nice: int = 0

    def _counters(self) -> list[int]:
        return [getattr(self, name) for name in COUNTERS]

    def __sub__(self, other: object) -> CpuStat:
        if not isinstance(other, CpuStat):
            return NotImplemented
        return replace(
            self,
            **{
                name: getattr(self, name) - getattr(other, name)
                for name in COUNTERS
            },
        )

    def total(self) -> int:
        """Sum of all counters."""
        return sum(self._counters())

    def utilization(self) -> float | None:
        """Share of non-idle time, or None when no time has been counted."""
        total = self.total()
        if total == 0:
            return None
        return (total - self.idle) / total

    @classmethod
    def from_line(cls, line: str) -> CpuStat:
        """Parse a cpu line; counters missing at the end are taken as zero."""
        tokens = line.split()
        if not tokens:
            raise ValueError("empty cpu stat line")
        name, *values = tokens
        try:
            counters = [int(value) for value in values[: len(COUNTERS)]]
        except ValueError as error:
            raise ValueError(f"malformed cpu stat line: {line.strip()!r}") from error
        if any(counter < 0 for counter in counters):
            raise ValueError(f"negative counter in cpu stat line: {line.strip()!r}")
        return cls(name, **dict(zip(COUNTERS, counters)))


assert tuple(f.name for f in fields(CpuStat))[1:] == COUNTERS