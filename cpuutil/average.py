"""Running arithmetic mean."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Average:
    """A mean that is updated one sample at a time."""

    value: float = 0.0
    count: int = 0

    def add(self, value: float) -> None:
        """Fold one more sample into the mean."""
        self.value = (self.value * self.count + value) / (self.count + 1)
        self.count += 1