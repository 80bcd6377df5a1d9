"""Wall-clock timing of single and repeated calls."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import timedelta

from aocutils.sliceutils import maximum, minimum


def start() -> float:
    """Return the current point of a monotonic clock, in seconds."""
    return time.perf_counter()


def time_single_call(start_time: float) -> timedelta:
    """Return the time elapsed since ``start_time``."""
    return timedelta(seconds=time.perf_counter() - start_time)


def print_single_call(start_time: float) -> None:
    """Print the time elapsed since ``start_time``."""
    print("Time taken for single call: ", time_single_call(start_time))


@dataclass
class TimeRepeatedCalls:
    """Collects the durations of repeated calls and reports on them."""

    calls: list[timedelta] = field(default_factory=list)

    def call(self, start_time: float) -> None:
        """Record the time elapsed since ``start_time`` as one call."""
        self.calls.append(time_single_call(start_time))

    def average(self) -> timedelta:
        """Return the mean duration of the recorded calls."""
        if not self.calls:
            raise ZeroDivisionError("no calls recorded")
        return self.total() / len(self.calls)

    def maximum(self) -> timedelta:
        """Return the longest recorded call."""
        return maximum(self.calls)

    def minimum(self) -> timedelta:
        """Return the shortest recorded call."""
        return minimum(self.calls)

    def total(self) -> timedelta:
        """Return the sum of the recorded durations."""
        return sum(self.calls, timedelta())

    def print_stats(self) -> str:
        """Print the average, longest, shortest and total durations.

        The printed report is also returned.
        """
        stats = [
            ("Average time taken: ", self.average()),
            ("Max time taken: ", self.maximum()),
            ("Min time taken: ", self.minimum()),
            ("Sum time taken: ", self.total()),
        ]
        lines = [f"{label} {value}" for label, value in stats]
        report = "\n".join(lines)
        print(report)
        return report