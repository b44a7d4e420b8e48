# src/stericoverlap/core/utils/benchmarking.py

import time
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Timer:
    """Context manager for timing code blocks."""

    name: str
    start_time: float = field(default=0.0)
    end_time: float = field(default=0.0)

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        self.end_time = 0.0
        return self

    def __exit__(self, *args) -> None:
        self.end_time = time.perf_counter()

    def elapsed(self) -> float:
        """Elapsed time in seconds, up to now while the block is running."""
        if self.end_time == 0.0:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time


@dataclass
class TimingStats:
    """Timings recorded for one phase of a run."""

    name: str
    times: List[float] = field(default_factory=list)

    def add_timing(self, elapsed: float) -> None:
        """Add a measurement in seconds."""
        self.times.append(elapsed)

    @property
    def total_time(self) -> float:
        return sum(self.times)

    @property
    def total_ms(self) -> int:
        return int(self.total_time * 1000)

    @property
    def count(self) -> int:
        return len(self.times)

    def __str__(self) -> str:
        if not self.times:
            return f"{self.name}: No timing data"
        return f"{self.name}: {self.total_ms} ms over {self.count} call(s)"


class PerformanceStats:
    """Collect timings per phase and report them."""

    def __init__(self) -> None:
        self.stats: Dict[str, TimingStats] = {}

    def get_stats(self, name: str) -> TimingStats:
        """Get or create stats for a phase."""
        if name not in self.stats:
            self.stats[name] = TimingStats(name=name)
        return self.stats[name]

    def add_timing(self, name: str, elapsed: float) -> None:
        self.get_stats(name).add_timing(elapsed)

    def elapsed_ms(self, name: str) -> int:
        return self.stats[name].total_ms if name in self.stats else 0

    def report(self) -> str:
        """Generate a performance report, one phase per line."""
        if not self.stats:
            return "No performance data collected"

        total_time = sum(s.total_time for s in self.stats.values())
        lines = []
        for stats in self.stats.values():
            pct = (stats.total_time / total_time) * 100 if total_time > 0 else 0
            lines.append(f"{stats} ({pct:.1f}%)")
        return "\n".join(lines)


@contextmanager
def timer(name: str, stats: Optional[PerformanceStats] = None) -> Iterator[Timer]:
    """Context manager timing a code block, optionally recording it in ``stats``.

    Args:
        name: Name of the phase being timed
        stats: Optional PerformanceStats object to collect the measurement
    """
    with Timer(name) as t:
        try:
            yield t
        finally:
            elapsed = t.elapsed()
            logger.debug(f"{name} took {elapsed * 1000:.1f} ms")
            if stats is not None:
                stats.add_timing(name, elapsed)
