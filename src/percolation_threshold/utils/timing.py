"""
Timing utilities for simulation runs.

Provides a wall-clock stopwatch and human-readable duration formatting used
when reporting how long a batch of trials took.
"""

import math
import time
from typing import Optional


class Stopwatch:
    """
    Wall-clock stopwatch that starts on construction.

    Example:
        watch = Stopwatch()
        run_trials()
        print(f"took {watch.elapsed_time():.3f}s")
    """

    def __init__(self):
        self._start = time.perf_counter()

    def elapsed_time(self) -> float:
        """Seconds elapsed since the stopwatch was created."""
        return time.perf_counter() - self._start


def format_duration(seconds: Optional[float]) -> str:
    """Format duration in seconds to human-readable string."""
    if seconds is None or math.isnan(seconds):
        return 'N/A'

    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        minutes = seconds / 60
        return f"{minutes:.1f}m"
    else:
        hours = seconds / 3600
        return f"{hours:.2f}h"
