from __future__ import annotations

"""Fixed timestep accumulator.

Real elapsed time is accumulated and spent in equal simulation steps, so the
simulation rate does not depend on the display rate.
"""

from dataclasses import dataclass, field
from typing import List, Optional

TICKS_PER_SECOND = 60
MAX_STEPS_PER_FRAME = 5


@dataclass
class FixedTimestep:
    ticks_per_second: int = TICKS_PER_SECOND
    max_steps_per_frame: int = MAX_STEPS_PER_FRAME
    accumulator: float = 0.0
    total_steps: int = 0
    # Seconds of owed simulation kept at most; None keeps all of it
    max_backlog: Optional[float] = None
    # Recent frame durations for the fps readout
    _frame_times: List[float] = field(default_factory=list, repr=False, init=False)

    @property
    def step(self) -> float:
        return 1.0 / self.ticks_per_second

    def advance(self, elapsed: float) -> int:
        """Add elapsed seconds and return how many steps to run now.

        At most max_steps_per_frame run in one frame; steps still owed stay in
        the accumulator and are paid back over the following frames. With
        max_backlog set, owed time beyond that many seconds is discarded.
        """
        if elapsed < 0.0:
            elapsed = 0.0
        self._record_frame(elapsed)
        self.accumulator += elapsed
        if self.max_backlog is not None and self.accumulator > self.max_backlog:
            self.accumulator = self.max_backlog
        # Small epsilon so sums of exact frame times are not lost to rounding
        steps = min(int(self.accumulator / self.step + 1e-9), self.max_steps_per_frame)
        self.accumulator = max(0.0, self.accumulator - steps * self.step)
        self.total_steps += steps
        return steps

    @property
    def pending_steps(self) -> int:
        """Whole steps still owed from earlier frames."""
        return int(self.accumulator / self.step + 1e-9)

    @property
    def alpha(self) -> float:
        """Fraction of a step left in the accumulator, for interpolation."""
        return self.accumulator / self.step

    def _record_frame(self, elapsed: float) -> None:
        self._frame_times.append(elapsed)
        if len(self._frame_times) > 30:
            del self._frame_times[0]

    @property
    def fps(self) -> float:
        """Average frames per second over the recent window."""
        total = sum(self._frame_times)
        if total <= 0.0:
            return 0.0
        return len(self._frame_times) / total

    def reset(self) -> None:
        self.accumulator = 0.0
        self._frame_times.clear()


__all__ = ["FixedTimestep", "TICKS_PER_SECOND", "MAX_STEPS_PER_FRAME"]
