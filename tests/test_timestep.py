"""
Tests for the fixed timestep accumulator
"""

import pytest

from pong.timestep import FixedTimestep


class TestFixedTimestep:
    """Tests for FixedTimestep"""

    def test_one_frame_one_step(self) -> None:
        ts = FixedTimestep()
        assert ts.advance(1 / 60) == 1
        assert ts.total_steps == 1
        assert ts.accumulator == pytest.approx(0.0)

    def test_several_steps_in_one_frame(self) -> None:
        """A slow frame runs more steps, never fewer"""
        ts = FixedTimestep()
        assert ts.advance(0.05) == 3

    def test_short_frames_accumulate(self) -> None:
        ts = FixedTimestep()
        assert ts.advance(0.008) == 0
        assert ts.alpha == pytest.approx(0.48)
        assert ts.advance(0.008) == 0
        assert ts.advance(0.008) == 1
        assert ts.accumulator == pytest.approx(0.024 - 1 / 60)

    def test_catch_up_is_spread_over_frames(self) -> None:
        """Steps over the per-frame cap are run on later frames, not lost"""
        ts = FixedTimestep(max_steps_per_frame=5)
        assert ts.advance(0.2) == 5
        assert ts.pending_steps == 7
        assert ts.advance(0.0) == 5
        assert ts.advance(0.0) == 2
        for _ in range(8):
            assert ts.advance(0.0) == 0
        assert ts.total_steps == 12

    def test_backlog_cap_is_opt_in(self) -> None:
        ts = FixedTimestep(max_steps_per_frame=5, max_backlog=0.1)
        assert ts.advance(1.0) == 5
        assert ts.advance(0.0) == 1
        assert ts.advance(0.0) == 0
        assert ts.total_steps == 6

    def test_negative_elapsed_is_ignored(self) -> None:
        ts = FixedTimestep()
        assert ts.advance(-1.0) == 0
        assert ts.accumulator == 0.0

    def test_other_tick_rate(self) -> None:
        ts = FixedTimestep(ticks_per_second=120)
        assert ts.step == pytest.approx(1 / 120)
        assert ts.advance(1 / 30) == 4

    def test_fps_readout(self) -> None:
        ts = FixedTimestep()
        assert ts.fps == 0.0
        for _ in range(10):
            ts.advance(0.02)
        assert ts.fps == pytest.approx(50.0)

    def test_reset(self) -> None:
        ts = FixedTimestep()
        ts.advance(0.01)
        ts.reset()
        assert ts.accumulator == 0.0
        assert ts.fps == 0.0
