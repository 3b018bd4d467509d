from __future__ import annotations

"""Thin adapter over `pong.engine` to feed a front-end.

`SimulationAdapter` couples a `RoundController` with a `FixedTimestep`: the
host hands it real elapsed time once per rendered frame and it runs as many
fixed ticks as are due. `FrameSnapshot` is a read-only copy of everything a
renderer needs, so drawing code never touches the live entities.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from pong.engine import Arena, MatchConfig, Phase, RoundController, RoundEvent
from pong.entities import InputState
from pong.timestep import FixedTimestep

logger = logging.getLogger(__name__)

Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class FrameSnapshot:
    """Render state for one frame.

    Paddles are (x, y, width, height) rectangles; the ball is its center and
    radius.
    """

    ball_pos: Tuple[float, float]
    ball_radius: float
    paddles: Tuple[Rect, Rect]
    lives: Tuple[int, int]
    phase: Phase
    first_run: bool
    game_over: bool
    winner: Optional[int] = None
    quit_requested: bool = False
    fps: float = 0.0
    ticks: int = 0


def take_snapshot(controller: RoundController, fps: float = 0.0) -> FrameSnapshot:
    """Copy the controller state into an immutable snapshot."""
    ball = controller.ball
    p1 = controller.player_one.paddle
    p2 = controller.player_two.paddle
    return FrameSnapshot(
        ball_pos=(ball.position.x, ball.position.y),
        ball_radius=ball.radius,
        paddles=(
            (p1.position.x, p1.position.y, p1.width, p1.height),
            (p2.position.x, p2.position.y, p2.width, p2.height),
        ),
        lives=controller.lives,
        phase=controller.phase,
        first_run=controller.first_run,
        game_over=controller.game_over,
        winner=controller.winner,
        quit_requested=controller.quit_requested,
        fps=fps,
        ticks=controller.ticks,
    )


class SimulationAdapter:
    def __init__(self, controller: RoundController, timestep: Optional[FixedTimestep] = None):
        self.controller = controller
        self.timestep = timestep or FixedTimestep()

    @classmethod
    def new_match(cls, arena: Arena, cfg: Optional[MatchConfig] = None, ticks_per_second: int = 60) -> "SimulationAdapter":
        """Build a fresh controller and clock for a new match."""
        return cls(RoundController(arena, cfg), FixedTimestep(ticks_per_second=ticks_per_second))

    def advance(self, elapsed: float, inputs: InputState, arena: Arena) -> List[RoundEvent]:
        """Run every tick due for elapsed seconds and return all their events.

        Inputs and arena size are sampled once per frame and reused for each
        tick run in that frame.
        """
        events: List[RoundEvent] = []
        steps = self.timestep.advance(elapsed)
        for _ in range(steps):
            self.controller.tick(inputs, arena)
            events.extend(self.controller.last_events)
        if self.timestep.pending_steps:
            logger.debug("frame ran %d ticks, %d still owed", steps, self.timestep.pending_steps)
        return events

    def snapshot(self) -> FrameSnapshot:
        return take_snapshot(self.controller, fps=self.timestep.fps)


__all__ = ["FrameSnapshot", "SimulationAdapter", "take_snapshot"]
