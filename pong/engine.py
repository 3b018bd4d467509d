from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from .entities import Ball, InputState, Paddle, Player, Vec2
from .physics import (
    LEFT_SIDE,
    RIGHT_SIDE,
    bounce_direction,
    circle_overlaps_rect,
    reflect_off_floor_and_ceiling,
    side_wall_hit,
)

logger = logging.getLogger(__name__)


Phase = Literal["menu", "serving", "playing", "game_over"]
EventKind = Literal["start", "serve", "paddle_hit", "wall_bounce", "point", "game_over", "restart"]
Arena = Tuple[float, float]

STARTING_LIFE_COUNT = 5


@dataclass
class MatchConfig:
    starting_lives: int = STARTING_LIFE_COUNT
    ball_speed: float = 25.0
    ball_radius: float = 12.0
    paddle_width: float = 15.0
    paddle_height: float = 100.0
    paddle_speed: float = 10.0
    # Gap between a side wall and its paddle
    paddle_x_offset: float = 25.0
    max_bounce_angle_deg: float = 60.0
    # Keep the hit ratio inside -1..1 so bounces stay within the angle fan
    clamp_bounce_ratio: bool = True
    # Full round reset when a finished match is restarted
    reset_on_restart: bool = True


@dataclass
class RoundEvent:
    """Something that happened during a tick.

    player is the actor: the paddle owner for a hit, the scorer for a point,
    the match winner for game over, the server for a serve or restart.
    """

    kind: EventKind
    tick: int
    player: Optional[int] = None
    loser: Optional[int] = None
    lives: Tuple[int, int] = (STARTING_LIFE_COUNT, STARTING_LIFE_COUNT)


class RoundController:
    """Owns the ball and both players and advances the match one tick at a time.

    Phases run menu -> serving -> playing, back to serving after each point,
    and to game_over once a player has no lives left. The host feeds an
    InputState and the current arena size to tick() and reads the entity
    state back for drawing.
    """

    def __init__(self, arena: Arena, cfg: Optional[MatchConfig] = None):
        self.cfg = cfg or MatchConfig()
        cfg = self.cfg
        self.player_one = Player(
            Paddle(self._paddle_start(0, arena), cfg.paddle_width, cfg.paddle_height, cfg.paddle_speed),
            life=cfg.starting_lives,
        )
        self.player_two = Player(
            Paddle(self._paddle_start(1, arena), cfg.paddle_width, cfg.paddle_height, cfg.paddle_speed),
            life=cfg.starting_lives,
        )
        self.ball = Ball(Vec2(0.0, 0.0), Vec2(1.0, 0.0), cfg.ball_speed, cfg.ball_radius)
        self._place_ball_for_serve(0, arena)

        self.phase: Phase = "menu"
        self.winner: Optional[int] = None
        self.quit_requested = False
        self.ticks = 0
        self.rounds_played = 0
        self.last_events: Tuple[RoundEvent, ...] = ()
        self._events: List[RoundEvent] = []

    # --- Read-only views ---
    @property
    def players(self) -> Tuple[Player, Player]:
        return (self.player_one, self.player_two)

    @property
    def lives(self) -> Tuple[int, int]:
        return (self.player_one.life, self.player_two.life)

    @property
    def turn_active(self) -> bool:
        return self.phase == "playing"

    @property
    def game_over(self) -> bool:
        return self.phase == "game_over"

    @property
    def first_run(self) -> bool:
        return self.phase == "menu"

    # --- Simulation ---
    def tick(self, inputs: InputState, arena: Arena) -> Optional[RoundEvent]:
        """Advance the match by one fixed step.

        Returns the most significant event of the step or None. Events are
        produced in tick order (hit, wall bounce, point, game over) and the
        last one wins; all of them are kept in last_events.
        """
        self._events = []
        self.ticks += 1
        if inputs.quit and not self.quit_requested:
            logger.debug("quit requested at tick %d", self.ticks)
            self.quit_requested = True

        if self.phase == "game_over":
            if inputs.confirm:
                self.restart(arena)
        else:
            if self.phase == "menu":
                if inputs.confirm:
                    self._set_phase("serving")
                    self._emit("start")
            elif self.phase == "serving":
                if inputs.confirm:
                    self._set_phase("playing")
                    self._emit("serve", player=0 if self.ball.direction.x > 0 else 1)

            self._move_paddles(inputs, arena[1])

            if self.phase == "playing":
                self.ball.advance()
                self._resolve_collisions(arena)

        self.last_events = tuple(self._events)
        return self._events[-1] if self._events else None

    def _move_paddles(self, inputs: InputState, arena_height: float) -> None:
        for index, player in enumerate(self.players):
            delta = inputs.paddle_delta(index, player.paddle.speed)
            # Clamp every tick so a shrinking arena pulls idle paddles back in
            player.paddle.clamp_move(delta, arena_height)

    def _resolve_collisions(self, arena: Arena) -> None:
        width, height = arena
        ball = self.ball
        cfg = self.cfg

        # Player one first; if both overlap, player two's bounce stands
        if circle_overlaps_rect(ball, self.player_one.paddle):
            ball.direction = bounce_direction(
                ball, self.player_one.paddle, LEFT_SIDE, cfg.max_bounce_angle_deg, cfg.clamp_bounce_ratio
            )
            self._emit("paddle_hit", player=0)

        if circle_overlaps_rect(ball, self.player_two.paddle):
            ball.direction = bounce_direction(
                ball, self.player_two.paddle, RIGHT_SIDE, cfg.max_bounce_angle_deg, cfg.clamp_bounce_ratio
            )
            self._emit("paddle_hit", player=1)

        if reflect_off_floor_and_ceiling(ball, height):
            self._emit("wall_bounce")

        scorer = side_wall_hit(ball, width)
        if scorer is not None:
            self.players[scorer].scored = True
            self._process_win(arena)

    def _process_win(self, arena: Arena) -> None:
        scorer = 0 if self.player_one.scored else 1
        loser_index = 1 - scorer
        loser = self.players[loser_index]

        loser.lose_life()
        self._emit("point", player=scorer, loser=loser_index)
        logger.debug("point to player %d, lives now %s", scorer + 1, self.lives)

        if not loser.out_of_lives:
            self.reset_round(arena, server=scorer)
            return

        self.winner = scorer
        self.player_one.scored = False
        self.player_two.scored = False
        self._set_phase("game_over")
        self._emit("game_over", player=scorer, loser=loser_index)
        logger.info("game over, player %d wins after %d rounds", scorer + 1, self.rounds_played + 1)

    # --- Lifecycle ---
    def reset_round(self, arena: Arena, server: Optional[int] = None) -> None:
        """Put paddles and ball back for a new serve.

        The ball sits next to the server's paddle, heading for the other
        side. Without an explicit server the player flagged as scorer
        serves, falling back to player one.
        """
        if server is None:
            server = 1 if self.player_two.scored and not self.player_one.scored else 0
        self.player_one.paddle.position = self._paddle_start(0, arena)
        self.player_two.paddle.position = self._paddle_start(1, arena)
        self._place_ball_for_serve(server, arena)
        self.player_one.scored = False
        self.player_two.scored = False
        self.rounds_played += 1
        self._set_phase("serving")

    def restart(self, arena: Arena) -> None:
        """Start a new match after game over with full lives."""
        for player in self.players:
            player.reset_life(self.cfg.starting_lives)
        server = 0 if self.winner is None else self.winner
        if self.cfg.reset_on_restart:
            self.reset_round(arena, server=server)
        else:
            # Legacy behavior: play resumes from wherever things stopped
            self._set_phase("playing")
        self.winner = None
        self._emit("restart", player=server)

    # --- Helpers ---
    def _paddle_start(self, index: int, arena: Arena) -> Vec2:
        width, height = arena
        cfg = self.cfg
        y = height / 2.0 - cfg.paddle_height / 2.0
        if index == 0:
            return Vec2(cfg.paddle_x_offset, y)
        return Vec2(width - cfg.paddle_x_offset - cfg.paddle_width, y)

    def _place_ball_for_serve(self, server: int, arena: Arena) -> None:
        width, height = arena
        cfg = self.cfg
        if server == 0:
            self.ball.position = Vec2(cfg.paddle_x_offset + cfg.paddle_width + cfg.ball_radius, height / 2.0)
            self.ball.direction = Vec2(1.0, 0.0)
        else:
            self.ball.position = Vec2(
                width - cfg.paddle_x_offset - cfg.paddle_width - cfg.ball_radius, height / 2.0
            )
            self.ball.direction = Vec2(-1.0, 0.0)

    def _set_phase(self, phase: Phase) -> None:
        if phase != self.phase:
            logger.debug("phase %s -> %s at tick %d", self.phase, phase, self.ticks)
        self.phase = phase

    def _emit(self, kind: EventKind, player: Optional[int] = None, loser: Optional[int] = None) -> None:
        self._events.append(RoundEvent(kind=kind, tick=self.ticks, player=player, loser=loser, lives=self.lives))


__all__ = ["MatchConfig", "RoundEvent", "RoundController", "Phase", "EventKind", "Arena", "STARTING_LIFE_COUNT"]
