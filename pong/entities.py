from __future__ import annotations

"""Game entities: ball, paddle, player and per-tick input.

Positions are in arena units (pixels in the pygame host). The ball position
is its center; the paddle position is its top-left corner.
"""

from dataclasses import dataclass

from pygame.math import Vector2 as Vec2


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a value into the closed range lo..hi."""
    return max(lo, min(hi, value))


@dataclass
class Ball:
    position: Vec2
    direction: Vec2
    speed: float = 25.0
    radius: float = 12.0

    def center(self) -> Vec2:
        """Return the center of the ball, which is its position."""
        return Vec2(self.position)

    def advance(self, direction: Vec2 | None = None, speed: float | None = None) -> None:
        """Move the ball by direction times speed.

        Defaults to the ball's own direction and speed, one tick worth.
        """
        d = self.direction if direction is None else direction
        s = self.speed if speed is None else speed
        self.position.x += d.x * s
        self.position.y += d.y * s


@dataclass
class Paddle:
    position: Vec2
    width: float = 15.0
    height: float = 100.0
    speed: float = 10.0

    def center(self) -> Vec2:
        """Return the center of the paddle rectangle."""
        return Vec2(self.position.x + self.width / 2.0, self.position.y + self.height / 2.0)

    def clamp_move(self, delta: float, arena_height: float) -> None:
        """Move vertically by delta, staying inside the arena."""
        self.position.y = clamp(self.position.y + delta, 0.0, arena_height - self.height)


@dataclass
class Player:
    paddle: Paddle
    life: int = 5
    scored: bool = False

    def lose_life(self) -> None:
        # Never drops below zero
        if self.life > 0:
            self.life -= 1

    def reset_life(self, lives: int) -> None:
        self.life = lives

    @property
    def out_of_lives(self) -> bool:
        return self.life <= 0


@dataclass
class InputState:
    """Boolean intents for one tick, written by the host from key events."""

    p1_up: bool = False
    p1_down: bool = False
    p2_up: bool = False
    p2_down: bool = False
    confirm: bool = False
    quit: bool = False

    def paddle_delta(self, player_index: int, speed: float) -> float:
        """Return the net vertical motion for a player this tick.

        Up and down held together cancel out.
        """
        if player_index == 0:
            up, down = self.p1_up, self.p1_down
        else:
            up, down = self.p2_up, self.p2_down
        delta = 0.0
        if up:
            delta -= speed
        if down:
            delta += speed
        return delta


__all__ = ["Ball", "Paddle", "Player", "InputState", "Vec2", "clamp"]
