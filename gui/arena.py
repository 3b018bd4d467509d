from __future__ import annotations

"""Arena drawing utilities.

The arena is the whole window; the simulation runs in window pixels so no
coordinate transform is needed, only the background, the center line and
the entities taken from a frame snapshot.
"""

from typing import Tuple

import pygame

from model.adapter import FrameSnapshot

from . import constants as C
from .sprites import BallSprite, PaddleSprite


class Arena:
    def __init__(self, window_size: Tuple[int, int]):
        # This sets up sprites sized for the current window
        self.window_size = window_size
        self.paddles = (PaddleSprite(C.PLAYER_ONE_COLOR), PaddleSprite(C.PLAYER_TWO_COLOR))
        self.ball = BallSprite()

    def resize(self, window_size: Tuple[int, int]):
        # Paddle y is clamped to the new height on the next tick; paddle x and
        # the serve spot follow the new width at the next round reset
        self.window_size = window_size

    @property
    def size(self) -> Tuple[float, float]:
        """Arena size handed to the engine each tick."""
        w, h = self.window_size
        return (float(w), float(h))

    def sync(self, snap: FrameSnapshot):
        # This copies entity positions from the latest snapshot into the sprites
        for sprite, rect in zip(self.paddles, snap.paddles):
            sprite.rect = rect
        self.ball.pos_px = snap.ball_pos
        self.ball.radius_px = snap.ball_radius

    # --- Drawing ---
    def draw(self, surf: pygame.Surface):
        w, h = self.window_size
        surf.fill(C.ARENA_COLOR)

        # Dashed center line
        cx = w // 2
        y = 0
        while y < h:
            pygame.draw.line(surf, C.LINE_COLOR, (cx, y), (cx, min(h, y + C.DASH_LENGTH_PX)), 2)
            y += C.DASH_LENGTH_PX + C.DASH_GAP_PX

        for paddle in self.paddles:
            paddle.draw(surf)
        self.ball.draw(surf)
