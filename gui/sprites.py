from __future__ import annotations

"""Simple drawable sprites for paddles and ball.

These are lightweight classes with explicit draw; no dependency on
pygame.sprite groups to keep things simple and efficient.
"""

from dataclasses import dataclass
from typing import Tuple

import pygame

from . import constants as C


Vec2 = Tuple[float, float]


@dataclass
class PaddleSprite:
    accent: Tuple[int, int, int]
    rect: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    def draw(self, surf: pygame.Surface):
        # Body in the paddle color with a thin accent edge for the owner
        x, y, w, h = self.rect
        body = pygame.Rect(int(x), int(y), int(w), int(h))
        pygame.draw.rect(surf, C.PADDLE_COLOR, body)
        pygame.draw.rect(surf, self.accent, body, 2)


@dataclass
class BallSprite:
    radius_px: float = 12.0
    pos_px: Vec2 = (0.0, 0.0)

    def draw(self, surf: pygame.Surface):
        # This draws a soft shadow then the ball itself
        x = int(self.pos_px[0])
        y = int(self.pos_px[1])
        r = max(1, int(self.radius_px))
        shadow_rect = pygame.Rect(0, 0, r * 2, int(r * 1.2))
        shadow_rect.center = (x + 2, y + 3)
        shadow_surf = pygame.Surface((shadow_rect.width, shadow_rect.height), pygame.SRCALPHA)
        pygame.draw.ellipse(shadow_surf, (60, 60, 60, 80), shadow_surf.get_rect())
        surf.blit(shadow_surf, shadow_rect.topleft)
        pygame.draw.circle(surf, C.BALL_COLOR, (x, y), r)
