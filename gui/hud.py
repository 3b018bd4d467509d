from __future__ import annotations

"""HUD for match info: lives, fps, and the menu/game over overlays."""

from dataclasses import dataclass
from typing import Optional, Tuple
import pygame

from . import constants as C


MENU_TEXT = (
    "Welcome to PONG!",
    "Player #1 (Left) moves with W and S",
    "Player #2 (Right) moves with Up and Down",
    "Press Space to start",
)


@dataclass
class HUDState:
    lives: Tuple[int, int] = (5, 5)
    fps: float = 0.0
    first_run: bool = True
    game_over: bool = False
    serving: bool = False
    winner: Optional[int] = None
    hint: str = "Space: serve | Esc: quit"


def game_over_lines(winner: Optional[int]) -> Tuple[str, ...]:
    """Return the overlay text shown when the match is over."""
    head = "Game Over!"
    if winner is not None:
        head += f" Player #{winner + 1} wins!"
    return (head, "Press Space to start again!")


class HUD:
    def __init__(self, surf: pygame.Surface):
        # This sets up fonts and a small state object for drawing
        self.surf = surf
        self.font = pygame.font.SysFont(C.FONT_NAME, C.SCORE_FONT_SIZE)
        self.font_big = pygame.font.SysFont(C.FONT_NAME, C.OVERLAY_FONT_SIZE)
        self.font_small = pygame.font.SysFont(C.FONT_NAME, C.HINT_FONT_SIZE)
        self.state = HUDState()

    def update(self, **kwargs):
        # This updates values that the HUD will present
        for k, v in kwargs.items():
            if hasattr(self.state, k):
                setattr(self.state, k, v)

    def draw(self):
        # Scoreboard in the top left, hint and fps along the bottom
        x, y = 25, 10
        for i, lives in enumerate(self.state.lives):
            color = C.PLAYER_ONE_COLOR if i == 0 else C.PLAYER_TWO_COLOR
            img = self.font.render(f"Player {i + 1} lives: {lives}", True, color)
            self.surf.blit(img, (x, y))
            y += img.get_height() + 6

        w, h = self.surf.get_size()
        hint = self.font_small.render(f"{self.state.hint} | {self.state.fps:.0f} fps", True, C.HUD_TEXT_COLOR)
        self.surf.blit(hint, (10, h - hint.get_height() - 6))

        if self.state.first_run:
            self._draw_overlay(MENU_TEXT)
        elif self.state.game_over:
            self._draw_overlay(game_over_lines(self.state.winner))
        elif self.state.serving:
            img = self.font_small.render("Press Space to serve", True, C.HUD_TEXT_COLOR)
            self.surf.blit(img, ((w - img.get_width()) // 2, h // 2 + 40))

    def _draw_overlay(self, lines):
        # Centered text block on a translucent panel
        images = [self.font_big.render(text, True, C.HUD_TEXT_COLOR) for text in lines]
        block_w = max(img.get_width() for img in images)
        block_h = sum(img.get_height() + 8 for img in images)
        w, h = self.surf.get_size()
        top = (h - block_h) // 2
        bg = pygame.Surface((block_w + 40, block_h + 30), pygame.SRCALPHA)
        bg.fill((0, 0, 0, 170))
        self.surf.blit(bg, ((w - block_w) // 2 - 20, top - 15))
        y = top
        for img in images:
            self.surf.blit(img, ((w - img.get_width()) // 2, y))
            y += img.get_height() + 8
