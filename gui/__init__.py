"""Pygame GUI for the paddle game.

Contains rendering primitives, a HUD for lives and overlays, and the
application entry point (`python -m gui.app`).
"""

__all__ = [
    "constants",
    "arena",
    "sprites",
    "hud",
    "app",
]
