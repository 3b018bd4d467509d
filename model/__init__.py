"""Model adapter package for the paddle game.

This package provides thin adapters over the existing `pong.engine`
so that front-ends (e.g., the Pygame GUI) can drive the fixed-step
simulation and read render state without touching the live entities.
"""

__all__ = ["adapter"]
