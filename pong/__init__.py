"""Paddle game simulation core.

The engine module holds the round/match state machine; entities, physics
and timestep hold the pieces it is built from. Nothing here draws or reads
devices, so front-ends (the pygame GUI, the text CLI) only feed inputs and
read state back.
"""

from .engine import MatchConfig, RoundController, RoundEvent
from .entities import Ball, InputState, Paddle, Player

__all__ = ["MatchConfig", "RoundController", "RoundEvent", "Ball", "InputState", "Paddle", "Player"]
