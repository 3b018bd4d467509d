from collections import Counter
import math
import os, sys

# Ensure project root is on sys.path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from pong.engine import MatchConfig, RoundController
from pong.entities import Ball, InputState, Paddle, Vec2
from pong.physics import LEFT_SIDE, bounce_direction


def bounce_fan(clamp_ratio: bool, radius: float = 12.0, steps: int = 9):
    """Return (ball y, outgoing angle in degrees) for hits along a left paddle.

    The ball is swept from above the paddle top to below its bottom.
    """
    paddle = Paddle(Vec2(25.0, 250.0))
    rows = []
    top = paddle.position.y - 2 * radius
    span = paddle.height + 2 * radius
    for i in range(steps):
        y = top + span * i / (steps - 1)
        ball = Ball(Vec2(52.0, y), Vec2(-1.0, 0.0), radius=radius)
        d = bounce_direction(ball, paddle, LEFT_SIDE, clamp_ratio=clamp_ratio)
        rows.append((round(y, 1), round(math.degrees(math.atan2(d.y, d.x)), 1)))
    return rows


def run(p2_hold: str, ball_speed: float, max_ticks: int = 20000):
    """Run one headless match and return (winner, ticks, points by player)."""
    cfg = MatchConfig(ball_speed=ball_speed)
    arena = (800.0, 600.0)
    ctl = RoundController(arena, cfg)
    inputs = InputState(confirm=True, p2_up=p2_hold == "up", p2_down=p2_hold == "down")
    points = Counter()
    for _ in range(max_ticks):
        ctl.tick(inputs, arena)
        for ev in ctl.last_events:
            if ev.kind == "point":
                points[ev.player] += 1
        if ctl.game_over:
            break
    return ctl.winner, ctl.ticks, points


def main():
    """Print the bounce fan with and without clamping, then a few matches."""
    for label, clamp_ratio in (("clamped", True), ("unclamped", False)):
        print(f"\n[bounce fan, {label}] ball y -> angle")
        for y, deg in bounce_fan(clamp_ratio):
            print(f"  {y:7.1f} -> {deg:6.1f}")
    for hold in ("up", "down", "none"):
        for speed in (15.0, 25.0, 40.0):
            winner, ticks, points = run(hold, speed)
            who = "none" if winner is None else f"player {winner + 1}"
            print(f"[p2 holds {hold:4s} speed {speed:4.0f}] winner: {who:8s} ticks: {ticks:6d} points: {dict(points)}")


if __name__ == '__main__':
    main()
