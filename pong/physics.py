from __future__ import annotations

"""Collision tests and bounce responses.

Ball versus paddle uses a per-axis circle/rectangle check: the closest point
on the paddle to the ball center is found by clamping, and a hit is declared
when that point is within the radius on both axes independently. This is
looser than a true distance test near the paddle corners.
"""

import math
from typing import Optional

from .entities import Ball, Paddle, Vec2, clamp

LEFT_SIDE = -1.0
RIGHT_SIDE = 1.0


def clamp_components(v: Vec2, half_w: float, half_h: float) -> Vec2:
    """Clamp x into -half_w..half_w and y into -half_h..half_h."""
    return Vec2(clamp(v.x, -half_w, half_w), clamp(v.y, -half_h, half_h))


def closest_point_on_paddle(ball: Ball, paddle: Paddle) -> Vec2:
    """Return the point of the paddle rectangle closest to the ball center."""
    paddle_center = paddle.center()
    offset = ball.center() - paddle_center
    return paddle_center + clamp_components(offset, paddle.width / 2.0, paddle.height / 2.0)


def circle_overlaps_rect(ball: Ball, paddle: Paddle) -> bool:
    """Return True if the ball touches the paddle on both axes."""
    gap = closest_point_on_paddle(ball, paddle) - ball.center()
    return abs(gap.x) < ball.radius and abs(gap.y) < ball.radius


def relative_intersect_ratio(ball: Ball, paddle: Paddle, clamp_ratio: bool = True) -> float:
    """Return where the ball met the paddle, 1 at the top edge and -1 at the bottom.

    The ball's top edge is measured against the paddle's middle. Without
    clamping the ratio can leave -1..1 for large radii or fast balls.
    """
    half = paddle.height / 2.0
    relative = paddle.position.y + half - ball.position.y - ball.radius
    ratio = relative / half
    if clamp_ratio:
        ratio = clamp(ratio, -1.0, 1.0)
    return ratio


def bounce_direction(
    ball: Ball,
    paddle: Paddle,
    side_sign: float,
    max_angle_deg: float = 60.0,
    clamp_ratio: bool = True,
) -> Vec2:
    """Return the outgoing unit direction after the ball hits a paddle.

    side_sign is -1 for the left paddle and +1 for the right one, so the
    ball always leaves away from the paddle it hit. A hit at the paddle's
    middle sends it out flat; hits toward an edge fan out to max_angle_deg.
    """
    ratio = relative_intersect_ratio(ball, paddle, clamp_ratio)
    angle = math.radians(ratio * -max_angle_deg)
    return Vec2(math.cos(angle) * -1.0 * side_sign, math.sin(angle))


def reflect_off_floor_and_ceiling(ball: Ball, arena_height: float) -> bool:
    """Keep the ball inside vertically, reflecting its direction at a bound.

    Returns True when a bounce happened.
    """
    if ball.position.y <= 0.0:
        ball.position.y = 0.0
        ball.direction.y = abs(ball.direction.y)
        return True
    if ball.position.y >= arena_height:
        ball.position.y = arena_height
        ball.direction.y = -abs(ball.direction.y)
        return True
    return False


def side_wall_hit(ball: Ball, arena_width: float) -> Optional[int]:
    """Return the index of the player who scored, or None.

    Passing the right wall scores for player one (index 0); passing the left
    wall scores for player two (index 1).
    """
    if ball.position.x + ball.radius >= arena_width:
        return 0
    if ball.position.x - ball.radius <= 0.0:
        return 1
    return None


__all__ = [
    "LEFT_SIDE",
    "RIGHT_SIDE",
    "clamp_components",
    "closest_point_on_paddle",
    "circle_overlaps_rect",
    "relative_intersect_ratio",
    "bounce_direction",
    "reflect_off_floor_and_ceiling",
    "side_wall_hit",
]
