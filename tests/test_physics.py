"""
Tests for collisions and bounce responses
"""

import math

import pytest

from pong.entities import Ball, Paddle, Vec2
from pong.physics import (
    LEFT_SIDE,
    RIGHT_SIDE,
    bounce_direction,
    circle_overlaps_rect,
    clamp_components,
    closest_point_on_paddle,
    reflect_off_floor_and_ceiling,
    relative_intersect_ratio,
    side_wall_hit,
)

ARENA_W = 800.0


def left_paddle() -> Paddle:
    # Center at (32.5, 300)
    return Paddle(Vec2(25.0, 250.0), width=15.0, height=100.0)


def ball_at(x: float, y: float, radius: float = 12.0) -> Ball:
    return Ball(Vec2(x, y), Vec2(-1.0, 0.0), radius=radius)


class TestClampComponents:
    """Tests for per-axis clamping"""

    def test_each_axis_clamped_independently(self) -> None:
        v = clamp_components(Vec2(20.0, -80.0), 7.5, 50.0)
        assert v.x == 7.5
        assert v.y == -50.0

    def test_inside_untouched(self) -> None:
        v = clamp_components(Vec2(1.0, -2.0), 7.5, 50.0)
        assert (v.x, v.y) == (1.0, -2.0)


class TestOverlap:
    """Tests for the circle versus rectangle check"""

    def test_closest_point_on_face(self) -> None:
        p = closest_point_on_paddle(ball_at(60.0, 280.0), left_paddle())
        assert (p.x, p.y) == (40.0, 280.0)

    def test_touching_exactly_is_not_overlap(self) -> None:
        """The radius threshold is strict"""
        assert not circle_overlaps_rect(ball_at(52.0, 300.0), left_paddle())

    def test_just_inside_radius(self) -> None:
        assert circle_overlaps_rect(ball_at(51.0, 300.0), left_paddle())

    def test_far_away(self) -> None:
        assert not circle_overlaps_rect(ball_at(400.0, 300.0), left_paddle())

    def test_ball_above_paddle(self) -> None:
        assert not circle_overlaps_rect(ball_at(32.5, 230.0), left_paddle())
        assert circle_overlaps_rect(ball_at(32.5, 239.0), left_paddle())

    def test_corner_uses_per_axis_test(self) -> None:
        """Near a corner a hit is reported past the true circle distance"""
        ball = ball_at(51.0, 239.0)
        closest = closest_point_on_paddle(ball, left_paddle())
        assert math.hypot(closest.x - 51.0, closest.y - 239.0) > 12.0
        assert circle_overlaps_rect(ball, left_paddle())

    @pytest.mark.parametrize(
        "x, y",
        [(52.0, 300.0), (51.0, 300.0), (51.0, 239.0), (45.0, 360.0), (30.0, 300.0), (100.0, 300.0), (47.0, 362.5)],
    )
    def test_mirror_symmetry(self, x: float, y: float) -> None:
        """Mirroring the scene across the vertical midline keeps the outcome"""
        paddle = left_paddle()
        mirrored_paddle = Paddle(Vec2(ARENA_W - paddle.position.x - paddle.width, paddle.position.y))
        ball = ball_at(x, y)
        mirrored_ball = Ball(Vec2(ARENA_W - x, y), Vec2(1.0, 0.0))
        assert circle_overlaps_rect(ball, paddle) == circle_overlaps_rect(mirrored_ball, mirrored_paddle)


class TestBounce:
    """Tests for the paddle bounce angle"""

    def test_center_hit_left_goes_right(self) -> None:
        """Ball top edge level with the paddle middle leaves flat"""
        d = bounce_direction(ball_at(50.0, 288.0), left_paddle(), LEFT_SIDE)
        assert d.x == pytest.approx(1.0)
        assert d.y == pytest.approx(0.0)

    def test_center_hit_right_goes_left(self) -> None:
        d = bounce_direction(ball_at(50.0, 288.0), left_paddle(), RIGHT_SIDE)
        assert d.x == pytest.approx(-1.0)
        assert d.y == pytest.approx(0.0)

    def test_top_edge_deflects_sixty_degrees_up(self) -> None:
        # relative intersect = height / 2
        ball = ball_at(50.0, 238.0)
        assert relative_intersect_ratio(ball, left_paddle()) == pytest.approx(1.0)
        d = bounce_direction(ball, left_paddle(), LEFT_SIDE)
        assert d.x == pytest.approx(math.cos(math.radians(60.0)))
        assert d.y == pytest.approx(-math.sin(math.radians(60.0)))
        assert math.degrees(math.atan2(-d.y, d.x)) == pytest.approx(60.0)

    def test_bottom_edge_deflects_sixty_degrees_down(self) -> None:
        ball = ball_at(50.0, 338.0)
        assert relative_intersect_ratio(ball, left_paddle()) == pytest.approx(-1.0)
        d = bounce_direction(ball, left_paddle(), LEFT_SIDE)
        assert d.x == pytest.approx(0.5)
        assert d.y == pytest.approx(math.sin(math.radians(60.0)))

    def test_right_side_mirrors_horizontal_component(self) -> None:
        ball = ball_at(50.0, 238.0)
        left = bounce_direction(ball, left_paddle(), LEFT_SIDE)
        right = bounce_direction(ball, left_paddle(), RIGHT_SIDE)
        assert right.x == pytest.approx(-left.x)
        assert right.y == pytest.approx(left.y)

    @pytest.mark.parametrize("y", [200.0, 238.0, 260.0, 288.0, 310.0, 338.0, 400.0])
    def test_direction_is_unit_length(self, y: float) -> None:
        d = bounce_direction(ball_at(50.0, y), left_paddle(), LEFT_SIDE)
        assert d.length() == pytest.approx(1.0)

    def test_clamped_ratio_keeps_ball_moving_away(self) -> None:
        """Far above the paddle top the angle is held at the fan edge"""
        ball = ball_at(50.0, 188.0)
        d = bounce_direction(ball, left_paddle(), LEFT_SIDE, clamp_ratio=True)
        assert d.x == pytest.approx(0.5)
        assert d.y == pytest.approx(-math.sin(math.radians(60.0)))

    def test_unclamped_ratio_can_leave_the_fan(self) -> None:
        ball = ball_at(50.0, 188.0)
        assert relative_intersect_ratio(ball, left_paddle(), clamp_ratio=False) == pytest.approx(2.0)
        d = bounce_direction(ball, left_paddle(), LEFT_SIDE, clamp_ratio=False)
        # 120 degrees off horizontal sends it back toward the left wall
        assert d.x == pytest.approx(-0.5)

    def test_custom_max_angle(self) -> None:
        d = bounce_direction(ball_at(50.0, 238.0), left_paddle(), LEFT_SIDE, max_angle_deg=45.0)
        assert d.x == pytest.approx(math.cos(math.radians(45.0)))
        assert d.y == pytest.approx(-math.sin(math.radians(45.0)))


class TestFloorAndCeiling:
    """Tests for the vertical bounds"""

    def test_ceiling_flips_upward_motion(self) -> None:
        ball = Ball(Vec2(400.0, 0.0), Vec2(0.0, -1.0))
        assert reflect_off_floor_and_ceiling(ball, 600.0)
        assert ball.direction.y == 1.0
        assert ball.position.y == 0.0

    def test_ball_past_ceiling_is_pulled_back(self) -> None:
        ball = Ball(Vec2(400.0, -25.0), Vec2(0.6, -0.8))
        assert reflect_off_floor_and_ceiling(ball, 600.0)
        assert ball.position.y == 0.0
        assert ball.direction.y == pytest.approx(0.8)
        assert ball.direction.x == pytest.approx(0.6)

    def test_floor(self) -> None:
        ball = Ball(Vec2(400.0, 610.0), Vec2(0.6, 0.8))
        assert reflect_off_floor_and_ceiling(ball, 600.0)
        assert ball.position.y == 600.0
        assert ball.direction.y == pytest.approx(-0.8)

    def test_inside_untouched(self) -> None:
        ball = Ball(Vec2(400.0, 300.0), Vec2(0.6, 0.8))
        assert not reflect_off_floor_and_ceiling(ball, 600.0)
        assert ball.direction.y == pytest.approx(0.8)


class TestSideWalls:
    """Tests for side wall scoring"""

    def test_right_wall_scores_for_player_one(self) -> None:
        assert side_wall_hit(ball_at(788.0, 300.0), ARENA_W) == 0

    def test_left_wall_scores_for_player_two(self) -> None:
        assert side_wall_hit(ball_at(12.0, 300.0), ARENA_W) == 1

    def test_no_score_in_play(self) -> None:
        assert side_wall_hit(ball_at(787.0, 300.0), ARENA_W) is None
        assert side_wall_hit(ball_at(13.0, 300.0), ARENA_W) is None
