from __future__ import annotations

import argparse
import logging
from typing import Optional

from .engine import MatchConfig, RoundController, RoundEvent
from .entities import InputState

PLAYER_NAMES = ("Player 1", "Player 2")


def is_valid_size(v: Optional[float]) -> bool:
    """Return True for a strictly positive arena dimension."""
    return v is not None and v > 0


def is_valid_lives(v: Optional[int]) -> bool:
    """Return True if the starting life count is at least one."""
    return isinstance(v, int) and v >= 1


def is_valid_speed(v: Optional[float]) -> bool:
    """Return True for a strictly positive speed."""
    return v is not None and v > 0


def scripted_input(p1_hold: str, p2_hold: str) -> InputState:
    """Build the fixed input used for every tick of a headless run.

    Confirm is held so serves and restarts happen as soon as allowed.
    """
    return InputState(
        p1_up=p1_hold == "up",
        p1_down=p1_hold == "down",
        p2_up=p2_hold == "up",
        p2_down=p2_hold == "down",
        confirm=True,
    )


def format_event(event: RoundEvent) -> Optional[str]:
    """Return the text line for an event, or None for events not shown."""
    a, b = PLAYER_NAMES
    la, lb = event.lives
    if event.kind == "start":
        return f"Start of play - {a} vs {b} - {la} lives each"
    if event.kind == "serve":
        return f"Serve {PLAYER_NAMES[event.player]}"
    if event.kind == "paddle_hit":
        return f"Hit {PLAYER_NAMES[event.player]}"
    if event.kind == "point":
        return f"Point {PLAYER_NAMES[event.player]}, Lives: {a} vs {b} {la} - {lb}"
    if event.kind == "game_over":
        return f"Winner: {PLAYER_NAMES[event.player]}. Final lives: {a} vs {b} {la} - {lb}"
    if event.kind == "restart":
        return f"Restart - {PLAYER_NAMES[event.player]} to serve"
    return None


def main(argv=None) -> int:
    """Run a headless match with held inputs and print each event as text.

    The match runs until game over or until the tick limit is hit.
    """
    parser = argparse.ArgumentParser(description="Paddle game headless match (CLI)")
    parser.add_argument("--width", type=float, default=800.0, help="Arena width")
    parser.add_argument("--height", type=float, default=600.0, help="Arena height")
    parser.add_argument("--lives", type=int, default=MatchConfig.starting_lives, help="Starting lives (default 5)")
    parser.add_argument("--ball-speed", dest="ball_speed", type=float, default=MatchConfig.ball_speed)
    parser.add_argument("--paddle-speed", dest="paddle_speed", type=float, default=MatchConfig.paddle_speed)
    parser.add_argument("--max-ticks", dest="max_ticks", type=int, default=20000, help="Stop after this many ticks")
    parser.add_argument("--p1-hold", dest="p1_hold", choices=["up", "down", "none"], default="none",
                        help="Direction player one holds for the whole run")
    parser.add_argument("--p2-hold", dest="p2_hold", choices=["up", "down", "none"], default="down",
                        help="Direction player two holds for the whole run")
    parser.add_argument("--unclamped-bounce", dest="unclamped_bounce", action="store_true",
                        help="Do not clamp the paddle hit ratio to -1..1")
    parser.add_argument("--keep-positions-on-restart", dest="keep_positions", action="store_true",
                        help="Restart after game over without resetting the round")
    parser.add_argument("--show-hits", dest="show_hits", action="store_true", help="Print paddle hits too")
    parser.add_argument("--verbose", action="store_true", help="Debug logging of phase changes")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not (is_valid_size(args.width) and is_valid_size(args.height)):
        print("Invalid input. Please try again.")
        return 2
    if not is_valid_lives(args.lives):
        print("Invalid input. Please try again.")
        return 2
    if not (is_valid_speed(args.ball_speed) and is_valid_speed(args.paddle_speed)):
        print("Invalid input. Please try again.")
        return 2

    cfg = MatchConfig(
        starting_lives=args.lives,
        ball_speed=args.ball_speed,
        paddle_speed=args.paddle_speed,
        clamp_bounce_ratio=not args.unclamped_bounce,
        reset_on_restart=not args.keep_positions,
    )
    if args.height <= cfg.paddle_height:
        print("Invalid input. Please try again.")
        return 2

    arena = (args.width, args.height)
    controller = RoundController(arena, cfg)
    inputs = scripted_input(args.p1_hold, args.p2_hold)

    for _ in range(args.max_ticks):
        controller.tick(inputs, arena)
        for event in controller.last_events:
            if event.kind == "paddle_hit" and not args.show_hits:
                continue
            line = format_event(event)
            if line is not None:
                print(line)
        if controller.game_over:
            print(f"Ticks: {controller.ticks}")
            return 0

    print(f"No winner after {controller.ticks} ticks. Lives: {controller.lives[0]} - {controller.lives[1]}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
