from __future__ import annotations

"""Pygame App for the paddle game.

Run with: `python -m gui.app`.

Controls:
  - W/S: player one (left) up/down
  - Up/Down: player two (right) up/down
  - Space/Enter: start, serve, restart after game over
  - Q/Esc: quit
"""

import argparse
import logging
import sys

try:
    import pygame
except Exception:  # pragma: no cover - runtime dependency hint
    print("Pygame is required for GUI. Install via: pip install pygame", file=sys.stderr)
    raise

from pong.engine import MatchConfig
from pong.entities import InputState
from model.adapter import SimulationAdapter

from . import constants as C
from .arena import Arena
from .hud import HUD


def parse_args(argv=None):
    """Parse command line flags for the GUI app.

    This keeps values simple and safe for window size and performance.
    """
    p = argparse.ArgumentParser(description="Paddle game GUI (Pygame)")
    p.add_argument("--lives", type=int, default=MatchConfig.starting_lives)
    p.add_argument("--width", type=int, default=C.DEFAULT_WINDOW[0])
    p.add_argument("--height", type=int, default=C.DEFAULT_WINDOW[1])
    p.add_argument("--fps", type=int, default=C.TARGET_FPS, help="Render frame cap")
    p.add_argument("--tick-rate", dest="tick_rate", type=int, default=60, help="Simulation steps per second")
    p.add_argument("--unclamped-bounce", dest="unclamped_bounce", action="store_true")
    p.add_argument("--keep-positions-on-restart", dest="keep_positions", action="store_true")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def read_input(keys) -> InputState:
    """Map the held keyboard state to this frame's intents."""
    return InputState(
        p1_up=bool(keys[pygame.K_w]),
        p1_down=bool(keys[pygame.K_s]),
        p2_up=bool(keys[pygame.K_UP]),
        p2_down=bool(keys[pygame.K_DOWN]),
        confirm=bool(keys[pygame.K_SPACE] or keys[pygame.K_RETURN]),
    )


def run(argv=None) -> int:
    """Run the pygame paddle game.

    This sets up the window, the simulation adapter and the HUD then loops
    until exit.
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    width = max(C.MIN_WINDOW[0], args.width)
    height = max(C.MIN_WINDOW[1], args.height)

    pygame.init()
    pygame.display.set_caption(C.WINDOW_TITLE)
    flags = pygame.RESIZABLE | pygame.DOUBLEBUF
    try:
        screen = pygame.display.set_mode((width, height), flags, vsync=1)
    except TypeError:
        screen = pygame.display.set_mode((width, height), flags)
    clock = pygame.time.Clock()

    arena = Arena(screen.get_size())
    hud = HUD(screen)

    cfg = MatchConfig(
        starting_lives=max(1, args.lives),
        clamp_bounce_ratio=not args.unclamped_bounce,
        reset_on_restart=not args.keep_positions,
    )
    sim = SimulationAdapter.new_match(arena.size, cfg, ticks_per_second=max(1, args.tick_rate))

    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0
        quit_now = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_now = True
            elif event.type == pygame.VIDEORESIZE:
                new_w = max(C.MIN_WINDOW[0], event.w)
                new_h = max(C.MIN_WINDOW[1], event.h)
                try:
                    screen = pygame.display.set_mode((new_w, new_h), flags, vsync=1)
                except TypeError:
                    screen = pygame.display.set_mode((new_w, new_h), flags)
                arena.resize(screen.get_size())
                hud.surf = screen
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    quit_now = True

        inputs = read_input(pygame.key.get_pressed())
        inputs.quit = quit_now
        sim.advance(dt, inputs, arena.size)

        snap = sim.snapshot()
        if snap.quit_requested or quit_now:
            running = False

        arena.sync(snap)
        hud.update(
            lives=snap.lives,
            fps=snap.fps,
            first_run=snap.first_run,
            game_over=snap.game_over,
            serving=snap.phase == "serving",
            winner=snap.winner,
        )

        arena.draw(screen)
        hud.draw()
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(run())
