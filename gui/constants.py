from __future__ import annotations

"""Constants for GUI rendering.

Arena units are window pixels: the simulation runs directly in the drawable
size of the window, so a resize changes the arena the next tick sees.
"""

# Colors (R,G,B)
ARENA_COLOR = (0, 0, 0)
LINE_COLOR = (90, 90, 90)
BALL_COLOR = (255, 0, 0)  # red ball
PADDLE_COLOR = (255, 255, 255)
PLAYER_ONE_COLOR = (66, 135, 245)  # blue for the left player
PLAYER_TWO_COLOR = (236, 88, 64)   # red for the right player
HUD_TEXT_COLOR = (245, 245, 245)
HUD_BG_COLOR = (0, 0, 0)

# Rendering
DEFAULT_WINDOW = (1024, 640)
MIN_WINDOW = (320, 240)
TARGET_FPS = 60
WINDOW_TITLE = "Pong - two player"

# Fonts
FONT_NAME = "liberationmono"
SCORE_FONT_SIZE = 32
OVERLAY_FONT_SIZE = 40
HINT_FONT_SIZE = 18

# Center line dashes
DASH_LENGTH_PX = 16
DASH_GAP_PX = 12
