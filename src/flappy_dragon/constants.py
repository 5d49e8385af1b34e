"""
constants.py: Centralized default tuning for the simulation and the grid client.
"""

# -------- Colours (RGB) --------
NAVY = (0, 0, 128)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
GOLD = (255, 215, 0)
ORANGE = (255, 165, 0)
CYAN = (0, 255, 255)

BACKGROUND_COLOR = NAVY
PLAYER_COLOR = YELLOW
OBSTACLE_COLOR = RED
OBJECTIVE_COLOR = GOLD
TEXT_COLOR = WHITE

# -------- Screen & Timing Config --------
SCREEN_WIDTH = 80               # Character grid columns
SCREEN_HEIGHT = 50              # Character grid rows
FRAME_DURATION = 45.0           # Milliseconds of accumulated time per physics step
RENDER_FPS = 60                 # External tick rate requested from the backend
CELL_SIZE = 12                  # Pixels per grid cell in the pygame client

PLAYER_START_X = 5
PLAYER_START_Y = 25

# -------- Falling Config --------
FALLING_GRAVITY = 0.4
TERMINAL_FALLING_VELOCITY = 1.5
FALLING_GLYPH = "~"

# -------- Flapping Config --------
MAX_FLAPPING_VELOCITY = -2.0
FLAP_MAX_ACCELERATION = -2.0
FLAP_INIT_ACCELERATION = 0.2
FLAP_DURATION = 8               # In physics steps
FLAPPING_GLYPHS = ("v", "V", "v", "_", "-", "^", "A", "^")

# -------- Diving Config --------
DIVING_GLYPH = "v"
DIVING_HOLD_LENGTH = 3          # Held physics steps before a flap turns into a dive
DIVING_GRAVITY = 0.8
TERMINAL_DIVING_VELOCITY = 3.5

# -------- Obstacle Config --------
GAP_BAND = (10, 40)             # gap_center_y is drawn from [low, high)
MIN_GAP = 2
BASE_GAP_SIZE = 20
OBSTACLE_GLYPH = "|"

# -------- Objective Config --------
OBJECTIVE_WIDTH = 3
OBJECTIVE_HEIGHT = 2
OBJECTIVE_GLYPHS = ("(*)", "\\_/")

# -------- Score Flash Config --------
# Played on the player glyph after each scoring event; the last entry is the resting colour.
SCORE_FLASH_COLORS = (WHITE, CYAN, WHITE, ORANGE, GOLD, ORANGE, GOLD, YELLOW)

# -------- Environment --------
LOG_LEVEL_ENV = "FLAPPY_DRAGON_LOG_LEVEL"
