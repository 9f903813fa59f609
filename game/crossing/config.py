"""
Configuration for the road-crossing game
Board geometry, asset identifiers and tunable session/environment settings
"""

# ==============================================================================
# BOARD GEOMETRY
# Fixed by the tile artwork; these are not meant to be tuned.
# ==============================================================================

BOARD_WIDTH = 505
BOARD_HEIGHT = 606

LANE_YS = (50, 150, 240)              # enemy lanes
COLUMN_XS = (0, 101, 202, 303, 403)   # token / spawn columns

START_X = 200
START_Y = 400
GOAL_Y = 20                           # y below this means the water was reached

STEP_X = 100
STEP_Y = 80
# Movement is only allowed while the player is inside these limits
LIMIT_UP = 0
LIMIT_DOWN = 350
LIMIT_LEFT = 80
LIMIT_RIGHT = 350

WRAP_X = 550                          # enemy wraps once past this
WRAP_RESET_X = -50

# Hit box: width shared by both boxes, first operand spans 60, second 80
HIT_WIDTH = 50
HIT_HEIGHT_A = 60
HIT_HEIGHT_B = 80

MAX_ENEMY_SPEED = 100

# ==============================================================================
# ASSETS
# ==============================================================================

ENEMY_SPRITE = "images/enemy-bug.png"
PLAYER_SPRITE = "images/char-boy.png"

TOKEN_KINDS = (
    "gem-green",
    "gem-orange",
    "gem-blue",
    "rock",
    "key",
    "heart",
    "star",
)
GEM_KINDS = ("gem-green", "gem-orange", "gem-blue")

TOKEN_SPRITES = {
    "gem-green": "images/gem-green.png",
    "gem-orange": "images/gem-orange.png",
    "gem-blue": "images/gem-blue.png",
    "rock": "images/Rock.png",
    "key": "images/Key.png",
    "heart": "images/Heart.png",
    "star": "images/Star.png",
}

SOUNDS = {
    "cheer": "sounds/jingle.ogg",
    "bite": "sounds/Bite.wav",
    "blip": "sounds/blip.ogg",
}

# ==============================================================================
# SESSION SETTINGS
# ==============================================================================

GAME_CONFIG = {
    "lives": 3,
    "level": 1,
    "level_up_every": 5,                   # score milestone that adds an enemy
    # (x, y, speed) of the enemies present at game start
    "initial_enemies": [(0, 50, 100), (0, 150, 150), (0, 240, 100)],
    "initial_token": (200, 20),
}

# Token effects: points added and lives added per kind
TOKEN_POINTS = {
    "gem": 2,
    "rock": 1,
    "key": 5,
    "star": 10,
}
HEART_LIVES = 1

# ==============================================================================
# ENVIRONMENT SETTINGS
# ==============================================================================

ENV_CONFIG = {
    "dt": 1 / 60,
    "max_steps": 3600,      # 60s at 60 FPS
    "k_enemies": 5,
    "r_score": 1.0,         # reward per point scored
    "r_life": 5.0,          # penalty per life lost
}
