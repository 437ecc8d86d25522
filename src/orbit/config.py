import math

# --- Display ---
WIDTH = 960
HEIGHT = 540
FPS = 60
MAX_FRAME_DT = 1.0 / 15.0    # host-side clamp on a stalled frame (sec)

# --- Player physics (world units, seconds) ---
GRAVITY = 8.0                # pulls velocity down
JUMP_IMPULSE = 3.5           # velocity set by a grounded jump
MAX_FALL_SPEED = 10.0        # |vy| cap while falling
MAX_JUMP_SPEED = 5.0         # vy cap while rising
JUMP_TOLERANCE = 0.1         # "grounded" if height <= this

# --- World ---
TWO_PI = 2.0 * math.pi
ROTATION_SPEED = 1.5         # world angle rate (rad/s)
PLAYER_LANE = 0.0
PLAYER_DEPTH = 0.0

# --- Obstacles ---
LANES = (-1.2, 0.0, 1.2)
SPAWN_DEPTH = -8.0           # far ahead of the player
DESPAWN_DEPTH = 3.0          # behind the player -> pruned
PASS_DEPTH = 0.5             # depth at which an obstacle counts as passed
HIT_RADIUS = 0.6             # player/obstacle distance that ends the run
HEIGHT_RANGES = {
    "asteroid": (0.3, 1.5),
    "satellite": (1.0, 2.0),
    "meteor": (0.5, 1.8),
}

# --- Difficulty ---
OBSTACLE_SPEED_START = 1.5
SPAWN_INTERVAL_START = 2.0
SPAWN_INTERVAL_MIN = 1.2
SPEED_STEP = 0.05            # obstacle speed gained per pass
INTERVAL_STEP = 0.02         # spawn interval lost per pass

SEED_DEFAULT = 12345

# --- Observations ---
OBS_NEAREST = 3              # obstacles described in the observation
OBS_MAX_HEIGHT = 2.0         # normalization for heights

# --- Side view ---
PX_PER_UNIT = 80.0
GROUND_Y = HEIGHT - 110
PLAYER_SCREEN_X = 660        # where depth 0 lands on screen
PLAYER_SIZE = 30
OBSTACLE_SIZE = 28

# --- Colors (RGB) ---
COLOR_BG = (9, 14, 28)
COLOR_FG = (220, 232, 255)
COLOR_ACCENT = (120, 200, 255)
COLOR_GROUND = (33, 46, 68)
COLOR_DANGER = (255, 86, 110)
COLOR_KIND = {
    "asteroid": (170, 140, 110),
    "satellite": (190, 200, 215),
    "meteor": (255, 140, 60),
}
