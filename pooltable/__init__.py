import math

# ── Central defaults (tune here, not scattered across files) ──

# Table
TABLE_WIDTH = 800.0
CUSHION_THICKNESS = 10.0
BALL_DIAMETER_RATIO = 1.0 / 36.0     # of table width
POCKET_DIAMETER_RATIO = 1.5          # of ball diameter
D_ZONE_RATIO = 0.2                   # of table width
CUE_SPAWN = (0.2, 0.5)               # fraction of (width, height)

# Rack
N_REDS = 15
RACK_ROWS = 5
RACK_APEX_X = 0.7                    # fraction of width
RACK_ROW_SHIFT = 0.8                 # of ball diameter
BLUE_SPOT = (0.5, 0.5)
BLACK_SPOT = (0.8, 0.5)

# World
DT = 1.0 / 60.0
N_SUBSTEPS = 1
GRAVITY = 0.0
DAMPING = 0.99 ** 60                 # velocity kept per second
BALL_DENSITY = 0.001                 # mass per unit area
BALL_RESTITUTION = 0.8
BALL_FRICTION = 0.01
CUSHION_RESTITUTION = 0.9
CUSHION_FRICTION = 0.1

# Cue
CUE_POWER = 50.0
SHOT_STRENGTH = 0.00035
AIM_STEP = math.pi / 90.0            # rad per rotate command
AIM_LINE_LENGTH = 100.0

# Rendering
FPS = 60
FELT_COLOR = (25, 110, 50)
LINE_COLOR = (255, 255, 255)
POCKET_COLOR = (0, 0, 0)
AIM_COLOR = (255, 0, 0)
AIM_WIDTH = 4
BALL_COLORS = {
    'red': (255, 0, 0),
    'blue': (0, 0, 255),
    'black': (0, 0, 0),
    'white': (255, 255, 255),
}
