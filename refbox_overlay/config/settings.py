from pathlib import Path

### ROSTER ###
NUMBER_OF_TEAMS = 2
NUMBER_OF_IDS = 12

# Orientation values outside this open interval point to an upstream defect
MAX_ABS_ORIENTATION = 7.0  # radians

### OBJECT MARKERS ###
POLYGON_SEGMENTS = 12  # robots, balls and the ball circle are 12-gons
ROBOT_LABEL_FONT_SIZE = 18
MODEL_LINE_WIDTH = 2

### FIELD MARKS ###
MARK_SIZE = 20  # mm, centre and penalty marks
GOAL_LINE_WIDTH = 3

### RULE VIOLATION OVERLAY ###
RULE_WINDOW = 5000  # same unit as the tracking timestamps (ms)
BREAKER_RING_MARGIN = 100  # mm added to the robot radius
BREAKER_RING_SEGMENTS = 24
FREEKICK_CROSS_HALF_LENGTH = 90  # mm
BALL_CIRCLE_RADIUS = 500  # mm
DEFENSE_AREA_HIGHLIGHT_OFFSET = 200  # mm
OVERLAY_LINE_WIDTH = 2
OVERLAY_THICK_LINE_WIDTH = 3
SCORE_RULE_NUMBER = 29

# Rule text block, relative to the top left corner of the playing field
RULE_TEXT_MARGIN_X = 100
RULE_TEXT_MARGIN_Y = 200
RULE_TEXT_LINE_SPACING = 250
RULE_TEXT_FONT_SIZE = 24

# Play state labels (field coordinates, independent of the field profile)
PLAY_STATE_POS = (-1480.0, 2052.0)
NEXT_PLAY_STATE_POS = (1020.0, 2052.0)
PLAY_STATE_FONT_SIZE = 10

### DISPLAY ###
RENDER_FPS = 30
REPLAY_BASE_PATH = Path.cwd() / "replays"

### LOGGING ###
LOG_CONFIG_FILE = "logging.conf"
LOG_DIR = Path.home() / ".refbox-overlay"
LOG_FILE_NAME = "refbox.log"
LOG_MAX_BYTES = 500000
LOG_FORMAT = "%(relativeCreated)6d %(levelname)-5s %(name)-16s %(message)s"
