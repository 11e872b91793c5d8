"""Constants for the coverage and placement engine."""

# Reference target widths the calibration table was measured with [m]
FLAME_REFERENCE_WIDTH = 0.5
SMOKE_REFERENCE_WIDTH = 0.75

# Validation limits
MOUNTING_HEIGHT_LIMIT = 30.0  # m
OPENING_ANGLE_LIMIT = 120.0  # degrees

# Placement / rendering conventions [m]
PLACEMENT_CLEARANCE = 0.05
MIN_VISIBLE_SIZE = 0.1
FOOTPRINT_FLOOR_OFFSET = 0.01

# tan() diverges at 180 degrees
MAX_FOV_DEG = 179.0

# Warning messages, in the order they are checked
MSG_MOUNTING_HEIGHT = "Mounting height should be between 0 and 30 meters."
MSG_OPENING_ANGLE = "Opening angle should be between 0 and 120 degrees."
MSG_FOCAL_LENGTH = "Focal length must be greater than 0 mm."
MSG_TARGET_WIDTH = "Minimum target widths must be greater than 0 meters."
MSG_NO_HIT = "Aim ray did not hit any room surface; placement unchanged."

DEFAULT_RANGE_INPUTS = {
    "mounting_height": 10.0,
    "opening_angle": 48.5,
    "focal_length": 6.0,
    "min_flame_width": 0.5,
    "min_smoke_width": 0.75,
}

# vertical FOV assumes a 4:3 sensor behind the default 48.5 degree lens
DEFAULT_FOV = {
    "mounting_height": 10.0,
    "range_max": 16.0,
    "horizontal_fov_deg": 48.5,
    "vertical_fov_deg": 37.3,
}

ROOM_DEFAULTS = {
    "length": 20.0,
    "width": 15.0,
    "height": 10.0,
    "wall_thickness": 0.2,
}

# Side-view diagram canvas, in pixels
DIAGRAM_WIDTH = 360
DIAGRAM_HEIGHT = 240
DIAGRAM_PADDING = 32

# Table column names
COL_HEIGHT = "height [m]"
COL_FLAME = "flame distance [m]"
COL_SMOKE = "smoke distance [m]"
