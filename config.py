# config.py
import os

WINDOW_TITLE = 'Scan Conversion Visualizer'
FPS = 60

# Canvases (width, height)
VISUALIZER_CANVAS = (500, 500)
DISPLAY_CANVAS = (500, 400)
INPUT_CANVAS = (400, 300)
PANEL_GAP = 20

# Speed slider (ms)
SPEED_MIN_MS = 10
SPEED_MAX_MS = 500
DEFAULT_ANIMATION_DELAY = 50
DEFAULT_SIMULATION_SPEED = 50
SPEED_STEP_MS = 10

# Pacing
RASTER_SWEEP_CONSTANT = 100   # raster delay = speed / (w*h) * constant
RANDOM_SCAN_FACTOR = 2        # random delay = speed * factor

# Algorithm defaults
DEFAULT_ALGORITHM = 'dda'
DEFAULT_PARAMS = {
    'x0': 50, 'y0': 50, 'x1': 200, 'y1': 150,
    'cx': 250, 'cy': 250, 'r': 100,
}
ALGORITHM_LABELS = {
    'dda': 'DDA Line',
    'bresenham': "Bresenham's Line",
    'midpointCircle': 'Midpoint Circle',
}

# Pixel sizes / stroke widths
PIXEL_SIZE = 2
HIGHLIGHT_PIXEL_SIZE = 4
STROKE_WIDTH = 2
HIGHLIGHT_STROKE_WIDTH = 3

# Colors (r, g, b[, a])
COLOR_BACKGROUND = (31, 41, 55)        # #1f2937
COLOR_LINE = (203, 213, 225)           # #cbd5e1
COLOR_STEP_HIGHLIGHT = (239, 68, 68)   # #ef4444
COLOR_BEAM = (253, 224, 71)            # #fde047
COLOR_FADED = (203, 213, 225, 204)     # rgba(203, 213, 225, 0.8)
COLOR_INPUT = (167, 139, 250)          # #a78bfa
COLOR_PREVIEW = (253, 224, 71)
COLOR_TEXT = (229, 231, 235)
COLOR_WINDOW = (17, 24, 39)

# Readout / messages
IDLE_INFO = 'N/A'
MESSAGE_TIMEOUT_MS = 3000
EMPTY_INPUT_MESSAGE = 'Please draw at least one line on the input canvas first!'

# Background particles
PARTICLE_COUNT = 50
PARTICLE_GRAY = 150

LOG_LEVEL = os.environ.get('SCANSIM_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
