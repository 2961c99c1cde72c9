# --- Window ---
WIDTH, HEIGHT = 800, 600
CAPTION = "String"
# the chord is drawn this many pixels in from the left/right edges
MARGIN = 50
DOT_SIZE = 4
FPS = 1000

# --- Simulation defaults ---
SEGMENTS = 80
STIFFNESS = 1.0 / (1 << 12)
PROFILE = "linear"

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
