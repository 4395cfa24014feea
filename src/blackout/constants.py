GRID_ROWS = 20
GRID_COLS = 10
CELL_SIZE = 32
# Horizontal pixel offset of column 0; the board spans the full window height.
BOARD_X_ORIGIN = 80

# Match rules
MATCH_LENGTH = 4
MATCH_SCORE = 4

# Generator: number of palette colors and the longest run of one color the
# generator will draw in a row (in generation order, not board adjacency).
COLOR_COUNT = 6
MAX_COLOR_STREAK = 3

# Session length in seconds.
SESSION_DURATION = 45.0

# Window footprint: board plus side margins for the HUD.
WINDOW_WIDTH = BOARD_X_ORIGIN * 2 + GRID_COLS * CELL_SIZE
WINDOW_HEIGHT = GRID_ROWS * CELL_SIZE
WINDOW_TITLE = "Blackout"

# Raw input codes (same values Arcade/pyglet report).
MOUSE_BUTTON_LEFT = 1
KEY_UP = 65362
KEY_DOWN = 65364
KEY_R = 114
KEY_ESCAPE = 65307
