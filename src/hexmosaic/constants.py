BOARD_HEIGHT = 11
NARROW_ROW_WIDTH = 6
WIDE_ROW_WIDTH = 7

MAX_WHITE = 30
MAX_YELLOW = 5
MAX_GREEN = 5
MAX_PURPLE = 5

# Points per filled cell, per distinct valid mosaic, per row threshold reached.
PIXEL_POINTS = 3
ARTIST_BONUS_POINTS = 10
SET_BONUS_POINTS = 10
# Rows (counted from the bottom, zero based) that unlock the three set bonuses.
SET_BONUS_ROWS = (3, 6, 9)

OPTIMAL_HEIGHT_PENALTY = 0.0
REALISTIC_HEIGHT_PENALTY = 0.7
SOLVE_MODES = {
    "optimal": OPTIMAL_HEIGHT_PENALTY,
    "realistic": REALISTIC_HEIGHT_PENALTY,
}

# Hard limit on solver steps; the board never holds more than a handful of mosaics.
SOLVER_MAX_STEPS = 50

# Next-best-pixel heuristic weights.
WRONG_COLOR_PENALTY = 5000
START_MOSAIC_BONUS = 1
COMPLETE_MOSAIC_BONUS = 10
COMPLETE_SET_BONUS = 10

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 640
WINDOW_TITLE = "Hex Mosaic Solver"

# Hexagon geometry: horizontal pitch between cells in a row and vertical pitch between rows.
CELL_WIDTH = 50
ROW_HEIGHT = 44
HEX_HALF_WIDTH = 22
HEX_RADIUS = 25
# Share of the window width reserved for the board; the info panel uses the rest.
BOARD_WIDTH_PCT = 0.7

# Text panel to the right of the board.
INFO_PANEL_MARGIN = 20
INFO_LINE_HEIGHT = 24
