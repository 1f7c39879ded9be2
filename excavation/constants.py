"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# DIG SITE GRID
# =============================================================================
GRID_WIDTH = 13   # cells
GRID_HEIGHT = 10  # cells

MIN_DIRT = 2      # layers of material on the shallowest cell
MAX_DIRT = 6      # layers of material on the deepest cell

# =============================================================================
# TREASURES
# =============================================================================
SCORE_BUDGET = 10           # total score hidden per game
MAX_ATTEMPTS = 30           # random top-left tries per treasure
MAX_SELECTION_DRAWS = 1000  # pool draws before selection gives up

# =============================================================================
# WALL
# =============================================================================
WALL_HEALTH = 60  # each hit costs the tool's damage
