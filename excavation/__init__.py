"""
Dig site gameplay: mining patterns and treasure placement.

This package is pure game logic, separated from UI/rendering concerns.

Example usage:
    from excavation import (
        Cell, ToolKind, compute_pattern, generate_layout, default_pool
    )
    import random

    # Which cells does a hammer blow at (5, 5) reach?
    profile = ToolKind.HAMMER.profile
    for cell, power in compute_pattern(Cell(5, 5), profile.power, profile.resistance):
        print(cell, power)

    # Hide treasures worth 10 points in a 13x10 wall
    layout = generate_layout((13, 10), default_pool(), 10, random.Random(42))
    for treasure in layout.treasures:
        print(treasure.shape.name, treasure.top_left)
"""

from excavation.errors import ExcavationError, SelectionExhausted, GameOverError
from excavation.grid import Cell, Direction, DirtGrid, Occupancy
from excavation.tools import ToolKind, ToolProfile
from excavation.treasures import TreasureShape
from excavation.pattern import compute_pattern
from excavation.placement import (
    Layout,
    PlacedTreasure,
    PlacementFailed,
    TreasurePlacer,
    can_place,
    generate_layout,
    score_of,
    select_treasures,
)
from excavation.pool import default_pool
from excavation.game import DigGame, GamePhase

__all__ = [
    "ExcavationError",
    "SelectionExhausted",
    "GameOverError",
    "Cell",
    "Direction",
    "DirtGrid",
    "Occupancy",
    "ToolKind",
    "ToolProfile",
    "TreasureShape",
    "compute_pattern",
    "Layout",
    "PlacedTreasure",
    "PlacementFailed",
    "TreasurePlacer",
    "can_place",
    "generate_layout",
    "score_of",
    "select_treasures",
    "default_pool",
    "DigGame",
    "GamePhase",
]
