"""
Dig site grid: coordinates, dirt layers and treasure occupancy.
NO UI DEPENDENCIES.
"""
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, Set, Tuple
from enum import Enum

import numpy as np

from .constants import MIN_DIRT, MAX_DIRT


class Direction(Enum):
    """Axis directions used for 4-connected propagation."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True, order=True)
class Cell:
    """
    A grid coordinate. Used as a value key everywhere.

    Coordinate system:
    - (0, 0) is top-left
    - x increases to the right
    - y increases downward
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> 'Cell':
        return Cell(self.x + dx, self.y + dy)

    def neighbor(self, direction: Direction) -> 'Cell':
        """Get the adjacent cell in the given direction."""
        return self.offset(direction.dx, direction.dy)

    def neighbors(self) -> Iterator['Cell']:
        """Yield the four axis neighbours (up, down, left, right)."""
        for direction in Direction:
            yield self.neighbor(direction)

    def manhattan(self, other: 'Cell') -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


class Occupancy:
    """
    The set of cells claimed by placed treasures.

    Grows monotonically during one placement pass. A cell is never
    claimed twice.
    """

    def __init__(self):
        self._cells: Set[Cell] = set()

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def is_free(self, cell: Cell) -> bool:
        return cell not in self._cells

    def claim(self, cells: Iterable[Cell]) -> None:
        """
        Mark cells as occupied.
        Raises ValueError (and claims nothing) if any cell is already taken.
        """
        cells = list(cells)
        taken = [cell for cell in cells if cell in self._cells]
        if taken:
            raise ValueError(f"Cells already occupied: {taken}")
        self._cells.update(cells)

    def as_set(self) -> Set[Cell]:
        return set(self._cells)


class DirtGrid:
    """
    Remaining material per cell of the dig site.

    A cell is clear once its material reaches zero; treasures underneath
    clear cells are visible.
    """

    def __init__(self, width: int, height: int, depth: int = MAX_DIRT):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must have positive size, got {width}x{height}")
        self.width = width
        self.height = height
        # Indexed [y, x] to match row-major layouts
        self._material = np.full((height, width), depth, dtype=np.int32)

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        rng: random.Random,
        min_depth: int = MIN_DIRT,
        max_depth: int = MAX_DIRT,
    ) -> 'DirtGrid':
        """Create a grid whose cells hold between min_depth and max_depth layers."""
        grid = cls(width, height, depth=0)
        for y in range(height):
            for x in range(width):
                grid._material[y, x] = rng.randint(min_depth, max_depth)
        return grid

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, cell: Cell) -> bool:
        """Check if a cell lies within the grid."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def material(self, cell: Cell) -> int:
        """Remaining layers at a cell. Out of bounds cells have none."""
        if not self.in_bounds(cell):
            return 0
        return int(self._material[cell.y, cell.x])

    def set_material(self, cell: Cell, amount: int) -> None:
        if not self.in_bounds(cell):
            raise ValueError(f"{cell} is outside {self!r}")
        self._material[cell.y, cell.x] = max(0, amount)

    def has_material(self, cell: Cell) -> bool:
        return self.material(cell) > 0

    def is_clear(self, cell: Cell) -> bool:
        """True if the cell is inside the grid and fully dug out."""
        return self.in_bounds(cell) and self.material(cell) == 0

    def dig(self, cell: Cell, amount: int) -> int:
        """
        Remove up to `amount` layers from a cell.
        Returns the number of layers actually removed.
        """
        remaining = self.material(cell)
        removed = min(remaining, max(0, amount))
        if removed:
            self._material[cell.y, cell.x] = remaining - removed
        return removed

    def total_material(self) -> int:
        return int(self._material.sum())

    def clear_count(self) -> int:
        return int(np.count_nonzero(self._material == 0))

    def as_array(self) -> np.ndarray:
        """Copy of the material grid, indexed [y, x]."""
        return self._material.copy()

    def __repr__(self) -> str:
        return f"DirtGrid({self.width}x{self.height})"
