"""
Treasure shapes: boolean bitmasks with a score.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple

import numpy as np

from .grid import Cell

SOLID_CHARS = "#Xx1"


@dataclass(frozen=True)
class TreasureShape:
    """
    An immutable width x height mask where True marks a solid cell.

    Only solid cells take part in overlap and exposure checks; the
    bounding box only limits where the shape may go.
    """
    name: str
    mask: Tuple[Tuple[bool, ...], ...]  # mask[row][column]
    score: int
    _solid: Tuple[Tuple[int, int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.mask or not self.mask[0]:
            raise ValueError(f"Treasure {self.name!r} has an empty mask")
        width = len(self.mask[0])
        if any(len(row) != width for row in self.mask):
            raise ValueError(f"Treasure {self.name!r} has ragged rows")
        if self.score < 0:
            raise ValueError(f"Treasure {self.name!r} has negative score {self.score}")

        solid = tuple(
            (x, y)
            for y, row in enumerate(self.mask)
            for x, bit in enumerate(row)
            if bit
        )
        if not solid:
            raise ValueError(f"Treasure {self.name!r} has no solid cells")
        object.__setattr__(self, '_solid', solid)

    @classmethod
    def from_mask(cls, name: str, mask, score: int) -> 'TreasureShape':
        """Build a shape from any 2D array-like of truthy values."""
        arr = np.asarray(mask, dtype=bool)
        if arr.ndim != 2:
            raise ValueError(f"Treasure {name!r} mask must be 2D, got {arr.ndim}D")
        rows = tuple(tuple(bool(bit) for bit in row) for row in arr)
        return cls(name=name, mask=rows, score=score)

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[str], score: int) -> 'TreasureShape':
        """
        Build a shape from ASCII art, one string per row.

        '#', 'X', 'x' and '1' are solid; anything else is empty.
        """
        mask = tuple(tuple(ch in SOLID_CHARS for ch in row) for row in rows)
        return cls(name=name, mask=mask, score=score)

    @property
    def width(self) -> int:
        return len(self.mask[0])

    @property
    def height(self) -> int:
        return len(self.mask)

    @property
    def area(self) -> int:
        """Bounding box area."""
        return self.width * self.height

    @property
    def solid_count(self) -> int:
        return len(self._solid)

    def is_solid(self, x: int, y: int) -> bool:
        """Check the bit at a local (column, row), False outside the box."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return self.mask[y][x]

    def solid_offsets(self) -> Tuple[Tuple[int, int], ...]:
        """Local (dx, dy) of every solid bit, row-major."""
        return self._solid

    def solid_cells(self, top_left: Cell) -> Iterator[Cell]:
        """Grid cells covered by solid bits when placed at top_left."""
        for dx, dy in self._solid:
            yield top_left.offset(dx, dy)

    def fits_in(self, width: int, height: int) -> bool:
        return self.width <= width and self.height <= height

    def to_rows(self) -> Tuple[str, ...]:
        return tuple(''.join('#' if bit else '.' for bit in row) for row in self.mask)
