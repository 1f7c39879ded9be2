"""
Treasure placement - picks treasures for a score budget and packs them
into the grid without overlap.
NO UI DEPENDENCIES.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple

from .constants import MAX_ATTEMPTS, MAX_SELECTION_DRAWS
from .errors import SelectionExhausted
from .grid import Cell, Occupancy
from .treasures import TreasureShape

logger = logging.getLogger(__name__)

GridSize = Tuple[int, int]  # (width, height)


@dataclass(frozen=True)
class PlacedTreasure:
    """A treasure fixed at a top-left grid position."""
    shape: TreasureShape
    top_left: Cell

    @property
    def score(self) -> int:
        return self.shape.score

    def cells(self) -> List[Cell]:
        """Grid cells covered by this treasure's solid bits."""
        return list(self.shape.solid_cells(self.top_left))

    def covers(self, cell: Cell) -> bool:
        return self.shape.is_solid(cell.x - self.top_left.x, cell.y - self.top_left.y)

    def is_exposed(self, exposed: Callable[[Cell], bool]) -> bool:
        """True if every solid cell satisfies `exposed`."""
        return all(exposed(cell) for cell in self.shape.solid_cells(self.top_left))


@dataclass(frozen=True)
class PlacementFailed:
    """Diagnostic for a treasure that found no room in the grid."""
    shape: TreasureShape
    attempts: int  # random tries plus fallback positions scanned


@dataclass(frozen=True)
class Layout:
    """
    The result of one generation pass.

    Never mutated; a new game builds a new Layout.
    """
    grid_size: GridSize
    treasures: Tuple[PlacedTreasure, ...]
    failures: Tuple[PlacementFailed, ...] = ()

    def occupancy(self) -> Set[Cell]:
        """Union of solid cells of every placed treasure."""
        cells: Set[Cell] = set()
        for treasure in self.treasures:
            cells.update(treasure.cells())
        return cells

    def treasure_at(self, cell: Cell) -> Optional[PlacedTreasure]:
        """The treasure whose solid bit covers `cell`, if any."""
        for treasure in self.treasures:
            if treasure.covers(cell):
                return treasure
        return None

    @property
    def total_score(self) -> int:
        return sum(t.score for t in self.treasures)

    def __len__(self) -> int:
        return len(self.treasures)


# =============================================================================
# BUDGET SELECTION
# =============================================================================

def select_treasures(
    pool: Sequence[TreasureShape],
    score_budget: int,
    rng: random.Random,
    max_draws: int = MAX_SELECTION_DRAWS,
) -> List[TreasureShape]:
    """
    Randomly draw shapes until their scores add up to exactly the budget.

    A draw is kept only if it does not push the total over the budget.
    This is greedy rejection sampling, not an optimal knapsack. Raises
    SelectionExhausted if the budget is not met within max_draws.
    """
    if score_budget <= 0:
        return []
    if not pool:
        logger.error("Cannot fill score budget %d from an empty pool", score_budget)
        raise SelectionExhausted(score_budget, 0, 0)

    selection: List[TreasureShape] = []
    total = 0
    draws = 0
    while total < score_budget:
        if draws >= max_draws:
            logger.error(
                "Gave up filling score budget %d at %d after %d draws",
                score_budget, total, draws,
            )
            raise SelectionExhausted(score_budget, total, draws)
        draws += 1

        shape = rng.choice(pool)
        if total + shape.score <= score_budget:
            selection.append(shape)
            total += shape.score

    logger.debug("Selected %d treasures in %d draws", len(selection), draws)
    return selection


# =============================================================================
# PACKING
# =============================================================================

def in_grid(shape: TreasureShape, top_left: Cell, grid_size: GridSize) -> bool:
    """Check that the shape's bounding box lies inside the grid."""
    width, height = grid_size
    return (
        top_left.x >= 0
        and top_left.y >= 0
        and top_left.x + shape.width <= width
        and top_left.y + shape.height <= height
    )


def can_place(
    occupancy: Occupancy,
    shape: TreasureShape,
    top_left: Cell,
    grid_size: GridSize,
) -> bool:
    """
    Check whether a shape fits at top_left.

    The bounding box must be inside the grid and no solid bit may land on
    an occupied cell. Empty bits may overlap other treasures.
    """
    if not in_grid(shape, top_left, grid_size):
        return False
    return all(occupancy.is_free(cell) for cell in shape.solid_cells(top_left))


class TreasurePlacer:
    """
    Packs shapes into one grid, largest first.

    Each shape gets MAX_ATTEMPTS random positions. Shapes still unplaced
    after the random pass are retried with a row-major scan of every
    position. There is no backtracking: a shape that fails both passes is
    dropped and recorded as a PlacementFailed.
    """

    def __init__(
        self,
        grid_size: GridSize,
        rng: random.Random,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        self.grid_size = grid_size
        self.rng = rng
        self.max_attempts = max_attempts
        self.reset()

    def reset(self) -> None:
        """Forget every placement so the next pass starts from an empty grid."""
        self.occupancy = Occupancy()
        self._placed: List[PlacedTreasure] = []
        self._failures: List[PlacementFailed] = []

    def can_place(self, shape: TreasureShape, top_left: Cell) -> bool:
        return can_place(self.occupancy, shape, top_left, self.grid_size)

    def commit(self, shape: TreasureShape, top_left: Cell) -> PlacedTreasure:
        """Claim the shape's solid cells and append it to the layout."""
        self.occupancy.claim(shape.solid_cells(top_left))
        placed = PlacedTreasure(shape, top_left)
        self._placed.append(placed)
        logger.debug("Placed %s at (%d, %d)", shape.name, top_left.x, top_left.y)
        return placed

    def try_random(self, shape: TreasureShape) -> Optional[PlacedTreasure]:
        """Try up to max_attempts random positions."""
        width, height = self.grid_size
        if not shape.fits_in(width, height):
            return None

        for _ in range(self.max_attempts):
            top_left = Cell(
                self.rng.randint(0, width - shape.width),
                self.rng.randint(0, height - shape.height),
            )
            if self.can_place(shape, top_left):
                return self.commit(shape, top_left)
        return None

    def try_exhaustive(self, shape: TreasureShape) -> Tuple[Optional[PlacedTreasure], int]:
        """
        Scan every position row by row and take the first that fits.
        Returns (placed or None, positions scanned).
        """
        width, height = self.grid_size
        scanned = 0
        for y in range(height - shape.height + 1):
            for x in range(width - shape.width + 1):
                scanned += 1
                top_left = Cell(x, y)
                if self.can_place(shape, top_left):
                    return self.commit(shape, top_left), scanned
        return None, scanned

    def place_all(self, shapes: Iterable[TreasureShape]) -> Layout:
        """
        Pack shapes (largest bounding box first) and return the layout.
        Each call starts a fresh pass; earlier placements are discarded.
        """
        self.reset()
        ordered = sorted(shapes, key=lambda s: s.area, reverse=True)

        unplaced: List[TreasureShape] = []
        for shape in ordered:
            if self.try_random(shape) is None:
                unplaced.append(shape)

        for shape in unplaced:
            logger.info("Random placement failed for %s, scanning all positions", shape.name)
            placed, scanned = self.try_exhaustive(shape)
            if placed is None:
                random_tries = self.max_attempts if shape.fits_in(*self.grid_size) else 0
                failure = PlacementFailed(shape, random_tries + scanned)
                self._failures.append(failure)
                logger.warning(
                    "Dropped %s (%dx%d): no room in %dx%d grid",
                    shape.name, shape.width, shape.height, *self.grid_size,
                )

        return self.layout()

    def layout(self) -> Layout:
        return Layout(self.grid_size, tuple(self._placed), tuple(self._failures))


def generate_layout(
    grid_size: GridSize,
    pool: Sequence[TreasureShape],
    score_budget: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
    max_draws: int = MAX_SELECTION_DRAWS,
) -> Layout:
    """
    Select treasures worth score_budget from pool and pack them.

    Deterministic for a seeded rng. Starts from an empty occupancy every
    call. Raises SelectionExhausted if the budget cannot be met.
    """
    if rng is None:
        rng = random.Random()

    selection = select_treasures(pool, score_budget, rng, max_draws=max_draws)
    placer = TreasurePlacer(grid_size, rng, max_attempts=max_attempts)
    layout = placer.place_all(selection)

    logger.info(
        "Generated layout: %d/%d treasures placed, score %d",
        len(layout.treasures), len(selection), layout.total_score,
    )
    return layout


def score_of(layout: Layout, exposed: Callable[[Cell], bool]) -> int:
    """Total score of treasures whose every solid cell is exposed."""
    return sum(t.score for t in layout.treasures if t.is_exposed(exposed))
