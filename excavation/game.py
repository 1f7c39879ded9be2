"""
Main DigGame class - wires the dig site together.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence
from enum import Enum, auto

from .config import Settings, get_settings
from .errors import GameOverError
from .grid import Cell, DirtGrid
from .pattern import compute_pattern
from .placement import Layout, PlacedTreasure, generate_layout, score_of
from .pool import default_pool
from .tools import DEFAULT_TOOL, ToolKind
from .treasures import TreasureShape

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Current phase of the game."""
    PLAYING = auto()  # Wall standing, treasures left to expose
    WON = auto()      # Every placed treasure exposed
    LOST = auto()     # Wall collapsed


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class GameStartedEvent(GameEvent):
    """A fresh layout was generated."""
    treasure_count: int
    dropped_count: int


@dataclass
class CellsMinedEvent(GameEvent):
    """A hit removed material. Maps each touched cell to layers removed."""
    origin: Cell
    removed: Dict[Cell, int]


@dataclass
class TreasureExposedEvent(GameEvent):
    """Every solid cell of a treasure is now clear."""
    treasure: PlacedTreasure


@dataclass
class WallDamagedEvent(GameEvent):
    """The wall took a hit."""
    amount: int
    new_health: int


@dataclass
class PhaseChangedEvent(GameEvent):
    """Game phase changed."""
    old_phase: GamePhase
    new_phase: GamePhase


class DigGame:
    """
    One dig site session.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts commands as method calls.
    Calls are expected to be serialized by the caller.

    Usage:
        game = DigGame()
        game.new_game(seed=42)
        game.select_tool(ToolKind.HAMMER)
        while game.phase == GamePhase.PLAYING:
            events = game.mine(x, y)
            # UI reads game state and renders
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        pool: Optional[Sequence[TreasureShape]] = None,
    ):
        self.settings = settings if settings is not None else get_settings()
        self.pool: List[TreasureShape] = list(pool) if pool is not None else default_pool()

        self.tool = DEFAULT_TOOL
        self.rng = random.Random(self.settings.seed)

        self.dirt = DirtGrid(self.settings.grid_width, self.settings.grid_height)
        self.layout = Layout(self.settings.grid_size, ())
        self.wall_health = self.settings.wall_health
        self.phase = GamePhase.PLAYING

        self._exposed: List[PlacedTreasure] = []

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def new_game(self, seed: Optional[int] = None) -> List[GameEvent]:
        """
        Start a new game: fresh dirt, fresh layout, full wall.

        Raises SelectionExhausted if the pool cannot fill the score budget;
        the previous game is left untouched in that case.
        """
        if seed is not None:
            self.rng = random.Random(seed)

        layout = generate_layout(
            self.settings.grid_size,
            self.pool,
            self.settings.score_budget,
            self.rng,
            max_attempts=self.settings.max_attempts,
            max_draws=self.settings.max_selection_draws,
        )

        self.dirt = DirtGrid.random(self.settings.grid_width, self.settings.grid_height, self.rng)
        self.layout = layout
        self.wall_health = self.settings.wall_health
        self.phase = GamePhase.PLAYING
        self._exposed = []

        logger.info(
            "New game: %d treasures worth %d, %d dropped",
            len(layout.treasures), layout.total_score, len(layout.failures),
        )
        return [GameStartedEvent(len(layout.treasures), len(layout.failures))]

    def select_tool(self, kind: ToolKind) -> None:
        """Switch the tool used by subsequent hits."""
        self.tool = kind

    def mine(self, x: int, y: int) -> List[GameEvent]:
        """
        Hit the wall at (x, y) with the current tool.

        Hits outside the grid or on a clear cell do nothing. Otherwise
        each affected cell loses up to its residual power in layers and
        the wall loses the tool's damage.
        """
        if self.phase != GamePhase.PLAYING:
            raise GameOverError(f"Game is over ({self.phase.name})")

        origin = Cell(x, y)
        if not self.dirt.has_material(origin):
            return []

        profile = self.tool.profile
        removed: Dict[Cell, int] = {}
        for cell, power in compute_pattern(origin, profile.power, profile.resistance):
            if not self.dirt.has_material(cell):
                continue
            dug = self.dirt.dig(cell, power)
            if dug:
                removed[cell] = dug

        events: List[GameEvent] = [CellsMinedEvent(origin, removed)]

        for treasure in self.layout.treasures:
            if treasure in self._exposed:
                continue
            if treasure.is_exposed(self.dirt.is_clear):
                self._exposed.append(treasure)
                events.append(TreasureExposedEvent(treasure))

        self.wall_health = max(0, self.wall_health - profile.damage)
        events.append(WallDamagedEvent(profile.damage, self.wall_health))

        if self.layout.treasures and len(self._exposed) == len(self.layout.treasures):
            events.append(self._set_phase(GamePhase.WON))
        elif self.wall_health == 0:
            events.append(self._set_phase(GamePhase.LOST))

        return events

    def _set_phase(self, new_phase: GamePhase) -> PhaseChangedEvent:
        old_phase = self.phase
        self.phase = new_phase
        logger.info("Game over: %s with score %d", new_phase.name, self.score)
        return PhaseChangedEvent(old_phase, new_phase)

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def score(self) -> int:
        """Score of every fully exposed treasure."""
        return score_of(self.layout, self.dirt.is_clear)

    @property
    def exposed_treasures(self) -> List[PlacedTreasure]:
        return list(self._exposed)

    def get_wall_state(self) -> tuple:
        """Get (health, max_health) for the wall."""
        return (self.wall_health, self.settings.wall_health)

    def is_over(self) -> bool:
        return self.phase != GamePhase.PLAYING
