"""
Tests for mining pattern propagation.
"""
from typing import Dict

import pytest
from excavation.grid import Cell
from excavation.pattern import compute_pattern, next_state, pattern_power
from excavation.tools import ToolKind


def walk_all_paths(origin: Cell, power: int, resistance: int, depth: int) -> Dict[Cell, int]:
    """
    Best power per cell over every walk of up to `depth` hops.

    Applies the hop rule directly so it can check compute_pattern.
    """
    best: Dict[Cell, int] = {}

    def walk(cell, p, r, steps):
        if p == 0:
            return
        if best.get(cell, 0) < p:
            best[cell] = p
        if steps == depth:
            return
        if r > 0:
            hop_power = p
        else:
            hop_power = max(p + r - 1, 0)
        hop_resistance = r - 1 if r - 1 >= 0 else 0
        for neighbor in cell.neighbors():
            walk(neighbor, hop_power, hop_resistance, steps + 1)

    walk(origin, power, resistance, 0)
    return best


class TestNextState:
    """Tests for the single-hop rule."""

    def test_positive_resistance_keeps_power(self):
        assert next_state(3, 2) == (3, 1)
        assert next_state(3, 1) == (3, 0)

    def test_zero_resistance_decays_by_one(self):
        assert next_state(3, 0) == (2, 0)
        assert next_state(1, 0) == (0, 0)

    def test_negative_resistance_decays_faster(self):
        """Negative resistance costs extra power and then resets to zero."""
        assert next_state(5, -2) == (2, 0)
        assert next_state(3, -1) == (1, 0)
        assert next_state(1, -3) == (0, 0)


class TestComputePattern:
    """Tests for compute_pattern."""

    def test_zero_power_is_empty(self):
        """A tool with no power affects nothing."""
        assert compute_pattern(Cell(3, 3), 0, 0) == []
        assert compute_pattern(Cell(3, 3), 0, 5) == []
        assert compute_pattern(Cell(3, 3), 0, -5) == []

    def test_negative_power_rejected(self):
        with pytest.raises(ValueError):
            compute_pattern(Cell(0, 0), -1, 0)

    def test_origin_first(self):
        """The struck cell is discovered first with full power."""
        pattern = compute_pattern(Cell(2, 2), 2, 0)
        assert pattern[0] == (Cell(2, 2), 2)

    def test_power_three_resistance_one(self):
        """First hop keeps power while resistance is positive, then decays."""
        origin = Cell(5, 5)
        power = pattern_power(compute_pattern(origin, 3, 1))

        assert power[origin] == 3
        for neighbor in origin.neighbors():
            assert power[neighbor] == 3

        for cell, value in power.items():
            distance = cell.manhattan(origin)
            assert value == {0: 3, 1: 3, 2: 2, 3: 1}[distance]

        # Diamond of radius 3: 1 + 4 + 8 + 12
        assert len(power) == 25
        assert Cell(5, 9) not in power
        assert Cell(7, 7) not in power

    def test_resistance_delays_decay(self):
        """Power 1 with resistance 3 reaches three hops without decaying."""
        power = pattern_power(compute_pattern(Cell(0, 0), 1, 3))
        assert set(power.values()) == {1}
        assert max(cell.manhattan(Cell(0, 0)) for cell in power) == 3

    def test_negative_resistance_shrinks_pattern(self):
        """Strongly negative resistance stops the spread after one hop."""
        power = pattern_power(compute_pattern(Cell(0, 0), 3, -3))
        assert power == {Cell(0, 0): 3}

    def test_not_clipped_to_grid(self):
        """Cells left of and above the origin are reported even past zero."""
        power = pattern_power(compute_pattern(Cell(0, 0), 2, 0))
        assert Cell(-1, 0) in power
        assert Cell(0, -1) in power

    def test_pickaxe_pattern(self):
        """The pickaxe spends all its power on the struck cell."""
        profile = ToolKind.PICKAXE.profile
        power = pattern_power(compute_pattern(Cell(4, 4), profile.power, profile.resistance))
        assert power == {Cell(4, 4): 2}

    def test_pickaxe_is_weaker_than_hammer(self):
        assert ToolKind.PICKAXE.profile.power < ToolKind.HAMMER.profile.power

    def test_hammer_reaches_further_than_pickaxe(self):
        hammer = ToolKind.HAMMER.profile
        pickaxe = ToolKind.PICKAXE.profile
        hammer_cells = compute_pattern(Cell(0, 0), hammer.power, hammer.resistance)
        pickaxe_cells = compute_pattern(Cell(0, 0), pickaxe.power, pickaxe.resistance)
        assert len(hammer_cells) > len(pickaxe_cells)

    @pytest.mark.parametrize("power", range(0, 6))
    @pytest.mark.parametrize("resistance", range(-3, 5))
    def test_no_duplicate_cells(self, power, resistance):
        """Every cell appears at most once."""
        pattern = compute_pattern(Cell(0, 0), power, resistance)
        cells = [cell for cell, _ in pattern]
        assert len(cells) == len(set(cells))
        assert all(value > 0 for _, value in pattern)

    @pytest.mark.parametrize("power,resistance", [
        (1, 0),
        (2, 1),
        (3, -1),
        (2, 2),
        (4, 0),
        (3, -2),
        (1, 3),
        (3, 1),
    ])
    def test_matches_path_enumeration(self, power, resistance):
        """Recorded power is the best any walk can deliver."""
        origin = Cell(0, 0)
        depth = power + max(resistance, 0) + 1
        expected = walk_all_paths(origin, power, resistance, depth)
        assert pattern_power(compute_pattern(origin, power, resistance)) == expected
