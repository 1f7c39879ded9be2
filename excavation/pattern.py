"""
Mining pattern propagation.
NO UI DEPENDENCIES.

A hit at one cell spreads to its neighbours. Each hop keeps the tool's
power while resistance is positive; once resistance is used up, power
decays by (1 - resistance) per hop. A cell is reprocessed only when a
later path reaches it with strictly more power, so every cell is
reported once with the best power any path can bring to it.
"""
from collections import deque
from typing import Deque, Dict, List, Tuple

from .grid import Cell

PatternEntry = Tuple[Cell, int]


def _clamp(value: int, low: int, high: int) -> int:
    # Lower bound is checked first, so it wins when low > high
    if value < low:
        return low
    if value > high:
        return high
    return value


def next_state(power: int, resistance: int) -> Tuple[int, int]:
    """(power, resistance) carried one hop further."""
    if resistance > 0:
        next_power = power
    else:
        next_power = max(power + resistance - 1, 0)
    next_resistance = _clamp(resistance - 1, 0, resistance + 1)
    return next_power, next_resistance


def compute_pattern(origin: Cell, power: int, resistance: int) -> List[PatternEntry]:
    """
    Cells affected by a hit at `origin` and the power that reaches each.

    The result is in discovery order and is not clipped to any grid;
    callers filter out cells that are out of bounds or already clear.
    A power of zero affects nothing.
    """
    if power < 0:
        raise ValueError(f"power must be non-negative, got {power}")

    queue: Deque[Tuple[Cell, int, int]] = deque([(origin, power, resistance)])
    best_power: Dict[Cell, int] = {}
    pattern: List[PatternEntry] = []

    while queue:
        cell, p, r = queue.popleft()
        if p == 0:
            continue
        if best_power.get(cell, 0) >= p:
            continue

        if cell in best_power:
            # Stronger path found; replace the earlier entry
            pattern = [(c, cp) for c, cp in pattern if c != cell]
        best_power[cell] = p
        pattern.append((cell, p))

        next_power, next_resistance = next_state(p, r)
        for neighbor in cell.neighbors():
            queue.append((neighbor, next_power, next_resistance))

    return pattern


def pattern_power(pattern: List[PatternEntry]) -> Dict[Cell, int]:
    """Pattern as a cell -> power lookup."""
    return dict(pattern)
