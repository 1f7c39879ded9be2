"""
Mining tools and their profiles.
NO UI DEPENDENCIES.
"""
from enum import Enum
from dataclasses import dataclass


@dataclass(frozen=True)
class ToolProfile:
    """How a tool propagates through the dirt and how hard it hits the wall."""
    power: int       # Propagation budget at the struck cell
    resistance: int  # Hops before power starts to decay (negative = faster decay)
    damage: int      # Wall health lost per hit


class ToolKind(Enum):
    """Tools the player can switch between."""
    HAMMER = ToolProfile(power=3, resistance=1, damage=2)    # wide, costly
    PICKAXE = ToolProfile(power=2, resistance=-1, damage=1)  # single cell, cheap

    @property
    def profile(self) -> ToolProfile:
        return self.value


DEFAULT_TOOL = ToolKind.PICKAXE
