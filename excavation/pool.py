"""
Treasure pool definitions - the shapes hidden in the wall.
NO UI DEPENDENCIES.
"""
from typing import List

from .treasures import TreasureShape


def default_pool() -> List[TreasureShape]:
    """
    The standard treasure pool.

    Scores roughly follow solid cell count so big finds are worth more:
    - Small gems (1-2 points) keep budget selection from stalling
    - Mid-size plates and bones
    - Large fossils
    """
    pool: List[TreasureShape] = []

    # Small gems
    pool.append(TreasureShape.from_rows("red shard", [
        "##",
    ], score=1))
    pool.append(TreasureShape.from_rows("blue shard", [
        "#",
        "#",
    ], score=1))
    pool.append(TreasureShape.from_rows("everstone", [
        "###",
        "###",
    ], score=2))
    pool.append(TreasureShape.from_rows("moon stone", [
        ".#.",
        "###",
        ".#.",
    ], score=2))

    # Plates and bones
    pool.append(TreasureShape.from_rows("heart scale", [
        "#.",
        "##",
    ], score=1))
    pool.append(TreasureShape.from_rows("iron plate", [
        "####",
        "####",
        "####",
    ], score=4))
    pool.append(TreasureShape.from_rows("old bone", [
        "#..#",
        "####",
        "#..#",
    ], score=3))

    # Fossils
    pool.append(TreasureShape.from_rows("helix fossil", [
        ".###",
        "####",
        "####",
        "###.",
    ], score=5))
    pool.append(TreasureShape.from_rows("dome fossil", [
        "..###..",
        ".#####.",
        "#######",
        "#######",
    ], score=6))

    return pool


def gem_pool() -> List[TreasureShape]:
    """
    A pool of single-point gems only - good for testing placement density.
    """
    return [
        TreasureShape.from_rows("red shard", ["##"], score=1),
        TreasureShape.from_rows("blue shard", ["#", "#"], score=1),
    ]
