#!/usr/bin/env python3
"""
Dig Site - Headless Entry Point

Hides treasures in a dirt wall and plays a scripted dig against it,
printing the wall as text. Useful for checking layouts and tool balance
without a renderer.

Usage:
    python main.py --seed 42
    python main.py --seed 42 --reveal        # print the layout only
    python main.py --width 8 --height 6 --budget 6 --tool hammer

Legend:
    A-Z  treasure (letter per placed treasure)
    .    empty dirt
    0-9  remaining layers (after the dig)
"""
import argparse
import logging
from typing import List

from excavation.config import Settings, get_settings
from excavation.game import DigGame, GamePhase, TreasureExposedEvent
from excavation.grid import Cell
from excavation.placement import Layout
from excavation.tools import ToolKind


def render_layout(layout: Layout) -> List[str]:
    """Text rows showing each placed treasure as a letter."""
    width, height = layout.grid_size
    rows = [['.'] * width for _ in range(height)]
    for index, treasure in enumerate(layout.treasures):
        letter = chr(ord('A') + index % 26)
        for cell in treasure.cells():
            rows[cell.y][cell.x] = letter
    return [''.join(row) for row in rows]


def render_dirt(game: DigGame) -> List[str]:
    """Text rows showing remaining layers, with exposed treasure cells as '*'."""
    lines = []
    for y in range(game.dirt.height):
        line = []
        for x in range(game.dirt.width):
            cell = Cell(x, y)
            material = game.dirt.material(cell)
            if material == 0 and game.layout.treasure_at(cell) is not None:
                line.append('*')
            else:
                line.append(str(min(material, 9)))
        lines.append(''.join(line))
    return lines


def scripted_dig(game: DigGame) -> None:
    """Strike every third cell on every other row until the game ends."""
    strikes = [
        (x, y)
        for y in range(0, game.dirt.height, 2)
        for x in range((y // 2) % 3, game.dirt.width, 3)
    ]
    while game.phase == GamePhase.PLAYING:
        hit_any = False
        for x, y in strikes:
            if game.phase != GamePhase.PLAYING:
                break
            events = game.mine(x, y)
            hit_any = hit_any or bool(events)
            for event in events:
                if isinstance(event, TreasureExposedEvent):
                    print(f"  Found {event.treasure.shape.name} (+{event.treasure.score})")
        if not hit_any:
            break


def main():
    parser = argparse.ArgumentParser(description="Headless dig site")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--width", type=int, default=None, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=None, help="Grid height in cells")
    parser.add_argument("--budget", type=int, default=None, help="Total treasure score")
    parser.add_argument(
        "--tool",
        choices=[kind.name.lower() for kind in ToolKind],
        default=None,
        help="Tool used by the scripted dig (default: pickaxe)",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Print the hidden layout and exit without digging",
    )
    args = parser.parse_args()

    overrides = {
        "grid_width": args.width,
        "grid_height": args.height,
        "score_budget": args.budget,
        "seed": args.seed,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    settings = Settings(**overrides) if overrides else get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    game = DigGame(settings)
    game.new_game()
    if args.tool is not None:
        game.select_tool(ToolKind[args.tool.upper()])

    print("Hidden layout:")
    for line in render_layout(game.layout):
        print(f"  {line}")
    for failure in game.layout.failures:
        print(f"  (no room for {failure.shape.name})")

    if args.reveal:
        return

    print(f"Digging with the {game.tool.name.lower()}...")
    scripted_dig(game)

    print("Wall after digging:")
    for line in render_dirt(game):
        print(f"  {line}")

    health, max_health = game.get_wall_state()
    print(f"Result: {game.phase.name}  score {game.score}/{game.layout.total_score}  "
          f"wall {health}/{max_health}")


if __name__ == "__main__":
    main()
