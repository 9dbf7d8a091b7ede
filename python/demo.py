"""
Demonstration scripts for the hexboard renderer.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum

from hexboard import HexBoard, HexCoord, HexDirection, hex_range

LAYOUTS: dict[str, str] = dict(
    single="0,0:a",
    four="0,0:a 1,0:b 0,1:c -1,-1:d",
    apart="1,1:t -1,-1:b",
    column="2,2:1 1,1:2 0,0:3 -1,-1:4",
    word="0,0:h 0,1:e 0,2:x 0,3:e 0,4:s",
)


class Tile(Enum):
    """Game-tile states shown by the flower demo."""

    EMPTY = "."
    RED = "R"
    BLUE = "B"


def tile_char(tile: Tile) -> str:
    return tile.value


def flower_board(radius: int = 2) -> HexBoard[Tile]:
    """A filled hexagon of tiles with a red ring around the center."""
    center = HexCoord(0, 0)
    board: HexBoard[Tile] = HexBoard.from_pairs((coord, Tile.EMPTY) for coord in hex_range(radius))
    for neighbor in center.neighbors():
        board[neighbor] = Tile.RED
    board[center.neighbor(HexDirection.N)] = Tile.BLUE
    return board


def demo() -> None:
    """Print every sample layout."""
    for name, definition in LAYOUTS.items():
        print("=" * 40)
        print(f"{name}: {definition}")
        print("=" * 40)
        print(HexBoard.parse(definition))
        print()

    print("=" * 40)
    print("flower (payloads rendered through tile_char):")
    print("=" * 40)
    print(flower_board().render(tile_char))


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "-v":
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    demo()
