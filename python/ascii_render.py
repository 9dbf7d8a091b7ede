"""
ASCII rendering for hexagonal boards.

Two-phase pipeline:
1. Coordinate mapping - places every hexagon's outline into a sparse character grid
2. Flattening - turns any sparse character grid into line-oriented text
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping, TypeVar

from hex_types import BRACKETS, LEFT_BRACKET, RIGHT_BRACKET, CharGrid, HexCoord, Position

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Cartesian images of the two axial basis vectors (5 columns, 1 row per step)
Q_BASIS: Position = (-5, -1)
R_BASIS: Position = (5, -1)

# Glyphs identical for every hexagon, relative to its center
STATIC_TILE_ELEMENTS: tuple[tuple[Position, str], ...] = (
    ((-1, 1), "-"),
    ((0, 1), "-"),
    ((1, 1), "-"),
    ((-3, 0), LEFT_BRACKET),
    ((3, 0), RIGHT_BRACKET),
    ((-1, -1), "-"),
    ((0, -1), "-"),
    ((1, -1), "-"),
)

# Corners shared with neighbors: (offset, single glyph, glyph when shared)
CORNER_TILE_ELEMENTS: tuple[tuple[Position, str, str], ...] = (
    ((-2, 1), "\\", RIGHT_BRACKET),
    ((2, 1), "/", LEFT_BRACKET),
    ((-2, -1), "/", RIGHT_BRACKET),
    ((2, -1), "\\", LEFT_BRACKET),
)


# =============================================================================
# Coordinate Mapping
# =============================================================================


def merge_corner(existing: str | None, single: str, multiple: str) -> str:
    """
    Resolve the glyph for a corner position that a hexagon wants to draw.

    A position only ever moves from empty to a diagonal to a bracket, so the
    final glyph does not depend on the order in which hexagons are visited.

    Args:
        existing: Glyph already at the position, or None
        single: Diagonal to draw when no other hexagon touches this corner
        multiple: Bracket to draw when a neighbor's diagonal is already there

    Returns:
        The glyph the position should hold afterwards
    """
    if existing is None:
        return single
    if existing in BRACKETS:
        return existing
    return multiple


def hex_to_cartesian(coord: HexCoord) -> Position:
    """Convert a hexagonal coordinate to an unnormalized character position."""
    return (
        Q_BASIS[0] * coord.q + R_BASIS[0] * coord.r,
        Q_BASIS[1] * coord.q + R_BASIS[1] * coord.r,
    )


def origin_offset(coords: Iterable[HexCoord]) -> Position:
    """
    Compute the translation that moves a whole board into non-negative positions.

    The leftmost center belongs to the hexagon with the largest q - r and the
    topmost center to the one with the largest q + r. The offset leaves the
    leftmost bracket in column 0 and the topmost border in row 0.

    Returns:
        (x, y) offset; (3, 1) for an empty board
    """
    coords = list(coords)
    leftmost = max((c.q - c.r for c in coords), default=0)
    topmost = max((c.q + c.r for c in coords), default=0)
    return (5 * leftmost + 3, topmost + 1)


def center_position(coord: HexCoord, offset: Position) -> Position:
    x, y = hex_to_cartesian(coord)
    return (x + offset[0], y + offset[1])


def draw_hexagon(grid: CharGrid, center: Position, char: str) -> None:
    """Write one hexagon's outline and center character into a sparse grid."""
    cx, cy = center
    grid[center] = char

    # Top, bottom and sides are always the same
    for (dx, dy), glyph in STATIC_TILE_ELEMENTS:
        grid[(cx + dx, cy + dy)] = glyph

    # Corners depend on whether a neighbor already drew there
    for (dx, dy), single, multiple in CORNER_TILE_ELEMENTS:
        pos = (cx + dx, cy + dy)
        grid[pos] = merge_corner(grid.get(pos), single, multiple)


def char_map(values: Mapping[HexCoord, T], to_char: Callable[[T], str] = str) -> CharGrid:
    """
    Build the sparse character grid for a whole board.

    Args:
        values: Mapping from hexagon to payload
        to_char: Converts a payload to its single display character

    Returns:
        Mapping from (x, y) to character covering every hexagon's outline
    """
    offset = origin_offset(values.keys())
    grid: CharGrid = {}

    for coord, value in values.items():
        draw_hexagon(grid, center_position(coord, offset), to_char(value))

    logger.info(
        "char_map: hexagons=%d, offset=%s, positions=%d",
        len(values),
        offset,
        len(grid),
    )
    return grid


# =============================================================================
# Flattening
# =============================================================================


def grid_bounds(grid: CharGrid) -> tuple[int, int]:
    """Return (max_x, max_y) over the grid; (0, 0) when it is empty."""
    max_x = max((x for x, _ in grid), default=0)
    max_y = max((y for _, y in grid), default=0)
    return (max_x, max_y)


def flatten(grid: CharGrid) -> str:
    """
    Render a sparse character grid as text.

    Covers the rectangle from (0, 0) to the largest observed x and y; missing
    positions become spaces. Positions with a negative coordinate fall outside
    that rectangle and are not shown; a grid whose largest x or y is negative
    yields empty rows or no rows at all.

    Returns:
        Rows joined with newlines, no trailing newline; "" for an empty grid
    """
    if not grid:
        return ""

    max_x, max_y = grid_bounds(grid)
    rows = (
        "".join(grid.get((x, y), " ") for x in range(max_x + 1))
        for y in range(max_y + 1)
    )
    return "\n".join(rows)


def render(values: Mapping[HexCoord, T], to_char: Callable[[T], str] = str) -> str:
    """Render a hexagon -> payload mapping to text."""
    return flatten(char_map(values, to_char))


# =============================================================================
# Read-back
# =============================================================================


def read_back(text: str, coords: Iterable[HexCoord]) -> dict[HexCoord, str]:
    """
    Recover each hexagon's display character from rendered text.

    Args:
        text: Output of render() for a board with exactly these coordinates
        coords: The board's coordinates

    Returns:
        Mapping from hexagon to the character found at its center
    """
    coords = list(coords)
    offset = origin_offset(coords)
    lines = text.split("\n")

    found: dict[HexCoord, str] = {}
    for coord in coords:
        x, y = center_position(coord, offset)
        line = lines[y] if 0 <= y < len(lines) else ""
        found[coord] = line[x] if 0 <= x < len(line) else " "
    return found
