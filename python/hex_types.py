"""
Shared type definitions for the hexboard system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class HexDirection(Enum):
    """Step to one of the six edge-sharing neighbors of a flat-topped hexagon."""

    N = (1, 1)  # Up (two rows)
    NE = (0, 1)  # Right and up
    SE = (-1, 0)  # Right and down
    S = (-1, -1)  # Down (two rows)
    SW = (0, -1)  # Left and down
    NW = (1, 0)  # Left and up


# =============================================================================
# Coordinate Types
# =============================================================================


@dataclass(frozen=True)
class HexCoord:
    """A hexagon in axial coordinates.

    Moving +1 along q shifts one hexagon left-and-up; moving +1 along r
    shifts one hexagon right-and-up.
    """

    q: int
    r: int

    def __add__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.q + other.q, self.r + other.r)

    def __sub__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.q - other.q, self.r - other.r)

    def neighbor(self, direction: HexDirection) -> HexCoord:
        dq, dr = direction.value
        return HexCoord(self.q + dq, self.r + dr)

    def neighbors(self) -> list[HexCoord]:
        return [self.neighbor(d) for d in HexDirection]


def hex_range(radius: int, center: HexCoord = HexCoord(0, 0)) -> Iterator[HexCoord]:
    """Yield every coordinate within `radius` steps of `center`.

    Distance is max(|dq|, |dr|, |dq - dr|) since a step N changes q and r
    together.
    """
    for dq in range(-radius, radius + 1):
        for dr in range(-radius, radius + 1):
            if abs(dq - dr) <= radius:
                yield HexCoord(center.q + dq, center.r + dr)


Position = tuple[int, int]  # (x, y): x grows rightwards, y grows downwards

CharGrid = dict[Position, str]


# =============================================================================
# Glyphs
# =============================================================================

LEFT_BRACKET = "\u27e8"  # ⟨
RIGHT_BRACKET = "\u27e9"  # ⟩
BRACKETS = frozenset({LEFT_BRACKET, RIGHT_BRACKET})
