"""
Sparse hexagonal boards rendered as terminal text.
Two-phase algorithm: char_map (builds the sparse character grid) -> flatten (text output).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, Mapping, TypeVar, Union

from ascii_render import char_map, flatten, merge_corner, origin_offset, read_back, render
from board_parser import parse_board
from hex_types import (
    BRACKETS,
    LEFT_BRACKET,
    RIGHT_BRACKET,
    CharGrid,
    HexCoord,
    HexDirection,
    Position,
    hex_range,
)

__all__ = [
    "BRACKETS",
    "LEFT_BRACKET",
    "RIGHT_BRACKET",
    "CharGrid",
    "HexBoard",
    "HexCoord",
    "HexDirection",
    "Position",
    "char_map",
    "flatten",
    "hex_range",
    "merge_corner",
    "origin_offset",
    "parse_board",
    "read_back",
    "render",
]

T = TypeVar("T")

CoordLike = Union[HexCoord, tuple[int, int]]


def as_coord(key: CoordLike) -> HexCoord:
    if isinstance(key, HexCoord):
        return key
    q, r = key
    return HexCoord(q, r)


# =============================================================================
# Board
# =============================================================================


@dataclass
class HexBoard(Generic[T]):
    """An owned mapping from hexagon to payload value."""

    values: dict[HexCoord, T] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Own a copy; plain (q, r) tuples become HexCoord
        self.values = {as_coord(key): value for key, value in self.values.items()}

    @classmethod
    def from_pairs(
        cls, pairs: Mapping[CoordLike, T] | Iterable[tuple[CoordLike, T]]
    ) -> HexBoard[T]:
        """Build a board; for repeated coordinates the last value wins."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        return cls({as_coord(key): value for key, value in items})

    @classmethod
    def parse(cls, definition: str) -> HexBoard[str]:
        """Build a board from the text format read by parse_board."""
        return cls(parse_board(definition))

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, tuple) and len(key) == 2:
            key = as_coord(key)
        return key in self.values

    def __getitem__(self, key: CoordLike) -> T:
        return self.values[as_coord(key)]

    def __setitem__(self, key: CoordLike, value: T) -> None:
        self.values[as_coord(key)] = value

    def __iter__(self) -> Iterator[HexCoord]:
        return iter(self.values)

    def translated(self, offset: CoordLike) -> HexBoard[T]:
        """Return a copy with every hexagon moved by the same offset."""
        step = as_coord(offset)
        return HexBoard({coord + step: value for coord, value in self.values.items()})

    def char_map(self, to_char: Callable[[T], str] = str) -> CharGrid:
        """Map from terminal position to the character output there."""
        return char_map(self.values, to_char)

    def render(self, to_char: Callable[[T], str] = str) -> str:
        """Render the board as terminal text."""
        return flatten(self.char_map(to_char))

    def __str__(self) -> str:
        return self.render()
