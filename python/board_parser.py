"""
Board parsing utilities for hexboard.

Boards are written as a list of entries, one per hexagon, each giving the
axial coordinate and the single character shown in its center.
"""

from __future__ import annotations

import re

from hex_types import HexCoord

__all__ = ["parse_board"]

_ENTRY = re.compile(r"(-?\d+),(-?\d+):(.+)")


def parse_board(definition: str) -> dict[HexCoord, str]:
    """
    Parse a board definition from a compact string format.

    Format:
    - Entries separated by whitespace or |
    - Each entry is "q,r:c"
      * q, r: signed integers (axial coordinate)
      * c: exactly one character, the hexagon's payload (not whitespace or |)
    - A coordinate given twice keeps the value from the last entry

    Example:
        "0,0:a 1,0:b | 0,1:c -1,-1:d"
        Creates:
        - {HexCoord(0, 0): "a", HexCoord(1, 0): "b", HexCoord(0, 1): "c", HexCoord(-1, -1): "d"}

    Args:
        definition: Board definition string

    Returns:
        Mapping from hexagon to its character
    """
    values: dict[HexCoord, str] = {}

    entries = definition.replace("|", " ").split()
    for idx, entry in enumerate(entries):
        match = _ENTRY.fullmatch(entry)
        if match is None or len(match.group(3)) != 1:
            # Provide detailed error information
            error_msg = (
                f"Invalid board entry: '{entry}'\n"
                f"  Position: entry {idx}\n"
                f"  Valid format:\n"
                f"    - 'q,r:c' with integer q and r and a single character c\n"
                f"    - Examples: '0,0:a', '-1,2:#'\n"
                f"  Entries are separated by whitespace or '|'"
            )
            raise ValueError(error_msg)

        q, r, char = int(match.group(1)), int(match.group(2)), match.group(3)
        values[HexCoord(q, r)] = char

    return values
