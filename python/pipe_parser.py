"""
Grid parsing utilities for pipe mazes.

One grid row per line, one tile per character:

    .  empty          L  north-east bend
    |  vertical       J  north-west bend
    -  horizontal     F  south-east bend
    S  start          7  south-west bend
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from pipe_types import (
    Coordinate,
    Grid,
    InvalidStart,
    MalformedGrid,
    MalformedTile,
    Tile,
    TileKind,
)

__all__ = ["parse_grid", "parse_grid_text", "read_grid_file", "tile_kind_for"]

logger = logging.getLogger(__name__)

_TILE_CHARS = {kind.value: kind for kind in TileKind}
_VALID_CHARS = " ".join(_TILE_CHARS)


def tile_kind_for(char: str, row: int = 0, col: int = 0) -> TileKind:
    """Map one input character to its tile kind."""
    try:
        return _TILE_CHARS[char]
    except KeyError:
        raise MalformedTile(
            f"Invalid tile character {char!r}\n"
            f"  Row {row}, column {col}\n"
            f"  Valid characters: {_VALID_CHARS}"
        ) from None


def parse_grid(lines: Iterable[str]) -> Grid:
    """
    Parse a pipe grid from a sequence of equal-length lines.

    Args:
        lines: Grid rows, top to bottom, without line terminators

    Returns:
        Grid with every tile unlabelled

    Raises:
        MalformedTile: If a line contains an unrecognised character
        MalformedGrid: If the lines are not all the same length
        InvalidStart: If there is not exactly one start tile
    """
    rows = list(lines)

    # Validate all rows have same length
    if rows:
        cols = len(rows[0])
        mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
        if mismatched:
            error_msg = (
                f"Inconsistent row lengths\n"
                f"  Expected: {cols} columns (from row 0)\n"
                f"  Mismatched rows:\n"
            )
            for row_idx, actual_cols in mismatched:
                error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{rows[row_idx]}\"\n"
            error_msg += "  All rows must have the same number of tiles"
            raise MalformedGrid(error_msg)

    tiles: dict[Coordinate, Tile] = {}
    starts: list[Coordinate] = []

    for y, row_str in enumerate(rows):
        for x, char in enumerate(row_str):
            kind = tile_kind_for(char, y, x)
            coord = Coordinate(x, y)
            tiles[coord] = Tile(kind)
            if kind is TileKind.START:
                starts.append(coord)

    if len(starts) != 1:
        found = ", ".join(f"({c.x}, {c.y})" for c in starts) or "none"
        raise InvalidStart(
            f"Expected exactly one start tile 'S', found {len(starts)}\n"
            f"  Positions: {found}"
        )

    width = len(rows[0])
    height = len(rows)
    logger.debug("parse_grid: %dx%d grid, start at %s", width, height, starts[0])
    return Grid(width, height, tiles, starts[0])


def parse_grid_text(text: str) -> Grid:
    """Parse a grid from a block of text; blank lines before and after are ignored."""
    return parse_grid(text.strip("\r\n").splitlines())


def read_grid_file(path: str | Path) -> Grid:
    """Read and parse a grid file."""
    return parse_grid_text(Path(path).read_text(encoding="utf-8"))
