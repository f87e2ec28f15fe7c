"""
Pipe maze solver: find the loop through the start tile and count what it encloses.
Three-phase pipeline: parse (text -> Grid) -> walk (label loop) -> classify (count interior).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from interior import boundary_kind, count_interior, interior_cells, scan_row
from loop_walker import (
    LoopResult,
    connected_neighbors,
    farthest_distance,
    resolve_start,
    walk_loop,
)
from pipe_parser import parse_grid, parse_grid_text, read_grid_file, tile_kind_for
from pipe_types import (
    Coordinate,
    Direction,
    Grid,
    InvalidStart,
    MalformedGrid,
    MalformedLoop,
    MalformedTile,
    PipeMazeError,
    Tile,
    TileKind,
)

__all__ = [
    "Coordinate",
    "Direction",
    "Grid",
    "InvalidStart",
    "LoopReport",
    "LoopResult",
    "MalformedGrid",
    "MalformedLoop",
    "MalformedTile",
    "PipeMazeError",
    "Tile",
    "TileKind",
    "boundary_kind",
    "connected_neighbors",
    "count_interior",
    "farthest_distance",
    "interior_cells",
    "parse_grid",
    "parse_grid_text",
    "read_grid_file",
    "resolve_start",
    "scan_row",
    "solve",
    "solve_grid",
    "tile_kind_for",
    "walk_loop",
]


@dataclass(frozen=True)
class LoopReport:
    """Caller-facing results for one grid."""

    loop_length: int
    loop_half_length: int  # Distance to the farthest point on the loop
    interior_count: int


def solve_grid(grid: Grid) -> LoopReport:
    """Walk a freshly parsed grid in place and classify it."""
    loop = walk_loop(grid)
    return LoopReport(
        loop_length=loop.length,
        loop_half_length=loop.half_length,
        interior_count=count_interior(grid),
    )


def solve(source: str | Iterable[str]) -> LoopReport:
    """
    Parse, walk and classify a grid.

    Args:
        source: Grid text, or an iterable of row strings

    Returns:
        LoopReport with loop length, farthest-point distance and enclosed count

    Raises:
        PipeMazeError: If the grid, its start tile or its loop is malformed
    """
    grid = parse_grid_text(source) if isinstance(source, str) else parse_grid(source)
    return solve_grid(grid)
