"""
Interior classification for walked pipe grids.

Each row is scanned left to right counting how many times the loop has been
crossed vertically; an off-loop cell with an odd count is enclosed. A run of
horizontal pipe between two bends only counts as a crossing when the bends
open to opposite sides (``F--J`` or ``L--7``); bends opening the same way
(``F--7`` or ``L--J``) touch the ray and turn back.
"""

from __future__ import annotations

import logging

from pipe_types import Coordinate, Grid, TileKind

__all__ = ["boundary_kind", "count_interior", "interior_cells", "scan_row"]

logger = logging.getLogger(__name__)

# Closing bend -> opening bend that makes the pair a net vertical crossing
_CROSSING_PAIRS = {
    TileKind.NORTH_WEST: TileKind.SOUTH_EAST,
    TileKind.SOUTH_WEST: TileKind.NORTH_EAST,
}


def boundary_kind(grid: Grid, coord: Coordinate) -> TileKind:
    """Kind of a cell as seen by the scan: off-loop tiles are EMPTY, the start is its resolved pipe."""
    if not grid.is_on_loop(coord):
        return TileKind.EMPTY
    kind = grid[coord].kind
    if kind is TileKind.START and grid.start_kind is not None:
        return grid.start_kind
    return kind


def scan_row(grid: Grid, y: int) -> list[Coordinate]:
    """Return the interior cells of row ``y``, left to right."""
    inside: list[Coordinate] = []
    crossings = 0
    prev = TileKind.EMPTY

    for coord in grid.row(y):
        cur = boundary_kind(grid, coord)
        match cur:
            case TileKind.VERTICAL:
                crossings += 1
            case TileKind.HORIZONTAL:
                # Transparent: keep the bend that opened this run
                cur = prev
            case TileKind.NORTH_WEST | TileKind.SOUTH_WEST:
                if prev is _CROSSING_PAIRS[cur]:
                    crossings += 1
            case TileKind.EMPTY:
                if crossings % 2 == 1:
                    inside.append(coord)
            case _:
                pass
        prev = cur

    return inside


def interior_cells(grid: Grid) -> list[Coordinate]:
    """
    All cells enclosed by the loop, in row-major order.

    The grid must already have been walked; on an unwalked grid every tile is
    off-loop and the result is meaningless. The grid is not modified.
    """
    cells: list[Coordinate] = []
    for y in range(grid.height):
        cells.extend(scan_row(grid, y))
    return cells


def count_interior(grid: Grid) -> int:
    """Number of cells enclosed by the loop of a walked grid."""
    count = len(interior_cells(grid))
    logger.debug("count_interior: %d enclosed cells", count)
    return count
