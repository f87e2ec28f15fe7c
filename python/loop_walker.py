"""
Loop traversal for pipe mazes.

The start tile hides its own shape, so walking is two passes: first resolve
which two of the start's four candidate directions are real connections, then
follow the pipe from the start until it closes, labelling every tile with its
step distance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pipe_types import (
    Coordinate,
    Direction,
    Grid,
    InvalidStart,
    MalformedLoop,
    TileKind,
)

__all__ = [
    "LoopResult",
    "connected_neighbors",
    "farthest_distance",
    "resolve_start",
    "walk_loop",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoopResult:
    """The cycle through the start tile."""

    start: Coordinate
    start_kind: TileKind  # Pipe kind the start tile actually is
    path: tuple[Coordinate, ...]  # path[i] is at distance i from start

    @property
    def length(self) -> int:
        return len(self.path)

    @property
    def half_length(self) -> int:
        """Steps to the point on the loop farthest from the start."""
        return self.length // 2


# =============================================================================
# Start Resolution
# =============================================================================


def _connects_back(grid: Grid, coord: Coordinate, direction: Direction) -> Coordinate | None:
    """Return the neighbour in ``direction`` if it has a connection pointing back at ``coord``."""
    n = grid.neighbor(coord, direction)
    if n is None:
        return None
    if direction.inverse in _directions(grid, n):
        return n
    return None


def _start_candidates(grid: Grid) -> tuple[Direction, ...]:
    return tuple(
        d for d in TileKind.START.connections
        if _connects_back(grid, grid.start, d) is not None
    )


def resolve_start(grid: Grid) -> tuple[Direction, ...]:
    """
    Determine the start tile's two real connections and record its pipe kind.

    A candidate direction is real if the neighbour there exists and connects
    back towards the start.

    Args:
        grid: Parsed grid; ``grid.start_kind`` is set on success

    Returns:
        The two connected directions in N, E, S, W order

    Raises:
        InvalidStart: If the start does not connect to exactly two neighbours
    """
    directions = _start_candidates(grid)
    if len(directions) != 2:
        raise InvalidStart(
            f"Start tile at ({grid.start.x}, {grid.start.y}) connects to "
            f"{len(directions)} neighbours, expected 2\n"
            f"  Connected directions: {', '.join(d.value for d in directions) or 'none'}"
        )
    grid.start_kind = TileKind.from_directions(directions)
    return directions


# =============================================================================
# Neighbours
# =============================================================================


def _directions(grid: Grid, coord: Coordinate) -> tuple[Direction, ...]:
    """Connection directions of a tile, using the resolved shape for the start."""
    kind = grid[coord].kind
    if kind is TileKind.START and grid.start_kind is not None:
        return grid.start_kind.connections
    return kind.connections


def connected_neighbors(grid: Grid, coord: Coordinate) -> list[Coordinate]:
    """
    Coordinates a tile's connections lead to.

    For the start tile only neighbours that connect back are returned. Other
    tiles are trusted: every in-bounds neighbour their shape points at is
    listed, whether or not it reciprocates.
    """
    if grid[coord].kind is TileKind.START:
        return [
            n for d in TileKind.START.connections
            if (n := _connects_back(grid, coord, d)) is not None
        ]

    neighbors = []
    for direction in _directions(grid, coord):
        n = grid.neighbor(coord, direction)
        if n is not None:
            neighbors.append(n)
    return neighbors


def _next_unvisited(grid: Grid, coord: Coordinate) -> Coordinate | None:
    """The first connected neighbour without a distance, checking each connection closes."""
    for direction in _directions(grid, coord):
        n = _connects_back(grid, coord, direction)
        if n is None:
            raise MalformedLoop(
                f"Pipe at ({coord.x}, {coord.y}) leads {direction.value} "
                f"to a tile that does not connect back\n"
                f"  Tile: {grid[coord].kind.value!r}\n"
                f"  The loop through the start must be closed"
            )
        if grid[n].distance is None:
            return n
    return None


# =============================================================================
# Walk
# =============================================================================


def walk_loop(grid: Grid) -> LoopResult:
    """
    Walk the cycle through the start tile, labelling each tile with its distance.

    At each tile the walk moves to the first unvisited neighbour in N, E, S, W
    order; only the first step away from the start has two to choose from.

    Args:
        grid: Parsed, unwalked grid. Distances are written in place.

    Returns:
        LoopResult describing the cycle

    Raises:
        InvalidStart: If the start does not connect to exactly two neighbours
        MalformedLoop: If the pipe is broken or does not return to the start
    """
    resolve_start(grid)
    assert grid.start_kind is not None

    current = grid.start
    grid.label(current, 0)
    path = [current]

    while (nxt := _next_unvisited(grid, current)) is not None:
        grid.label(nxt, len(path))
        path.append(nxt)
        current = nxt

    if current == grid.start or grid.start not in connected_neighbors(grid, current):
        raise MalformedLoop(
            f"Walk from start ({grid.start.x}, {grid.start.y}) ended at "
            f"({current.x}, {current.y}) after {len(path)} tiles\n"
            f"  The final tile is not connected to the start"
        )

    result = LoopResult(grid.start, grid.start_kind, tuple(path))
    logger.info(
        "walk_loop: start=(%d, %d) resolved=%s length=%d",
        result.start.x,
        result.start.y,
        result.start_kind.value,
        result.length,
    )
    if result.length % 2:
        logger.warning("walk_loop: odd loop length %d", result.length)
    return result


def farthest_distance(grid: Grid) -> int:
    """Walk a grid and return the distance to the loop's farthest point."""
    return walk_loop(grid).half_length
