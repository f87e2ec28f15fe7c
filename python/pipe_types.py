"""
Shared type definitions for the pipe maze system.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Direction(Enum):
    """Cardinal direction for traversal.

    Declaration order (N, E, S, W) is the tie-break order used by the walker.
    """

    N = "N"  # Up (decreasing y)
    E = "E"  # Right (increasing x)
    S = "S"  # Down (increasing y)
    W = "W"  # Left (decreasing x)

    @property
    def inverse(self) -> Direction:
        return _INVERSES[self]

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) for one step in this direction."""
        return _DELTAS[self]


_INVERSES = {
    Direction.N: Direction.S,
    Direction.E: Direction.W,
    Direction.S: Direction.N,
    Direction.W: Direction.E,
}

_DELTAS = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}


class TileKind(Enum):
    """Connector kind of a single tile, keyed by its input character."""

    EMPTY = "."
    VERTICAL = "|"
    HORIZONTAL = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_EAST = "F"
    SOUTH_WEST = "7"
    START = "S"

    @property
    def connections(self) -> tuple[Direction, ...]:
        """Directions this kind connects to. For START these are only candidates."""
        return _CONNECTIONS[self]

    @classmethod
    def from_directions(cls, directions: tuple[Direction, ...]) -> TileKind:
        """Return the pipe kind connecting exactly the given two directions."""
        wanted = frozenset(directions)
        for kind in _PIPES:
            if frozenset(kind.connections) == wanted:
                return kind
        raise ValueError(f"No pipe connects {sorted(d.value for d in directions)}")


_CONNECTIONS: dict[TileKind, tuple[Direction, ...]] = {
    TileKind.EMPTY: (),
    TileKind.VERTICAL: (Direction.N, Direction.S),
    TileKind.HORIZONTAL: (Direction.E, Direction.W),
    TileKind.NORTH_EAST: (Direction.N, Direction.E),
    TileKind.NORTH_WEST: (Direction.N, Direction.W),
    TileKind.SOUTH_EAST: (Direction.E, Direction.S),
    TileKind.SOUTH_WEST: (Direction.S, Direction.W),
    TileKind.START: (Direction.N, Direction.E, Direction.S, Direction.W),
}

_PIPES = (
    TileKind.VERTICAL,
    TileKind.HORIZONTAL,
    TileKind.NORTH_EAST,
    TileKind.NORTH_WEST,
    TileKind.SOUTH_EAST,
    TileKind.SOUTH_WEST,
)


# =============================================================================
# Errors
# =============================================================================


class PipeMazeError(ValueError):
    """Base class for structural defects in a pipe grid."""


class MalformedGrid(PipeMazeError):
    """Input rows are not all the same length."""


class MalformedTile(PipeMazeError):
    """A character outside the recognised tile set."""


class InvalidStart(PipeMazeError):
    """Zero or several start tiles, or a start that does not connect to exactly two pipes."""


class MalformedLoop(PipeMazeError):
    """The pipe leaving the start does not close back on it."""


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Coordinate:
    """A cell position; x is the column, y is the row."""

    x: int
    y: int

    def step(self, direction: Direction) -> Coordinate | None:
        """Move one cell, or None when that would leave the non-negative quadrant."""
        dx, dy = direction.delta
        x, y = self.x + dx, self.y + dy
        if x < 0 or y < 0:
            return None
        return Coordinate(x, y)


@dataclass(frozen=True)
class Tile:
    """A tile and its step distance from the start (None = not on the loop)."""

    kind: TileKind
    distance: int | None = None


@dataclass
class Grid:
    """A rectangular grid of pipe tiles.

    Only the walker mutates a grid, and only through ``label`` and
    ``start_kind``.
    """

    width: int
    height: int
    tiles: dict[Coordinate, Tile]
    start: Coordinate
    start_kind: TileKind | None = None

    def __getitem__(self, coord: Coordinate) -> Tile:
        return self.tiles[coord]

    def __contains__(self, coord: object) -> bool:
        return coord in self.tiles

    def neighbor(self, coord: Coordinate, direction: Direction) -> Coordinate | None:
        """Bounds-checked neighbour lookup."""
        n = coord.step(direction)
        if n is None or n.x >= self.width or n.y >= self.height:
            return None
        return n

    def label(self, coord: Coordinate, distance: int) -> None:
        self.tiles[coord] = replace(self.tiles[coord], distance=distance)

    def is_on_loop(self, coord: Coordinate) -> bool:
        tile = self.tiles[coord]
        return tile.kind is not TileKind.EMPTY and tile.distance is not None

    def row(self, y: int) -> list[Coordinate]:
        return [Coordinate(x, y) for x in range(self.width)]

    def copy(self) -> Grid:
        return Grid(self.width, self.height, dict(self.tiles), self.start, self.start_kind)
