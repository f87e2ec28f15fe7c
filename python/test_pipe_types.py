"""Tests for the shared pipe maze types."""

import pytest

from pipe_parser import parse_grid_text
from pipe_types import Coordinate, Direction, Tile, TileKind


class TestDirection:
    """Tests for Direction."""

    def test_inverse(self) -> None:
        assert Direction.N.inverse is Direction.S
        assert Direction.S.inverse is Direction.N
        assert Direction.E.inverse is Direction.W
        assert Direction.W.inverse is Direction.E

    def test_delta(self) -> None:
        """North decreases y, east increases x."""
        assert Direction.N.delta == (0, -1)
        assert Direction.E.delta == (1, 0)
        assert Direction.S.delta == (0, 1)
        assert Direction.W.delta == (-1, 0)

    def test_enumeration_order(self) -> None:
        """Directions iterate clockwise from north."""
        assert list(Direction) == [Direction.N, Direction.E, Direction.S, Direction.W]


class TestTileKind:
    """Tests for tile connection sets."""

    def test_pipe_connections(self) -> None:
        """Every pipe connects exactly two directions."""
        assert set(TileKind.VERTICAL.connections) == {Direction.N, Direction.S}
        assert set(TileKind.HORIZONTAL.connections) == {Direction.E, Direction.W}
        assert set(TileKind.NORTH_EAST.connections) == {Direction.N, Direction.E}
        assert set(TileKind.NORTH_WEST.connections) == {Direction.N, Direction.W}
        assert set(TileKind.SOUTH_EAST.connections) == {Direction.S, Direction.E}
        assert set(TileKind.SOUTH_WEST.connections) == {Direction.S, Direction.W}

    def test_empty_and_start(self) -> None:
        """Empty connects nowhere; start is a candidate in every direction."""
        assert TileKind.EMPTY.connections == ()
        assert TileKind.START.connections == tuple(Direction)

    @pytest.mark.parametrize(
        "kind",
        [
            TileKind.VERTICAL,
            TileKind.HORIZONTAL,
            TileKind.NORTH_EAST,
            TileKind.NORTH_WEST,
            TileKind.SOUTH_EAST,
            TileKind.SOUTH_WEST,
        ],
    )
    def test_from_directions_round_trip(self, kind: TileKind) -> None:
        assert TileKind.from_directions(kind.connections) is kind
        assert TileKind.from_directions(tuple(reversed(kind.connections))) is kind

    def test_from_directions_rejects_non_pipe(self) -> None:
        with pytest.raises(ValueError):
            TileKind.from_directions((Direction.N,))


class TestCoordinate:
    """Tests for Coordinate stepping."""

    def test_step(self) -> None:
        c = Coordinate(2, 3)
        assert c.step(Direction.N) == Coordinate(2, 2)
        assert c.step(Direction.E) == Coordinate(3, 3)
        assert c.step(Direction.S) == Coordinate(2, 4)
        assert c.step(Direction.W) == Coordinate(1, 3)

    def test_step_off_origin(self) -> None:
        """Stepping to a negative coordinate yields no neighbour."""
        assert Coordinate(0, 5).step(Direction.W) is None
        assert Coordinate(5, 0).step(Direction.N) is None

    def test_value_equality(self) -> None:
        assert Coordinate(1, 2) == Coordinate(1, 2)
        assert len({Coordinate(1, 2), Coordinate(1, 2), Coordinate(2, 1)}) == 2


class TestGrid:
    """Tests for Grid lookups and labelling."""

    def test_neighbor_bounds(self) -> None:
        """Neighbours past the far edges are None as well."""
        grid = parse_grid_text("S7\nLJ\n")

        assert grid.neighbor(Coordinate(1, 1), Direction.E) is None
        assert grid.neighbor(Coordinate(1, 1), Direction.S) is None
        assert grid.neighbor(Coordinate(0, 0), Direction.N) is None
        assert grid.neighbor(Coordinate(0, 0), Direction.E) == Coordinate(1, 0)

    def test_label(self) -> None:
        grid = parse_grid_text("S7\nLJ\n")

        grid.label(Coordinate(1, 0), 3)

        assert grid[Coordinate(1, 0)] == Tile(TileKind.SOUTH_WEST, 3)
        assert grid.is_on_loop(Coordinate(1, 0))
        assert not grid.is_on_loop(Coordinate(0, 1))

    def test_copy_is_independent(self) -> None:
        """Labelling a copy leaves the original untouched."""
        grid = parse_grid_text("S7\nLJ\n")
        other = grid.copy()

        other.label(Coordinate(0, 0), 0)
        other.start_kind = TileKind.SOUTH_EAST

        assert grid[Coordinate(0, 0)].distance is None
        assert grid.start_kind is None
        assert other != grid

    def test_row(self) -> None:
        grid = parse_grid_text("S-7\nL-J\n")

        assert grid.row(1) == [Coordinate(0, 1), Coordinate(1, 1), Coordinate(2, 1)]
        assert Coordinate(2, 1) in grid
        assert Coordinate(3, 1) not in grid
