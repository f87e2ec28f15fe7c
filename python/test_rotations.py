"""
Test rotation framework for systematic directional testing.

This module provides utilities to write loop tests once and automatically run
them in all 4 rotations (0°, 90°, 180°, 270°). Rotating a pipe layout rotates
every tile's shape along with the grid, so the loop and its interior are the
same in every rotation while the row scan sees each one differently.
"""

from dataclasses import dataclass, field
from typing import Callable

from pipemaze import Coordinate, Grid, TileKind, count_interior, parse_grid_text, walk_loop


# =============================================================================
# Rotation Utilities
# =============================================================================

# Tile character -> character after a 90° clockwise turn (N->E, E->S, S->W, W->N)
_ROTATED_CHARS = {
    ".": ".",
    "S": "S",
    "|": "-",
    "-": "|",
    "L": "F",
    "F": "7",
    "7": "J",
    "J": "L",
}


def rotate_layout_90(layout: str) -> str:
    """
    Rotate a pipe layout 90° clockwise.

    In an N×M layout rotated 90° clockwise, it becomes M×N.
    Position (row, col) → (col, N - 1 - row)
    """
    rows = layout.strip("\n").splitlines()
    height = len(rows)
    width = len(rows[0]) if rows else 0

    new_rows = [
        "".join(_ROTATED_CHARS[rows[height - 1 - new_col][new_row]] for new_col in range(height))
        for new_row in range(width)
    ]
    return "\n".join(new_rows) + "\n"


def rotate_coordinate_90(coord: Coordinate, height: int) -> Coordinate:
    """Rotate a coordinate 90° clockwise within a layout of the given height."""
    return Coordinate(height - 1 - coord.y, coord.x)


def rotate_kind_90(kind: TileKind) -> TileKind:
    """Rotate a tile kind 90° clockwise."""
    return TileKind(_ROTATED_CHARS[kind.value])


# =============================================================================
# Test Case Data Structures
# =============================================================================


@dataclass
class RotationalTestCase:
    """
    A loop test case that will be run in all 4 rotations.

    Example usage:
        test = RotationalTestCase(
            name="square",
            layout=SQUARE,
            half_length=4,
            interior_count=1,
            start_kind=TileKind.SOUTH_EAST,
        )
        run_rotational_test(test)
    """

    name: str
    layout: str
    half_length: int | None
    interior_count: int
    start_kind: TileKind | None = None  # Expected resolved start at 0°
    checks: list[Callable[[Grid, int], None]] = field(default_factory=list)

    def get_all_rotations(self) -> list[tuple[int, str, TileKind | None]]:
        """
        Generate all 4 rotations of this test case.

        Returns:
            List of (rotation_degrees, layout, expected_start_kind) tuples
        """
        results = []
        layout = self.layout
        start_kind = self.start_kind

        for rotation in [0, 90, 180, 270]:
            results.append((rotation, layout, start_kind))
            layout = rotate_layout_90(layout)
            if start_kind is not None:
                start_kind = rotate_kind_90(start_kind)

        return results


# =============================================================================
# Test Runner
# =============================================================================


def run_rotational_test(test_case: RotationalTestCase) -> None:
    """
    Run a rotational test case through all 4 rotations.

    Checks the farthest-point distance, the enclosed count and (when given)
    the start tile's resolved kind, then runs any extra checks with the walked
    grid and the rotation in degrees.
    """
    for rotation, layout, start_kind in test_case.get_all_rotations():
        grid = parse_grid_text(layout)
        loop = walk_loop(grid)
        prefix = f"{test_case.name} at {rotation}°"

        if test_case.half_length is not None:
            assert loop.half_length == test_case.half_length, (
                f"{prefix}: expected half length {test_case.half_length}, got {loop.half_length}"
            )
        interior = count_interior(grid)
        assert interior == test_case.interior_count, (
            f"{prefix}: expected {test_case.interior_count} enclosed tiles, got {interior}"
        )
        if start_kind is not None:
            assert loop.start_kind is start_kind, (
                f"{prefix}: expected start to resolve to {start_kind}, got {loop.start_kind}"
            )

        for check in test_case.checks:
            try:
                check(grid, rotation)
            except AssertionError as e:
                raise AssertionError(f"{prefix}: {e}") from e
