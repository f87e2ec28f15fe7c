"""
ASCII rendering for pipe grids.

Provides three views:
1. Pipe view - every tile drawn with box-drawing glyphs, junk included
2. Loop view - only the loop drawn, optionally marking enclosed cells
3. Framed view - the loop view inside a titled border
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from pipe_types import Coordinate, Grid, TileKind

__all__ = ["BOX_GLYPHS", "RenderStyle", "render_framed", "render_loop", "render_pipes"]

logger = logging.getLogger(__name__)

BOX_GLYPHS: dict[TileKind, str] = {
    TileKind.EMPTY: ".",
    TileKind.VERTICAL: "│",
    TileKind.HORIZONTAL: "─",
    TileKind.NORTH_EAST: "╰",
    TileKind.NORTH_WEST: "╯",
    TileKind.SOUTH_EAST: "╭",
    TileKind.SOUTH_WEST: "╮",
    TileKind.START: "S",
}


@dataclass(frozen=True)
class RenderStyle:
    """Options for the loop and framed views."""

    glyphs: dict[TileKind, str] = field(default_factory=lambda: dict(BOX_GLYPHS))
    outside_char: str = "."
    interior_char: str = "I"
    cell_width: int = 1
    color: bool = False


def _identity(s: str) -> str:
    return s


def _pad(char: str, cell_width: int) -> str:
    return char if cell_width == 1 else char.center(cell_width)


def render_pipes(grid: Grid, glyphs: dict[TileKind, str] | None = None) -> str:
    """Render every tile, on the loop or not."""
    glyphs = glyphs or BOX_GLYPHS
    return "\n".join(
        "".join(glyphs[grid[coord].kind] for coord in grid.row(y))
        for y in range(grid.height)
    )


def _loop_rows(
    grid: Grid,
    interior: Iterable[Coordinate] | None,
    style: RenderStyle,
) -> list[str]:
    enclosed = set(interior or ())

    loop_color: Callable[[str], str] = chalk.green if style.color else _identity
    inside_color: Callable[[str], str] = chalk.yellow if style.color else _identity
    start_color: Callable[[str], str] = chalk.bgWhite.black if style.color else _identity

    lines: list[str] = []
    for y in range(grid.height):
        line_parts: list[str] = []
        for coord in grid.row(y):
            if grid.is_on_loop(coord):
                content = _pad(style.glyphs[grid[coord].kind], style.cell_width)
                colorize = start_color if coord == grid.start else loop_color
            elif coord in enclosed:
                content = _pad(style.interior_char, style.cell_width)
                colorize = inside_color
            else:
                content = _pad(style.outside_char, style.cell_width)
                colorize = _identity
            line_parts.append(colorize(content))
        lines.append("".join(line_parts))
    return lines


def render_loop(
    grid: Grid,
    interior: Iterable[Coordinate] | None = None,
    style: RenderStyle | None = None,
) -> str:
    """
    Render only the loop of a walked grid.

    Args:
        grid: Walked grid
        interior: Optional enclosed cells to mark with ``style.interior_char``
        style: Rendering options (default: box glyphs, no colour)

    Returns:
        Rendered text, one line per grid row
    """
    return "\n".join(_loop_rows(grid, interior, style or RenderStyle()))


def render_framed(
    grid: Grid,
    title: str,
    interior: Iterable[Coordinate] | None = None,
    style: RenderStyle | None = None,
) -> str:
    """Render the loop view inside a border with a centred title."""
    style = style or RenderStyle()
    grid_width = grid.width * style.cell_width + 2  # +2 for borders

    title = f" {title} "
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    if len(title) <= grid_width - 2:
        title_start = (grid_width - len(title)) // 2
        title_line = (
            "┌" +
            "─" * (title_start - 1) +
            title +
            "─" * (grid_width - title_start - len(title) - 1) +
            "┐"
        )
    else:
        logger.debug("render_framed: title %r wider than grid, omitted", title)

    lines = [title_line]
    lines.extend(f"│{row}│" for row in _loop_rows(grid, interior, style))
    lines.append("└" + "─" * (grid_width - 2) + "┘")
    return "\n".join(lines)
