"""
Demonstration script for the pipe maze solver.

    python demo.py              # solve and draw every example layout
    python demo.py grid.txt     # solve and draw a grid file
"""

import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import RenderStyle, render_framed, render_pipes
from example_layouts import LAYOUTS
from pipemaze import Grid, PipeMazeError, interior_cells, parse_grid_text, read_grid_file, walk_loop


def generate_display(name: str, grid: Grid) -> Panel:
    """Solve a parsed grid and build a panel showing both views and the results."""
    raw = render_pipes(grid)
    try:
        loop = walk_loop(grid)
    except PipeMazeError as e:
        status = Text()
        status.append(f"{type(e).__name__}\n", style="bold red")
        status.append(f"{e}\n\n")
        status.append(raw)
        return Panel(status, title=f"{name} - Error", border_style="red")

    inside = interior_cells(grid)
    framed = render_framed(grid, "loop", inside, RenderStyle(color=True))

    status = Text()
    status.append(raw + "\n\n")
    # Convert ANSI-colored grid text to Rich Text
    status.append(Text.from_ansi(framed))
    status.append("\n\n")
    status.append("Loop length: ", style="bold")
    status.append(f"{loop.length}\n")
    status.append("Farthest point: ", style="bold")
    status.append(f"{loop.half_length}\n")
    status.append("Enclosed tiles: ", style="bold")
    status.append(f"{len(inside)}")

    return Panel(status, title=name, border_style="green")


def main() -> None:
    """Render every example layout."""
    console = Console()
    for name, (layout, _, _) in LAYOUTS.items():
        console.print(generate_display(name, parse_grid_text(layout)))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    if len(sys.argv) > 1:
        path = sys.argv[1]
        try:
            grid = read_grid_file(path)
        except (OSError, PipeMazeError) as e:
            print(f"Error reading {path}: {e}", file=sys.stderr)
            sys.exit(1)
        Console().print(generate_display(path, grid))
    else:
        main()
