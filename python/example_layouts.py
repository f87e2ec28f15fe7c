"""
Example pipe layouts with their known answers.

Each entry maps a name to (layout text, loop half length, interior count).
A half length of None is not checked.
"""

from __future__ import annotations

SQUARE = """\
.....
.S-7.
.|.|.
.L-J.
.....
"""

SQUARE_WITH_JUNK = """\
-L|F7
7S-7|
L|7||
-L-J|
L|-JF
"""

WINDING = """\
7-F7-
.FJ|7
SJLL7
|F--J
LJ.LJ
"""

NESTED = """\
...........
.S-------7.
.|F-----7|.
.||.....||.
.||.....||.
.|L-7.F-J|.
.|..|.|..|.
.L--J.L--J.
...........
"""

SQUEEZED = """\
..........
.S------7.
.|F----7|.
.||....||.
.||....||.
.|L-7F-J|.
.|..||..|.
.L--JL--J.
..........
"""

CORRIDORS = """\
.F----7F7F7F7F-7....
.|F--7||||||||FJ....
.||.FJ||||||||L7....
FJL7L7LJLJ||LJ.L-7..
L--J.L7...LJS7F-7L7.
....F-J..F7FJ|L7L7L7
....L7.F7||L7|.L7L7|
.....|FJLJ|FJ|F7|.LJ
....FJL-7.||.||||...
....L---J.LJ.LJLJ...
"""

JUNK_FIELD = """\
FF7FSF7F7F7F7F7F---7
L|LJ||||||||||||F--J
FL-7LJLJ||||||LJL-77
F--JF--7||LJLJ7F7FJ-
L---JF-JLJ.||-FJLJJ7
|F|F-JF---7F7-L7L|7|
|FFJF7L7F-JF7|JL---7
7-L-JL7||F7|L7F-7F7|
L.L7LFJ|||||FJL7||LJ
L7JLJL-JLJLJL--JLJ.L
"""

FRAMED = """\
S--7
|..|
L--J
"""

TIGHT = """\
S7
LJ
"""

LAYOUTS: dict[str, tuple[str, int | None, int]] = {
    "square": (SQUARE, 4, 1),
    "square_with_junk": (SQUARE_WITH_JUNK, 4, 1),
    "winding": (WINDING, 8, 1),
    "nested": (NESTED, 23, 4),
    "squeezed": (SQUEEZED, 22, 4),
    "corridors": (CORRIDORS, 70, 8),
    "junk_field": (JUNK_FIELD, None, 10),
    "framed": (FRAMED, 5, 2),
    "tight": (TIGHT, 2, 0),
}
