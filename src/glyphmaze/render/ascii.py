# src/glyphmaze/render/ascii.py
# Terminal preview. Wrap-around walls are drawn on the outer border, so the
# top border repeats the last row's south walls and the left border the last
# column's east walls.

from typing import List, Optional

from ..grid import GeneratedMaze, MazeData, Position

MARKERS = {"king": "K", "key": "k", "goal": "G"}


def render_ascii(maze: MazeData, generated: Optional[GeneratedMaze] = None) -> str:
    marks = {}
    if generated is not None:
        marks[tuple(generated.king_pos)] = MARKERS["king"]
        marks[tuple(generated.key_pos)] = MARKERS["key"]
        marks[tuple(generated.goal_pos)] = MARKERS["goal"]

    w, h = maze.width, maze.height
    lines: List[str] = []
    for y in range(h):
        top = ["+"]
        mid = []
        for x in range(w):
            top.append("--" if maze.cells[(y - 1) % h][x].south_wall else "  ")
            top.append("+")
            mid.append("|" if maze.cells[y][(x - 1) % w].east_wall else " ")
            fill = "##" if maze.cells[y][x].is_text_cell else "  "
            m = marks.get((x, y))
            mid.append((m + fill[1]) if m else fill)
        mid.append("|" if maze.cells[y][w - 1].east_wall else " ")
        lines.append("".join(top))
        lines.append("".join(mid))
    bottom = ["+"]
    for x in range(w):
        bottom.append("--" if maze.cells[h - 1][x].south_wall else "  ")
        bottom.append("+")
    lines.append("".join(bottom))
    return "\n".join(lines)


def render_generated(generated: GeneratedMaze) -> str:
    return render_ascii(generated.maze, generated)
