# src/glyphmaze/mapgen/placement.py
from typing import List, Tuple

from ..grid import MazeData, Position
from ..rng import SeededRng


def manhattan(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def placement_candidates(maze: MazeData) -> List[Position]:
    """Open (non-text) cells, or every cell when fewer than three are open."""
    open_cells = [p for p in maze.positions() if not maze.cells[p.y][p.x].is_text_cell]
    if len(open_cells) >= 3:
        return open_cells
    return list(maze.positions())


def place_entities(maze: MazeData, rng: SeededRng) -> Tuple[Position, Position, Position]:
    """
    Order:
      1) king  = first shuffled candidate
      2) key   = first later candidate farther than width/3 from the king
      3) goal  = first candidate from index 2 farther than width/4 from both
    Fallbacks keep all three distinct.
    """
    shuffled = rng.shuffle(placement_candidates(maze))
    king = shuffled[0]

    key = shuffled[1]
    for pos in shuffled[1:]:
        if manhattan(pos, king) > maze.width / 3:
            key = pos
            break

    # shuffled[2] may already be the key; shuffled[1] then cannot be.
    goal = shuffled[2] if shuffled[2] != key else shuffled[1]
    for pos in shuffled[2:]:
        if manhattan(pos, king) > maze.width / 4 and manhattan(pos, key) > maze.width / 4:
            goal = pos
            break

    return king, key, goal
