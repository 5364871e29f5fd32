# src/glyphmaze/mapgen/carve.py
# Wall carving passes: per-glyph skeletons, silhouette walls, entry points,
# then a randomized Kruskal pass over the open (non-text) space.

import logging
from typing import Dict, List, Tuple

from ..font import calculate_entry_count, get_character_boundaries, TOP, BOTTOM, LEFT, RIGHT
from ..grid import MazeData, Wall
from ..rng import SeededRng
from .embed import GlyphPlacement

logger = logging.getLogger(__name__)

SIDE_OFFSETS = {
    TOP: (0, -1),
    BOTTOM: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}


class DisjointSet:
    """Union-find with union by rank; find() is iterative (path halving)."""

    def __init__(self, size: int = 0):
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, i: int) -> int:
        parent = self.parent
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b. False when already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        return True


def _glyph_pairs(cells: List[Tuple[int, int]]) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    filled = set(cells)
    pairs = []
    for x, y in cells:
        if (x + 1, y) in filled:
            pairs.append(((x, y), (x + 1, y)))
        if (x, y + 1) in filled:
            pairs.append(((x, y), (x, y + 1)))
    return pairs


def carve_glyph_skeletons(maze: MazeData, placements: List[GlyphPlacement], rng: SeededRng) -> int:
    """
    Open a random spanning tree through each glyph's filled pixels. Each
    4-connected stroke ends up with exactly (pixels - 1) open walls and no
    cycles. Returns the number of walls opened.
    """
    opened = 0
    for placement in placements:
        cells = placement.cells()
        if len(cells) < 2:
            continue
        index: Dict[Tuple[int, int], int] = {c: i for i, c in enumerate(cells)}
        ds = DisjointSet(len(cells))
        for a, b in rng.shuffle(_glyph_pairs(cells)):
            if ds.union(index[a], index[b]):
                maze.set_wall(maze.wall_between(a, b), False)
                opened += 1
    return opened


def assert_boundary_walls(maze: MazeData) -> int:
    """Close every wall between a text cell and a non-text cell."""
    closed = 0
    for wall in maze.walls():
        x, y, _ = wall
        far = maze.wall_far_side(wall)
        if maze.is_text(x, y) != maze.is_text(far.x, far.y) and not maze.wall_present(wall):
            maze.set_wall(wall, True)
            closed += 1
    return closed


def _entry_wall(maze: MazeData, placement: GlyphPlacement, ep) -> Tuple[Wall, Tuple[int, int]]:
    gx, gy = placement.x + ep.x, placement.y + ep.y
    dx, dy = SIDE_OFFSETS[ep.side]
    far = ((gx + dx) % maze.width, (gy + dy) % maze.height)
    return maze.wall_between((gx, gy), far), far


def carve_entry_points(maze: MazeData, placements: List[GlyphPlacement], rng: SeededRng) -> int:
    """
    Punch doors through each glyph's silhouette.

    For every filled component, a few outward-facing walls are opened, but
    only where the far cell is open space. For every enclosed hole, one or two
    walls are opened unconditionally so the hole joins the glyph.
    """
    opened = 0
    for placement in placements:
        if placement.key is None:
            continue
        bounds = get_character_boundaries(placement.key)

        for edge in bounds.external:
            take = calculate_entry_count(len(edge), False)
            for ep in rng.shuffle(edge)[:take]:
                wall, far = _entry_wall(maze, placement, ep)
                if not maze.is_text(*far):
                    maze.set_wall(wall, False)
                    opened += 1

        for edge in bounds.internal:
            take = calculate_entry_count(len(edge), True)
            for ep in rng.shuffle(edge)[:take]:
                wall, _ = _entry_wall(maze, placement, ep)
                maze.set_wall(wall, False)
                opened += 1
    return opened


def carve_open_space(maze: MazeData, rng: SeededRng) -> int:
    """
    Randomized Kruskal over walls between two non-text cells, wrap-around
    walls included. Every wall that is already open is unioned first so the
    glyph skeletons and their doors become part of the spanning forest.
    """
    ds = DisjointSet(maze.width * maze.height)
    candidates: List[Wall] = []
    for wall in maze.walls():
        x, y, _ = wall
        far = maze.wall_far_side(wall)
        a, b = maze.idx(x, y), maze.idx(far.x, far.y)
        if not maze.wall_present(wall):
            ds.union(a, b)
        elif not maze.is_text(x, y) and not maze.is_text(far.x, far.y):
            candidates.append(wall)

    opened = 0
    for wall in rng.shuffle(candidates):
        x, y, _ = wall
        far = maze.wall_far_side(wall)
        if ds.union(maze.idx(x, y), maze.idx(far.x, far.y)):
            maze.set_wall(wall, False)
            opened += 1
    logger.debug("kruskal: %d candidate walls, %d opened", len(candidates), opened)
    return opened
