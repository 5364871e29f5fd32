# src/glyphmaze/mapgen/generator.py
# Seed string -> toroidal maze with the seed written into it as walkable glyphs.

import logging
import time
from typing import Optional

from ..config import DEFAULTS, MazeConfig
from ..grid import GeneratedMaze, MazeData
from ..layout import calculate_dimensions
from ..rng import SeededRng
from .carve import assert_boundary_walls, carve_entry_points, carve_glyph_skeletons, carve_open_space
from .embed import embed_text
from .placement import place_entities

logger = logging.getLogger(__name__)


def generate_maze(seed: str, config: Optional[MazeConfig] = None) -> GeneratedMaze:
    """
    Build the maze for `seed`. The same seed (and config) always produces the
    same walls and the same king/key/goal positions.

    Phase order is fixed, each phase consuming the RNG in turn:
      embed -> glyph skeletons -> silhouette walls -> entry points
      -> open-space Kruskal -> entity placement
    """
    if not seed:
        raise ValueError("seed must be a non-empty string")
    cfg = config or DEFAULTS
    t0 = time.perf_counter()

    rng = SeededRng.from_seed(seed)
    dims = calculate_dimensions(seed, cfg)
    maze = MazeData.filled(dims.width, dims.height)

    placements = embed_text(maze, dims.layout, cfg)
    skeleton = carve_glyph_skeletons(maze, placements, rng)
    assert_boundary_walls(maze)
    doors = carve_entry_points(maze, placements, rng)
    carve_open_space(maze, rng)
    king, key, goal = place_entities(maze, rng)

    logger.debug(
        "maze %r: %dx%d, %d lines, %d glyphs, %d skeleton walls, %d doors, %.1f ms",
        seed, maze.width, maze.height, len(dims.layout.lines), len(placements),
        skeleton, doors, (time.perf_counter() - t0) * 1000.0,
    )
    return GeneratedMaze(maze=maze, king_pos=king, key_pos=key, goal_pos=goal)
