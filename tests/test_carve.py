from glyphmaze.config import MazeConfig
from glyphmaze.grid import MazeData
from glyphmaze.layout import calculate_dimensions
from glyphmaze.mapgen.carve import (
    DisjointSet, assert_boundary_walls, carve_entry_points, carve_glyph_skeletons,
)
from glyphmaze.mapgen.embed import embed_text
from glyphmaze.rng import SeededRng

def build(seed):
    cfg = MazeConfig()
    dims = calculate_dimensions(seed, cfg)
    maze = MazeData.filled(dims.width, dims.height)
    return maze, embed_text(maze, dims.layout, cfg)

def count_open(maze):
    return sum(1 for w in maze.walls() if not maze.wall_present(w))

def test_disjoint_set():
    ds = DisjointSet(5)
    assert ds.union(0, 1)
    assert ds.union(3, 4)
    assert not ds.union(1, 0)
    assert ds.find(0) == ds.find(1)
    assert ds.find(1) != ds.find(3)
    assert ds.union(1, 4)
    assert ds.find(0) == ds.find(3)

def test_disjoint_set_deep_chain_is_iterative():
    n = 200_000
    ds = DisjointSet(n)
    for i in range(n - 1):
        ds.parent[i] = i + 1  # worst-case chain
    assert ds.find(0) == n - 1

def test_skeleton_opens_pixels_minus_one():
    maze, (h,) = build("H")
    opened = carve_glyph_skeletons(maze, [h], SeededRng.from_seed("H"))
    assert opened == len(h.cells()) - 1
    assert count_open(maze) == opened

def test_boundary_walls_are_restored():
    maze, (t,) = build("T")
    x, y = t.cells()[0]  # top-left pixel of the T bar
    wall = maze.wall_between((x, y), (x, y - 1))
    maze.set_wall(wall, False)
    assert assert_boundary_walls(maze) == 1
    assert maze.wall_present(wall)

def test_entry_points_reach_outside_and_hole():
    maze, (o,) = build("O")
    rng = SeededRng.from_seed("O")
    carve_glyph_skeletons(maze, [o], rng)
    opened = carve_entry_points(maze, [o], rng)
    text = set(o.cells())
    to_outside = to_hole = 0
    for w in maze.walls():
        if maze.wall_present(w):
            continue
        x, y, _ = w
        far = maze.wall_far_side(w)
        a, b = (x, y), (far.x, far.y)
        if (a in text) == (b in text):
            continue
        empty = b if a in text else a
        if 0 < empty[0] - o.x < 4 and 0 < empty[1] - o.y < 7:
            to_hole += 1
        else:
            to_outside += 1
        assert empty not in text
    assert 3 <= to_outside <= 6
    assert 1 <= to_hole <= 2
    assert opened == to_outside + to_hole
