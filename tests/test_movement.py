import pytest

from glyphmaze.engine.movement import (
    Move, can_move, get_new_position, is_fully_connected, path_to_moves,
    reachable_cells, shortest_path, solve,
)
from glyphmaze.engine.state import GameState
from glyphmaze.grid import GeneratedMaze, MazeData, Position
from glyphmaze.mapgen.generator import generate_maze

def corridor():
    # 5x3, open along row 0 from x=0 to x=4 (no wrap); everything else walled.
    m = MazeData.filled(5, 3)
    for x in range(4):
        m.cells[0][x].east_wall = False
    return m

def test_moves_read_south_and_east_walls():
    m = corridor()
    assert can_move(m, Position(0, 0), Move.RIGHT)
    assert can_move(m, Position(1, 0), "left")
    assert not can_move(m, Position(0, 0), Move.DOWN)
    assert not can_move(m, Position(0, 0), "up")
    assert not can_move(m, Position(4, 0), Move.RIGHT)

def test_wraparound_moves():
    m = MazeData.filled(3, 3)
    m.cells[2][0].south_wall = False    # row 2 <-> row 0
    m.cells[1][2].east_wall = False     # col 2 <-> col 0
    assert can_move(m, Position(0, 0), Move.UP)
    assert get_new_position(m, Position(0, 0), Move.UP) == Position(0, 2)
    assert can_move(m, Position(0, 2), Move.DOWN)
    assert can_move(m, Position(0, 1), Move.LEFT)
    assert get_new_position(m, Position(0, 1), Move.LEFT) == Position(2, 1)
    assert get_new_position(m, Position(2, 1), "right") == Position(0, 1)

def test_bad_direction_name():
    with pytest.raises(ValueError):
        can_move(corridor(), Position(0, 0), "north")

def test_reachability_oracle():
    m = corridor()
    assert reachable_cells(m, Position(2, 0)) == {Position(x, 0) for x in range(5)}
    assert not is_fully_connected(m, Position(0, 0))

def test_shortest_path_and_moves():
    m = corridor()
    path = shortest_path(m, Position(0, 0), Position(3, 0))
    assert path == [Position(x, 0) for x in range(4)]
    assert path_to_moves(m, path) == [Move.RIGHT] * 3
    assert shortest_path(m, Position(0, 0), Position(0, 1)) == []
    with pytest.raises(ValueError):
        path_to_moves(m, [Position(0, 0), Position(0, 1)])

def test_solve_generated_maze_visits_key_then_goal():
    g = generate_maze("solve me")
    moves = solve(g)
    pos, saw_key = g.king_pos, False
    for mv in moves:
        assert can_move(g.maze, pos, mv)
        pos = get_new_position(g.maze, pos, mv)
        saw_key = saw_key or pos == g.key_pos
    assert saw_key and pos == g.goal_pos

def test_game_state_key_then_goal():
    m = corridor()
    g = GeneratedMaze(maze=m, king_pos=Position(2, 0), key_pos=Position(4, 0), goal_pos=Position(0, 0))
    st = GameState.new_game(g)

    out = st.step(Move.LEFT)
    out = st.step(Move.LEFT)
    assert st.player_pos == Position(0, 0) and not out.won  # goal without key

    assert not st.step(Move.UP).moved  # wall
    assert st.move_count == 2

    for _ in range(4):
        out = st.step("right")
    assert out.picked_key and st.has_key

    for _ in range(4):
        out = st.step(Move.LEFT)
    assert out.won and st.game_won
    assert st.moves == [Move.LEFT] * 2 + [Move.RIGHT] * 4 + [Move.LEFT] * 4

    assert not st.step(Move.RIGHT).moved
    assert st.player_pos == Position(0, 0)

def test_game_state_from_seed_plays_solution():
    st = GameState.from_seed("play")
    for mv in solve(st.generated):
        assert st.step(mv).moved
    assert st.game_won
