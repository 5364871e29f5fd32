import pytest

from glyphmaze.codec.share import (
    deserialize_maze, deserialize_moves, serialize_generated, serialize_maze, serialize_moves,
)
from glyphmaze.codec.zk import (
    MAX_MOVES, MAX_PACKED_BYTES, decode_cell, encode_cell, generate_prover_input,
    generate_prover_toml, pack_cells, serialize_for_zk, unpack_cells, validate_path,
)
from glyphmaze.engine.movement import Move, solve
from glyphmaze.errors import CapacityError, CodecError, ShareCodecError
from glyphmaze.grid import Cell, MazeData, Position
from glyphmaze.mapgen.generator import generate_maze

ROW3 = "00030001000000000001000000020000db00"

def strip(m):
    return [[(c.south_wall, c.east_wall, c.is_text_cell) for c in row] for row in m.cells]

# --- share format ---

def test_share_known_bytes():
    m = MazeData.filled(3, 1)
    assert serialize_maze(m, Position(0, 0), Position(1, 0), Position(2, 0)) == ROW3

def test_share_decode_known_bytes():
    g = deserialize_maze(ROW3)
    assert (g.maze.width, g.maze.height) == (3, 1)
    assert g.king_pos == Position(0, 0) and g.key_pos == Position(1, 0) and g.goal_pos == Position(2, 0)
    assert all(c.south_wall and c.east_wall and not c.is_text_cell for c in g.maze.cells[0])

def test_share_generated_maze_survives():
    g = generate_maze("share me")
    back = deserialize_maze(serialize_generated(g))
    assert strip(back.maze) == strip(g.maze)
    assert (back.king_pos, back.key_pos, back.goal_pos) == (g.king_pos, g.key_pos, g.goal_pos)

def test_share_fields_straddle_bytes():
    # 3 bits per cell: cell 2 spans bytes 0 and 1, cell 5 spans bytes 1 and 2
    m = MazeData.filled(8, 1)
    m.cells[0][2] = Cell(south_wall=True, east_wall=False, is_text_cell=True)    # 101
    m.cells[0][5] = Cell(south_wall=False, east_wall=True, is_text_cell=False)   # 010
    back = deserialize_maze(serialize_maze(m, (0, 0), (1, 0), (2, 0)))
    assert strip(back.maze) == strip(m)

@pytest.mark.parametrize("data", [
    "zz",
    "0003",
    "00000001000000000000000000000000",          # zero width
    "00030001000000000001000000020000db",        # truncated cells
    "00030001000300000001000000020000db00",      # king x out of range
])
def test_share_rejects_bad_payloads(data):
    with pytest.raises(ShareCodecError):
        deserialize_maze(data)

def test_share_rejects_oversized_fields():
    with pytest.raises(ShareCodecError):
        serialize_maze(MazeData.filled(2, 2), (70000, 0), (1, 0), (0, 1))

def test_codec_errors_are_value_errors():
    assert issubclass(ShareCodecError, CodecError)
    assert issubclass(CapacityError, CodecError)
    assert issubclass(CodecError, ValueError)

def test_moves_known_bytes():
    assert serialize_moves([0, 1, 2, 3]) == "1b"
    assert serialize_moves([Move.LEFT]) == "c0"
    assert serialize_moves([]) == ""
    assert deserialize_moves("1b") == [Move.UP, Move.RIGHT, Move.DOWN, Move.LEFT]
    assert deserialize_moves("") == []

def test_moves_trailing_zero_bytes_need_count():
    data = serialize_moves([1, 0, 0, 0, 0])
    assert data == "4000"
    assert deserialize_moves(data) == [1, 0, 0, 0]
    assert deserialize_moves(data, count=5) == [1, 0, 0, 0, 0]
    with pytest.raises(ShareCodecError):
        deserialize_moves(data, count=9)

def test_moves_of_solution_survive():
    moves = solve(generate_maze("moves"))
    assert deserialize_moves(serialize_moves(moves), count=len(moves)) == moves

# --- prover inputs ---

def test_cell_nibbles():
    assert encode_cell(Cell()) == 0x0C
    assert encode_cell(Cell(is_text_cell=True)) == 0x0D
    assert encode_cell(Cell(is_text_cell=True, is_zk_cell=True)) == 0x0E
    assert encode_cell(Cell(south_wall=False, east_wall=False)) == 0x00
    assert encode_cell(Cell(south_wall=False)) == 0x04
    z = decode_cell(0x0E)
    assert z.south_wall and z.east_wall and z.is_text_cell and z.is_zk_cell

def test_pack_nibbles():
    assert pack_cells(0x0C, 0x0D) == 0xCD
    assert unpack_cells(0xCD) == (0x0C, 0x0D)

def test_zk_odd_cell_count_is_padded():
    zk = serialize_for_zk(MazeData.filled(3, 1), (0, 0), (1, 0), (2, 0))
    assert zk.packed_cells == [0xCC, 0xC0]
    assert (zk.width, zk.height, zk.key_x, zk.goal_x) == (3, 1, 1, 2)

def test_prover_input_padding():
    zk = serialize_for_zk(MazeData.filled(3, 1), (0, 0), (1, 0), (2, 0))
    inp = generate_prover_input(zk, [Move.RIGHT, Move.RIGHT])
    assert len(inp.packed_cells) == MAX_PACKED_BYTES
    assert inp.packed_cells[:3] == [0xCC, 0xC0, 0]
    assert len(inp.moves) == MAX_MOVES
    assert inp.moves[:3] == [1, 1, 0]
    assert inp.move_count == 2

def test_prover_capacity_limits():
    big = serialize_for_zk(MazeData.filled(51, 50), (0, 0), (1, 0), (2, 0))
    with pytest.raises(CapacityError, match="Maze too large"):
        generate_prover_input(big, [])
    ok = serialize_for_zk(MazeData.filled(50, 50), (0, 0), (1, 0), (2, 0))
    assert generate_prover_input(ok, []).move_count == 0
    with pytest.raises(CapacityError, match="Too many moves"):
        generate_prover_input(ok, [0] * (MAX_MOVES + 1))

def test_prover_toml():
    zk = serialize_for_zk(MazeData.filled(3, 1), (0, 0), (1, 0), (2, 0))
    toml = generate_prover_toml(generate_prover_input(zk, [1]))
    lines = toml.splitlines()
    assert lines[:9] == [
        "width = 3", "height = 1",
        "start_x = 0", "start_y = 0",
        "key_x = 1", "key_y = 0",
        "goal_x = 2", "goal_y = 0",
        "move_count = 1",
    ]
    assert lines[9].startswith("packed_cells = [204, 192, 0, ")
    assert lines[10].startswith("moves = [1, 0, ")

def test_validate_path():
    m = MazeData.filled(3, 1)
    m.cells[0][0].east_wall = False
    m.cells[0][1].east_wall = False
    start, key, goal = Position(0, 0), Position(2, 0), Position(1, 0)

    assert validate_path(m, start, key, goal, [1, 1, 3]).valid

    bad = validate_path(m, start, key, goal, [1, 2])
    assert not bad.valid and bad.error.startswith("Move 1: Cannot move DOWN from (1, 0)")

    nokey = validate_path(m, start, key, goal, [1])
    assert not nokey.valid and "key" in nokey.error

    short = validate_path(m, start, key, goal, [1, 1])
    assert not short.valid and "not goal" in short.error

def test_validate_solution_of_generated_maze():
    g = generate_maze("ZK")
    assert validate_path(g.maze, g.king_pos, g.key_pos, g.goal_pos, solve(g)).valid
