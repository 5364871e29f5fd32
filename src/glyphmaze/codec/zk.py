# src/glyphmaze/codec/zk.py
"""
Prover inputs for the maze-solution circuit.

Cells are 4 bits (south<<3 | east<<2 | cell_type), two per byte with the
even-indexed cell in the high nibble. Cell and move arrays are zero-padded
to the circuit's fixed sizes. A claimed solution is re-checked here with the
same movement rules the game uses before any proof is attempted.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..engine.movement import Move, can_move, get_new_position
from ..errors import CapacityError
from ..grid import Cell, CellType, MazeData, Position

MAX_CELLS = 2500          # 50 x 50
MAX_PACKED_BYTES = MAX_CELLS // 2
MAX_MOVES = 3000


def encode_cell(cell: Cell) -> int:
    data = 0
    if cell.south_wall:
        data |= 0x08
    if cell.east_wall:
        data |= 0x04
    return data | (int(cell.cell_type) & 0x03)


def decode_cell(data: int) -> Cell:
    kind = data & 0x03
    return Cell(
        south_wall=bool(data & 0x08),
        east_wall=bool(data & 0x04),
        is_text_cell=kind != CellType.NORMAL,
        is_zk_cell=kind == CellType.ZK_TEXT,
    )


def pack_cells(even: int, odd: int) -> int:
    return ((even & 0x0F) << 4) | (odd & 0x0F)


def unpack_cells(byte: int) -> Tuple[int, int]:
    return (byte >> 4) & 0x0F, byte & 0x0F


@dataclass
class ZkMazeData:
    width: int
    height: int
    start_x: int
    start_y: int
    key_x: int
    key_y: int
    goal_x: int
    goal_y: int
    packed_cells: List[int]


@dataclass
class ProverInput:
    # public
    width: int
    height: int
    start_x: int
    start_y: int
    key_x: int
    key_y: int
    goal_x: int
    goal_y: int
    packed_cells: List[int]
    move_count: int
    # private
    moves: List[int]


@dataclass
class PathCheck:
    valid: bool
    error: Optional[str] = None


def serialize_for_zk(maze: MazeData, start: Position, key: Position, goal: Position) -> ZkMazeData:
    encoded = [encode_cell(c) for row in maze.cells for c in row]
    if len(encoded) % 2:
        encoded.append(0)
    packed = [pack_cells(encoded[i], encoded[i + 1]) for i in range(0, len(encoded), 2)]
    return ZkMazeData(
        width=maze.width, height=maze.height,
        start_x=start[0], start_y=start[1],
        key_x=key[0], key_y=key[1],
        goal_x=goal[0], goal_y=goal[1],
        packed_cells=packed,
    )


def generate_prover_input(zk: ZkMazeData, moves: Sequence[int]) -> ProverInput:
    total = zk.width * zk.height
    if total > MAX_CELLS:
        raise CapacityError(f"Maze too large: {total} cells exceeds max {MAX_CELLS}")
    if len(moves) > MAX_MOVES:
        raise CapacityError(f"Too many moves: {len(moves)} exceeds max {MAX_MOVES}")

    cells = list(zk.packed_cells) + [0] * (MAX_PACKED_BYTES - len(zk.packed_cells))
    dirs = [int(Move(m)) for m in moves]
    padded = dirs + [0] * (MAX_MOVES - len(dirs))
    return ProverInput(
        width=zk.width, height=zk.height,
        start_x=zk.start_x, start_y=zk.start_y,
        key_x=zk.key_x, key_y=zk.key_y,
        goal_x=zk.goal_x, goal_y=zk.goal_y,
        packed_cells=cells,
        move_count=len(dirs),
        moves=padded,
    )


def generate_prover_toml(inp: ProverInput) -> str:
    lines = [
        f"width = {inp.width}",
        f"height = {inp.height}",
        f"start_x = {inp.start_x}",
        f"start_y = {inp.start_y}",
        f"key_x = {inp.key_x}",
        f"key_y = {inp.key_y}",
        f"goal_x = {inp.goal_x}",
        f"goal_y = {inp.goal_y}",
        f"move_count = {inp.move_count}",
        f"packed_cells = [{', '.join(map(str, inp.packed_cells))}]",
        f"moves = [{', '.join(map(str, inp.moves))}]",
    ]
    return "\n".join(lines)


def validate_path(
    maze: MazeData,
    start: Position,
    key: Position,
    goal: Position,
    moves: Sequence[int],
) -> PathCheck:
    """Walk the moves; the path must pick up the key and stop on the goal."""
    pos = Position(*start)
    key, goal = Position(*key), Position(*goal)
    has_key = pos == key
    for i, m in enumerate(moves):
        move = Move(m)
        if not can_move(maze, pos, move):
            return PathCheck(False, f"Move {i}: Cannot move {move.name} from ({pos.x}, {pos.y}) - wall")
        pos = get_new_position(maze, pos, move)
        if pos == key:
            has_key = True
    if not has_key:
        return PathCheck(False, "Path does not collect the key")
    if pos != goal:
        return PathCheck(False, f"Path ends at ({pos.x}, {pos.y}), not goal ({goal.x}, {goal.y})")
    return PathCheck(True)
