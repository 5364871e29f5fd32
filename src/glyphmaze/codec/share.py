# src/glyphmaze/codec/share.py
"""
Compact hex format for sharing a maze and for replaying a move list.

Maze layout (big-endian):
  u16 width, u16 height,
  u16 king.x, u16 king.y, u16 key.x, u16 key.y, u16 goal.x, u16 goal.y,
  cells row-major, 3 bits each, MSB first: south<<2 | east<<1 | text

Moves: 2 bits each, MSB first, using the Move values (UP=0 .. LEFT=3).
"""

import struct
from typing import List, Optional, Sequence

from ..engine.movement import Move
from ..errors import ShareCodecError
from ..grid import Cell, GeneratedMaze, MazeData, Position

HEADER = struct.Struct(">8H")
U16_MAX = 0xFFFF


def _check_u16(name: str, value: int) -> None:
    if not (0 <= value <= U16_MAX):
        raise ShareCodecError(f"{name} = {value} does not fit in 16 bits")


def _from_hex(data: str) -> bytes:
    try:
        return bytes.fromhex(data)
    except ValueError as e:
        raise ShareCodecError(f"not a hex string: {e}") from e


def serialize_maze(maze: MazeData, king: Position, key: Position, goal: Position) -> str:
    fields = [maze.width, maze.height, king[0], king[1], key[0], key[1], goal[0], goal[1]]
    names = ["width", "height", "king.x", "king.y", "key.x", "key.y", "goal.x", "goal.y"]
    for n, v in zip(names, fields):
        _check_u16(n, v)

    total = maze.width * maze.height
    body = bytearray((total * 3 + 7) // 8)
    bit = 0
    for row in maze.cells:
        for c in row:
            v = (4 if c.south_wall else 0) | (2 if c.east_wall else 0) | (1 if c.is_text_cell else 0)
            # A 3-bit field can straddle a byte boundary.
            shifted = v << (13 - (bit % 8))
            byte_i = bit // 8
            body[byte_i] |= (shifted >> 8) & 0xFF
            if shifted & 0xFF:
                body[byte_i + 1] |= shifted & 0xFF
            bit += 3
    return (HEADER.pack(*fields) + bytes(body)).hex()


def serialize_generated(generated: GeneratedMaze) -> str:
    return serialize_maze(generated.maze, generated.king_pos, generated.key_pos, generated.goal_pos)


def deserialize_maze(data: str) -> GeneratedMaze:
    raw = _from_hex(data)
    if len(raw) < HEADER.size:
        raise ShareCodecError(f"payload too short for header: {len(raw)} bytes")
    w, h, kx, ky, keyx, keyy, gx, gy = HEADER.unpack_from(raw, 0)
    if w == 0 or h == 0:
        raise ShareCodecError(f"invalid dimensions {w}x{h}")
    body = raw[HEADER.size:]
    need = (w * h * 3 + 7) // 8
    if len(body) < need:
        raise ShareCodecError(f"cell data truncated: need {need} bytes, got {len(body)}")

    cells = []
    bit = 0
    for _ in range(h):
        row = []
        for _ in range(w):
            byte_i = bit // 8
            word = body[byte_i] << 8
            if byte_i + 1 < len(body):
                word |= body[byte_i + 1]
            v = (word >> (13 - (bit % 8))) & 0b111
            row.append(Cell(south_wall=bool(v & 4), east_wall=bool(v & 2), is_text_cell=bool(v & 1)))
            bit += 3
        cells.append(row)

    for name, (x, y) in (("king", (kx, ky)), ("key", (keyx, keyy)), ("goal", (gx, gy))):
        if x >= w or y >= h:
            raise ShareCodecError(f"{name} position ({x}, {y}) outside {w}x{h}")

    return GeneratedMaze(
        maze=MazeData(width=w, height=h, cells=cells),
        king_pos=Position(kx, ky),
        key_pos=Position(keyx, keyy),
        goal_pos=Position(gx, gy),
    )


def serialize_moves(moves: Sequence[int]) -> str:
    if not moves:
        return ""
    out = bytearray((len(moves) * 2 + 7) // 8)
    for i, m in enumerate(moves):
        out[i // 4] |= (int(Move(m)) & 0b11) << (6 - (i % 4) * 2)
    return out.hex()


def deserialize_moves(data: str, count: Optional[int] = None) -> List[Move]:
    """
    Decode a move string. Without `count`, trailing all-zero bytes are taken
    as padding (which cannot tell padding from a real run of UP moves that
    starts on a byte boundary; pass `count` when it matters).
    """
    if not data:
        return []
    raw = _from_hex(data)
    capacity = len(raw) * 4
    if count is not None:
        if count > capacity:
            raise ShareCodecError(f"{count} moves requested but only {capacity} encoded")
        capacity = count

    moves: List[Move] = []
    for i in range(capacity):
        byte_i, slot = divmod(i, 4)
        if count is None and i > 0 and slot == 0 and not any(raw[byte_i:]):
            break
        moves.append(Move((raw[byte_i] >> (6 - slot * 2)) & 0b11))
    return moves
