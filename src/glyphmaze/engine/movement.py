# src/glyphmaze/engine/movement.py
# Wall-aware, wrapping movement. Every legality check in the project (BFS
# oracle, solver, game state, prover-input validation) goes through
# can_move/get_new_position.

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Dict, List, Optional, Set, Union

from ..grid import GeneratedMaze, MazeData, Position


class Move(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


_BY_NAME = {
    "up": Move.UP,
    "right": Move.RIGHT,
    "down": Move.DOWN,
    "left": Move.LEFT,
}

Direction = Union[Move, int, str]


def as_move(direction: Direction) -> Move:
    if isinstance(direction, str):
        try:
            return _BY_NAME[direction.lower()]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
    return Move(direction)


def can_move(maze: MazeData, pos: Position, direction: Direction) -> bool:
    x, y = pos
    move = as_move(direction)
    if move is Move.DOWN:
        return not maze.cells[y][x].south_wall
    if move is Move.UP:
        return not maze.cells[(y - 1) % maze.height][x].south_wall
    if move is Move.RIGHT:
        return not maze.cells[y][x].east_wall
    return not maze.cells[y][(x - 1) % maze.width].east_wall


def get_new_position(maze: MazeData, pos: Position, direction: Direction) -> Position:
    x, y = pos
    move = as_move(direction)
    if move is Move.DOWN:
        return Position(x, (y + 1) % maze.height)
    if move is Move.UP:
        return Position(x, (y - 1) % maze.height)
    if move is Move.RIGHT:
        return Position((x + 1) % maze.width, y)
    return Position((x - 1) % maze.width, y)


def reachable_cells(maze: MazeData, start: Position) -> Set[Position]:
    """Flood fill from start through open walls (wrap-around included)."""
    start = Position(*start)
    seen = {start}
    q = deque([start])
    while q:
        pos = q.popleft()
        for move in Move:
            if can_move(maze, pos, move):
                nxt = get_new_position(maze, pos, move)
                if nxt not in seen:
                    seen.add(nxt)
                    q.append(nxt)
    return seen


def is_fully_connected(maze: MazeData, start: Position) -> bool:
    return len(reachable_cells(maze, start)) == maze.width * maze.height


def shortest_path(maze: MazeData, start: Position, goal: Position) -> List[Position]:
    """BFS path from start to goal inclusive; empty list when unreachable."""
    start, goal = Position(*start), Position(*goal)
    prev: Dict[Position, Optional[Position]] = {start: None}
    q = deque([start])
    while q:
        pos = q.popleft()
        if pos == goal:
            path = []
            cur: Optional[Position] = pos
            while cur is not None:
                path.append(cur)
                cur = prev[cur]
            path.reverse()
            return path
        for move in Move:
            if can_move(maze, pos, move):
                nxt = get_new_position(maze, pos, move)
                if nxt not in prev:
                    prev[nxt] = pos
                    q.append(nxt)
    return []


def path_to_moves(maze: MazeData, path: List[Position]) -> List[Move]:
    """One move per step; consecutive positions must be legal neighbours."""
    moves = []
    for a, b in zip(path, path[1:]):
        for move in Move:
            if get_new_position(maze, a, move) == b and can_move(maze, a, move):
                moves.append(move)
                break
        else:
            raise ValueError(f"no legal move from {tuple(a)} to {tuple(b)}")
    return moves


def solve(generated: GeneratedMaze) -> List[Move]:
    """Shortest king -> key leg followed by shortest key -> goal leg."""
    maze = generated.maze
    to_key = shortest_path(maze, generated.king_pos, generated.key_pos)
    to_goal = shortest_path(maze, generated.key_pos, generated.goal_pos)
    if not to_key or not to_goal:
        raise ValueError("maze is not solvable from the king position")
    return path_to_moves(maze, to_key) + path_to_moves(maze, to_goal)
