# src/glyphmaze/engine/state.py
# Play-through state: king position, key pickup, move history, win flag.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..config import MazeConfig
from ..grid import GeneratedMaze, Position
from ..mapgen.generator import generate_maze
from .movement import Direction, Move, as_move, can_move, get_new_position


@dataclass
class MoveOut:
    moved: bool
    picked_key: bool = False
    won: bool = False


@dataclass
class GameState:
    generated: GeneratedMaze
    player_pos: Position
    has_key: bool = False
    move_count: int = 0
    moves: List[Move] = field(default_factory=list)
    game_won: bool = False

    @classmethod
    def new_game(cls, generated: GeneratedMaze) -> "GameState":
        return cls(generated=generated, player_pos=generated.king_pos)

    @classmethod
    def from_seed(cls, seed: str, config: Optional[MazeConfig] = None) -> "GameState":
        return cls.new_game(generate_maze(seed, config))

    @property
    def key_pos(self) -> Position:
        return self.generated.key_pos

    @property
    def goal_pos(self) -> Position:
        return self.generated.goal_pos

    def step(self, direction: Direction) -> MoveOut:
        """
        Try one move. Blocked moves and moves after the win change nothing.
        Reaching the goal only wins once the key has been collected.
        """
        if self.game_won:
            return MoveOut(moved=False, won=True)
        maze = self.generated.maze
        move = as_move(direction)
        if not can_move(maze, self.player_pos, move):
            return MoveOut(moved=False)

        self.player_pos = get_new_position(maze, self.player_pos, move)
        self.moves.append(move)
        self.move_count += 1

        picked = False
        if not self.has_key and self.player_pos == self.key_pos:
            self.has_key = True
            picked = True
        if self.has_key and self.player_pos == self.goal_pos:
            self.game_won = True
        return MoveOut(moved=True, picked_key=picked, won=self.game_won)
