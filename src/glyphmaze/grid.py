from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, NamedTuple, Tuple

SOUTH = "S"
EAST = "E"

# A wall is named by the cell that stores it and the face (S or E).
Wall = Tuple[int, int, str]


class CellType(IntEnum):
    NORMAL = 0
    TEXT = 1
    ZK_TEXT = 2


class Position(NamedTuple):
    x: int
    y: int


@dataclass
class Cell:
    south_wall: bool = True
    east_wall: bool = True
    is_text_cell: bool = False
    is_zk_cell: bool = False

    @property
    def cell_type(self) -> CellType:
        if self.is_zk_cell:
            return CellType.ZK_TEXT
        if self.is_text_cell:
            return CellType.TEXT
        return CellType.NORMAL


@dataclass
class MazeData:
    width: int
    height: int
    cells: List[List[Cell]]

    @classmethod
    def filled(cls, width: int, height: int) -> "MazeData":
        """Every wall present, every flag clear."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Maze dimensions must be positive (got {width}x{height})")
        cells = [[Cell() for _ in range(width)] for _ in range(height)]
        return cls(width=width, height=height, cells=cells)

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def pos(self, i: int) -> Position:
        return Position(i % self.width, i // self.width)

    def cell(self, x: int, y: int) -> Cell:
        # Wrapping lookup
        return self.cells[y % self.height][x % self.width]

    def is_text(self, x: int, y: int) -> bool:
        return self.cell(x, y).is_text_cell

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    def south_of(self, x: int, y: int) -> Position:
        return Position(x, (y + 1) % self.height)

    def east_of(self, x: int, y: int) -> Position:
        return Position((x + 1) % self.width, y)

    def wall_between(self, a: Tuple[int, int], b: Tuple[int, int]) -> Wall:
        """
        Storage location of the wall separating two toroidally adjacent cells.
        Raises ValueError when the cells are not neighbours.
        """
        ax, ay = a[0] % self.width, a[1] % self.height
        bx, by = b[0] % self.width, b[1] % self.height
        if ax == bx:
            if (ay + 1) % self.height == by:
                return (ax, ay, SOUTH)
            if (by + 1) % self.height == ay:
                return (bx, by, SOUTH)
        if ay == by:
            if (ax + 1) % self.width == bx:
                return (ax, ay, EAST)
            if (bx + 1) % self.width == ax:
                return (bx, by, EAST)
        raise ValueError(f"cells {a} and {b} are not adjacent")

    def wall_present(self, wall: Wall) -> bool:
        x, y, face = wall
        c = self.cells[y][x]
        return c.south_wall if face == SOUTH else c.east_wall

    def set_wall(self, wall: Wall, present: bool) -> None:
        x, y, face = wall
        c = self.cells[y][x]
        if face == SOUTH:
            c.south_wall = present
        else:
            c.east_wall = present

    def wall_far_side(self, wall: Wall) -> Position:
        x, y, face = wall
        return self.south_of(x, y) if face == SOUTH else self.east_of(x, y)

    def walls(self) -> Iterator[Wall]:
        """Every stored wall, row-major, south before east."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y, SOUTH)
                yield (x, y, EAST)


@dataclass
class GeneratedMaze:
    maze: MazeData
    king_pos: Position
    key_pos: Position
    goal_pos: Position
