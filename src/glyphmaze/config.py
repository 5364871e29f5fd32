from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class MazeConfig:
    # Glyph metrics. Font rows are 8 tall; descenders may hang lower.
    char_height: int = 8
    char_spacing: int = 1
    avg_cells_per_char: int = 6

    # Layout / sizing
    max_width_chars: int = 20
    margin_chars: int = 2
    min_size: int = 20

    # Glyphs whose cells also carry the zero-knowledge highlight flag.
    zk_chars: FrozenSet[str] = field(default_factory=lambda: frozenset("ZK"))

    @property
    def margin_cells(self) -> int:
        return self.margin_chars * self.avg_cells_per_char

    @property
    def max_line_cells(self) -> int:
        return self.max_width_chars * self.avg_cells_per_char


# Shared default (never mutated; pass a new MazeConfig to override)
DEFAULTS = MazeConfig()
