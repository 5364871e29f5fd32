# src/glyphmaze/layout.py
# Word-wrap the seed into lines of glyphs and size the maze around them.

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import DEFAULTS, MazeConfig
from .font import get_text_dimensions


@dataclass(frozen=True)
class TextLayout:
    lines: Tuple[str, ...]
    line_heights: Tuple[int, ...]
    width: int
    height: int


@dataclass(frozen=True)
class MazeDimensions:
    width: int
    height: int
    layout: TextLayout


def wrap_words(text: str, max_line_cells: int) -> List[str]:
    """Greedy wrap: a word joins the current line while the line still fits."""
    lines: List[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
            continue
        candidate = current + " " + word
        if get_text_dimensions(candidate).width <= max_line_cells:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def layout_text(text: str, config: Optional[MazeConfig] = None) -> TextLayout:
    cfg = config or DEFAULTS
    lines = wrap_words(text, cfg.max_line_cells)
    dims = [get_text_dimensions(line) for line in lines]
    heights = tuple(max(cfg.char_height, d.height) for d in dims)
    width = max((d.width for d in dims), default=0)
    height = sum(heights) + cfg.char_spacing * (len(lines) - 1) if lines else 0
    return TextLayout(lines=tuple(lines), line_heights=heights, width=width, height=height)


def calculate_dimensions(text: str, config: Optional[MazeConfig] = None) -> MazeDimensions:
    cfg = config or DEFAULTS
    layout = layout_text(text, cfg)
    margin = cfg.margin_cells
    return MazeDimensions(
        width=max(layout.width + 2 * margin, cfg.min_size),
        height=max(layout.height + 2 * margin, cfg.min_size),
        layout=layout,
    )
