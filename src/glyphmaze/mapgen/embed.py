# src/glyphmaze/mapgen/embed.py
# Stamp the laid-out glyphs into the cell grid as text cells.

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import MazeConfig
from ..font import get_char_pattern, get_char_width, get_text_dimensions, glyph_key
from ..grid import MazeData
from ..layout import TextLayout


@dataclass(frozen=True)
class GlyphPlacement:
    char: str
    key: Optional[str]  # font key, None for an unknown glyph
    x: int              # grid column of pattern (0, 0)
    y: int              # grid row of pattern (0, 0)

    def cells(self) -> List[Tuple[int, int]]:
        """Grid (x, y) of every filled pixel of this glyph."""
        pattern = get_char_pattern(self.char)
        if not pattern:
            return []
        out = []
        for py, row in enumerate(pattern):
            for px, filled in enumerate(row):
                if filled:
                    out.append((self.x + px, self.y + py))
        return out


def embed_text(maze: MazeData, layout: TextLayout, config: MazeConfig) -> List[GlyphPlacement]:
    """
    Centre the text block in the maze, centre each line inside the block, and
    mark every glyph pixel as a text cell. Glyphs listed in config.zk_chars
    also get the highlight flag. Unknown glyphs only advance the cursor.
    """
    start_x = (maze.width - layout.width) // 2
    start_y = (maze.height - layout.height) // 2
    zk = {c.upper() for c in config.zk_chars}

    placements: List[GlyphPlacement] = []
    cur_y = start_y
    for line, line_h in zip(layout.lines, layout.line_heights):
        line_w = get_text_dimensions(line).width
        cur_x = start_x + (layout.width - line_w) // 2
        for ch in line:
            placement = GlyphPlacement(char=ch, key=glyph_key(ch), x=cur_x, y=cur_y)
            placements.append(placement)
            highlight = ch.upper() in zk
            for gx, gy in placement.cells():
                if 0 <= gx < maze.width and 0 <= gy < maze.height:
                    c = maze.cells[gy][gx]
                    c.is_text_cell = True
                    if highlight:
                        c.is_zk_cell = True
            cur_x += get_char_width(ch) + config.char_spacing
        cur_y += line_h + config.char_spacing
    return placements
