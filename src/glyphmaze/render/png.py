# src/glyphmaze/render/png.py
# Debug PNG of a generated maze using Pillow.

import os
from typing import Tuple

from PIL import Image, ImageDraw

from ..grid import GeneratedMaze

RGBA = Tuple[int, int, int, int]

BACKGROUND: RGBA = (24, 24, 24, 255)
TEXT_FILL: RGBA = (60, 60, 90, 255)
ZK_FILL: RGBA = (90, 60, 120, 255)
WALL: RGBA = (220, 220, 220, 255)
TEXT_WALL: RGBA = (255, 200, 0, 255)
KING: RGBA = (0, 200, 255, 255)
KEY: RGBA = (255, 220, 0, 255)
GOAL: RGBA = (0, 220, 0, 255)


def render_image(generated: GeneratedMaze, cell: int = 12, margin: int = 2) -> Image.Image:
    maze = generated.maze
    w = maze.width * cell + 2 * margin
    h = maze.height * cell + 2 * margin
    img = Image.new("RGBA", (w, h), BACKGROUND)
    draw = ImageDraw.Draw(img)

    for y, row in enumerate(maze.cells):
        for x, c in enumerate(row):
            x0, y0 = margin + x * cell, margin + y * cell
            if c.is_text_cell:
                draw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=ZK_FILL if c.is_zk_cell else TEXT_FILL)

    for y, row in enumerate(maze.cells):
        for x, c in enumerate(row):
            x0, y0 = margin + x * cell, margin + y * cell
            x1, y1 = x0 + cell, y0 + cell
            if c.south_wall:
                other = maze.cell(x, y + 1)
                color = TEXT_WALL if (c.is_text_cell or other.is_text_cell) else WALL
                draw.line((x0, y1, x1, y1), fill=color)
                if y == maze.height - 1:
                    draw.line((x0, margin, x1, margin), fill=color)
            if c.east_wall:
                other = maze.cell(x + 1, y)
                color = TEXT_WALL if (c.is_text_cell or other.is_text_cell) else WALL
                draw.line((x1, y0, x1, y1), fill=color)
                if x == maze.width - 1:
                    draw.line((margin, y0, margin, y1), fill=color)

    pad = max(1, cell // 4)
    for pos, color in ((generated.king_pos, KING), (generated.key_pos, KEY), (generated.goal_pos, GOAL)):
        x0, y0 = margin + pos.x * cell, margin + pos.y * cell
        draw.ellipse((x0 + pad, y0 + pad, x0 + cell - pad, y0 + cell - pad), fill=color)
    return img


def render_png(generated: GeneratedMaze, out_png: str, cell: int = 12) -> None:
    img = render_image(generated, cell=cell)
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
