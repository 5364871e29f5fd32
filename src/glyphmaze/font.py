# src/glyphmaze/font.py
# 8-row pixel font whose strokes are walkable, plus per-glyph boundary analysis
# (which filled cells face open space, which face enclosed holes).

from collections import deque
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, List, Optional, Tuple

CHAR_HEIGHT = 8
CHAR_SPACING = 1
UNKNOWN_CHAR_WIDTH = 3

CharPattern = Tuple[Tuple[bool, ...], ...]


def _p(*rows: str) -> CharPattern:
    # '#' = glyph wall pixel, '.' = empty. Ragged rows are padded with empty.
    width = max(len(r) for r in rows)
    return tuple(tuple(c == "#" for c in r.ljust(width, ".")) for r in rows)


PIXEL_FONT = MappingProxyType({
    "A": _p(
        ".###.",
        "##.##",
        "#...#",
        "#...#",
        "#####",
        "#...#",
        "#...#",
        "#...#",
    ),
    "B": _p(
        "#####",
        "#...#",
        "#..##",
        "####.",
        "#..##",
        "#...#",
        "#...#",
        "#####",
    ),
    "C": _p(
        ".###.",
        "##...",
        "#....",
        "#....",
        "#....",
        "#....",
        "##...",
        ".###.",
    ),
    "D": _p(
        "####.",
        "#..##",
        "#...#",
        "#...#",
        "#...#",
        "#...#",
        "#..##",
        "####.",
    ),
    "E": _p(
        "#####",
        "#....",
        "#....",
        "####.",
        "#....",
        "#....",
        "#....",
        "#####",
    ),
    "F": _p(
        "#####",
        "#....",
        "#....",
        "####.",
        "#....",
        "#....",
        "#....",
        "#....",
    ),
    "G": _p(
        ".####",
        "##...",
        "#....",
        "#....",
        "#.###",
        "#...#",
        "#..##",
        "####.",
    ),
    "H": _p(
        "#...#",
        "#...#",
        "#...#",
        "#####",
        "#...#",
        "#...#",
        "#...#",
        "#...#",
    ),
    "I": _p(
        "#####",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "#####",
    ),
    "J": _p(
        "#####",
        "....#",
        "....#",
        "....#",
        "....#",
        "#...#",
        "##.##",
        ".###.",
    ),
    "K": _p(
        "#...#",
        "#..##",
        "#.##.",
        "###..",
        "###..",
        "#.##.",
        "#..##",
        "#...#",
    ),
    "L": _p(
        "#....",
        "#....",
        "#....",
        "#....",
        "#....",
        "#....",
        "#....",
        "#####",
    ),
    "M": _p(
        "#...#",
        "##.##",
        "#####",
        "#.#.#",
        "#.#.#",
        "#...#",
        "#...#",
        "#...#",
    ),
    "N": _p(
        "#...#",
        "##..#",
        "###.#",
        "#.#.#",
        "#.#.#",
        "#.###",
        "#..##",
        "#...#",
    ),
    "O": _p(
        ".###.",
        "##.##",
        "#...#",
        "#...#",
        "#...#",
        "#...#",
        "##.##",
        ".###.",
    ),
    "P": _p(
        "#####",
        "#...#",
        "#...#",
        "#..##",
        "####.",
        "#....",
        "#....",
        "#....",
    ),
    "Q": _p(
        ".###.",
        "##.##",
        "#...#",
        "#...#",
        "#.#.#",
        "#.###",
        "##.##",
        ".####",
    ),
    "R": _p(
        "####.",
        "#..##",
        "#...#",
        "#..##",
        "####.",
        "#.##.",
        "#..##",
        "#...#",
    ),
    "S": _p(
        "#####",
        "#....",
        "##...",
        ".####",
        "....#",
        "....#",
        "#...#",
        "#####",
    ),
    "T": _p(
        "#####",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
    ),
    "U": _p(
        "#...#",
        "#...#",
        "#...#",
        "#...#",
        "#...#",
        "#...#",
        "##..#",
        ".####",
    ),
    "V": _p(
        "#...#",
        "#...#",
        "#...#",
        "#...#",
        "#...#",
        "##.##",
        ".###.",
        "..#..",
    ),
    "W": _p(
        "#...#",
        "#...#",
        "#...#",
        "#.#.#",
        "#.#.#",
        "#.#.#",
        "#####",
        ".#.#.",
    ),
    "X": _p(
        "#...#",
        "##.##",
        ".###.",
        "..#..",
        "..#..",
        ".###.",
        "##.##",
        "#...#",
    ),
    "Y": _p(
        "#...#",
        "#...#",
        "##.##",
        ".###.",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
    ),
    "Z": _p(
        "#####",
        "....#",
        "...##",
        "..##.",
        ".##..",
        "##...",
        "#....",
        "#####",
    ),
    "0": _p(
        ".###.",
        "##.##",
        "#...#",
        "#.#.#",
        "#.#.#",
        "#...#",
        "##.##",
        ".###.",
    ),
    "1": _p(
        "..#..",
        ".##..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "#####",
    ),
    "2": _p(
        ".###.",
        "##.##",
        "....#",
        "..###",
        ".##..",
        "##...",
        "#....",
        "#####",
    ),
    "3": _p(
        ".###.",
        "##.##",
        "....#",
        "..###",
        "....#",
        "....#",
        "##.##",
        ".###.",
    ),
    "4": _p(
        "#...#",
        "#...#",
        "#...#",
        "#####",
        "....#",
        "....#",
        "....#",
        "....#",
    ),
    "5": _p(
        "#####",
        "#....",
        "#....",
        "#####",
        "....#",
        "....#",
        "##.##",
        ".###.",
    ),
    "6": _p(
        ".####",
        "##..#",
        "#....",
        "####.",
        "#..##",
        "#...#",
        "##.##",
        ".###.",
    ),
    "7": _p(
        "#####",
        "....#",
        "....#",
        "...##",
        "..##.",
        "..#..",
        "..#..",
        "..#..",
    ),
    "8": _p(
        ".###.",
        "##.##",
        "#...#",
        "##.##",
        "#####",
        "#...#",
        "##.##",
        ".###.",
    ),
    "9": _p(
        ".###.",
        "##.##",
        "#...#",
        "##.##",
        ".####",
        "....#",
        "#..##",
        "####.",
    ),
    " ": _p(
        "..",
        "..",
        "..",
        "..",
        "..",
        "..",
        "..",
        "..",
    ),
    ".": _p(
        "...",
        "...",
        "...",
        "...",
        "...",
        "...",
        "...",
        "#..",
    ),
    ",": _p(
        "...",
        "...",
        "...",
        "...",
        "...",
        "...",
        "...",
        "#..",
        "#..",
        "...",
    ),
    "!": _p(
        "#",
        "#",
        "#",
        "#",
        "#",
        "#",
        ".",
        "#",
    ),
    "?": _p(
        ".###.",
        "##.##",
        "#...#",
        "...##",
        "..##.",
        "..#.",
        ".....",
        "..#..",
    ),
    '"': _p(
        "#.#",
        "#.#",
        "...",
        "...",
        "...",
        "...",
        "...",
        "...",
    ),
    "'": _p(
        "#",
        "#",
        ".",
        ".",
        ".",
        ".",
        ".",
        ".",
    ),
    "-": _p(
        "....",
        "....",
        "....",
        "....",
        "####",
        "....",
        "....",
        "....",
    ),
    ":": _p(
        "..",
        "..",
        "#.",
        "..",
        "..",
        "#.",
        "..",
        "..",
    ),
    "\u265a": _p(
        "..........",
        "..........",
        "..........",
        ".#.#.#.#..",
        ".#######..",
        ".#.#.#.#..",
        "..#####...",
        "..........",
    ),
    "a": _p(
        "....",
        "....",
        "....",
        "####",
        "...#",
        "####",
        "#..#",
        "####",
    ),
    "b": _p(
        "#....",
        "#....",
        "#....",
        "####.",
        "##.##",
        "#...#",
        "##.##",
        "####.",
    ),
    "c": _p(
        "....",
        "....",
        "....",
        ".###",
        "##..",
        "#...",
        "##..",
        ".###",
    ),
    "d": _p(
        "....#",
        "....#",
        "....#",
        ".####",
        "##.##",
        "#...#",
        "##.##",
        ".####",
    ),
    "e": _p(
        "....",
        "....",
        "....",
        "####",
        "#..#",
        "####",
        "#...",
        "####",
    ),
    "f": _p(
        ".###",
        ".#.#",
        ".#..",
        "###.",
        ".#..",
        ".#..",
        ".#..",
        ".#..",
    ),
    "g": _p(
        "....",
        "....",
        "....",
        ".###",
        "##.#",
        "#..#",
        "##.#",
        ".###",
        "...#",
        ".###",
    ),
    "h": _p(
        "#...",
        "#...",
        "#...",
        "###.",
        "#.##",
        "#..#",
        "#..#",
        "#..#",
    ),
    "i": _p(
        "...",
        ".#.",
        "...",
        "##.",
        ".#.",
        ".#.",
        ".#.",
        "###",
    ),
    "j": _p(
        "...",
        "..#",
        "...",
        ".##",
        "..#",
        "..#",
        "..#",
        "..#",
        "..#",
        "###",
    ),
    "k": _p(
        "#...",
        "#...",
        "#..#",
        "#.##",
        "###.",
        "#.##",
        "#..#",
        "#..#",
    ),
    "l": _p(
        "##..",
        ".#..",
        ".#..",
        ".#..",
        ".#..",
        ".#..",
        ".#.#",
        ".###",
    ),
    "m": _p(
        ".....",
        ".....",
        ".....",
        "#####",
        "#.#.#",
        "#.#.#",
        "#...#",
        "#...#",
    ),
    "n": _p(
        ".....",
        ".....",
        ".....",
        ".###.",
        "##.##",
        "#...#",
        "#...#",
        "#...#",
    ),
    "o": _p(
        ".....",
        ".....",
        ".....",
        ".###.",
        "##.##",
        "#...#",
        "##.##",
        ".###.",
    ),
    "p": _p(
        "....",
        "....",
        "....",
        "###.",
        "#.##",
        "#..#",
        "#.##",
        "###.",
        "#...",
        "#...",
    ),
    "q": _p(
        "....",
        "....",
        "....",
        ".###",
        "##.#",
        "#..#",
        "##.#",
        ".###",
        "...#",
        "...#",
    ),
    "r": _p(
        "....",
        "....",
        "....",
        ".##.",
        "####",
        "#..#",
        "#...",
        "#...",
    ),
    "s": _p(
        ".....",
        ".....",
        "....",
        ".###.",
        "##...",
        ".###.",
        "...##",
        "####.",
    ),
    "t": _p(
        ".#..",
        ".#..",
        ".#..",
        "####",
        ".#..",
        ".#..",
        ".#.#",
        ".###",
    ),
    "u": _p(
        "....",
        "....",
        "....",
        "#..#",
        "#..#",
        "#..#",
        "##.#",
        ".###",
    ),
    "v": _p(
        ".....",
        ".....",
        ".....",
        "#...#",
        "#...#",
        "##.##",
        ".###.",
        "..#..",
    ),
    "w": _p(
        ".....",
        ".....",
        ".....",
        "#...#",
        "#.#.#",
        "#.#.#",
        "#####",
        ".#.#.",
    ),
    "x": _p(
        "....",
        "....",
        "....",
        "#..#",
        "####",
        ".##.",
        "####",
        "#..#",
    ),
    "y": _p(
        "....",
        "....",
        "....",
        "#..#",
        "#..#",
        "#..#",
        "##.#",
        ".###",
        "...#",
        ".###",
    ),
    "z": _p(
        "....",
        "....",
        "....",
        "####",
        "..##",
        ".##.",
        "##..",
        "####",
    ),
})

VALID_CHARS: FrozenSet[str] = frozenset(PIXEL_FONT)


def glyph_key(ch: str) -> Optional[str]:
    """Exact glyph first (lowercase has its own shapes), then uppercase."""
    if ch in PIXEL_FONT:
        return ch
    up = ch.upper()
    return up if up in PIXEL_FONT else None


def get_char_pattern(ch: str) -> Optional[CharPattern]:
    key = glyph_key(ch)
    return PIXEL_FONT[key] if key is not None else None


def get_char_width(ch: str) -> int:
    pattern = get_char_pattern(ch)
    if not pattern:
        return UNKNOWN_CHAR_WIDTH
    return len(pattern[0])


def get_char_height(ch: str) -> int:
    pattern = get_char_pattern(ch)
    return len(pattern) if pattern else CHAR_HEIGHT


@dataclass(frozen=True)
class TextDimensions:
    width: int
    height: int


def get_text_dimensions(text: str) -> TextDimensions:
    """
    Width is the sum of glyph widths plus one spacing column between
    neighbours. Height is 8, or taller when a descender glyph is present.
    """
    width = sum(get_char_width(ch) for ch in text)
    if len(text) > 1:
        width += (len(text) - 1) * CHAR_SPACING
    height = max([CHAR_HEIGHT] + [get_char_height(ch) for ch in text])
    return TextDimensions(width=width, height=height)


def is_valid_char(ch: str) -> bool:
    return ch in VALID_CHARS or ch.upper() in VALID_CHARS


def filter_to_valid_chars(text: str) -> str:
    return "".join(ch for ch in text if is_valid_char(ch))


# ---------- boundary analysis ----------

TOP, RIGHT, BOTTOM, LEFT = "top", "right", "bottom", "left"

# (dy, dx, side) in N, E, S, W order
_SIDES = ((-1, 0, TOP), (0, 1, RIGHT), (1, 0, BOTTOM), (0, -1, LEFT))
_FLIP = {TOP: BOTTOM, BOTTOM: TOP, LEFT: RIGHT, RIGHT: LEFT}


@dataclass(frozen=True)
class EntryPoint:
    x: int
    y: int
    side: str


@dataclass(frozen=True)
class CharacterBoundaries:
    # One tuple per disconnected filled component
    external: Tuple[Tuple[EntryPoint, ...], ...]
    # One tuple per enclosed empty region
    internal: Tuple[Tuple[EntryPoint, ...], ...]


EMPTY_BOUNDARIES = CharacterBoundaries(external=(), internal=())


def _flood(start: Tuple[int, int], h: int, w: int, accept) -> List[Tuple[int, int]]:
    """BFS over 4-neighbours inside an h x w box; accept(y, x) gates entry."""
    seen = {start}
    out = []
    q = deque([start])
    while q:
        cy, cx = q.popleft()
        out.append((cy, cx))
        for dy, dx, _ in _SIDES:
            ny, nx = cy + dy, cx + dx
            if 0 <= ny < h and 0 <= nx < w and (ny, nx) not in seen and accept(ny, nx):
                seen.add((ny, nx))
                q.append((ny, nx))
    return out


def filled_components(pattern: CharPattern) -> List[List[Tuple[int, int]]]:
    """4-connected groups of filled pixels as (y, x) lists, scan order."""
    h = len(pattern)
    w = len(pattern[0]) if h else 0
    assigned = set()
    comps = []
    for y in range(h):
        for x in range(w):
            if pattern[y][x] and (y, x) not in assigned:
                comp = _flood((y, x), h, w, lambda yy, xx: pattern[yy][xx])
                assigned.update(comp)
                comps.append(comp)
    return comps


@lru_cache(maxsize=None)
def get_character_boundaries(ch: str) -> CharacterBoundaries:
    """
    Classify a glyph's filled pixels by what they border.

    The pattern is padded with a one-cell empty ring and flood-filled from the
    corner; empty cells reached that way are "outside". Each 4-connected
    filled component lists the pixels (and sides) that touch outside space,
    or, for a component enclosed by another, the sides that touch its hole.
    Every remaining empty group is an enclosed hole, listing the filled pixels
    around it with the side of the filled pixel that faces the hole.

    Only exact glyph keys are analysed; unknown characters yield no
    boundaries. Results are cached for the life of the process.
    """
    pattern = PIXEL_FONT.get(ch)
    if not pattern or not any(any(row) for row in pattern):
        return EMPTY_BOUNDARIES

    h = len(pattern)
    w = len(pattern[0])
    ph, pw = h + 2, w + 2

    def padded(y: int, x: int) -> bool:
        return 1 <= y <= h and 1 <= x <= w and pattern[y - 1][x - 1]

    outside = set(_flood((0, 0), ph, pw, lambda y, x: not padded(y, x)))

    def faces(y: int, x: int, side_ok) -> List[EntryPoint]:
        out = []
        for dy, dx, side in _SIDES:
            ny, nx = y + 1 + dy, x + 1 + dx
            if not padded(ny, nx) and side_ok(ny, nx):
                out.append(EntryPoint(x, y, side))
        return out

    external = []
    for comp in filled_components(pattern):
        edge = [ep for y, x in comp for ep in faces(y, x, lambda ny, nx: (ny, nx) in outside)]
        if not edge:
            # Walled in by another stroke (the bar inside "0"): its doors open
            # into the surrounding hole instead.
            edge = [ep for y, x in comp for ep in faces(y, x, lambda ny, nx: True)]
        external.append(tuple(edge))

    internal = []
    claimed = set()
    for y in range(1, h + 1):
        for x in range(1, w + 1):
            if padded(y, x) or (y, x) in outside or (y, x) in claimed:
                continue
            hole = _flood(
                (y, x), ph, pw,
                lambda yy, xx: (1 <= yy <= h and 1 <= xx <= w
                                and not padded(yy, xx) and (yy, xx) not in outside),
            )
            claimed.update(hole)
            edge = []
            added = set()
            for cy, cx in hole:
                for dy, dx, side in _SIDES:
                    ny, nx = cy + dy, cx + dx
                    if padded(ny, nx):
                        ep = EntryPoint(nx - 1, ny - 1, _FLIP[side])
                        if ep not in added:
                            added.add(ep)
                            edge.append(ep)
            if edge:
                internal.append(tuple(edge))

    return CharacterBoundaries(external=tuple(external), internal=tuple(internal))


def calculate_entry_count(boundary_size: int, is_internal: bool) -> int:
    """How many walls to open along one boundary list."""
    if boundary_size <= 0:
        return 0
    if is_internal:
        return min(2, max(1, boundary_size // 6))
    return min(6, max(3, boundary_size // 4))
