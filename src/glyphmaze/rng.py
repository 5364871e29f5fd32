from dataclasses import dataclass
from typing import List, Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
GOLDEN = 0x6D2B79F5  # mulberry32 increment
TWO_32 = 4294967296.0


def to_int32(v: int) -> int:
    """Interpret v as signed 32-bit."""
    v &= MASK32
    return v - 0x100000000 if (v & 0x80000000) else v


def imul(a: int, b: int) -> int:
    # Low 32 bits of the product, unsigned.
    return ((a & MASK32) * (b & MASK32)) & MASK32


def _utf16_units(text: str) -> List[int]:
    units = []
    for ch in text:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            units.append(0xD800 + (cp >> 10))
            units.append(0xDC00 + (cp & 0x3FF))
        else:
            units.append(cp)
    return units


def hash_seed(seed: str) -> int:
    """
    Running 31-multiplier string hash, truncated to signed 32-bit after every
    step, then made non-negative. Characters are hashed by UTF-16 code unit.
    """
    h = 0
    for unit in _utf16_units(seed):
        h = to_int32(((h << 5) - h) + unit)
    return abs(h)


def mulberry32_step(state: int):
    """Advance one step. Returns (new_state, 32-bit output)."""
    state = (state + GOLDEN) & MASK32
    t = imul(state ^ (state >> 15), 1 | state)
    t = ((t + imul(t ^ (t >> 7), 61 | t)) & MASK32) ^ t
    return state, (t ^ (t >> 14)) & MASK32


@dataclass
class SeededRng:
    state: int

    @classmethod
    def from_seed(cls, seed: str) -> "SeededRng":
        return cls(state=hash_seed(seed) & MASK32)

    def next_u32(self) -> int:
        self.state, out = mulberry32_step(self.state)
        return out

    def next(self) -> float:
        """Float in [0, 1)."""
        return self.next_u32() / TWO_32

    def next_int(self, lo: int, hi: int) -> int:
        # Inclusive on both ends.
        return int(self.next() * (hi - lo + 1)) + lo

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Fisher-Yates from the tail; returns a new list."""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = self.next_int(0, i)
            out[i], out[j] = out[j], out[i]
        return out

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("pick() from an empty sequence")
        return items[self.next_int(0, len(items) - 1)]
