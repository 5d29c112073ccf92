from __future__ import annotations

from .errors import ScalarValueError

MAX_SCALAR = 0x10FFFF
SUR_START = 0xD800
SUR_END = 0xDFFF
BEFORE_SUR = SUR_START - 1
AFTER_SUR = SUR_END + 1
SUR_LEN = SUR_END - SUR_START + 1
SCALAR_COUNT = MAX_SCALAR + 1 - SUR_LEN

def is_scalar(v: int) -> bool:
    return 0 <= v <= MAX_SCALAR and not (SUR_START <= v <= SUR_END)

def to_codepoint(c: str | int) -> int:
    """Coerce a one-character str or an int codepoint to a validated scalar value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ScalarValueError(f"expected a single character, got {c!r}")
        v = ord(c)
    elif isinstance(c, int) and not isinstance(c, bool):
        v = c
    else:
        raise ScalarValueError(f"expected str or int, got {type(c).__name__}")
    if not is_scalar(v):
        raise ScalarValueError(f"0x{v:X} is not a Unicode scalar value")
    return v

def step(cp: int, forward: bool) -> int:
    """
    One step along the scalar values, jumping the surrogate block in a single move.
    Never called on 0 backward or MAX_SCALAR forward: the cursor stops at start == end.
    """
    if forward:
        new = AFTER_SUR if cp == BEFORE_SUR else cp + 1
    else:
        new = BEFORE_SUR if cp == AFTER_SUR else cp - 1
    assert is_scalar(new), f"step from 0x{cp:X} left the scalar domain"
    return new

def count_between(start: int, end: int) -> int:
    """Scalar values in [start, end]; both bounds must be scalar values."""
    naive = end - start + 1
    # bounds are never inside the block, so spanning it means straddling both neighbours
    if start <= BEFORE_SUR and end >= AFTER_SUR:
        return naive - SUR_LEN
    return naive

# gap-free positions, used for even splits
def index_of(cp: int) -> int:
    return cp - SUR_LEN if cp >= AFTER_SUR else cp

def scalar_at(index: int) -> int:
    if not (0 <= index < SCALAR_COUNT): raise IndexError(f"scalar index {index} out of range")
    return index + SUR_LEN if index >= SUR_START else index
