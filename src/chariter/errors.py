from __future__ import annotations


class CharIterError(ValueError):
    pass


class ScalarValueError(CharIterError):
    """Input is not a Unicode scalar value (out of range, surrogate, or not a single char)."""


class EmptyRangeError(CharIterError):
    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(f"start U+{start:04X} > end U+{end:04X}")
