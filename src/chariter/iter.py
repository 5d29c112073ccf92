from __future__ import annotations

from .errors import EmptyRangeError
from .scalar import count_between, step, to_codepoint

class Iter:
    """
    Inclusive iterator over the scalar values start..end, skipping 0xD800..0xDFFF.

    Double-ended: __next__ consumes from the front, next_back() from the back;
    both ends converge and every value is produced exactly once. len() and
    size_hint() are exact at all times.
    """
    __slots__ = ("_start", "_end", "_finished")

    def __init__(self, start: str | int, end: str | int):
        s, e = to_codepoint(start), to_codepoint(end)
        if s > e: raise EmptyRangeError(s, e)
        self._start = s
        self._end = e
        self._finished = False

    @property
    def is_finished(self) -> bool: return self._finished
    @property
    def start(self) -> str | None: return None if self._finished else chr(self._start)
    @property
    def end(self) -> str | None: return None if self._finished else chr(self._end)

    def __iter__(self) -> Iter: return self

    def __next__(self) -> str:
        if self._finished:
            raise StopIteration
        ret = self._start
        if self._start == self._end:
            self._finished = True
        else:
            self._start = step(self._start, forward=True)
        return chr(ret)

    def next(self) -> str | None:
        """Forward consumption; None once exhausted."""
        return next(self, None)

    def next_back(self) -> str | None:
        if self._finished:
            return None
        ret = self._end
        if self._start == self._end:
            self._finished = True
        else:
            self._end = step(self._end, forward=False)
        return chr(ret)

    def size_hint(self) -> tuple[int, int]:
        n = 0 if self._finished else count_between(self._start, self._end)
        return n, n

    def __len__(self) -> int: return self.size_hint()[0]
    def __length_hint__(self) -> int: return len(self)

    def __reversed__(self) -> Rev: return Rev(self)
    def rev(self) -> Rev: return Rev(self)

    def copy(self) -> Iter:
        out = Iter.__new__(Iter)
        out._start, out._end, out._finished = self._start, self._end, self._finished
        return out

    __copy__ = copy

    def __repr__(self) -> str:
        if self._finished:
            return "Iter(<finished>)"
        return f"Iter(U+{self._start:04X}, U+{self._end:04X})"


class Rev:
    """Reversed view over an Iter; shares its state."""
    __slots__ = ("_it",)

    def __init__(self, it: Iter):
        self._it = it

    def __iter__(self) -> Rev: return self

    def __next__(self) -> str:
        c = self._it.next_back()
        if c is None:
            raise StopIteration
        return c

    def next(self) -> str | None: return self._it.next_back()
    def next_back(self) -> str | None: return self._it.next()

    def size_hint(self) -> tuple[int, int]: return self._it.size_hint()
    def __len__(self) -> int: return len(self._it)
    def __length_hint__(self) -> int: return len(self._it)

    def __reversed__(self) -> Iter: return self._it
    def rev(self) -> Iter: return self._it

    def __repr__(self) -> str: return f"Rev({self._it!r})"


def new(start: str | int, end: str | int) -> Iter:
    """
    Iterator over the characters (Unicode scalar values) from start to end, inclusive.
    Raises EmptyRangeError if start > end.
    """
    return Iter(start, end)
