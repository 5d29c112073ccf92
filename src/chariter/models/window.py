from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator
from typing import List

from ..iter import Iter
from ..scalar import MAX_SCALAR, count_between, index_of, scalar_at, to_codepoint

class CharWindow(BaseModel):
    """Inclusive [start, end] range of scalar values, stored as integer codepoints."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0, le=MAX_SCALAR)
    end: int = Field(..., ge=0, le=MAX_SCALAR)

    @field_validator("start", "end", mode="before")
    @classmethod
    def check_scalar(cls, v):
        # accepts a one-character str as well; ScalarValueError is a ValueError
        return to_codepoint(v)

    @model_validator(mode="after")
    def check_order(self) -> "CharWindow":
        if self.start > self.end:
            raise ValueError(f"start U+{self.start:04X} > end U+{self.end:04X}")
        return self

    @classmethod
    def of(cls, start: str | int, end: str | int) -> "CharWindow":
        return cls(start=start, end=end)

    @classmethod
    def full(cls) -> "CharWindow":
        return cls(start=0, end=MAX_SCALAR)

    @computed_field
    @property
    def start_hex(self) -> str: return f"U+{self.start:04X}"

    @computed_field
    @property
    def end_hex(self) -> str: return f"U+{self.end:04X}"

    @property
    def count(self) -> int: return count_between(self.start, self.end)

    def iter(self) -> Iter: return Iter(self.start, self.end)

    def contains(self, c: str | int) -> bool:
        cp = to_codepoint(c)
        return self.start <= cp <= self.end

    def split(self, parts: int) -> List["CharWindow"]:
        """
        Disjoint ascending windows covering this one, sizes differing by at most one.
        Never produces more windows than there are values.
        """
        if parts < 1:
            raise ValueError(f"parts must be >= 1, got {parts}")
        total = self.count
        parts = min(parts, total)
        base, extra = divmod(total, parts)
        out = []
        i = index_of(self.start)
        for k in range(parts):
            size = base + (1 if k < extra else 0)
            out.append(CharWindow(start=scalar_at(i), end=scalar_at(i + size - 1)))
            i += size
        return out
