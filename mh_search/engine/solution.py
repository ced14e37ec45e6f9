"""Scored encodings shared by every search controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Solution:
    """An encoding together with the score it evaluated to.

    Ordering looks at ``score`` only, lower is better. The controllers build a
    ``Solution`` right after evaluating its encoding and never touch the score
    afterwards.
    """

    encoding: Any
    score: float

    def __lt__(self, other: "Solution") -> bool:
        return self.score < other.score

    def __repr__(self) -> str:
        return f"Solution(encoding={self.encoding!r}, score={self.score:.6g})"
