from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Optional


Table = list[list[int]]


class Transform(str, Enum):
    REPLACEMENT = "R"
    TRANSPOSITION = "T"
    INSERTION = "I"
    DELETION = "D"

    @classmethod
    def from_code(cls, code: str) -> "Transform":
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown transform code: {code!r}") from None


# Tie-break order for reconstruction: earlier entries win equal table values.
TRANSFORM_PRIORITY = (
    Transform.REPLACEMENT,
    Transform.TRANSPOSITION,
    Transform.INSERTION,
    Transform.DELETION,
)


def _swapped(s0: Sequence[Any], s1: Sequence[Any], r: int, c: int) -> bool:
    return s0[r - 1] == s1[c - 2] and s0[r - 2] == s1[c - 1]


def build_table(s0: Sequence[Any], s1: Sequence[Any]) -> Table:
    """
    Edit-distance table over all prefix pairs (deletion, insertion, replacement, adjacent transposition).

    `table[r][c]` is the cost of turning the first r items of s0 into the first c items of s1.
    """
    n = len(s0)
    m = len(s1)

    table = [[0] * (m + 1) for _ in range(n + 1)]
    for r in range(n + 1):
        table[r][0] = r
    for c in range(m + 1):
        table[0][c] = c

    for r in range(1, n + 1):
        for c in range(1, m + 1):
            dele = table[r - 1][c] + 1
            ins = table[r][c - 1] + 1
            rep = table[r - 1][c - 1] + (0 if s0[r - 1] == s1[c - 1] else 1)
            best = min(dele, ins, rep)
            if r >= 2 and c >= 2 and _swapped(s0, s1, r, c):
                best = min(best, table[r - 2][c - 2] + 1)
            table[r][c] = best

    return table


def table_distance(table: Table) -> int:
    return table[-1][-1]


def distance(s0: Sequence[Any], s1: Sequence[Any]) -> int:
    if s0 == s1:
        return 0
    return table_distance(build_table(s0, s1))


def transform_sequence(
    s0: Sequence[Any], s1: Sequence[Any], table: Optional[Table] = None
) -> list[Transform]:
    """
    One minimal top-down transform sequence turning s0 into s1.

    Candidates are scanned in TRANSFORM_PRIORITY order and the first strict minimum wins.
    Replacements of an item by itself are free matches and are not emitted. The result is
    in walk order (largest subproblem first), not reversed.

    `table` must have been built for this exact (s0, s1) pair.
    """
    if table is None:
        table = build_table(s0, s1)

    transforms: list[Transform] = []
    row, col = len(s0), len(s1)
    while table[row][col] != 0:
        best: Optional[int] = None
        step = Transform.REPLACEMENT
        next_row, next_col = row, col

        if row >= 1 and col >= 1:
            best = table[row - 1][col - 1]
            step = Transform.REPLACEMENT
            next_row, next_col = row - 1, col - 1
        if row >= 2 and col >= 2 and _swapped(s0, s1, row, col):
            if best is None or table[row - 2][col - 2] < best:
                best = table[row - 2][col - 2]
                step = Transform.TRANSPOSITION
                next_row, next_col = row - 2, col - 2
        if col >= 1 and (best is None or table[row][col - 1] < best):
            best = table[row][col - 1]
            step = Transform.INSERTION
            next_row, next_col = row, col - 1
        if row >= 1 and (best is None or table[row - 1][col] < best):
            best = table[row - 1][col]
            step = Transform.DELETION
            next_row, next_col = row - 1, col

        free_match = step is Transform.REPLACEMENT and s0[row - 1] == s1[col - 1]
        if not free_match:
            transforms.append(step)
        row, col = next_row, next_col

    return transforms


def to_codes(transforms: Iterable[Transform]) -> list[str]:
    return [t.value for t in transforms]


def from_codes(codes: Iterable[str | Transform]) -> list[Transform]:
    return [c if isinstance(c, Transform) else Transform.from_code(c) for c in codes]


def transform_counts(transforms: Iterable[Transform]) -> dict[Transform, int]:
    counts = {t: 0 for t in TRANSFORM_PRIORITY}
    for t in transforms:
        counts[t] += 1
    return counts
