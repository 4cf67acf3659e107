from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from .edit_distance import Table


_EMPTY = "ε"


def write_json(result: BaseModel, path: str | Path) -> None:
    Path(path).write_text(result.model_dump_json(indent=2), encoding="utf-8")


def format_table(s0: Sequence[str], s1: Sequence[str], table: Table) -> str:
    """
    Render a distance table as a fixed-width grid (source down the side, target across the top).
    """
    width = max(len(_EMPTY), *(len(str(v)) for row in table for v in row))
    width = max(width, *(len(ch) for ch in [*s0, *s1]), 1)

    def cell(x: object) -> str:
        return str(x).rjust(width)

    lines = [" ".join([cell(""), cell(_EMPTY), *(cell(ch) for ch in s1)])]
    for r, row in enumerate(table):
        label = _EMPTY if r == 0 else s0[r - 1]
        lines.append(" ".join([cell(label), *(cell(v) for v in row)]))
    return "\n".join(lines)
