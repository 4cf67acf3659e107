"""Distle feedback and the candidate filtering contract."""

from __future__ import annotations

from collections.abc import Iterable

from .edit_distance import Transform, build_table, table_distance, transform_sequence
from .schemas import Feedback


def feedback(guess: str, secret: str) -> Feedback:
    """Distance and top-down transforms from *guess* to *secret*, sharing one table."""
    table = build_table(guess, secret)
    return Feedback(
        guess=guess,
        edit_distance=table_distance(table),
        transforms=transform_sequence(guess, secret, table),
    )


def is_consistent(word: str, observed: Feedback) -> bool:
    # Length gap is a lower bound on the distance.
    if abs(len(observed.guess) - len(word)) > observed.edit_distance:
        return False
    return transform_sequence(observed.guess, word) == observed.transforms


def filter_candidates(
    candidates: Iterable[str],
    guess: str,
    transforms: list[Transform],
) -> list[str]:
    """Keep only candidates whose transforms from *guess* equal *transforms* (order kept)."""
    observed = Feedback(guess=guess, edit_distance=len(transforms), transforms=transforms)
    return [w for w in candidates if is_consistent(w, observed)]
