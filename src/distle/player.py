from __future__ import annotations

import logging
import math
import random
from collections import Counter
from collections.abc import Iterable

from .config import PlayerOptions
from .edit_distance import Transform, from_codes, transform_sequence
from .feedback import filter_candidates

logger = logging.getLogger(__name__)


class DistlePlayer:
    """
    Plays one game of Distle at a time; `options` holds the sampling caps and RNG seed.
    """

    def __init__(self, options: PlayerOptions | None = None) -> None:
        self._options = options or PlayerOptions()
        self._candidates: list[str] = []
        self._max_guesses = 0
        self._guesses_made = 0
        self._started = False
        self._rng = random.Random(self._options.seed)

    def start_new_game(self, dictionary: Iterable[str], max_guesses: int) -> None:
        words = sorted(set(dictionary))
        if not words:
            raise ValueError("dictionary must contain at least one word")
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be >= 1, got {max_guesses}")
        self._candidates = words
        self._max_guesses = max_guesses
        self._guesses_made = 0
        self._started = True
        self._rng = random.Random(self._options.seed)
        logger.debug("new game: %d candidates, %d guesses", len(words), max_guesses)

    def make_guess(self) -> str:
        """
        Raises RuntimeError before start_new_game(), once guesses run out, or with no candidates left.
        """
        if not self._started:
            raise RuntimeError("Call start_new_game() before guessing")
        if self.remaining_guesses <= 0:
            raise RuntimeError("No guesses remaining")
        if not self._candidates:
            raise RuntimeError("No candidates are consistent with the feedback so far")

        guess = self._best_guess()
        self._guesses_made += 1
        return guess

    def get_feedback(
        self,
        guess: str,
        edit_distance: int,
        transforms: Iterable[Transform | str],
    ) -> None:
        """
        Narrow the candidates after an incorrect guess (transforms may be R/T/I/D codes).
        """
        observed = from_codes(transforms)
        before = len(self._candidates)
        self._candidates = [
            w for w in filter_candidates(self._candidates, guess, observed) if w != guess
        ]
        logger.debug(
            "feedback for %r (distance %d, %s): %d -> %d candidates",
            guess,
            edit_distance,
            "".join(t.value for t in observed),
            before,
            len(self._candidates),
        )

    @property
    def candidates(self) -> list[str]:
        return list(self._candidates)

    @property
    def guesses_made(self) -> int:
        return self._guesses_made

    @property
    def remaining_guesses(self) -> int:
        return self._max_guesses - self._guesses_made

    def _sample(self, words: list[str], cap: int) -> list[str]:
        if len(words) <= cap:
            return words
        return sorted(self._rng.sample(words, cap))

    def _best_guess(self) -> str:
        """
        Max-entropy guess over capped, seeded samples (ties keep the earlier word).
        """
        candidates = self._candidates
        if len(candidates) <= 2:
            return candidates[0]

        guess_pool = self._sample(candidates, self._options.max_guess_pool)
        eval_candidates = self._sample(candidates, self._options.max_eval_candidates)

        best_guess = guess_pool[0]
        best_entropy = -1.0
        for g in guess_pool:
            h = _partition_entropy(g, eval_candidates)
            if h > best_entropy:
                best_entropy = h
                best_guess = g
        logger.debug("guess %r (entropy %.3f over %d)", best_guess, best_entropy, len(eval_candidates))
        return best_guess


def _partition_entropy(guess: str, candidates: list[str]) -> float:
    buckets: Counter[tuple[Transform, ...]] = Counter(
        tuple(transform_sequence(guess, w)) for w in candidates
    )
    n = len(candidates)
    return -sum((k / n) * math.log2(k / n) for k in buckets.values())
