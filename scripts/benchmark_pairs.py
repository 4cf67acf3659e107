from __future__ import annotations

import argparse
import random
import string
from time import perf_counter

from distle.edit_distance import build_table, transform_sequence


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--pairs", type=int, default=1000)
    ap.add_argument("--length", type=int, default=8)
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()

    if args.pairs < 1:
        print("Nothing to do.")
        return 1

    rng = random.Random(args.seed)
    letters = string.ascii_lowercase[:6]
    pairs = [
        (
            "".join(rng.choices(letters, k=args.length)),
            "".join(rng.choices(letters, k=args.length)),
        )
        for _ in range(args.pairs)
    ]

    t0 = perf_counter()
    total = 0
    for s0, s1 in pairs:
        total += len(transform_sequence(s0, s1, build_table(s0, s1)))
    dt = perf_counter() - t0
    print(f"Processed {len(pairs)} pairs (mean distance {total / len(pairs):.2f}) in {dt:.2f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
