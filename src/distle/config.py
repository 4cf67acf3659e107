from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path

import yaml


LOG_LEVEL_ENV = "DISTLE_LOG_LEVEL"


@dataclass(frozen=True)
class PlayerOptions:
    max_guess_pool: int = 200
    max_eval_candidates: int = 500
    seed: int = 0


def load_options(path: str | None) -> PlayerOptions:
    """
    Read PlayerOptions from a YAML or JSON mapping; missing keys keep their defaults.
    """
    if not path:
        return PlayerOptions()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    if p.suffix.lower() in {".yml", ".yaml"}:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    elif p.suffix.lower() == ".json":
        data = json.loads(p.read_text(encoding="utf-8"))
    else:
        raise ValueError("Config must be .yml/.yaml or .json")
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping of option -> value")

    known = {f.name for f in fields(PlayerOptions)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(map(str, unknown))}")

    for k, v in data.items():
        # bool is an int subclass; YAML `true` must not pass as 1.
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"{k} must be an integer")

    opts = PlayerOptions(**data)
    if opts.max_guess_pool < 1 or opts.max_eval_candidates < 1:
        raise ValueError("max_guess_pool and max_eval_candidates must be positive")
    return opts
