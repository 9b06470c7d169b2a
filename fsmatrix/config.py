# fsmatrix/config.py

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from rich.markup import escape

from .util.console import warn

DEFAULT_MAX_COLUMNS = 64
DEFAULT_FRAME_WAIT = 100  # milliseconds
DEFAULT_SPAWN_CHANCE = 0.5
DEFAULT_EXIT_KEY = "escape"

ENV_MAX_COLUMNS = "FSMATRIX_MAX_COLUMNS"
ENV_FRAME_WAIT = "FSMATRIX_FRAME_WAIT"
ENV_SEED = "FSMATRIX_SEED"


@dataclass
class EngineConfig:
    max_columns: int = DEFAULT_MAX_COLUMNS
    frame_wait: int = DEFAULT_FRAME_WAIT
    spawn_chance: float = DEFAULT_SPAWN_CHANCE
    exit_key: str = DEFAULT_EXIT_KEY
    seed: Optional[int] = None

    @property
    def frame_wait_seconds(self) -> float:
        return self.frame_wait / 1000.0


def _env_int(env: Mapping[str, str], name: str, minimum: int) -> Optional[int]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        warn(f"Ignoring {name}={escape(repr(raw))}: not an integer.")
        return None
    if value < minimum:
        warn(f"Ignoring {name}={escape(repr(raw))}: must be >= {minimum}.")
        return None
    return value


def load_config(env: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """
    Build the engine config from defaults plus environment overrides:
      FSMATRIX_MAX_COLUMNS   columns alive at once (default 64)
      FSMATRIX_FRAME_WAIT    milliseconds between frames (default 100)
      FSMATRIX_SEED          int seed for a reproducible run (default: unset)
    Invalid values are reported and the default is kept.
    """
    env = os.environ if env is None else env
    cfg = EngineConfig()

    max_columns = _env_int(env, ENV_MAX_COLUMNS, minimum=0)
    if max_columns is not None:
        cfg.max_columns = max_columns

    frame_wait = _env_int(env, ENV_FRAME_WAIT, minimum=0)
    if frame_wait is not None:
        cfg.frame_wait = frame_wait

    seed = _env_int(env, ENV_SEED, minimum=0)
    if seed is not None:
        cfg.seed = seed

    return cfg
