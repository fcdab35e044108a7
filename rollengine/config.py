from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class EngineConfig:
    """
    Centralized engine settings. These are defaults; callers can override,
    or build one from the environment with from_env().

    seed:
      - None means OS entropy; an int gives a reproducible SeededSource
    strict_terms:
      - raise MalformedExpressionError instead of silently ignoring bad terms
    history_limit:
      - how many roll log entries the engine keeps (0 disables the log)
    """
    seed: Optional[int] = None
    strict_terms: bool = False
    history_limit: int = 100
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.history_limit < 0:
            raise ConfigError("history_limit must be >= 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ

        seed: Optional[int] = None
        raw_seed = env.get("ROLLENGINE_SEED", "").strip()
        if raw_seed:
            seed = _parse_int("ROLLENGINE_SEED", raw_seed)

        history_limit = cls.history_limit
        raw_limit = env.get("ROLLENGINE_HISTORY_LIMIT", "").strip()
        if raw_limit:
            history_limit = _parse_int("ROLLENGINE_HISTORY_LIMIT", raw_limit)

        return cls(
            seed=seed,
            strict_terms=_parse_bool("ROLLENGINE_STRICT", env.get("ROLLENGINE_STRICT", "")),
            history_limit=history_limit,
            log_level=env.get("ROLLENGINE_LOG_LEVEL", cls.log_level).strip() or cls.log_level,
        )


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")
