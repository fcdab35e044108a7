from __future__ import annotations

from .config import EngineConfig
from .core import RollEngine
from .dice import Dice
from .errors import ConfigError, MalformedExpressionError, MissingCharacterContextError, RollEngineError
from .rng import FixedSequenceSource, RandomnessSource, SeededSource, SynchronizedSource, SystemEntropySource

__all__ = [
    "RollEngine",
    "EngineConfig",
    "Dice",
    "RandomnessSource",
    "SystemEntropySource",
    "SeededSource",
    "FixedSequenceSource",
    "SynchronizedSource",
    "RollEngineError",
    "ConfigError",
    "MalformedExpressionError",
    "MissingCharacterContextError",
]
