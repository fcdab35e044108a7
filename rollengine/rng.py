from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, runtime_checkable

_U64_MASK = (1 << 64) - 1


@runtime_checkable
class RandomnessSource(Protocol):
    """
    Anything that hands out unsigned 64-bit integers, one per call.

    Sources are the only stateful piece of the engine. Give each logical roll
    sequence its own instance, or wrap a shared one in SynchronizedSource.
    """

    def next(self) -> int: ...


class SystemEntropySource:
    """Production source backed by the OS entropy pool."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def next(self) -> int:
        return self._rng.getrandbits(64)


@dataclass
class SeededSource:
    """
    Reproducible pseudo-random source, for "same seed, same session" runs.
    Not a test fixture: use FixedSequenceSource when the exact faces matter.
    """
    seed: int
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def next(self) -> int:
        return self._rng.getrandbits(64)


class FixedSequenceSource:
    """
    Deterministic, replayable source for tests.

    Returns the given values in order and cycles back to the start when
    exhausted. With the engine's die mapping, values 1..N read as die faces,
    so FixedSequenceSource([3, 4]) rolls a 3 and then a 4 on a d6.
    """

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("FixedSequenceSource needs at least one value")
        for v in values:
            if v < 0 or v > _U64_MASK:
                raise ValueError(f"values must be unsigned 64-bit integers, got {v}")
        self._values: List[int] = list(values)
        self._index = 0

    @property
    def consumed(self) -> int:
        """How many values have been handed out since creation/reset."""
        return self._index

    def next(self) -> int:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value

    def reset(self) -> None:
        self._index = 0


class SynchronizedSource:
    """
    Wraps a source behind a lock so several threads can share it.
    Results then depend on lock acquisition order; that is the caller's
    problem, not the engine's.
    """

    def __init__(self, inner: RandomnessSource) -> None:
        self._inner = inner
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return self._inner.next()


def source_from_seed(seed: Optional[int] = None) -> RandomnessSource:
    if seed is None:
        return SystemEntropySource()
    return SeededSource(seed)


def face_for(value: int, sides: int) -> int:
    """
    Map one source value onto a die face in [1, sides].
    Value 0 maps to the top face, so any integer input stays in range.
    """
    if sides <= 0:
        raise ValueError("sides must be > 0")
    return (value - 1) % sides + 1
