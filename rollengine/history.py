from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, List, Mapping, Optional

from .models import RollKind, RollLogEntry


@dataclass
class RollHistory:
    """
    Bounded roll log container.

    Note: this is intentionally "dumb". It stores entries and trims the
    oldest once limit is reached; limit 0 keeps nothing.
    """
    limit: int = 100
    _entries: Deque[RollLogEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError("limit must be >= 0")
        self._entries = deque(maxlen=self.limit)

    def record(
        self,
        kind: RollKind,
        expression: str,
        breakdown: str,
        context: str = "",
        data: Optional[Mapping[str, object]] = None,
    ) -> Optional[RollLogEntry]:
        if self.limit == 0:
            return None
        entry = RollLogEntry(kind=kind, expression=expression, breakdown=breakdown, context=context, data=data or {})
        self._entries.append(entry)
        return entry

    def entries(self) -> List[RollLogEntry]:
        """Oldest first."""
        return list(self._entries)

    def latest(self) -> Optional[RollLogEntry]:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RollLogEntry]:
        return iter(self._entries)
