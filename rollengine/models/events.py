from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, Mapping

RollKind = Literal[
    "roll",
    "check",
    "attack",
]


@dataclass(frozen=True)
class RollLogEntry:
    """
    Immutable record of one engine call, kept for the character's roll log.
    expression is what was asked for; breakdown is what came out.
    """
    kind: RollKind
    expression: str
    breakdown: str
    context: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    data: Mapping[str, object] = field(default_factory=dict)
