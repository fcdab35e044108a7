from __future__ import annotations

from typing import Sequence, Tuple

from .models import MalformedTerm


class RollEngineError(Exception):
    """Base class for errors raised by rollengine."""


class ConfigError(RollEngineError, ValueError):
    pass


class MalformedExpressionError(RollEngineError, ValueError):
    """
    Raised only in strict mode, when a dice expression contained terms that
    were ignored or fell back to defaults.
    """

    def __init__(self, expression: str, warnings: Sequence[MalformedTerm]) -> None:
        self.expression = expression
        self.warnings: Tuple[MalformedTerm, ...] = tuple(warnings)
        terms = ", ".join(repr(w.term) for w in self.warnings)
        super().__init__(f"Malformed dice expression {expression!r}: {terms}")


class MissingCharacterContextError(RollEngineError, TypeError):
    """A check was requested without a character to check against."""
