from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple, TypeAlias

from .core import Ability, CheckTarget

AdvantageState: TypeAlias = Literal["normal", "advantage", "disadvantage"]


@dataclass(frozen=True)
class MalformedTerm:
    """
    A term of a dice expression that was not understood (or only partly).
    Soft diagnostic: it never changes the computed total.
    """
    term: str
    reason: str


@dataclass(frozen=True)
class RollResult:
    """
    Outcome of rolling a dice expression.
    - rolls: individual die faces, in the order they were drawn
    - total: sum of every contributing term
    - formula: the original expression, unmodified
    - critical: whether dice counts were doubled
    - warnings: terms that were ignored or fell back to defaults
    """

    rolls: Tuple[int, ...]
    total: int
    formula: str = ""
    critical: bool = False
    warnings: Tuple[MalformedTerm, ...] = ()


@dataclass(frozen=True)
class CheckRollResult:
    """
    Outcome of a single-d20 ability or skill check.

    rolls holds every d20 drawn (two under advantage/disadvantage);
    d20 is the one that counted.
    """
    target: CheckTarget
    advantage: AdvantageState
    rolls: Tuple[int, ...]
    d20: int
    ability: Ability
    ability_modifier: int
    proficiency_bonus: int
    is_proficient: bool
    is_expertise: bool
    total: int

    @property
    def proficiency_contribution(self) -> int:
        if self.is_expertise:
            return self.proficiency_bonus * 2
        if self.is_proficient:
            return self.proficiency_bonus
        return 0

    @property
    def breakdown(self) -> str:
        parts = [f"d20: {self.d20}", f"ability: {self.ability_modifier}"]
        if self.is_expertise:
            parts.append(f"expertise: {self.proficiency_contribution}")
        elif self.is_proficient:
            parts.append(f"proficiency: {self.proficiency_contribution}")
        return " + ".join(parts) + f" = {self.total}"


@dataclass(frozen=True)
class AttackRollResult:
    """
    To-hit roll plus (on a hit) the damage roll for one attack.
    hit is None when no target AC was given.
    """
    name: str
    rolls: Tuple[int, ...]
    d20: int
    attack_bonus: int
    total: int
    is_critical: bool
    hit: Optional[bool] = None
    damage: Optional[RollResult] = None
