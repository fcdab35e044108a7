from __future__ import annotations

from .core import (
    SKILL_ABILITY,
    Ability,
    CheckTarget,
    ProficiencyTier,
    Skill,
    ability_mod,
    parse_check_target,
    proficiency_bonus_for_level,
    proficiency_contribution,
)
from .character import AttackProfile, Character, CharacterSnapshot
from .events import RollKind, RollLogEntry
from .results import AdvantageState, AttackRollResult, CheckRollResult, MalformedTerm, RollResult

__all__ = [
    "SKILL_ABILITY",
    "Ability",
    "CheckTarget",
    "ProficiencyTier",
    "Skill",
    "ability_mod",
    "parse_check_target",
    "proficiency_bonus_for_level",
    "proficiency_contribution",
    "AttackProfile",
    "Character",
    "CharacterSnapshot",
    "RollKind",
    "RollLogEntry",
    "AdvantageState",
    "AttackRollResult",
    "CheckRollResult",
    "MalformedTerm",
    "RollResult",
]
