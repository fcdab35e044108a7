from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol, runtime_checkable

from .core import (
    Ability,
    ProficiencyTier,
    Skill,
    ability_mod,
    proficiency_bonus_for_level,
    proficiency_contribution,
)


@runtime_checkable
class CharacterSnapshot(Protocol):
    """
    Read-only view of a character, as consumed by the dice and check engines.

    The record store that owns the real character is not our concern; anything
    exposing these four members can be rolled for.
    """

    @property
    def proficiency_bonus(self) -> int: ...

    def ability_modifier(self, ability: Ability) -> int: ...

    def ability_proficiency(self, ability: Ability) -> ProficiencyTier: ...

    def skill_proficiency(self, skill: Skill) -> ProficiencyTier: ...


@dataclass(frozen=True)
class AttackProfile:
    """
    A single attack entry on a character sheet.
    damage is a dice expression and may reference abilities ("1d8+STR").
    """
    name: str
    attack_bonus: int
    damage: str
    damage_type: str = ""


@dataclass
class Character:
    """
    Minimal concrete character record satisfying CharacterSnapshot.

    skills / abilities:
      - two independent proficiency tables (skill checks vs ability checks and saves)
      - missing entries mean ProficiencyTier.NONE
    """
    name: str = "New Character"
    level: int = 1

    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10

    skills: Dict[Skill, ProficiencyTier] = field(default_factory=dict)
    abilities: Dict[Ability, ProficiencyTier] = field(default_factory=dict)
    attacks: List[AttackProfile] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError("level must be >= 1")
        for ability in Ability:
            score = self.score(ability)
            if not 1 <= score <= 30:
                raise ValueError(f"{ability.title} score must be between 1 and 30, got {score}")

    def score(self, ability: Ability) -> int:
        return getattr(self, _SCORE_FIELDS[ability])

    @property
    def proficiency_bonus(self) -> int:
        return proficiency_bonus_for_level(self.level)

    def ability_modifier(self, ability: Ability) -> int:
        return ability_mod(self.score(ability))

    @property
    def str_mod(self) -> int:
        return self.ability_modifier(Ability.STR)

    @property
    def dex_mod(self) -> int:
        return self.ability_modifier(Ability.DEX)

    @property
    def con_mod(self) -> int:
        return self.ability_modifier(Ability.CON)

    @property
    def int_mod(self) -> int:
        return self.ability_modifier(Ability.INT)

    @property
    def wis_mod(self) -> int:
        return self.ability_modifier(Ability.WIS)

    @property
    def cha_mod(self) -> int:
        return self.ability_modifier(Ability.CHA)

    def skill_proficiency(self, skill: Skill) -> ProficiencyTier:
        return self.skills.get(skill, ProficiencyTier.NONE)

    def set_skill_proficiency(self, skill: Skill, tier: ProficiencyTier) -> None:
        self.skills[skill] = ProficiencyTier(tier)

    def ability_proficiency(self, ability: Ability) -> ProficiencyTier:
        return self.abilities.get(ability, ProficiencyTier.NONE)

    def set_ability_proficiency(self, ability: Ability, tier: ProficiencyTier) -> None:
        self.abilities[ability] = ProficiencyTier(tier)

    @property
    def passive_perception(self) -> int:
        tier = self.skill_proficiency(Skill.PERCEPTION)
        return 10 + self.wis_mod + proficiency_contribution(self.proficiency_bonus, tier)


_SCORE_FIELDS: Dict[Ability, str] = {
    Ability.STR: "strength",
    Ability.DEX: "dexterity",
    Ability.CON: "constitution",
    Ability.INT: "intelligence",
    Ability.WIS: "wisdom",
    Ability.CHA: "charisma",
}
