from __future__ import annotations

from enum import Enum, IntEnum
from typing import Mapping, Optional, TypeAlias, Union


class Ability(str, Enum):
    """
    The six base attributes. Values double as the short codes used in dice
    notation ("1d8+STR").
    """

    STR = "str"
    DEX = "dex"
    CON = "con"
    INT = "int"
    WIS = "wis"
    CHA = "cha"

    @property
    def title(self) -> str:
        return _ABILITY_TITLES[self]

    @classmethod
    def from_code(cls, code: str) -> Optional["Ability"]:
        try:
            return cls(code.strip().lower())
        except ValueError:
            return None


_ABILITY_TITLES: Mapping[Ability, str] = {
    Ability.STR: "Strength",
    Ability.DEX: "Dexterity",
    Ability.CON: "Constitution",
    Ability.INT: "Intelligence",
    Ability.WIS: "Wisdom",
    Ability.CHA: "Charisma",
}


class ProficiencyTier(IntEnum):
    """
    Ordered proficiency levels. The integer value is the number of times the
    proficiency bonus is applied.
    """

    NONE = 0
    PROFICIENT = 1
    EXPERTISE = 2


class Skill(str, Enum):
    ATHLETICS = "athletics"
    ACROBATICS = "acrobatics"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"
    ARCANA = "arcana"
    HISTORY = "history"
    INVESTIGATION = "investigation"
    NATURE = "nature"
    RELIGION = "religion"
    ANIMAL_HANDLING = "animal_handling"
    INSIGHT = "insight"
    MEDICINE = "medicine"
    PERCEPTION = "perception"
    SURVIVAL = "survival"
    DECEPTION = "deception"
    INTIMIDATION = "intimidation"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"

    @property
    def ability(self) -> Ability:
        return SKILL_ABILITY[self]

    @property
    def title(self) -> str:
        return self.value.replace("_", " ").title().replace(" Of ", " of ")


# Fixed governing-ability table. Every Skill must appear exactly once.
SKILL_ABILITY: Mapping[Skill, Ability] = {
    Skill.ATHLETICS: Ability.STR,
    Skill.ACROBATICS: Ability.DEX,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    Skill.ARCANA: Ability.INT,
    Skill.HISTORY: Ability.INT,
    Skill.INVESTIGATION: Ability.INT,
    Skill.NATURE: Ability.INT,
    Skill.RELIGION: Ability.INT,
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.INSIGHT: Ability.WIS,
    Skill.MEDICINE: Ability.WIS,
    Skill.PERCEPTION: Ability.WIS,
    Skill.SURVIVAL: Ability.WIS,
    Skill.DECEPTION: Ability.CHA,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
}

CheckTarget: TypeAlias = Union[Ability, Skill]


def ability_mod(score: int) -> int:
    """
    5e-style ability modifier.
    Floor division on purpose: score 9 is -1, not 0.
    """
    return (score - 10) // 2


def proficiency_bonus_for_level(level: int) -> int:
    return (level - 1) // 4 + 2


def proficiency_contribution(bonus: int, tier: ProficiencyTier) -> int:
    return bonus * int(tier)


def parse_check_target(name: str) -> CheckTarget:
    """
    Resolve a user-facing name ("str", "Strength", "sleight of hand",
    "animal_handling") into an Ability or Skill.
    """
    key = name.strip().lower().replace(" ", "_").replace("-", "_")
    ability = Ability.from_code(key)
    if ability is not None:
        return ability
    for a, title in _ABILITY_TITLES.items():
        if title.lower() == key:
            return a
    try:
        return Skill(key)
    except ValueError:
        raise ValueError(f"Unknown ability or skill: {name!r}") from None
