from __future__ import annotations

import pytest

from rollengine.models import Character, ProficiencyTier, Skill


@pytest.fixture
def fighter() -> Character:
    # STR 16 (+3), DEX 12 (+1), level 5 => proficiency bonus +3
    c = Character(name="Fighter", level=5, strength=16, dexterity=12, wisdom=9)
    c.set_skill_proficiency(Skill.ATHLETICS, ProficiencyTier.PROFICIENT)
    return c


@pytest.fixture
def rogue() -> Character:
    # DEX 14 (+2), level 5 => proficiency bonus +3, stealth expertise
    c = Character(name="Rogue", level=5, dexterity=14, wisdom=13)
    c.set_skill_proficiency(Skill.STEALTH, ProficiencyTier.EXPERTISE)
    c.set_skill_proficiency(Skill.PERCEPTION, ProficiencyTier.PROFICIENT)
    return c
