from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from ...dice import Dice, normalize_adv_state
from ...errors import MissingCharacterContextError
from ...models import (
    Ability,
    CharacterSnapshot,
    CheckRollResult,
    CheckTarget,
    ProficiencyTier,
    Skill,
    proficiency_contribution,
)

logger = logging.getLogger(__name__)


def resolve_check_target(target: CheckTarget, character: CharacterSnapshot) -> Tuple[Ability, ProficiencyTier]:
    """
    Governing ability and proficiency tier for a check.

    Skills use their fixed governing ability and the skill table; abilities use
    themselves and the ability table. The two tables are never mixed.
    """
    if isinstance(target, Skill):
        return target.ability, character.skill_proficiency(target)
    if isinstance(target, Ability):
        return target, character.ability_proficiency(target)
    raise TypeError(f"check target must be an Ability or Skill, got {target!r}")


@dataclass
class CheckEvaluator:
    """
    Ability / skill check resolution.

    Stateless apart from the dice it is handed; two evaluators over sources
    that yield identical sequences produce identical results.
    """
    dice: Dice

    def evaluate(
        self,
        target: CheckTarget,
        character: CharacterSnapshot,
        advantage: str = "normal",
    ) -> CheckRollResult:
        """
        d20 (two under advantage/disadvantage) + ability modifier + proficiency.
        """
        if character is None:
            raise MissingCharacterContextError("a check needs a character to roll for")

        state = normalize_adv_state(advantage)
        d20, rolls = self.dice.d20_with_adv_state(state)
        ability, tier = resolve_check_target(target, character)

        modifier = character.ability_modifier(ability)
        bonus = character.proficiency_bonus
        total = d20 + modifier + proficiency_contribution(bonus, tier)

        result = CheckRollResult(
            target=target,
            advantage=state,
            rolls=rolls,
            d20=d20,
            ability=ability,
            ability_modifier=modifier,
            proficiency_bonus=bonus,
            is_proficient=tier != ProficiencyTier.NONE,
            is_expertise=tier == ProficiencyTier.EXPERTISE,
            total=total,
        )
        logger.debug("%s check (%s): d20%s -> %s", target.title, state, list(rolls), result.breakdown)
        return result

    def check(self, target: CheckTarget, character: CharacterSnapshot) -> CheckRollResult:
        """Plain check: always exactly one d20."""
        return self.evaluate(target, character, "normal")

    def passive(self, target: CheckTarget, character: CharacterSnapshot) -> int:
        """
        Passive score (10 + modifiers), e.g. passive Perception.
        Draws nothing.
        """
        if character is None:
            raise MissingCharacterContextError("a passive score needs a character")
        ability, tier = resolve_check_target(target, character)
        return 10 + character.ability_modifier(ability) + proficiency_contribution(character.proficiency_bonus, tier)
