from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ...dice import Dice, normalize_adv_state
from ...models import AttackProfile, AttackRollResult, CharacterSnapshot

logger = logging.getLogger(__name__)


@dataclass
class AttackResolver:
    """
    Attack resolution for a character's attack entries.

    To-hit:  d20 (advantage-aware) + attack bonus
    Crit:    natural 20, always hits, damage dice doubled
    Damage:  the attack's dice expression, rolled only on a hit
             (or always, when no target AC is known)
    """
    dice: Dice

    def resolve(
        self,
        attack: AttackProfile,
        character: Optional[CharacterSnapshot] = None,
        advantage: str = "normal",
        target_ac: Optional[int] = None,
    ) -> AttackRollResult:
        state = normalize_adv_state(advantage)
        d20, underlying = self.dice.d20_with_adv_state(state)
        total_to_hit = d20 + attack.attack_bonus

        is_crit = d20 == 20
        hit: Optional[bool] = None
        if target_ac is not None:
            hit = is_crit or total_to_hit >= target_ac

        damage = None
        if hit is not False:
            damage = self.dice.roll(attack.damage, character=character, critical=is_crit)

        rolls_str = ", ".join(map(str, underlying))
        logger.debug(
            "%s: d20(%s) -> %s + %s = %s%s%s",
            attack.name,
            rolls_str,
            d20,
            attack.attack_bonus,
            total_to_hit,
            f" vs AC {target_ac}" if target_ac is not None else "",
            " (CRIT)" if is_crit else "",
        )

        return AttackRollResult(
            name=attack.name,
            rolls=underlying,
            d20=d20,
            attack_bonus=attack.attack_bonus,
            total=total_to_hit,
            is_critical=is_crit,
            hit=hit,
            damage=damage,
        )
