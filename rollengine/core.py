from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import EngineConfig
from .dice import Dice
from .errors import MalformedExpressionError
from .history import RollHistory
from .models import (
    AttackProfile,
    AttackRollResult,
    CharacterSnapshot,
    CheckRollResult,
    CheckTarget,
    RollResult,
)
from .rng import RandomnessSource, source_from_seed
from .systems.attacks.resolution import AttackResolver
from .systems.checks.evaluation import CheckEvaluator


@dataclass
class RollEngine:
    """
    RollEngine is the façade / public API for the engine.

    Everything external (CLI, tests, the character sheet UI) should call into
    this instead of wiring Dice, CheckEvaluator and AttackResolver together
    ad hoc.

    source:
      - explicit randomness source; when omitted one is built from config.seed
    history:
      - roll log of every call made through the façade
    """

    config: EngineConfig = field(default_factory=EngineConfig)
    source: Optional[RandomnessSource] = None

    dice: Dice = field(init=False)
    checks: CheckEvaluator = field(init=False)
    attacks: AttackResolver = field(init=False)
    history: RollHistory = field(init=False)

    def __post_init__(self) -> None:
        if self.source is None:
            self.source = source_from_seed(self.config.seed)
        self.dice = Dice(self.source)
        self.checks = CheckEvaluator(self.dice)
        self.attacks = AttackResolver(self.dice)
        self.history = RollHistory(limit=self.config.history_limit)

    # --- Expressions ------------------------------------------------------

    def roll(
        self,
        expression: str,
        character: Optional[CharacterSnapshot] = None,
        *,
        critical: bool = False,
        context: str = "",
    ) -> RollResult:
        """
        Roll a free-form damage/utility expression.

        In strict mode, an expression with unrecognized or malformed terms
        raises MalformedExpressionError after rolling (dice already drawn
        stay drawn).
        """
        result = self.dice.roll(expression, character=character, critical=critical)
        if result.warnings and self.config.strict_terms:
            raise MalformedExpressionError(expression, result.warnings)

        self.history.record(
            "roll",
            expression,
            f"Rolls: {list(result.rolls)} Total: {result.total}",
            context=context,
            data={"total": result.total, "rolls": result.rolls, "critical": critical},
        )
        return result

    # --- Checks -----------------------------------------------------------

    def check(
        self,
        target: CheckTarget,
        character: CharacterSnapshot,
        advantage: Optional[str] = None,
        *,
        context: str = "",
    ) -> CheckRollResult:
        """
        Ability or skill check. advantage=None is the plain check (one d20).
        """
        if advantage is None:
            result = self.checks.check(target, character)
        else:
            result = self.checks.evaluate(target, character, advantage)

        self.history.record(
            "check",
            f"{target.title} check",
            result.breakdown,
            context=context,
            data={"total": result.total, "rolls": result.rolls, "advantage": result.advantage},
        )
        return result

    def passive(self, target: CheckTarget, character: CharacterSnapshot) -> int:
        return self.checks.passive(target, character)

    # --- Attacks ----------------------------------------------------------

    def attack(
        self,
        attack: AttackProfile,
        character: Optional[CharacterSnapshot] = None,
        *,
        advantage: str = "normal",
        target_ac: Optional[int] = None,
        context: str = "",
    ) -> AttackRollResult:
        result = self.attacks.resolve(attack, character, advantage=advantage, target_ac=target_ac)

        if result.damage is not None and result.damage.warnings and self.config.strict_terms:
            raise MalformedExpressionError(attack.damage, result.damage.warnings)

        self.history.record(
            "attack",
            f"{attack.name}: d20+{attack.attack_bonus} / {attack.damage}",
            format_attack(result),
            context=context,
            data={"total": result.total, "hit": result.hit, "critical": result.is_critical},
        )
        return result


def format_attack(result: AttackRollResult) -> str:
    """
    Examples:
      - "Longsword: d20(14) -> 14 + 5 = 19 | hit | 1d8+STR => [6] = 9"
      - "Longsword: d20(3, 17) -> 3 + 5 = 8 | miss"
    """
    rolls_str = ", ".join(map(str, result.rolls))
    text = f"{result.name}: d20({rolls_str}) -> {result.d20} + {result.attack_bonus} = {result.total}"
    if result.is_critical:
        text += " (CRIT)"
    if result.hit is not None:
        text += " | hit" if result.hit else " | miss"
    if result.damage is not None:
        text += " | " + Dice.format_roll(result.damage)
    return text
