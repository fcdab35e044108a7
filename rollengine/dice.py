from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .models import (
    Ability,
    AdvantageState,
    CharacterSnapshot,
    MalformedTerm,
    RollResult,
)
from .rng import RandomnessSource, face_for

logger = logging.getLogger(__name__)

DEFAULT_SIDES = 20

_INT_RE = re.compile(r"^[+-]?\d+$")
_DIGITS_RE = re.compile(r"^\d+$")


@dataclass(frozen=True)
class DiceTerm:
    """
    <count>d<sides>. count/sides are already resolved to their fallbacks.
    """
    text: str
    count: int
    sides: int


@dataclass(frozen=True)
class ProficiencyTerm:
    text: str


@dataclass(frozen=True)
class AbilityTerm:
    text: str
    ability: Ability


@dataclass(frozen=True)
class ConstantTerm:
    text: str
    value: int


@dataclass(frozen=True)
class UnknownTerm:
    text: str


Term = Union[DiceTerm, ProficiencyTerm, AbilityTerm, ConstantTerm, UnknownTerm]


def parse_terms(expression: str) -> Tuple[List[Term], List[MalformedTerm]]:
    """
    Parse a flat additive dice expression: term ('+' term)*
      - "2d6", "d20", "4D8"   => DiceTerm (count defaults to 1)
      - "PB"                  => ProficiencyTerm
      - "STR", "dex", ...     => AbilityTerm
      - "3", "-1"             => ConstantTerm
      - anything else         => UnknownTerm (contributes nothing)

    Whitespace is ignored and empty terms ("1d6++2") are skipped.
    Never raises: malformed count/sides fall back to 1/20 and are reported
    in the returned warnings.
    """
    compact = "".join(expression.split())
    terms: List[Term] = []
    warnings: List[MalformedTerm] = []

    for token in compact.split("+"):
        if not token:
            continue

        if token.upper() == "PB":
            terms.append(ProficiencyTerm(token))
            continue

        # Ability codes before dice: "dex" contains a 'd' but is never a die.
        ability = Ability.from_code(token)
        if ability is not None:
            terms.append(AbilityTerm(token, ability))
            continue

        d_index = token.lower().find("d")
        if d_index >= 0:
            terms.append(_parse_dice_term(token, d_index, warnings))
            continue

        if _INT_RE.match(token):
            terms.append(ConstantTerm(token, int(token)))
            continue

        terms.append(UnknownTerm(token))
        warnings.append(MalformedTerm(token, "unrecognized term ignored"))

    return terms, warnings


def _parse_dice_term(token: str, d_index: int, warnings: List[MalformedTerm]) -> DiceTerm:
    count_str = token[:d_index]
    sides_str = token[d_index + 1 :]

    count = 1
    if count_str:
        if _DIGITS_RE.match(count_str):
            count = int(count_str)
        else:
            warnings.append(MalformedTerm(token, f"bad dice count {count_str!r}, using 1"))

    sides = DEFAULT_SIDES
    if _DIGITS_RE.match(sides_str) and int(sides_str) > 0:
        sides = int(sides_str)
    else:
        warnings.append(MalformedTerm(token, f"bad die size {sides_str!r}, using {DEFAULT_SIDES}"))

    return DiceTerm(token, count, sides)


class Dice:
    """
    Dice roller over an injected randomness source.

    No default source: callers pick between
    SystemEntropySource, SeededSource and FixedSequenceSource.
    """

    def __init__(self, source: RandomnessSource) -> None:
        self.source = source

    # --- Core primitives ---

    def roll_die(self, sides: int) -> int:
        """Roll 1..sides. Consumes exactly one source value."""
        if sides <= 0:
            raise ValueError("sides must be > 0")
        return face_for(self.source.next(), sides)

    def roll_dice(self, num_dice: int, sides: int) -> List[int]:
        if num_dice < 0:
            raise ValueError("num_dice must be >= 0")
        return [self.roll_die(sides) for _ in range(num_dice)]

    def d20(self) -> int:
        return self.roll_die(20)

    # --- Advantage / disadvantage ---

    def d20_with_adv_state(self, adv_state: str = "normal") -> Tuple[int, Tuple[int, ...]]:
        """
        adv_state: "normal" | "advantage" | "disadvantage" (or "adv" / "dis")
        Returns: (chosen_roll, underlying_rolls) with rolls in draw order.
        """
        state = normalize_adv_state(adv_state)
        first = self.d20()
        if state == "normal":
            return first, (first,)
        second = self.d20()
        chosen = max(first, second) if state == "advantage" else min(first, second)
        return chosen, (first, second)

    # --- Notation rolls ---

    def roll(
        self,
        expression: str,
        character: Optional[CharacterSnapshot] = None,
        critical: bool = False,
    ) -> RollResult:
        """
        Roll a dice expression like "2d6+3", "1d8+STR" or "d20+PB".

        critical doubles the number of dice in every dice term, never the
        flat modifiers. Character references resolve to 0 without a character.
        """
        terms, warnings = parse_terms(expression)

        rolls: List[int] = []
        total = 0
        for term in terms:
            match term:
                case DiceTerm(count=count, sides=sides):
                    faces = self.roll_dice(count * 2 if critical else count, sides)
                    rolls.extend(faces)
                    total += sum(faces)
                case ProficiencyTerm():
                    if character is not None:
                        total += character.proficiency_bonus
                case AbilityTerm(ability=ability):
                    if character is not None:
                        total += character.ability_modifier(ability)
                case ConstantTerm(value=value):
                    total += value
                case UnknownTerm():
                    pass

        for w in warnings:
            logger.warning("Dice expression %r: term %r: %s", expression, w.term, w.reason)

        result = RollResult(
            rolls=tuple(rolls),
            total=total,
            formula=expression,
            critical=critical,
            warnings=tuple(warnings),
        )
        logger.debug("Rolled %s", self.format_roll(result))
        return result

    # --- Utility ---

    @staticmethod
    def format_roll(result: RollResult) -> str:
        """
        Friendly string for logs.
        Examples:
          - "2d6+3 => [3, 4] = 10"
          - "1d8+STR (CRIT) => [5, 2] = 10"
          - "5 => [] = 5"
        """
        crit = " (CRIT)" if result.critical else ""
        return f"{result.formula}{crit} => {list(result.rolls)} = {result.total}".strip()


def normalize_adv_state(adv_state: str) -> AdvantageState:
    state = adv_state.lower().strip()
    if state in ("normal", "n", ""):
        return "normal"
    if state in ("adv", "a", "advantage"):
        return "advantage"
    if state in ("dis", "d", "disadvantage"):
        return "disadvantage"
    raise ValueError("adv_state must be 'normal', 'advantage', or 'disadvantage'")
