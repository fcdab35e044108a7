from __future__ import annotations

from rollengine.models import AttackProfile
from rollengine.systems.attacks.resolution import AttackResolver

from .helpers import fixed_dice

LONGSWORD = AttackProfile(name="Longsword", attack_bonus=5, damage="1d8+STR", damage_type="slashing")


def test_hit_rolls_damage(fighter):
    result = AttackResolver(fixed_dice(12, 6)).resolve(LONGSWORD, fighter, target_ac=15)
    assert result.total == 17
    assert result.hit is True
    assert result.is_critical is False
    assert result.damage is not None
    assert result.damage.rolls == (6,)
    assert result.damage.total == 9


def test_miss_rolls_no_damage(fighter):
    result = AttackResolver(fixed_dice(3)).resolve(LONGSWORD, fighter, target_ac=15)
    assert result.hit is False
    assert result.damage is None


def test_natural_twenty_crits_and_always_hits(fighter):
    attack = AttackProfile(name="Dagger", attack_bonus=-10, damage="1d4+STR")
    result = AttackResolver(fixed_dice(20, 2, 3)).resolve(attack, fighter, target_ac=30)
    assert result.is_critical is True
    assert result.hit is True
    assert result.damage.rolls == (2, 3)
    assert result.damage.total == 2 + 3 + 3


def test_no_target_ac_always_rolls_damage():
    result = AttackResolver(fixed_dice(2, 5)).resolve(LONGSWORD)
    assert result.hit is None
    # no character: STR resolves to 0
    assert result.damage.total == 5


def test_disadvantage_picks_lower(fighter):
    result = AttackResolver(fixed_dice(18, 4)).resolve(LONGSWORD, fighter, advantage="dis", target_ac=10)
    assert result.rolls == (18, 4)
    assert result.d20 == 4
    assert result.hit is False
