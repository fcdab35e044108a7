from __future__ import annotations

import pytest

from rollengine import EngineConfig, FixedSequenceSource, MalformedExpressionError, RollEngine
from rollengine.core import format_attack
from rollengine.models import Ability, AttackProfile, Skill
from rollengine.rng import SeededSource, SystemEntropySource


def engine(*values: int, **config) -> RollEngine:
    return RollEngine(config=EngineConfig(**config), source=FixedSequenceSource(list(values)))


def test_source_is_built_from_config():
    assert isinstance(RollEngine().source, SystemEntropySource)
    seeded = RollEngine(config=EngineConfig(seed=3))
    assert isinstance(seeded.source, SeededSource)


def test_seeded_engines_agree(fighter):
    a = RollEngine(config=EngineConfig(seed=1234))
    b = RollEngine(config=EngineConfig(seed=1234))
    assert a.roll("4d6+STR", fighter) == b.roll("4d6+STR", fighter)
    assert a.check(Skill.ATHLETICS, fighter, "adv") == b.check(Skill.ATHLETICS, fighter, "adv")


def test_roll_records_history(fighter):
    eng = engine(3, 4)
    result = eng.roll("2d6+3", fighter, context="Greatsword")
    assert result.total == 10

    entry = eng.history.latest()
    assert entry.kind == "roll"
    assert entry.expression == "2d6+3"
    assert entry.context == "Greatsword"
    assert entry.breakdown == "Rolls: [3, 4] Total: 10"


def test_check_plain_vs_advantage(fighter):
    eng = engine(6, 16)
    plain = eng.check(Ability.STR, fighter)
    assert plain.rolls == (6,)

    adv = eng.check(Ability.STR, fighter, "advantage")
    # source cycles: 16 then 6
    assert adv.rolls == (16, 6)
    assert adv.d20 == 16

    kinds = [e.kind for e in eng.history]
    assert kinds == ["check", "check"]
    assert eng.history.entries()[0].expression == "Strength check"


def test_passive(rogue):
    assert engine(1).passive(Skill.PERCEPTION, rogue) == 14


def test_attack_through_engine(fighter):
    eng = engine(15, 7)
    longsword = AttackProfile(name="Longsword", attack_bonus=5, damage="1d8+STR", damage_type="slashing")
    result = eng.attack(longsword, fighter, target_ac=13)
    assert result.hit is True
    assert format_attack(result) == "Longsword: d20(15) -> 15 + 5 = 20 | hit | 1d8+STR => [7] = 10"
    assert eng.history.latest().kind == "attack"


def test_forgiving_by_default():
    result = engine(2).roll("1d4+oops")
    assert result.total == 2
    assert result.warnings


def test_strict_mode_raises_with_warnings():
    eng = engine(2, strict_terms=True)
    with pytest.raises(MalformedExpressionError) as exc:
        eng.roll("1d4+oops")
    assert [w.term for w in exc.value.warnings] == ["oops"]
    assert len(eng.history) == 0


def test_strict_mode_checks_attack_damage():
    eng = engine(10, 3, strict_terms=True)
    bad = AttackProfile(name="Club", attack_bonus=0, damage="1d4+huh")
    with pytest.raises(MalformedExpressionError):
        eng.attack(bad)


def test_history_is_bounded():
    eng = engine(1, history_limit=2)
    for expr in ("1", "2", "3"):
        eng.roll(expr)
    assert [e.expression for e in eng.history.entries()] == ["2", "3"]


def test_history_can_be_disabled():
    eng = engine(1, history_limit=0)
    eng.roll("1d6")
    assert len(eng.history) == 0
    assert eng.history.latest() is None
