from __future__ import annotations

import logging

import pytest

import run
from rollengine.log import PACKAGE_LOGGER
from rollengine.models import Ability, ProficiencyTier, Skill


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ROLLENGINE_SEED", "ROLLENGINE_STRICT", "ROLLENGINE_HISTORY_LIMIT", "ROLLENGINE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_roll_command(capsys):
    assert run.main(["--seed", "5", "--str", "16", "roll", "2d6+STR"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("2d6+STR => [")


def test_roll_command_reports_ignored_terms(capsys):
    assert run.main(["--seed", "5", "roll", "1d6+wat"]) == 0
    assert "ignored 'wat'" in capsys.readouterr().out


def test_strict_roll_fails(capsys):
    assert run.main(["--seed", "5", "--strict", "roll", "1d6+wat"]) == 2
    assert "error:" in capsys.readouterr().err


def test_check_command(capsys):
    code = run.main(["--seed", "1", "--level", "5", "--dex", "14", "--expertise", "stealth", "check", "stealth", "--advantage"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("Stealth check d20(")
    assert "expertise: 6" in out


def test_build_character_tables():
    args = run.build_parser().parse_args(["--proficient", "str", "--expertise", "Sleight of Hand", "check", "str"])
    character = run.build_character(args)
    assert character.ability_proficiency(Ability.STR) is ProficiencyTier.PROFICIENT
    assert character.skill_proficiency(Skill.SLEIGHT_OF_HAND) is ProficiencyTier.EXPERTISE


def test_unknown_target(capsys):
    assert run.main(["check", "juggling"]) == 2
    assert "Unknown ability or skill" in capsys.readouterr().err
