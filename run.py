from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from rollengine import EngineConfig, RollEngine, RollEngineError
from rollengine.dice import Dice
from rollengine.log import setup_logging
from rollengine.models import Ability, Character, ProficiencyTier, Skill, parse_check_target


def build_character(args: argparse.Namespace) -> Character:
    character = Character(
        name=args.name,
        level=args.level,
        strength=args.str,
        dexterity=args.dex,
        constitution=args.con,
        intelligence=args.int,
        wisdom=args.wis,
        charisma=args.cha,
    )
    for names, tier in ((args.proficient, ProficiencyTier.PROFICIENT), (args.expertise, ProficiencyTier.EXPERTISE)):
        for name in names:
            target = parse_check_target(name)
            if isinstance(target, Skill):
                character.set_skill_proficiency(target, tier)
            else:
                character.set_ability_proficiency(target, tier)
    return character


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rollengine", description="Roll dice expressions and character checks.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for deterministic rolls")
    parser.add_argument("--strict", action="store_true", help="Fail on unrecognized expression terms")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")

    sheet = parser.add_argument_group("character")
    sheet.add_argument("--name", default="Adventurer")
    sheet.add_argument("--level", type=int, default=1)
    for ability in Ability:
        sheet.add_argument(f"--{ability.value}", type=int, default=10, help=f"{ability.title} score")
    sheet.add_argument("--proficient", action="append", default=[], metavar="NAME", help="Ability or skill (repeatable)")
    sheet.add_argument("--expertise", action="append", default=[], metavar="NAME", help="Ability or skill (repeatable)")

    sub = parser.add_subparsers(dest="command", required=True)

    roll_p = sub.add_parser("roll", help="Roll a dice expression, e.g. 2d6+3 or 1d8+STR")
    roll_p.add_argument("expression")
    roll_p.add_argument("--critical", action="store_true", help="Double the dice (not the modifiers)")

    check_p = sub.add_parser("check", help="Roll an ability or skill check, e.g. str or stealth")
    check_p.add_argument("target")
    adv = check_p.add_mutually_exclusive_group()
    adv.add_argument("--advantage", action="store_true")
    adv.add_argument("--disadvantage", action="store_true")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        env_config = EngineConfig.from_env()
        config = EngineConfig(
            seed=args.seed if args.seed is not None else env_config.seed,
            strict_terms=args.strict or env_config.strict_terms,
            history_limit=env_config.history_limit,
            log_level=args.log_level or env_config.log_level,
        )
        setup_logging(config.log_level)

        engine = RollEngine(config=config)
        character = build_character(args)

        if args.command == "roll":
            result = engine.roll(args.expression, character, critical=args.critical)
            print(Dice.format_roll(result), flush=True)
            for w in result.warnings:
                print(f"  ignored {w.term!r}: {w.reason}", flush=True)
        else:
            target = parse_check_target(args.target)
            advantage = "advantage" if args.advantage else "disadvantage" if args.disadvantage else None
            check = engine.check(target, character, advantage)
            rolls = ", ".join(map(str, check.rolls))
            print(f"{target.title} check d20({rolls}): {check.breakdown}", flush=True)
    except (RollEngineError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr, flush=True)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
