from __future__ import annotations

from rollengine.dice import Dice
from rollengine.rng import FixedSequenceSource


def fixed_dice(*values: int) -> Dice:
    return Dice(FixedSequenceSource(list(values)))
