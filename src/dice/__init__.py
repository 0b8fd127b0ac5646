"""Dice notation parsing and rolling.

Usage:
    >>> from src.dice import parse_dice, roll_dice, roll
    >>> dice = parse_dice("d20 adv")
    >>> result = roll_dice(dice)
    >>> result = roll("2d6+3")
"""

# Errors
from src.dice.exceptions import (
    DiceConfigError,
    DiceError,
    DiceParseError,
    DiceValidationError,
)

# Types
from src.dice.types import (
    Dice,
    DiceSet,
    DiceSetResult,
    Operation,
    RollResult,
    RollType,
)

# Parser
from src.dice.parser import ROLL_TYPE_ALIASES, parse_dice, parse_dice_set

# Randomness
from src.dice.random_source import (
    RandomSource,
    default_random_source,
    reset_default_random_source,
)

# Roller
from src.dice.roller import roll, roll_dice, roll_dice_set

__all__ = [
    # Errors
    "DiceConfigError",
    "DiceError",
    "DiceParseError",
    "DiceValidationError",
    # Types
    "Dice",
    "DiceSet",
    "DiceSetResult",
    "Operation",
    "RollResult",
    "RollType",
    # Parser
    "ROLL_TYPE_ALIASES",
    "parse_dice",
    "parse_dice_set",
    # Randomness
    "RandomSource",
    "default_random_source",
    "reset_default_random_source",
    # Roller
    "roll",
    "roll_dice",
    "roll_dice_set",
]
