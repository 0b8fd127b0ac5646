"""Core dice rolling engine.

Rolls Dice and DiceSets with support for advantage/disadvantage.

Every function takes an optional random source; when omitted the shared
default from :func:`src.dice.random_source.default_random_source` is used.
Pass a seeded ``random.Random`` (or a mock) for reproducible results.
"""

import logging

from src.dice.parser import parse_dice
from src.dice.random_source import RandomSource, default_random_source
from src.dice.types import (
    Dice,
    DiceSet,
    DiceSetResult,
    Operation,
    RollResult,
    RollType,
)

logger = logging.getLogger(__name__)


def _draw(rng: RandomSource, sides: int) -> int:
    return rng.randint(1, sides)


def roll_dice(dice: Dice, rng: RandomSource | None = None) -> RollResult:
    """Roll dice according to their roll type.

    - Normal: rolls ``count`` dice and sums them.
    - Advantage: rolls two dice, keeps the higher.
    - Disadvantage: rolls two dice, keeps the lower.

    Advantage and disadvantage always roll exactly two dice of ``sides``,
    whatever ``count`` is.

    Args:
        dice: The dice to roll.
        rng: Source of random integers. Defaults to the shared source.

    Returns:
        RollResult with every raw roll, the kept rolls, and the total.

    Examples:
        >>> import random
        >>> result = roll_dice(Dice(count=2, sides=6, modifier=3), random.Random(1))
        >>> len(result.rolls)
        2
    """
    if rng is None:
        rng = default_random_source()

    if dice.roll_type == RollType.NORMAL:
        rolls = tuple(_draw(rng, dice.sides) for _ in range(dice.count))
        kept = rolls
    else:
        first = _draw(rng, dice.sides)
        second = _draw(rng, dice.sides)
        rolls = (first, second)
        if dice.roll_type == RollType.ADVANTAGE:
            kept = (max(first, second),)
        else:  # DISADVANTAGE
            kept = (min(first, second),)

    total = sum(kept) + (dice.modifier or 0)
    logger.debug(f"Rolled {dice}: rolls={list(rolls)} kept={list(kept)} total={total}")

    return RollResult(dice=dice, rolls=rolls, kept=kept, total=total)


def roll(notation: str, rng: RandomSource | None = None) -> RollResult:
    """Parse dice notation and roll.

    Convenience function combining parse_dice and roll_dice.

    Args:
        notation: Dice notation string (e.g., "2d6+3", "d20 adv").
        rng: Source of random integers. Defaults to the shared source.

    Returns:
        RollResult with rolls and total.

    Raises:
        DiceParseError: If notation is invalid.
    """
    return roll_dice(parse_dice(notation), rng)


def roll_dice_set(dice_set: DiceSet, rng: RandomSource | None = None) -> DiceSetResult:
    """Roll every group in a dice set and combine the totals.

    Groups are rolled in order from the same source. Each group's total
    (modifier included) is added or subtracted according to its operation.

    Args:
        dice_set: The dice set to roll.
        rng: Source of random integers. Defaults to the shared source.

    Returns:
        DiceSetResult with a RollResult per group and the signed total.
    """
    if rng is None:
        rng = default_random_source()

    results = []
    operations = []
    total = 0
    for operation, dice in dice_set.terms:
        result = roll_dice(dice, rng)
        results.append(result)
        operations.append(operation)
        if operation == Operation.ADDITION:
            total += result.total
        else:
            total -= result.total

    return DiceSetResult(
        results=tuple(results),
        operations=tuple(operations),
        total=total,
    )
