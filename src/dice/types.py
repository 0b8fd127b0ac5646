"""Dice system type definitions.

Immutable dataclasses for dice, dice sets, and roll results.
"""

from dataclasses import dataclass
from enum import Enum

from src.dice.exceptions import DiceValidationError


class RollType(str, Enum):
    """How a die is rolled."""

    NORMAL = "normal"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"


class Operation(str, Enum):
    """Whether a group of dice adds to or subtracts from a set total."""

    ADDITION = "+"
    SUBTRACTION = "-"


def _require_positive_int(name: str, value: object) -> None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise DiceValidationError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise DiceValidationError(f"{name} must be at least 1, got {value}")


@dataclass(frozen=True)
class Dice:
    """A homogeneous group of dice like 2d6+3.

    Attributes:
        count: Number of dice to roll.
        sides: Faces on each die (e.g., 6 for d6, 20 for d20).
        modifier: Optional flat modifier added to the total.
        roll_type: Normal, advantage, or disadvantage.

    Advantage and disadvantage always roll a pair of single dice and keep
    one; ``count`` is ignored for those roll types.

    Raises:
        DiceValidationError: If count or sides is not a positive integer.
    """

    count: int
    sides: int
    modifier: int | None = None
    roll_type: RollType = RollType.NORMAL

    def __post_init__(self) -> None:
        _require_positive_int("count", self.count)
        _require_positive_int("sides", self.sides)
        if self.modifier is not None and (
            isinstance(self.modifier, bool) or not isinstance(self.modifier, int)
        ):
            raise DiceValidationError(
                f"modifier must be an integer or None, got {self.modifier!r}"
            )
        if not isinstance(self.roll_type, RollType):
            try:
                object.__setattr__(self, "roll_type", RollType(self.roll_type))
            except ValueError as e:
                raise DiceValidationError(
                    f"Unknown roll type: {self.roll_type!r}"
                ) from e

    @classmethod
    def parse(cls, notation: str) -> "Dice":
        """Parse dice notation. See :func:`src.dice.parser.parse_dice`."""
        from src.dice.parser import parse_dice

        return parse_dice(notation)

    @property
    def has_advantage_type(self) -> bool:
        """Whether this roll keeps one of two dice."""
        return self.roll_type != RollType.NORMAL

    def __str__(self) -> str:
        text = f"{self.count}d{self.sides}"
        if self.modifier is not None:
            text += f"{self.modifier:+d}"
        if self.has_advantage_type:
            text += f" {self.roll_type.value}"
        return text


@dataclass(frozen=True)
class RollResult:
    """Result of rolling one Dice.

    Attributes:
        dice: The dice that were rolled.
        rolls: Every raw face value drawn, in draw order.
        kept: The values counted toward the total.
        total: Sum of kept values plus modifier.
    """

    dice: Dice
    rolls: tuple[int, ...]
    kept: tuple[int, ...]
    total: int

    @property
    def modifier(self) -> int:
        """Modifier applied to the total (0 when absent)."""
        return self.dice.modifier or 0

    @property
    def discarded(self) -> tuple[int, ...]:
        """Raw rolls dropped by advantage/disadvantage."""
        if not self.dice.has_advantage_type:
            return ()
        remaining = list(self.rolls)
        for value in self.kept:
            remaining.remove(value)
        return tuple(remaining)

    def __str__(self) -> str:
        rolls = f"[{', '.join(str(r) for r in self.rolls)}]"
        if self.dice.has_advantage_type:
            return f"{rolls} -> {self.kept[0]}"
        return rolls


@dataclass(frozen=True)
class DiceSet:
    """Several dice groups combined with + and -, like 2d6+2 - d4.

    Attributes:
        terms: (operation, dice) pairs in input order. The first
            operation is always addition.
    """

    terms: tuple[tuple[Operation, Dice], ...]

    def __post_init__(self) -> None:
        if not self.terms:
            raise DiceValidationError("A dice set needs at least one group of dice")
        if self.terms[0][0] != Operation.ADDITION:
            raise DiceValidationError("The first group of a dice set must be added")

    @classmethod
    def of(cls, *dice: Dice) -> "DiceSet":
        """Build a set that adds every group."""
        return cls(terms=tuple((Operation.ADDITION, d) for d in dice))

    def __str__(self) -> str:
        parts = [str(self.terms[0][1])]
        for operation, dice in self.terms[1:]:
            parts.append(f"{operation.value} {dice}")
        return " ".join(parts)


@dataclass(frozen=True)
class DiceSetResult:
    """Result of rolling a DiceSet.

    Attributes:
        results: One RollResult per group, in set order.
        operations: The operation applied to each result.
        total: Signed sum of every group's total.
    """

    results: tuple[RollResult, ...]
    operations: tuple[Operation, ...]
    total: int
