"""Dice exception definitions.

Custom exception hierarchy for parsing and constructing dice.
"""


class DiceError(ValueError):
    """Base exception for dice operations."""

    pass


class DiceParseError(DiceError):
    """Dice notation could not be parsed.

    Attributes:
        notation: The input string that failed to parse.
    """

    def __init__(self, message: str, notation: str = "") -> None:
        super().__init__(message)
        self.notation = notation


class DiceValidationError(DiceError):
    """Dice fields violate count/sides invariants."""

    pass


class DiceConfigError(DiceError):
    """Settings for the default random source are invalid (e.g. DICE_SEED)."""

    pass
