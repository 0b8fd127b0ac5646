"""Sources of randomness for dice rolls.

The roller takes any object with a ``randint(a, b)`` method, so a seeded
``random.Random`` or a test double can be passed in. Callers that don't
pass one get the process-wide default from :func:`default_random_source`.
"""

import random
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from src.config import get_settings
from src.dice.exceptions import DiceConfigError


@runtime_checkable
class RandomSource(Protocol):
    """Uniform random integers in an inclusive range."""

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...


_default_source: random.Random | None = None


def default_random_source() -> random.Random:
    """Get the shared default random source.

    Created on first use and seeded from ``Settings.dice_seed`` when that is
    set, which makes every roll in the process reproducible. Unknown keys in
    the environment or ``.env`` are ignored.

    Returns:
        The process-wide ``random.Random`` instance.

    Raises:
        DiceConfigError: If the dice settings are malformed (e.g. a
            non-integer DICE_SEED). Passing an explicit source to the
            roller never reads settings.
    """
    global _default_source
    if _default_source is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            raise DiceConfigError(f"Invalid dice settings: {e}") from e
        _default_source = random.Random(settings.dice_seed)
    return _default_source


def reset_default_random_source() -> None:
    """Drop the shared source so the next roll re-reads settings."""
    global _default_source
    _default_source = None
