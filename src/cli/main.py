"""Command-line wrapper around the dice library."""

import logging
import random
from typing import Optional

import typer
from pydantic import ValidationError

from src.cli.display import display_dice_set, display_error, display_roll
from src.config import get_settings
from src.dice.exceptions import DiceParseError
from src.dice.parser import parse_dice_set
from src.dice.roller import roll_dice_set

logger = logging.getLogger(__name__)

# Create main app
app = typer.Typer(
    name="dice",
    help="Parse and roll dice notation like '2d20 + 1' or 'd20 adv'",
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    """Set up root logging for a CLI run."""
    settings = get_settings()
    if verbose or settings.debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.callback()
def main() -> None:
    """Dice roller - parse and roll dice notation.

    Settings are read here so a bad DICE_SEED fails before any roll.
    """
    try:
        get_settings()
    except ValidationError as e:
        display_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)


@app.command("roll")
def roll_command(
    notation: str = typer.Argument(..., help="Dice notation, e.g. '2d6+2 + d4'"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Seed for reproducible rolls"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each roll"),
) -> None:
    """Roll dice and show each die and the total."""
    configure_logging(verbose)

    try:
        dice_set = parse_dice_set(notation)
    except DiceParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    # None falls through to the shared default source
    rng = random.Random(seed) if seed is not None else None
    logger.debug(f"Rolling {dice_set} (seed={seed})")
    display_roll(roll_dice_set(dice_set, rng))


@app.command("parse")
def parse_command(
    notation: str = typer.Argument(..., help="Dice notation, e.g. '1d6 - 1 disadvantage'"),
) -> None:
    """Parse dice notation and show the structured result without rolling."""
    try:
        dice_set = parse_dice_set(notation)
    except DiceParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_dice_set(dice_set)


if __name__ == "__main__":
    app()
