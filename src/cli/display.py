"""Rich display helpers for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from src.dice.types import DiceSet, DiceSetResult, Operation, RollResult


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_rolls(result: RollResult) -> Text:
    """Format raw rolls, striking through discarded ones.

    Args:
        result: The roll result to format.

    Returns:
        Rich Text like "[3, 17]" with the kept roll highlighted.
    """
    text = Text("[")
    kept = list(result.kept)
    for index, value in enumerate(result.rolls):
        if index:
            text.append(", ")
        if result.dice.has_advantage_type:
            if value in kept:
                kept.remove(value)
                text.append(str(value), style="bold yellow")
            else:
                text.append(str(value), style="dim strike")
        else:
            text.append(str(value))
    text.append("]")
    return text


def display_roll(result: DiceSetResult) -> None:
    """Display every group of a dice set roll and the total.

    Args:
        result: The dice set result.
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("", justify="center")
    table.add_column("Dice", style="cyan")
    table.add_column("Rolls")
    table.add_column("Mod", justify="right")
    table.add_column("Subtotal", justify="right")

    for operation, roll_result in zip(result.operations, result.results):
        modifier = roll_result.dice.modifier
        table.add_row(
            "-" if operation == Operation.SUBTRACTION else "+",
            str(roll_result.dice),
            format_rolls(roll_result),
            f"{modifier:+d}" if modifier is not None else "",
            str(roll_result.total),
        )

    console.print(table)
    console.print(f"Total: [bold green]{result.total}[/bold green]")


def display_dice_set(dice_set: DiceSet) -> None:
    """Display the canonical form of each parsed group.

    Args:
        dice_set: The parsed dice set.
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Op", justify="center")
    table.add_column("Count", justify="right")
    table.add_column("Sides", justify="right")
    table.add_column("Modifier", justify="right")
    table.add_column("Roll type")

    for operation, dice in dice_set.terms:
        table.add_row(
            operation.value,
            str(dice.count),
            str(dice.sides),
            f"{dice.modifier:+d}" if dice.modifier is not None else "",
            dice.roll_type.value,
        )

    console.print(table)
    console.print(f"[dim]{dice_set}[/dim]")
