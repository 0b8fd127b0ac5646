"""Dice notation parser.

Parses dice notation like 1d20, 2d6+3, d100, "d20 adv", "1d6 - 1 disadvantage",
and sets of dice joined by + and - like "2d6+2 + d4".
"""

import re
from dataclasses import dataclass
from enum import Enum

from src.dice.exceptions import DiceParseError
from src.dice.types import Dice, DiceSet, Operation, RollType


class TokenKind(str, Enum):
    """Lexical piece of dice notation."""

    NUMBER = "number"
    SIGN = "sign"
    WORD = "word"


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    kind: TokenKind
    text: str


# Keywords are matched lowercased against this table only
ROLL_TYPE_ALIASES: dict[str, RollType] = {
    "advantage": RollType.ADVANTAGE,
    "adv": RollType.ADVANTAGE,
    "a": RollType.ADVANTAGE,
    "disadvantage": RollType.DISADVANTAGE,
    "dadv": RollType.DISADVANTAGE,
    "d": RollType.DISADVANTAGE,
}

DIE_SEPARATOR = "d"

# Whitespace is skipped; anything else unmatched is an error
TOKEN_PATTERN = re.compile(
    r"\s*(?:(?P<number>\d+)|(?P<sign>[+-])|(?P<word>[a-z]+)|(?P<bad>\S))",
    re.IGNORECASE,
)


def tokenize(notation: str) -> list[Token]:
    """Split dice notation into tokens.

    Args:
        notation: Dice notation string.

    Returns:
        Tokens in input order. Words are lowercased.

    Raises:
        DiceParseError: On a character that is not part of dice notation.

    Examples:
        >>> [t.text for t in tokenize("2D6 + 3 Adv")]
        ['2', 'd', '6', '+', '3', 'adv']
    """
    tokens: list[Token] = []
    for match in TOKEN_PATTERN.finditer(notation):
        if match.group("number") is not None:
            tokens.append(Token(TokenKind.NUMBER, match.group("number")))
        elif match.group("sign") is not None:
            tokens.append(Token(TokenKind.SIGN, match.group("sign")))
        elif match.group("word") is not None:
            tokens.append(Token(TokenKind.WORD, match.group("word").lower()))
        else:
            raise DiceParseError(
                f"Unexpected character '{match.group('bad')}' in dice notation: '{notation}'",
                notation,
            )
    return tokens


class _DiceTokenParser:
    """Left-to-right walker over a token list."""

    def __init__(self, notation: str) -> None:
        self.notation = notation
        self.tokens = tokenize(notation)
        self.pos = 0

    def error(self, message: str) -> DiceParseError:
        return DiceParseError(f"{message}: '{self.notation}'", self.notation)

    def peek(self, offset: int = 0) -> Token | None:
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def is_separator(self, offset: int = 0) -> bool:
        token = self.peek(offset)
        return (
            token is not None
            and token.kind == TokenKind.WORD
            and token.text == DIE_SEPARATOR
        )

    def starts_die_spec(self, offset: int = 0) -> bool:
        """Whether a `[count] d sides` sequence begins at offset."""
        token = self.peek(offset)
        if token is not None and token.kind == TokenKind.NUMBER:
            offset += 1
        if not self.is_separator(offset):
            return False
        sides = self.peek(offset + 1)
        return sides is not None and sides.kind == TokenKind.NUMBER

    def parse_positive(self, token: Token, name: str) -> int:
        value = int(token.text)
        if value < 1:
            raise self.error(f"{name} must be at least 1, got {value}")
        return value

    def parse_dice(self, in_set: bool = False) -> Dice:
        """Consume one dice expression.

        With in_set, a sign followed by a die spec is left for the caller
        as the start of the next group.
        """
        if self.at_end:
            raise self.error("Missing dice expression")

        count = 1
        token = self.peek()
        if token.kind == TokenKind.NUMBER:
            count = self.parse_positive(self.advance(), "Number of dice")
        elif token.kind == TokenKind.SIGN:
            raise self.error("Number of dice cannot be signed")

        if not self.is_separator():
            raise self.error("Missing 'd' separator in dice notation")
        self.advance()

        token = self.peek()
        if token is None or token.kind != TokenKind.NUMBER:
            raise self.error("Missing die size")
        sides = self.parse_positive(self.advance(), "Die size")

        modifier = None
        token = self.peek()
        if token is not None and token.kind == TokenKind.SIGN:
            if not (in_set and self.starts_die_spec(1)):
                sign = self.advance().text
                value = self.peek()
                if value is None or value.kind != TokenKind.NUMBER:
                    raise self.error(f"Modifier sign '{sign}' must be followed by a number")
                self.advance()
                modifier = int(value.text) if sign == "+" else -int(value.text)

        roll_type = RollType.NORMAL
        token = self.peek()
        if token is not None and token.kind == TokenKind.WORD:
            if token.text not in ROLL_TYPE_ALIASES:
                raise self.error(f"Unknown roll type '{token.text}'")
            roll_type = ROLL_TYPE_ALIASES[self.advance().text]

        return Dice(count=count, sides=sides, modifier=modifier, roll_type=roll_type)

    def expect_end(self) -> None:
        if not self.at_end:
            raise self.error(f"Unexpected '{self.peek().text}' in dice notation")


def _check_not_empty(notation: str) -> None:
    if not notation or not notation.strip():
        raise DiceParseError("Dice notation cannot be empty", notation or "")


def parse_dice(notation: str) -> Dice:
    """Parse dice notation into a Dice.

    A modifier of +0 or -0 is accepted and kept as 0, so "2d6+0" keeps its
    explicit modifier; a missing modifier is None.

    Args:
        notation: Dice notation string (e.g., "2d6+3", "d20 adv").

    Returns:
        Dice with parsed values.

    Raises:
        DiceParseError: If notation is invalid.

    Examples:
        >>> parse_dice("2d20 + 1")
        Dice(count=2, sides=20, modifier=1, roll_type=<RollType.NORMAL: 'normal'>)
        >>> parse_dice("d6")
        Dice(count=1, sides=6, modifier=None, roll_type=<RollType.NORMAL: 'normal'>)
    """
    _check_not_empty(notation)
    parser = _DiceTokenParser(notation)
    dice = parser.parse_dice()
    parser.expect_end()
    return dice


def parse_dice_set(notation: str) -> DiceSet:
    """Parse groups of dice joined by + and - into a DiceSet.

    A sign directly followed by a die spec starts a new group; any other
    sign is the modifier of the group before it.

    Args:
        notation: Dice notation string (e.g., "2d6+2 + d4", "d20+5 - 1d4").

    Returns:
        DiceSet with one term per group.

    Raises:
        DiceParseError: If notation is invalid.

    Examples:
        >>> str(parse_dice_set("2d6+2 - d4"))
        '2d6+2 - 1d4'
    """
    _check_not_empty(notation)
    parser = _DiceTokenParser(notation)
    terms = [(Operation.ADDITION, parser.parse_dice(in_set=True))]
    while not parser.at_end:
        token = parser.peek()
        if token.kind != TokenKind.SIGN:
            raise parser.error(f"Unexpected '{token.text}' in dice notation")
        operation = Operation(parser.advance().text)
        terms.append((operation, parser.parse_dice(in_set=True)))
    return DiceSet(terms=tuple(terms))
