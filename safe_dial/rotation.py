from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Which way the dial is turned.

    The member value is the signed unit multiplier for a step in that
    direction: -1 towards lower numbers, +1 towards higher numbers.
    """

    LEFT = -1
    RIGHT = 1

    @classmethod
    def from_char(cls, ch: str) -> "Direction":
        if ch == "L":
            return cls.LEFT
        if ch == "R":
            return cls.RIGHT
        raise ValueError(f"not a direction: {ch!r}")

    @property
    def unit(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.name.capitalize()


class RotationParseError(ValueError):
    """Base class for a line that could not be turned into a Rotation."""

    def __init__(self, line: str, message: str) -> None:
        super().__init__(message)
        self.line = line


class IncorrectStartOfLineCharacter(RotationParseError):
    def __init__(self, line: str) -> None:
        super().__init__(line, f"line must start with 'L' or 'R': {line!r}")


class IntegerParseError(RotationParseError):
    """The step count after the direction is not an unsigned integer.

    Attributes:
        cause (ValueError): The error raised while reading the number.
    """

    def __init__(self, line: str, cause: ValueError) -> None:
        super().__init__(line, f"invalid step count in {line!r}: {cause}")
        self.cause = cause


def _parse_steps(text: str) -> int:
    # Accept what an unsigned integer parser accepts: digits with an optional '+'.
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid unsigned integer literal: {text!r}")
    return int(digits)


@dataclass(frozen=True)
class Rotation:
    """One requested turn of the dial.

    Attributes:
        direction (Direction): Left or right.
        steps (int): Number of clicks, never negative. May be larger
            than the dial, i.e. several full revolutions.
    """

    direction: Direction
    steps: int

    @classmethod
    def parse(cls, line: str) -> "Rotation":
        """
        Parse a command such as ``L50`` or ``R1220``.

        Args:
            line (str): One input line without its line terminator.

        Returns:
            Rotation: The parsed rotation.

        Raises:
            IncorrectStartOfLineCharacter: The line is empty or does not
                start with 'L' or 'R'.
            IntegerParseError: The rest of the line is not an unsigned integer.
        """
        try:
            direction = Direction.from_char(line[:1])
        except ValueError:
            raise IncorrectStartOfLineCharacter(line) from None

        try:
            steps = _parse_steps(line[1:])
        except ValueError as exc:
            raise IntegerParseError(line, exc) from exc

        return cls(direction, steps)

    @property
    def signed_steps(self) -> int:
        return self.steps * self.direction.unit


def parse_rotation(line: str) -> Rotation:
    return Rotation.parse(line)
