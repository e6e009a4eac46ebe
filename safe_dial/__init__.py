from .dial import DEFAULT_POSITION, DIAL_SIZE, Dial
from .rotation import (
    Direction,
    IncorrectStartOfLineCharacter,
    IntegerParseError,
    Rotation,
    RotationParseError,
    parse_rotation,
)
from .runner import LineError, Tally, TurnReport, read_lines, run, tally

__all__ = [
    "DEFAULT_POSITION",
    "DIAL_SIZE",
    "Dial",
    "Direction",
    "IncorrectStartOfLineCharacter",
    "IntegerParseError",
    "LineError",
    "Rotation",
    "RotationParseError",
    "Tally",
    "TurnReport",
    "parse_rotation",
    "read_lines",
    "run",
    "tally",
]
