import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

from .dial import DEFAULT_POSITION, Dial
from .rotation import Direction, Rotation, RotationParseError


class LineError(Exception):
    """A line of input could not be used.

    The underlying RotationParseError is chained as __cause__.
    """

    def __init__(self, lineno: int, line: str, reason: Exception) -> None:
        super().__init__(f"Failed to parse line {lineno}: {reason}")
        self.lineno = lineno
        self.line = line


@dataclass(frozen=True)
class TurnReport:
    """What happened to the dial for a single input line."""

    index: int
    start_position: int
    direction: Direction
    steps: int
    end_position: int
    crossings: int

    def describe(self) -> str:
        """Render the step as one line of progress output.

        The step number is the 1-based line number in the input, so skipped
        lines leave gaps.
        """
        return (
            f"Step {self.index}, turn dial from {self.start_position} "
            f"to the {str(self.direction).lower()} by {self.steps} clicks, "
            f"ends up at {self.end_position} crossing zero {self.crossings} times."
        )


@dataclass
class Tally:
    rotations: int = 0
    zero_stops: int = 0
    zero_crossings: int = 0

    def add(self, report: TurnReport) -> None:
        self.rotations += 1
        self.zero_crossings += report.crossings
        if report.end_position == 0:
            self.zero_stops += 1


def read_lines(path) -> Iterator[str]:
    """Yield the lines of a text file without their line terminators."""
    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            yield raw.rstrip("\r\n")


def run(
    lines: Iterable[str],
    start: int = DEFAULT_POSITION,
    skip_invalid: bool = False,
) -> Iterator[TurnReport]:
    """
    Turn a fresh dial once per input line, in order.

    Args:
        lines: Rotation commands such as "L68". Empty lines are ignored;
            whitespace-only lines are parse errors.
        start: Starting position of the dial.
        skip_invalid: Warn about unparsable lines and carry on instead
            of stopping at the first one.

    Yields:
        TurnReport: One report per rotation applied.

    Raises:
        LineError: A line could not be parsed and skip_invalid is False.
    """
    dial = Dial(start)

    for lineno, line in enumerate(lines, start=1):
        if not line:
            continue

        try:
            rotation = Rotation.parse(line)
        except RotationParseError as exc:
            if not skip_invalid:
                raise LineError(lineno, line, exc) from exc
            print(f"[WARN] skipping line {lineno}: {exc}", file=sys.stderr)
            continue

        start_position = dial.position
        crossings = dial.turn(rotation)

        yield TurnReport(
            index=lineno,
            start_position=start_position,
            direction=rotation.direction,
            steps=rotation.steps,
            end_position=dial.position,
            crossings=crossings,
        )


def tally(reports: Iterable[TurnReport]) -> Tally:
    totals = Tally()
    for report in reports:
        totals.add(report)
    return totals
