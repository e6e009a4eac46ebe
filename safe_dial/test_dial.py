import random

import pytest

from safe_dial.dial import DEFAULT_POSITION, DIAL_SIZE, Dial
from safe_dial.rotation import Direction, Rotation


def turn(dial, line):
    return dial.turn(Rotation.parse(line))


def test_default_position():
    assert Dial().position == DEFAULT_POSITION == 50


def test_rejects_out_of_range_start():
    with pytest.raises(ValueError):
        Dial(100)
    with pytest.raises(ValueError):
        Dial(-1)


def test_zero_crossings():
    dial = Dial()

    assert turn(dial, "L50") == 1  # 50 -> 0
    assert dial.position == 0
    assert turn(dial, "L100") == 1  # full revolution from 0
    assert turn(dial, "R100") == 1
    assert turn(dial, "R200") == 2
    assert turn(dial, "L200") == 2
    assert dial.position == 0

    assert turn(dial, "L1") == 0  # leaving 0 is not a crossing
    assert dial.position == 99
    assert turn(dial, "R1") == 1  # 99 -> 0
    assert dial.position == 0
    assert turn(dial, "L1") == 0
    assert turn(dial, "R101") == 2  # 99 -> 0 plus one revolution
    assert dial.position == 0

    assert turn(dial, "R1") == 0
    assert turn(dial, "L1") == 1  # 1 -> 0
    assert turn(dial, "R1") == 0
    assert turn(dial, "L101") == 2
    assert dial.position == 0


def test_example_input():
    dial = Dial()
    lines = ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]
    expected = [1, 0, 1, 0, 1, 1, 0, 1, 0, 1]
    positions = [82, 52, 0, 95, 55, 0, 99, 0, 14, 32]

    for line, crossings, position in zip(lines, expected, positions):
        assert turn(dial, line) == crossings
        assert dial.position == position


def test_exact_revolutions_keep_position():
    for start in (0, 1, 50, 99):
        for line in ("L100", "R100", "L200", "R300", "L1000"):
            dial = Dial(start)
            steps = Rotation.parse(line).steps
            assert dial.turn(Rotation.parse(line)) == steps // DIAL_SIZE
            assert dial.position == start


def test_zero_steps_is_a_no_op():
    for start in (0, 42):
        dial = Dial(start)
        assert dial.turn(Rotation(Direction.LEFT, 0)) == 0
        assert dial.turn(Rotation(Direction.RIGHT, 0)) == 0
        assert dial.position == start


def test_left_then_right_returns_home():
    rng = random.Random(1234)
    for _ in range(200):
        start = rng.randrange(DIAL_SIZE)
        steps = rng.randrange(1000)
        dial = Dial(start)
        dial.turn(Rotation(Direction.LEFT, steps))
        dial.turn(Rotation(Direction.RIGHT, steps))
        assert dial.position == start


def test_large_rotation():
    dial = Dial(50)
    assert dial.turn(Rotation(Direction.RIGHT, 10**12 + 50)) == 10**10 + 1
    assert dial.position == 0
    assert dial.at_zero


def test_position_stays_in_range():
    rng = random.Random(99)
    dial = Dial()
    for _ in range(1000):
        direction = rng.choice([Direction.LEFT, Direction.RIGHT])
        dial.turn(Rotation(direction, rng.randrange(5000)))
        assert 0 <= dial.position < DIAL_SIZE


def test_matches_click_by_click_count():
    # Walk small rotations one click at a time and compare.
    rng = random.Random(7)
    for _ in range(500):
        start = rng.randrange(DIAL_SIZE)
        direction = rng.choice([Direction.LEFT, Direction.RIGHT])
        steps = rng.randrange(350)

        position, expected = start, 0
        for _ in range(steps):
            position = (position + direction.unit) % DIAL_SIZE
            if position == 0:
                expected += 1

        dial = Dial(start)
        assert dial.turn(Rotation(direction, steps)) == expected
        assert dial.position == position
