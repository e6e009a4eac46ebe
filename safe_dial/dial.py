from .rotation import Rotation

DIAL_SIZE = 100
DEFAULT_POSITION = 50


class Dial:
    """
    A safe dial with positions 0 to DIAL_SIZE - 1.

    The dial only changes through turn(), which also reports how many
    times the pointer passed over or landed on 0 while turning.

    Attributes:
        position (int): Where the pointer currently rests.
    """

    def __init__(self, position: int = DEFAULT_POSITION) -> None:
        if not 0 <= position < DIAL_SIZE:
            raise ValueError(
                f"position must be between 0 and {DIAL_SIZE - 1}, got {position}"
            )
        self.position = position

    def __repr__(self) -> str:
        return f"Dial(position={self.position})"

    @property
    def at_zero(self) -> bool:
        return self.position == 0

    def turn(self, rotation: Rotation) -> int:
        """
        Apply a rotation and count zero crossings.

        Rotations may span many revolutions, so the count is worked out
        from the quotient and remainder of the signed step count instead
        of walking the dial one click at a time.

        Args:
            rotation (Rotation): The turn to apply.

        Returns:
            int: How many times the pointer passed over or stopped on 0.
        """
        steps = rotation.signed_steps

        # Truncating division: the remainder keeps the sign of the turn.
        full_revs, rem_steps = divmod(abs(steps), DIAL_SIZE)
        if steps < 0:
            rem_steps = -rem_steps

        zero_crossings = full_revs
        new_position = self.position + rem_steps

        if new_position < 0:
            new_position += DIAL_SIZE
            # Leaving 0 to the left is not a crossing.
            if self.position != 0:
                zero_crossings += 1

        if new_position > DIAL_SIZE - 1:
            new_position -= DIAL_SIZE
            # Landing on 0 is counted below.
            if new_position != 0:
                zero_crossings += 1

        # Landing on 0 after an exact number of revolutions is already
        # in full_revs.
        if new_position == 0 and rem_steps != 0:
            zero_crossings += 1

        assert 0 <= new_position < DIAL_SIZE, f"dial position out of range: {new_position}"
        self.position = new_position
        return zero_crossings
