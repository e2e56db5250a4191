"""A robot arm joint driven by one servo channel."""

from __future__ import annotations

from typing import Optional

from robarm.servo import Servo


class Joint:
    """A servo-driven joint with software limits and a zero offset.

    Angles handed to and returned from a joint are in joint coordinates.
    The offset is added before the angle reaches the servo. The limits are
    in servo coordinates.
    """

    def __init__(
        self,
        servo: Servo,
        joint_id: int = 0,
        offset: int = 0,
        minimum: int = 0,
        maximum: int = 180,
    ) -> None:
        self.servo = servo
        self.id = joint_id
        self.offset = offset
        self.min = minimum
        self.max = maximum

    def write(self, degree: int) -> None:
        """Drive the joint to an angle, clamped to the servo limits."""
        deg = int(degree) + self.offset
        self.servo.write(min(max(deg, self.min), self.max))

    def attach(
        self,
        pin: int,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> None:
        """Bind the servo to a pin, optionally setting limits and offset."""
        if minimum is not None:
            self.min = minimum
        if maximum is not None:
            self.max = maximum
        if offset is not None:
            self.offset = offset
        self.servo.attach(pin)

    def limit(self, minimum: int, maximum: int) -> None:
        """Set the servo-side angle limits."""
        self.min = minimum
        self.max = maximum

    def read(self) -> int:
        """Return the joint angle, with the offset removed."""
        return self.servo.read() - self.offset

    def read_raw(self) -> int:
        """Return the servo angle as the servo sees it."""
        return self.servo.read()

    def read_microseconds(self) -> int:
        """Return the servo pulse width in microseconds."""
        return self.servo.read_microseconds()

    def delta(self, dest: int) -> int:
        """Return how far the joint must move to reach dest, or 0 if unreachable."""
        if dest < self.min - self.offset or dest > self.max - self.offset:
            return 0
        return dest - self.read()