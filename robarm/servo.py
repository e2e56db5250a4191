"""Model of a timer-driven hobby servo channel bank."""

from __future__ import annotations

from dataclasses import dataclass

MIN_PULSE_WIDTH = 544
MAX_PULSE_WIDTH = 2400
DEFAULT_PULSE_WIDTH = 1500
REFRESH_INTERVAL = 20000
SERVOS_PER_TIMER = 12
TIMER_COUNT = 1
MAX_SERVOS = TIMER_COUNT * SERVOS_PER_TIMER
INVALID_SERVO = 255
TRIM_DURATION = 5
CLOCK_CYCLES_PER_MICROSECOND = 48


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _int8(value: int) -> int:
    return ((value + 128) & 0xFF) - 128


def us_to_ticks(us: int) -> int:
    """Convert microseconds to timer ticks."""
    return _cdiv(CLOCK_CYCLES_PER_MICROSECOND * int(us), 16)


def ticks_to_us(ticks: int) -> int:
    """Convert timer ticks back to microseconds."""
    return ((int(ticks) & 0xFFFFFFFF) * 16) // CLOCK_CYCLES_PER_MICROSECOND


def arduino_map(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map an integer from one range to another with truncating division."""
    return _cdiv((value - in_min) * (out_max - out_min), in_max - in_min) + out_min


@dataclass
class _Channel:
    pin: int = 0
    active: bool = False
    ticks: int = 0


class ServoBank:
    """Fixed set of servo channels driven by shared timers."""

    def __init__(self, capacity: int = MAX_SERVOS) -> None:
        self.capacity = capacity
        self._channels = [_Channel() for _ in range(capacity)]
        self._count = 0
        self._running: set[int] = set()

    def new_servo(self) -> "Servo":
        """Allocate the next channel; an exhausted bank yields an invalid servo."""
        if self._count < self.capacity:
            index = self._count
            self._count += 1
            self._channels[index].ticks = us_to_ticks(DEFAULT_PULSE_WIDTH)
        else:
            index = INVALID_SERVO
        return Servo(self, index)

    def _timer_active(self, timer: int) -> bool:
        start = timer * SERVOS_PER_TIMER
        return any(ch.active for ch in self._channels[start:start + SERVOS_PER_TIMER])


class Servo:
    """One servo channel of a ServoBank."""

    def __init__(self, bank: ServoBank, index: int) -> None:
        self.bank = bank
        self.index = index
        self._min = 0
        self._max = 0

    @property
    def _valid(self) -> bool:
        return self.index < self.bank.capacity

    @property
    def _servo_min(self) -> int:
        return MIN_PULSE_WIDTH - self._min * 4

    @property
    def _servo_max(self) -> int:
        return MAX_PULSE_WIDTH - self._max * 4

    def attach(self, pin: int, min_pulse: int = MIN_PULSE_WIDTH, max_pulse: int = MAX_PULSE_WIDTH) -> int:
        """Bind the channel to a pin with pulse limits in microseconds."""
        if self._valid:
            channel = self.bank._channels[self.index]
            channel.pin = pin & 0x3F
            self._min = _int8(_cdiv(MIN_PULSE_WIDTH - min_pulse, 4))
            self._max = _int8(_cdiv(MAX_PULSE_WIDTH - max_pulse, 4))
            timer = self.index // SERVOS_PER_TIMER
            if not self.bank._timer_active(timer):
                self.bank._running.add(timer)
            channel.active = True
        return self.index

    def detach(self) -> None:
        """Stop pulsing the channel."""
        if not self._valid:
            return
        self.bank._channels[self.index].active = False
        timer = self.index // SERVOS_PER_TIMER
        if not self.bank._timer_active(timer):
            self.bank._running.discard(timer)

    def write(self, value: int) -> None:
        """Set an angle in degrees, or a pulse width if the value is large."""
        value = int(value)
        if value < MIN_PULSE_WIDTH:
            value = min(max(value, 0), 180)
            value = arduino_map(value, 0, 180, self._servo_min, self._servo_max)
        self.write_microseconds(value)

    def write_microseconds(self, value: int) -> None:
        """Set the pulse width in microseconds, clamped to the channel limits."""
        if not self._valid:
            return
        value = min(max(int(value), self._servo_min), self._servo_max)
        self.bank._channels[self.index].ticks = us_to_ticks(value - TRIM_DURATION)

    def read(self) -> int:
        """Return the last written pulse as an angle between 0 and 180."""
        return arduino_map(self.read_microseconds() + 1, self._servo_min, self._servo_max, 0, 180)

    def read_microseconds(self) -> int:
        """Return the last written pulse width in microseconds."""
        if self.index == INVALID_SERVO:
            return 0
        return ticks_to_us(self.bank._channels[self.index].ticks) + TRIM_DURATION

    def attached(self) -> bool:
        """Whether the channel is currently pulsing."""
        return self._valid and self.bank._channels[self.index].active