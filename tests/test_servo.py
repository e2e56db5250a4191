import pytest

from robarm.servo import (
    INVALID_SERVO,
    MAX_PULSE_WIDTH,
    MIN_PULSE_WIDTH,
    ServoBank,
    arduino_map,
    ticks_to_us,
    us_to_ticks,
)


@pytest.mark.parametrize("us", [0, 3, 544, 1500, 2400, 20000])
def test_ticks_round_trip(us):
    assert ticks_to_us(us_to_ticks(us)) == us


def test_ticks_grow_with_time():
    assert us_to_ticks(2000) > us_to_ticks(1000)


def test_map_endpoints():
    assert arduino_map(0, 0, 180, MIN_PULSE_WIDTH, MAX_PULSE_WIDTH) == MIN_PULSE_WIDTH
    assert arduino_map(180, 0, 180, MIN_PULSE_WIDTH, MAX_PULSE_WIDTH) == MAX_PULSE_WIDTH


def test_map_midpoint():
    assert arduino_map(5, 0, 10, 0, 100) == 50


def test_map_truncates_toward_zero():
    assert arduino_map(-1, 0, 3, 0, 1) == 0


def test_new_servos_get_consecutive_indices():
    bank = ServoBank(3)
    assert [bank.new_servo().index for _ in range(3)] == [0, 1, 2]


def test_exhausted_bank_gives_invalid_servo():
    bank = ServoBank(1)
    bank.new_servo()
    extra = bank.new_servo()
    assert extra.index == INVALID_SERVO
    assert extra.read_microseconds() == 0
    assert extra.attach(4) == INVALID_SERVO
    assert extra.attached() is False


def test_attach_and_detach():
    servo = ServoBank().new_servo()
    assert servo.attached() is False
    assert servo.attach(9) == 0
    assert servo.attached() is True
    servo.detach()
    assert servo.attached() is False


@pytest.mark.parametrize("degree", [0, 1, 45, 90, 135, 179, 180])
def test_write_read_angle_round_trip(degree):
    servo = ServoBank().new_servo()
    servo.attach(9)
    servo.write(degree)
    assert servo.read() == degree


@pytest.mark.parametrize("us", [600, 1000, 1500, 2000])
def test_write_read_microseconds_round_trip(us):
    servo = ServoBank().new_servo()
    servo.attach(9)
    servo.write_microseconds(us)
    assert servo.read_microseconds() == us


def test_large_write_value_is_a_pulse_width():
    servo = ServoBank().new_servo()
    servo.attach(9)
    servo.write(1000)
    assert servo.read_microseconds() == 1000


def test_angles_are_clamped():
    servo = ServoBank().new_servo()
    servo.attach(9)
    servo.write(-10)
    assert servo.read() == 0
    servo.write(300)
    assert servo.read() == 180


def test_pulse_widths_are_clamped():
    servo = ServoBank().new_servo()
    servo.attach(9)
    servo.write_microseconds(5000)
    assert servo.read_microseconds() == MAX_PULSE_WIDTH
    servo.write_microseconds(10)
    assert servo.read_microseconds() == MIN_PULSE_WIDTH


def test_custom_pulse_limits():
    servo = ServoBank().new_servo()
    servo.attach(9, 1000, 2000)
    servo.write(0)
    assert servo.read_microseconds() == 1000
    servo.write(180)
    assert servo.read_microseconds() == 2000
    assert servo.read() == 180


def test_channels_are_independent():
    bank = ServoBank()
    a, b = bank.new_servo(), bank.new_servo()
    a.attach(2)
    b.attach(3)
    a.write(30)
    b.write(150)
    assert (a.read(), b.read()) == (30, 150)