import pytest

from robarm.joint import Joint
from robarm.servo import ServoBank


@pytest.fixture
def joint():
    bank = ServoBank()
    jt = Joint(bank.new_servo(), joint_id=1)
    jt.attach(3)
    return jt


def test_write_read_round_trip(joint):
    joint.write(90)
    assert joint.read() == 90
    assert joint.read_raw() == 90


def test_offset_is_applied_and_removed(joint):
    joint.offset = 10
    joint.write(80)
    assert joint.read_raw() == 90
    assert joint.read() == 80


def test_attach_sets_limits_and_offset():
    bank = ServoBank()
    jt = Joint(bank.new_servo())
    jt.attach(4, 20, 100, 5)
    assert (jt.min, jt.max, jt.offset) == (20, 100, 5)
    assert jt.servo.attached()


def test_write_clamps_to_upper_limit(joint):
    joint.limit(20, 100)
    joint.write(150)
    assert joint.read_raw() == 100


def test_write_clamps_to_lower_limit(joint):
    joint.limit(20, 100)
    joint.write(-50)
    assert joint.read_raw() == 20


def test_read_microseconds_matches_servo(joint):
    joint.write(45)
    assert joint.read_microseconds() == joint.servo.read_microseconds()


def test_delta_in_range(joint):
    joint.write(90)
    assert joint.delta(100) == 100 - joint.read()
    assert joint.delta(joint.read()) == 0


def test_delta_out_of_range_is_zero(joint):
    joint.limit(20, 100)
    joint.write(50)
    assert joint.delta(150) == 0
    assert joint.delta(10) == 0


def test_delta_respects_offset(joint):
    joint.limit(20, 100)
    joint.offset = 10
    joint.write(50)
    assert joint.delta(95) == 0
    assert joint.delta(85) == 85 - joint.read()