# robarm

robarm is a small library for a four-joint robot arm. It covers the arm's kinematics, a model of its servo channels, and the text commands that drive it.

## Modules

- `robarm.types` holds the value types.
  - `DhParam` holds the Denavit–Hartenberg parameters of one joint: `alpha`, `link`, `disp` and `theta`. Angles are in degrees.
  - `Matrix4x4` is an immutable homogeneous transform. It is stored row by row. It supports `a @ b`, indexing with `m[row, col]`, `Matrix4x4.identity()` and `translation()`.
  - `Position` holds `x`, `y`, `z`, `a`, `b` and `c`.
  - `Posture` holds the four joint angles `jt1` to `jt4`.
  - `Command` holds `id`, `name`, `value` and `content`.
- `robarm.logger` provides `Logger`, which writes lines prefixed with `==>` to text streams.
  - The first stream given to `Logger(...)` is the monitor. Each line goes to it followed by a newline.
  - Every further stream gets each line preceded by a newline.
  - Beside `log(value, title)` there are `log_posture`, `log_position` and `log_command`. Numbers are printed with two decimals.
- `robarm.servo` models a timer-driven servo channel bank.
  - `us_to_ticks` and `ticks_to_us` convert between pulse widths and ticks.
  - `arduino_map` re-maps integers from one range to another with truncating division.
  - `ServoBank(capacity)` hands out `Servo` channels through `new_servo()`. Once the bank is exhausted, it returns invalid servos.
  - `Servo.write` takes an angle from 0 to 180. Values of 544 and above are taken as a pulse width in microseconds.
  - `Servo` also has `write_microseconds`, `read`, `read_microseconds`, `attach`, `detach` and `attached`.
- `robarm.joint` provides `Joint`, which wraps a `Servo`.
  - It adds an offset to angles before they reach the servo, and removes it again in `read()`.
  - It clamps to `min`/`max` limits, which are in servo coordinates.
  - `delta(dest)` gives the remaining movement to `dest`. It gives `0` when `dest` is out of reach.
- `robarm.kinematic` provides the kinematics.
  - `get_rad` and `get_deg` convert angles using π ≈ 3.14.
  - `Kinematic` holds the arm's D-H table.
  - `forward(posture)` returns the tool `Position`.
  - `inverse(position)` returns a `Posture`.
  - `joint_matrix` and `arm_matrix` expose the transforms. Intermediate products are kept in the attributes `t_mat01` … `t_mat04`.
  - Steps are logged through the given `Logger`.
- `robarm.commands` parses text commands and drives joints.
  - `Tag` enumerates the known commands: `world`, `jt1`–`jt4`, `speed`, `here`, `pos`, `home`, `gotopos`, `gotojt` and `debug`.
  - `Commands.parse` decodes lines such as `speed 50`. It returns a copy of the matching `Command` with the parsed value.
  - `goto_deg(joint, dest)` sweeps a joint one degree per step. It calls `delay()` between steps. The delay shortens as the `speed` value rises, and the default `speed` is 70.
  - `set_param(index, value)` sets a command's value. It raises `ValueError` for a negative value and `IndexError` for a bad index.
  - `len(commands)` gives the size of the table, and `commands[i]` gives a copy of one entry.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import sys

from robarm.commands import Commands
from robarm.joint import Joint
from robarm.kinematic import Kinematic
from robarm.logger import Logger
from robarm.servo import ServoBank
from robarm.types import Posture

log = Logger(sys.stdout)

arm = Kinematic(log)
tip = arm.forward(Posture(jt1=0.0, jt2=45.0, jt3=-30.0, jt4=0.0))
print(tip.x, tip.y, tip.z)

bank = ServoBank(12)
joint = Joint(bank.new_servo(), joint_id=1, offset=0, minimum=1, maximum=180)
joint.attach(9, 1, 180, 0)

commands = Commands(log, sleep=lambda seconds: None)
cmd = commands.parse("jt1 120")
commands.goto_deg(joint, cmd.value)
print(joint.read())
```

When `Commands.parse` does not recognise the command name, it returns a `Command` with id `-1` and name `"Invalid"`.

## What it does not do

- The package talks to no hardware. `ServoBank` and `Servo` only keep pulse widths in memory, and no pins or timers are driven.
- There is no serial port handling. `Logger` writes to whatever text streams you pass it.
- There is no command-line program and no loop that reads commands. Parsed commands are returned to the caller, and it is up to the caller to act on them.