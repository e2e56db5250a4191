"""Line-oriented status logging to a local monitor and a serial link."""

from __future__ import annotations

from typing import Optional, TextIO

from robarm.types import Command, Position, Posture

_SEPARATOR = "==================================================="


def _fmt(value: object) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def _fnum(value: float) -> str:
    return f"{float(value):.2f}"


class Logger:
    """Writes status lines to text streams.

    The first stream is treated as the local monitor and gets each line
    followed by a newline; every further stream is a link on which each
    line is framed by a leading newline.
    """

    def __init__(self, *args: TextIO) -> None:
        self.monitor: Optional[TextIO] = args[0] if args else None
        self.links = list(args[1:])

    def encode(self, data: str) -> None:
        """Send one line to the monitor and to every link."""
        if self.monitor is not None:
            self.monitor.write(data + "\n")
        for link in self.links:
            link.write("\n" + data)

    def log(self, value: object = "", title: Optional[str] = None) -> None:
        """Log a text or number, optionally with a title."""
        if title is None:
            self.encode("==>" + _fmt(value))
        else:
            self.encode("==>" + title + ": " + _fmt(value))

    def log_posture(self, pt: Posture) -> None:
        """Log the angular position of each joint."""
        self.encode(_SEPARATOR + ">")
        self.encode("==>Angular Position of Each Joint")
        for name, angle in (("JT1", pt.jt1), ("JT2", pt.jt2), ("JT3", pt.jt3), ("JT4", pt.jt4)):
            self.encode(f"==>{name}: {_fnum(angle)}")

    def log_position(self, ps: Position) -> None:
        """Log location and orientation of the end effector."""
        self.encode(_SEPARATOR + ">")
        self.encode("==>Location and Orientation of Endeffector")
        for name, coord in (
            ("X", ps.x),
            ("Y", ps.y),
            ("Z", ps.z),
            ("A", ps.a),
            ("B", ps.b),
            ("C", ps.c),
        ):
            self.encode(f"==>{name}: {_fnum(coord)}")

    def log_command(self, cmd: Command) -> None:
        """Log a decoded command on one line."""
        self.encode("==================================================>")
        self.encode(
            f"==>ID: {cmd.id}| Name: {cmd.name}| Value: {_fnum(cmd.value)}| Content: {cmd.content}"
        )