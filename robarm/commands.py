"""Text command decoding and joint motion for the arm."""

from __future__ import annotations

import dataclasses
import re
import time
from enum import IntEnum
from typing import Callable, Optional

from robarm.joint import Joint
from robarm.logger import Logger
from robarm.types import Command

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _to_float(text: str) -> float:
    """Parse the leading number of a string, or 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


class Tag(IntEnum):
    """Command identifiers."""

    WORLD = 0
    JT1 = 1
    JT2 = 2
    JT3 = 3
    JT4 = 4
    SPEED = 5
    HERE = 6
    POS = 7
    GO_HOME = 8
    GOTO_POS = 9
    GOTO_JOINT = 10
    DEBUG = 11


_NAMES = {
    Tag.WORLD: "world",
    Tag.JT1: "jt1",
    Tag.JT2: "jt2",
    Tag.JT3: "jt3",
    Tag.JT4: "jt4",
    Tag.SPEED: "speed",
    Tag.HERE: "here",
    Tag.POS: "pos",
    Tag.GO_HOME: "home",
    Tag.GOTO_POS: "gotopos",
    Tag.GOTO_JOINT: "gotojt",
    Tag.DEBUG: "debug",
}

_DEFAULTS = {Tag.SPEED: 70.0, Tag.DEBUG: -1.0}


class Commands:
    """The table of known commands and the motions they drive."""

    def __init__(
        self,
        logger: Optional[Logger] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.logger = logger if logger is not None else Logger()
        self.sleep = sleep
        self._list = [
            Command(int(tag), _NAMES[tag], _DEFAULTS.get(tag, 0.0)) for tag in Tag
        ]

    def __len__(self) -> int:
        return len(self._list)

    def __getitem__(self, index: int) -> Command:
        return dataclasses.replace(self._list[index])

    def parse(self, text: str) -> Command:
        """Decode a line such as 'speed 50'; unknown names give an Invalid command."""
        text = text.strip().lower()
        self.logger.log("=======================================>")
        self.logger.log(text, "Decoding Incoming Data: ")
        self.logger.log(len(self._list), "Command Range: ")

        name, space, rest = text.partition(" ")
        value = space + rest

        self.logger.log(len(value), "Command Value lenght: ")

        for cmd in self._list:
            if cmd.name == name:
                if value:
                    cmd.content = value
                    cmd.value = _to_float(value)
                self.logger.log_command(cmd)
                return dataclasses.replace(cmd)

        return Command(-1, "Invalid", 0.0)

    def goto_deg(self, joint: Joint, dest: float) -> None:
        """Sweep a joint one degree at a time from where it is to dest."""
        self._sweep(joint, joint.read(), dest)

    def set_param(self, index: int, value: float) -> None:
        """Set the value of a command; negative values and bad indices raise."""
        if value < 0:
            self.logger.log(value, "Invalid Parameter Value: ")
            raise ValueError(f"invalid parameter value: {value}")
        if not 0 <= index < len(self._list):
            self.logger.log(index, "invalid Param Index: ")
            raise IndexError(f"invalid parameter index: {index}")
        self._list[index].value = value

    def delay(self) -> None:
        """Wait one sweep step; faster speed means a shorter wait."""
        ms = int(10 - self._list[Tag.SPEED].value / 10)
        self.sleep(max(ms, 0) / 1000)

    def _sweep(self, joint: Joint, origin: float, dest: float) -> None:
        self.logger.log("Sweep Started")
        self.logger.log(f"Jt{joint.id} at {origin}")
        self.logger.log(f"Jt{joint.id} goto {dest}")

        step = 1 if dest >= origin else -1
        i = int(origin)
        while (i <= dest) if step > 0 else (i >= dest):
            joint.write(i)
            self.delay()
            i += step

        self.logger.log("Sweep Done")