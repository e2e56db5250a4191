"""Kinematics, servo channel model, logging and command parsing for a four-joint robot arm."""

__version__ = "0.1.0"

__all__ = ["commands", "joint", "kinematic", "logger", "servo", "types"]