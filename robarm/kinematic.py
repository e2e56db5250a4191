"""Denavit-Hartenberg kinematic model of the four-axis arm."""

from __future__ import annotations

import math
from typing import List, Optional

from robarm.logger import Logger
from robarm.types import DhParam, Matrix4x4, Position, Posture

_PI = 3.14


def get_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (_PI / 180)


def get_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180 / _PI)


def _div(a: float, b: float) -> float:
    """Floating-point division following IEEE rules for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _round(x: float) -> float:
    """Round half away from zero, passing non-finite values through."""
    if not math.isfinite(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _acos(x: float) -> float:
    if math.isnan(x) or x < -1.0 or x > 1.0:
        return math.nan
    return math.acos(x)


def _f(value: float) -> str:
    return f"{value:.2f}"


class Kinematic:
    """Forward and inverse kinematics of the arm."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger if logger is not None else Logger()
        self.dh: List[DhParam] = [
            DhParam(90.0, 28.691, 0.0, 0.0),
            DhParam(-180.0, 58.0, 0.0, 0.0),
            DhParam(180.0, 68.3, 0.0, 0.0),
            DhParam(0.0, 66.539, 0.0, 0.0),
        ]
        identity = Matrix4x4.identity()
        self.t_mat01 = identity
        self.t_mat12 = identity
        self.t_mat23 = identity
        self.t_mat34 = identity
        self.t_mat02 = identity
        self.t_mat03 = identity
        self.t_mat04 = identity

    def print_matrix(self, mat: Matrix4x4, heading: str) -> None:
        """Log a matrix row by row under a heading."""
        self.logger.log("=============================")
        self.logger.log(heading)
        for i, row in enumerate(mat.rows, start=1):
            self.logger.log(
                " | ".join(f"Mat{i}{j}: {_f(v)}" for j, v in enumerate(row, start=1)).replace(
                    " | ", "| "
                )
            )

    def forward(self, posture: Posture) -> Position:
        """Compute the end effector position for a joint posture."""
        mat = self.arm_matrix(posture)
        self.print_matrix(mat, "Arm Transformation Matrix")
        x, y, z = mat.translation()
        return Position(x, y, z)

    def inverse(self, position: Position) -> Posture:
        """Compute a joint posture for an end effector position."""
        ps = position
        link2 = self.dh[1].link
        link3 = self.dh[2].link
        link4 = self.dh[3].link

        jt1 = get_deg(math.atan(get_rad(_div(ps.y, ps.x))))

        pa24 = math.atan(get_rad(_div(ps.y, ps.z)))
        t = math.atan2(ps.y, ps.z)
        pr4 = math.sqrt(ps.x ** 2 + ps.y ** 2)
        pz4 = ps.z
        pr3 = pr4 - link4 * math.cos(pa24)
        pz3 = pz4 - link4 * math.sin(pa24)

        n3 = pr3 ** 2 + pz3 ** 2 + (link2 ** 2 + link3 ** 2)
        d3 = 2 * link2 * link3
        jt3 = get_deg(_acos(_round(_div(n3, d3))))

        rad3 = get_rad(jt3)
        n2 = pr3 * (link2 + link3 * math.cos(rad3)) + pz3 * (link3 * math.sin(rad3))
        d2 = pr3 ** 2 + pz3 ** 2
        jt2 = get_deg(_acos(_round(_div(n2, d2))))

        jt4 = pa24 - (jt2 + jt3)

        for label, value in (
            ("pa24: ", pa24),
            ("pat: ", t),
            ("pr4: ", pr4),
            ("pz4: ", pz4),
            ("pr3: ", pr3),
            ("pz3: ", pz3),
            ("n2 ", n2),
            ("n3: ", n3),
            ("d2: ", d2),
            ("d3 ", d3),
        ):
            self.logger.log(label + _f(value))

        return Posture(jt1, jt2, jt3, jt4)

    def joint_matrix(self, dh: DhParam) -> Matrix4x4:
        """Return the Denavit-Hartenberg transformation of one joint."""
        ct = math.cos(get_rad(dh.theta))
        st = math.sin(get_rad(dh.theta))
        ca = math.cos(get_rad(dh.alpha))
        sa = math.sin(get_rad(dh.alpha))
        return Matrix4x4(
            [
                [ct, -ca * st, sa * st, dh.link * ct],
                [st, ca * ct, -sa * ct, dh.link * st],
                [0.0, sa, ca, dh.disp],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def arm_matrix(self, posture: Posture) -> Matrix4x4:
        """Return the base-to-tool transformation for a posture."""
        for dh, theta in zip(self.dh, (posture.jt1, posture.jt2, posture.jt3, posture.jt4)):
            dh.theta = theta

        self.logger.log("===================================================")
        self.logger.log("D-H Paramter")
        for n, dh in enumerate(self.dh, start=1):
            self.logger.log(
                f"dhPar{n}: {_f(dh.alpha)} ,{_f(dh.link)}, {_f(dh.disp)}, {_f(dh.theta)}"
            )
        self.logger.log("===================================================")

        self.t_mat01, self.t_mat12, self.t_mat23, self.t_mat34 = (
            self.joint_matrix(dh) for dh in self.dh
        )
        self.t_mat02 = self.t_mat01 @ self.t_mat12
        self.t_mat03 = self.t_mat02 @ self.t_mat23
        self.t_mat04 = self.t_mat03 @ self.t_mat34
        return self.t_mat04