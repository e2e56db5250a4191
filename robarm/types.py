"""Plain value types shared by the arm controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple

Row = Tuple[float, float, float, float]


@dataclass
class DhParam:
    """Denavit-Hartenberg parameters of one joint (angles in degrees)."""

    alpha: float
    link: float
    disp: float
    theta: float = 0.0


@dataclass(frozen=True)
class Matrix4x4:
    """A 4 by 4 homogeneous transformation matrix stored row by row."""

    rows: Tuple[Row, Row, Row, Row]

    def __init__(self, rows: Sequence[Sequence[float]]) -> None:
        converted = tuple(tuple(float(v) for v in row) for row in rows)
        if len(converted) != 4 or any(len(row) != 4 for row in converted):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", converted)

    @staticmethod
    def identity() -> "Matrix4x4":
        """Return the 4 by 4 identity matrix."""
        return Matrix4x4([[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)])

    def __getitem__(self, key: Tuple[int, int]) -> float:
        row, col = key
        return self.rows[row][col]

    def __matmul__(self, other: object) -> "Matrix4x4":
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Matrix4x4(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.rows]
        )

    def translation(self) -> Tuple[float, float, float]:
        """Return the translational part (last column, first three rows)."""
        return (self.rows[0][3], self.rows[1][3], self.rows[2][3])


@dataclass
class Position:
    """Location and orientation of the end effector."""

    x: float
    y: float
    z: float
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0


@dataclass
class Posture:
    """Angular configuration of the four joints, in degrees."""

    jt1: float = 0.0
    jt2: float = 0.0
    jt3: float = 0.0
    jt4: float = 0.0


@dataclass
class Command:
    """A decoded text command."""

    id: int
    name: str
    value: float = 0.0
    content: str = field(default="")