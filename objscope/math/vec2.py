# objscope/math/vec2.py
"""
Двумерный вектор (float32): проекции на плоскость и texcoords.
"""

import numpy as np
from typing import Iterable, Tuple


class Vec2:
    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = np.array([x, y], dtype=np.float32)

    @staticmethod
    def zero() -> "Vec2":
        return Vec2()

    @staticmethod
    def from_iterable(values: Iterable[float]) -> "Vec2":
        it = iter(values)
        return Vec2(next(it), next(it))

    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    def __getitem__(self, index: int) -> float:
        return float(self._v[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._v[index] = float(value)

    def __iter__(self):
        return iter(self._v.tolist())

    def __len__(self) -> int:
        return 2

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(*(self._v + other._v))

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(*(self._v - other._v))

    def __mul__(self, other) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(*(self._v * other._v))
        return Vec2(*(self._v * np.float32(other)))

    __rmul__ = __mul__

    def __truediv__(self, other) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(*(self._v / other._v))
        return Vec2(*(self._v / np.float32(other)))

    def __neg__(self) -> "Vec2":
        return Vec2(*(-self._v))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def dot(self, other: "Vec2") -> float:
        return float(np.dot(self._v, other._v))

    def norm2(self) -> float:
        return float(np.dot(self._v, self._v))

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def normalized(self) -> "Vec2":
        n = self.length()
        if n == 0.0:
            return Vec2()
        return Vec2(*(self._v / n))

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
