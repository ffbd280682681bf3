# objscope/math/vec3.py
# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32).
Основная «валюта» загрузчика: позиции, цвета, нормали.
"""

import numpy as np
from typing import Iterable, Tuple


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    @staticmethod
    def zero() -> "Vec3":
        return Vec3()

    @staticmethod
    def from_iterable(values: Iterable[float]) -> "Vec3":
        """Первые три элемента итерируемого объекта → Vec3."""
        it = iter(values)
        return Vec3(next(it), next(it), next(it))

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float):
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float):
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float):
        self._v[2] = float(value)

    def __getitem__(self, index: int) -> float:
        return float(self._v[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._v[index] = float(value)

    def __iter__(self):
        return iter(self._v.tolist())

    def __len__(self) -> int:
        return 3

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v + other._v))

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v - other._v))

    def __mul__(self, other) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(*(self._v * other._v))
        return Vec3(*(self._v * np.float32(other)))

    __rmul__ = __mul__

    def __truediv__(self, other) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(*(self._v / other._v))
        return Vec3(*(self._v / np.float32(other)))

    def __neg__(self) -> "Vec3":
        return Vec3(*(-self._v))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(*np.cross(self._v, other._v))

    def norm2(self) -> float:
        """Квадрат длины (без корня)."""
        return float(np.dot(self._v, self._v))

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def normalized(self) -> "Vec3":
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(*(self._v / n))

    def min(self, other: "Vec3") -> "Vec3":
        """Покомпонентный минимум."""
        return Vec3(*np.minimum(self._v, other._v))

    def max(self, other: "Vec3") -> "Vec3":
        """Покомпонентный максимум."""
        return Vec3(*np.maximum(self._v, other._v))

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
