# objscope/math/mat4.py
"""
Матрица 4×4 (float32, row‑major).

Соглашение: векторы‑столбцы, преобразование применяется слева
(``M @ v``), композиция ``A @ B`` сначала применяет B.
"""
import numpy as np
from math import radians, tan, sin, cos

from objscope.math.vec3 import Vec3
from objscope.math.vec4 import Vec4


class Mat4:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=np.float32))

    @staticmethod
    def empty():
        """Нулевая матрица."""
        return Mat4(np.zeros((4, 4), dtype=np.float32))

    @staticmethod
    def translate(vec) -> "Mat4":
        x, y, z = vec
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(vec) -> "Mat4":
        sx, sy, sz = vec
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def rotate(axis, angle: float) -> "Mat4":
        """
        Поворот на ``angle`` радиан вокруг ``axis`` (формула Родрига).
        Ось нормализуется; нулевая ось – ошибка.
        """
        a = Vec3.from_iterable(axis)
        if a.norm2() == 0.0:
            raise ValueError("Mat4.rotate: zero rotation axis")
        x, y, z = a.normalized()
        c, s = cos(angle), sin(angle)
        t = 1.0 - c

        m = np.identity(4, dtype=np.float32)
        m[0, 0] = t * x * x + c
        m[0, 1] = t * x * y - z * s
        m[0, 2] = t * x * z + y * s

        m[1, 0] = t * y * x + z * s
        m[1, 1] = t * y * y + c
        m[1, 2] = t * y * z - x * s

        m[2, 0] = t * z * x - y * s
        m[2, 1] = t * z * y + x * s
        m[2, 2] = t * z * z + c
        return Mat4(m)

    @staticmethod
    def perspective(fov_deg: float, aspect: float,
                    z_near: float, z_far: float):
        """
        Правосторонняя перспектива в стиле OpenGL: после деления на w
        ближняя плоскость уходит в z = -1, дальняя – в z = +1.
        """
        half = tan(radians(fov_deg) / 2.0)
        if half == 0.0 or aspect == 0.0 or z_near == z_far:
            raise ValueError(
                f"Degenerate perspective: fov={fov_deg}, aspect={aspect}, "
                f"near={z_near}, far={z_far}"
            )
        f = 1.0 / half
        m = np.zeros((4, 4), dtype=np.float32)
        m[0, 0] = f / aspect
        m[1, 1] = f
        m[2, 2] = (z_far + z_near) / (z_near - z_far)
        m[2, 3] = (2.0 * z_far * z_near) / (z_near - z_far)
        m[3, 2] = -1.0
        return Mat4(m)

    @staticmethod
    def look_at(eye, target, up) -> "Mat4":
        """View‑матрица: базис right/up/direction по Граму–Шмидту."""
        eye = Vec3.from_iterable(eye)
        target = Vec3.from_iterable(target)
        up = Vec3.from_iterable(up)

        direction = (eye - target).normalized()
        right = up.cross(direction).normalized()
        cam_up = direction.cross(right)

        m = np.identity(4, dtype=np.float32)
        m[0, :3] = right.as_np()
        m[1, :3] = cam_up.as_np()
        m[2, :3] = direction.as_np()

        return Mat4(m) @ Mat4.translate(-eye)

    def transpose(self) -> "Mat4":
        return Mat4(self.m.T)

    # -----------------------------------------------------------------
    # операторы
    # -----------------------------------------------------------------
    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return Mat4(np.dot(self.m, other.m))
        if isinstance(other, Vec4):
            return Vec4(*np.dot(self.m, other.as_np()))
        return NotImplemented

    def __mul__(self, scalar: float) -> "Mat4":
        return Mat4(self.m * np.float32(scalar))

    __rmul__ = __mul__

    def __add__(self, other: "Mat4") -> "Mat4":
        return Mat4(self.m + other.m)

    def __getitem__(self, index):
        return self.m[index]

    def __setitem__(self, index, value) -> None:
        self.m[index] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def allclose(self, other: "Mat4", atol: float = 1e-6) -> bool:
        return bool(np.allclose(self.m, other.m, atol=atol))

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        """Row‑major копия 4×4."""
        return self.m.copy()

    def to_gl(self) -> np.ndarray:
        """Транспонируем для передачи в OpenGL (столбцы‑массив)."""
        return self.m.T.copy()
