"""
Математический суб‑пакет: Vec2, Vec3, Vec4, Mat4.
Все типы хранят компоненты в numpy.float32.
"""

from objscope.math.vec2 import Vec2
from objscope.math.vec3 import Vec3
from objscope.math.vec4 import Vec4
from objscope.math.mat4 import Mat4

__all__ = ["Vec2", "Vec3", "Vec4", "Mat4"]
