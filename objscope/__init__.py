"""
objscope – загрузчик Wavefront OBJ и линейная алгебра для рендера.

Текст OBJ превращается в дедуплицированный интерлив‑буфер вершин
(position, color, texcoords) и массив треугольных индексов.
"""

from objscope.utils import logger
from objscope.math import Vec2, Vec3, Vec4, Mat4
from objscope.obj import (
    ErrorType,
    Model,
    ObjParseError,
    Vertex,
    parse_obj,
)
from objscope.utils.loader import load_obj
from objscope.scene import Camera

__version__ = "1.0.0"

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "Mat4",
    "ErrorType",
    "Model",
    "ObjParseError",
    "Vertex",
    "parse_obj",
    "load_obj",
    "Camera",
]
