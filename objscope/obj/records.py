# objscope/obj/records.py
"""
Записи разбора OBJ и итоговая модель.

Сырые записи (позиции, texcoords, нормали, ссылки граней) живут только
внутри одного вызова ``parse_obj``; наружу уходит лишь ``Model``.
"""

from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from objscope.math.vec3 import Vec3

TexCoord = Tuple[float, float]

# Раскладка интерлив‑буфера: (атрибут, число float32)
VERTEX_LAYOUT = (
    ("position", 3),
    ("color", 3),
    ("texture_coordinates", 2),
)
VERTEX_STRIDE = sum(size for _, size in VERTEX_LAYOUT)


class RawPosition:
    """Одна строка ``v``: позиция и (необязательный) цвет."""
    __slots__ = ("position", "color")

    def __init__(self, position: Vec3, color: Optional[Vec3] = None):
        self.position = position
        self.color = color

    def __repr__(self):
        return f"RawPosition({self.position!r}, color={self.color!r})"


class RawFaceReference(NamedTuple):
    """Токен грани до разрешения: индексы 1‑based или отрицательные."""
    vertex: int
    texture: Optional[int] = None
    normal: Optional[int] = None

    def same_shape(self, other: "RawFaceReference") -> bool:
        return ((self.texture is None) == (other.texture is None)
                and (self.normal is None) == (other.normal is None))


class ResolvedFaceReference(NamedTuple):
    """Проверенные 0‑based индексы. Ключ дедупликации вершин."""
    vertex: int
    texture: Optional[int] = None
    normal: Optional[int] = None


class Vertex:
    """Выходная вершина: позиция (уже отцентрована), цвет, uv."""
    __slots__ = ("position", "color", "texture_coordinates")

    def __init__(self, position: Vec3, color: Vec3,
                 texture_coordinates: TexCoord):
        self.position = position
        self.color = color
        self.texture_coordinates = texture_coordinates

    def to_list(self) -> List[float]:
        """8 float‑ов в порядке VERTEX_LAYOUT."""
        return [*self.position, *self.color, *self.texture_coordinates]

    def __repr__(self):
        u, v = self.texture_coordinates
        return (f"Vertex(position={self.position!r}, color={self.color!r}, "
                f"uv=({u:.3f}, {v:.3f}))")


class Model:
    """Готовая к загрузке в GPU геометрия: вершины + треугольные индексы."""

    def __init__(self, vertices: List[Vertex], indices):
        self.vertices = vertices
        self.indices = np.asarray(indices, dtype=np.uint32)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def vertex_buffer(self) -> np.ndarray:
        """Интерлив‑массив (N, 8) float32: position, color, texcoords."""
        if not self.vertices:
            return np.zeros((0, VERTEX_STRIDE), dtype=np.float32)
        return np.array([v.to_list() for v in self.vertices],
                        dtype=np.float32)

    def index_buffer(self) -> np.ndarray:
        return self.indices.copy()

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """(min, max) позиций выходных вершин."""
        if not self.vertices:
            zero = np.zeros(3, dtype=np.float32)
            return zero, zero.copy()
        positions = self.vertex_buffer()[:, 0:3]
        return positions.min(axis=0), positions.max(axis=0)

    def __repr__(self):
        return (f"Model(vertices={len(self.vertices)}, "
                f"triangles={self.triangle_count})")
