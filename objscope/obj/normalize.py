# objscope/obj/normalize.py
"""
Пост‑проход после разбора: центрирование по середине bounding‑box,
синтез uv для вершин без ``vt`` и дедупликация вершин по тройке
(vertex, texture, normal).
"""

from math import acos
from typing import Dict, List, Sequence, Tuple

import numpy as np

from objscope.math.vec2 import Vec2
from objscope.math.vec3 import Vec3
from objscope.obj.records import (
    Model,
    RawPosition,
    ResolvedFaceReference,
    TexCoord,
    Vertex,
)

_AXIS_Z = Vec2(0.0, 1.0)


def bounding_box(positions: Sequence[RawPosition]) -> Tuple[Vec3, Vec3]:
    """Покомпонентные min/max всех позиций; пустой вход → (0, 0)."""
    if not positions:
        return Vec3.zero(), Vec3.zero()
    arr = np.array([p.position.as_np() for p in positions], dtype=np.float32)
    return Vec3(*arr.min(axis=0)), Vec3(*arr.max(axis=0))


def synthesize_uv(position: Vec3, center: Vec3, minimum: Vec3) -> TexCoord:
    """
    Детерминированная uv для вершины без текстурных координат:

        u = acos(dot(p, (0, 1)) / |p|) + |p - c|
        v = y - min.y

    где ``p = (x, z)`` – позиция на горизонтальной плоскости, ``c`` – центр
    bounding‑box на той же плоскости. Это не развёртка, а просто
    воспроизводимая эвристика. При ``|p| == 0`` угол принимается за 0.
    """
    pos2d = Vec2(position.x, position.z)
    center2d = Vec2(center.x, center.z)

    length = pos2d.length()
    if length == 0.0:
        angle = 0.0
    else:
        cosine = pos2d.dot(_AXIS_Z) / length
        angle = acos(max(-1.0, min(1.0, cosine)))
    distance = (pos2d - center2d).length()

    return (float(np.float32(angle + distance)),
            float(np.float32(position.y - minimum.y)))


def build_model(positions: Sequence[RawPosition],
                texcoords: Sequence[TexCoord],
                references: Sequence[ResolvedFaceReference]) -> Model:
    """
    Собрать ``Model`` из разрешённых ссылок (по три на треугольник).
    Первая встреча тройки индексов создаёт вершину, повторные
    переиспользуют её номер.
    """
    minimum, maximum = bounding_box(positions)
    center = (minimum + maximum) / 2.0

    seen: Dict[ResolvedFaceReference, int] = {}
    vertices: List[Vertex] = []
    indices: List[int] = []

    for ref in references:
        index = seen.get(ref)
        if index is None:
            index = len(vertices)
            seen[ref] = index
            raw = positions[ref.vertex]

            if ref.texture is not None:
                uv = texcoords[ref.texture]
            elif not texcoords:
                uv = synthesize_uv(raw.position, center, minimum)
            else:
                uv = (0.0, 0.0)

            color = raw.color if raw.color is not None else Vec3.zero()
            vertices.append(Vertex(raw.position - center, color, uv))
        indices.append(index)

    return Model(vertices, indices)
