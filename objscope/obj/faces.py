# objscope/obj/faces.py
"""
Работа с гранями OBJ:

* разбор токена ``v``, ``v/vt``, ``v//vn``, ``v/vt/vn``;
* разрешение 1‑based / отрицательных индексов;
* веерная триангуляция многоугольника.
"""

import re
from typing import List, Optional, Sequence, Tuple, TypeVar

from objscope.obj.errors import ErrorType, ObjParseError
from objscope.obj.records import RawFaceReference, ResolvedFaceReference

T = TypeVar("T")

# выходные индексы – u32
MAX_INDEX = 2 ** 32 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(field: str, position: int) -> int:
    if not _INT_RE.fullmatch(field):
        raise ObjParseError(ErrorType.INVALID_PARAMETER, position)
    return int(field)


def parse_face_reference(token: str, position: int = 0) -> RawFaceReference:
    """
    Разобрать один токен строки ``f``.
    Пустое поле между слэшами означает «нет атрибута».
    ``position`` – номер токена в строке, попадает в ошибку.
    """
    fields = token.split("/")
    if len(fields) > 3:
        raise ObjParseError(ErrorType.INVALID_PARAMETER, position)

    vertex = _parse_int(fields[0], position)
    texture: Optional[int] = None
    normal: Optional[int] = None
    if len(fields) > 1 and fields[1]:
        texture = _parse_int(fields[1], position)
    if len(fields) > 2:
        normal = _parse_int(fields[2], position)
    return RawFaceReference(vertex, texture, normal)


def same_shape(references: Sequence[RawFaceReference]) -> Optional[int]:
    """
    Проверить, что все ссылки грани имеют ту же «форму», что и первая.
    Возвращает позицию первой несовпавшей ссылки или None.
    """
    if not references:
        return None
    first = references[0]
    for position, ref in enumerate(references):
        if not first.same_shape(ref):
            return position
    return None


def resolve_index(index: int, length: int) -> int:
    """
    1‑based или отрицательный (с конца) индекс → 0‑based.

    ``i > 0``: ``i - 1``, если ``i <= length``;
    ``i < 0``: ``length - |i|``, если ``|i| <= length``;
    ``i == 0`` недопустим всегда.
    """
    if index > 0 and index <= length:
        resolved = index - 1
    elif index < 0 and -index <= length:
        resolved = length + index
    else:
        raise ObjParseError(ErrorType.INDEX_OUT_OF_BOUND, index)
    if resolved > MAX_INDEX:
        raise ObjParseError(ErrorType.INDEX_OUT_OF_BOUND, index)
    return resolved


def resolve_face_reference(raw: RawFaceReference, positions: int,
                           texcoords: int, normals: int) -> ResolvedFaceReference:
    """Разрешить все три индекса относительно текущих длин таблиц."""
    vertex = resolve_index(raw.vertex, positions)
    texture = None if raw.texture is None else resolve_index(raw.texture, texcoords)
    normal = None if raw.normal is None else resolve_index(raw.normal, normals)
    return ResolvedFaceReference(vertex, texture, normal)


def triangulate(polygon: Sequence[T]) -> List[Tuple[T, T, T]]:
    """
    Веер от первой вершины: (v0, v1, v2), (v0, v2, v3), …

    Корректно только для выпуклых многоугольников; вогнутые могут дать
    пересекающиеся треугольники.
    """
    if len(polygon) < 3:
        raise ValueError(f"triangulate: need at least 3 vertices, got {len(polygon)}")
    anchor = polygon[0]
    return [(anchor, polygon[i], polygon[i + 1])
            for i in range(1, len(polygon) - 1)]
