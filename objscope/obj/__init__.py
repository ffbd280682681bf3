"""
Загрузчик Wavefront OBJ: текст → дедуплицированный вершинный/индексный буфер.
"""

from objscope.obj.errors import ErrorType, ObjParseError
from objscope.obj.records import (
    Model,
    RawFaceReference,
    RawPosition,
    ResolvedFaceReference,
    Vertex,
    VERTEX_LAYOUT,
    VERTEX_STRIDE,
)
from objscope.obj.faces import (
    parse_face_reference,
    resolve_face_reference,
    resolve_index,
    same_shape,
    triangulate,
)
from objscope.obj.normalize import build_model, synthesize_uv
from objscope.obj.parser import ObjParser, parse_obj

__all__ = [
    "ErrorType",
    "ObjParseError",
    "Model",
    "RawFaceReference",
    "RawPosition",
    "ResolvedFaceReference",
    "Vertex",
    "VERTEX_LAYOUT",
    "VERTEX_STRIDE",
    "parse_face_reference",
    "resolve_face_reference",
    "resolve_index",
    "same_shape",
    "triangulate",
    "build_model",
    "synthesize_uv",
    "ObjParser",
    "parse_obj",
]
