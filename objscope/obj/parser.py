# objscope/obj/parser.py
# -*- coding: utf-8 -*-
"""
Построчный разбор подмножества Wavefront OBJ.

Поддерживаются ``v``, ``vt``, ``vn``, ``f`` и ``s off``.
``g``, ``o``, ``mtllib``, ``usemtl`` пропускаются с предупреждением,
остальные геометрические директивы (кривые, поверхности, точки, линии)
приводят к ошибке ``UNSUPPORTED``. Первая же ошибка прерывает разбор.
"""

import re
from typing import Iterable, List, Optional, Union

import numpy as np

from objscope.math.vec3 import Vec3
from objscope.obj.errors import ErrorType, ObjParseError
from objscope.obj.faces import (
    parse_face_reference,
    resolve_face_reference,
    same_shape,
    triangulate,
)
from objscope.obj.normalize import build_model
from objscope.obj.records import (
    Model,
    RawPosition,
    ResolvedFaceReference,
    TexCoord,
)
from objscope.utils.logger import logger

IGNORED_DIRECTIVES = frozenset({"g", "o", "mtllib", "usemtl"})

UNSUPPORTED_DIRECTIVES = frozenset({
    "p", "l", "curv", "curv2D", "surf", "mg", "parm", "trim",
    "hole", "scrv", "sp", "end", "con",
})


# float() понимает «1_0» и не‑ASCII цифры, поэтому поле сначала сверяется
# с ASCII‑грамматикой числа
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


def _parse_floats(fields: List[str]) -> List[np.float32]:
    values = []
    for position, field in enumerate(fields):
        if not _FLOAT_RE.fullmatch(field):
            raise ObjParseError(ErrorType.INVALID_PARAMETER, position)
        values.append(np.float32(float(field)))
    return values


class ObjParser:
    """
    Накопитель одного разбора: таблицы атрибутов и список разрешённых
    ссылок граней (уже триангулированных, но ещё не дедуплицированных).
    """

    def __init__(self):
        self.positions: List[RawPosition] = []
        self.texcoords: List[TexCoord] = []
        self.normals: List[Vec3] = []
        self.references: List[ResolvedFaceReference] = []
        self._line_no = 0

    # -----------------------------------------------------------------
    def feed(self, line_no: int, line: str) -> None:
        """Разобрать одну строку; ошибка получает номер и текст строки."""
        self._line_no = line_no
        try:
            self._dispatch(line)
        except ObjParseError as exc:
            exc.locate(line_no, line)
            raise

    def finish(self) -> Model:
        return build_model(self.positions, self.texcoords, self.references)

    # -----------------------------------------------------------------
    def _dispatch(self, line: str) -> None:
        if not line.strip() or line.startswith("#"):
            return

        keyword, sep, rest = line.partition(" ")
        if not sep:
            raise ObjParseError(ErrorType.INVALID_LINE)
        args = rest.split()

        if keyword == "v":
            self._vertex(args)
        elif keyword == "vt":
            self._texcoord(args)
        elif keyword == "vn":
            self._normal(args)
        elif keyword == "f":
            self._face(args)
        elif keyword == "s":
            self._smoothing(args)
        elif keyword in IGNORED_DIRECTIVES:
            logger.warning(f"[ObjParser] line {self._line_no}: '{keyword}' "
                           f"is not implemented, ignored")
        elif keyword in UNSUPPORTED_DIRECTIVES:
            raise ObjParseError(ErrorType.UNSUPPORTED, keyword)
        else:
            raise ObjParseError(ErrorType.INVALID_ENTRY, keyword)

    def _vertex(self, args: List[str]) -> None:
        # x y z [w] | x y z r g b
        if len(args) not in (3, 4, 6):
            raise ObjParseError(ErrorType.INVALID_PARAMETER_NUMBER)
        values = _parse_floats(args)
        if len(values) == 4:
            logger.warning(f"[ObjParser] line {self._line_no}: "
                           f"w component ignored")
        color: Optional[Vec3] = None
        if len(values) == 6:
            color = Vec3(*values[3:6])
        self.positions.append(RawPosition(Vec3(*values[0:3]), color))

    def _texcoord(self, args: List[str]) -> None:
        # u v [w]
        if len(args) not in (2, 3):
            raise ObjParseError(ErrorType.INVALID_PARAMETER_NUMBER)
        values = _parse_floats(args)
        if len(values) == 3:
            logger.warning(f"[ObjParser] line {self._line_no}: "
                           f"w texture component ignored")
        self.texcoords.append((float(values[0]), float(values[1])))

    def _normal(self, args: List[str]) -> None:
        if len(args) != 3:
            raise ObjParseError(ErrorType.INVALID_PARAMETER_NUMBER)
        self.normals.append(Vec3(*_parse_floats(args)))

    def _face(self, args: List[str]) -> None:
        raw = [parse_face_reference(token, position)
               for position, token in enumerate(args)]
        mismatch = same_shape(raw)
        if mismatch is not None:
            raise ObjParseError(ErrorType.INVALID_PARAMETER, mismatch)

        resolved = [
            resolve_face_reference(ref, len(self.positions),
                                   len(self.texcoords), len(self.normals))
            for ref in raw
        ]
        if len(resolved) < 3:
            raise ObjParseError(ErrorType.INVALID_PARAMETER_NUMBER)

        for triangle in triangulate(resolved):
            self.references.extend(triangle)

    def _smoothing(self, args: List[str]) -> None:
        if len(args) != 1:
            raise ObjParseError(ErrorType.INVALID_PARAMETER_NUMBER)
        if args[0] == "off":
            return
        if args[0] == "on":
            raise ObjParseError(ErrorType.UNSUPPORTED, "s on")
        raise ObjParseError(ErrorType.INVALID_ENTRY, args[0])


def _numbered_lines(lines: Iterable[Union[str, bytes]]):
    """(номер, строка без \\r\\n); сбой чтения → IO_ERROR."""
    it = iter(lines)
    line_no = 0
    while True:
        try:
            line = next(it)
            if isinstance(line, bytes):
                line = line.decode("utf-8")
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise ObjParseError(ErrorType.IO_ERROR, exc, line_no=line_no) from exc
        yield line_no, line.rstrip("\r\n")
        line_no += 1


def parse_obj(lines: Iterable[Union[str, bytes]]) -> Model:
    """
    Разобрать OBJ из любого итерируемого набора строк (файл, список,
    ``io.StringIO``) и вернуть дедуплицированную, отцентрованную ``Model``.

    :raises ObjParseError: первая встреченная ошибка; частичной модели нет.
    """
    parser = ObjParser()
    for line_no, line in _numbered_lines(lines):
        parser.feed(line_no, line)
    model = parser.finish()
    logger.debug(
        f"[ObjParser] {len(parser.positions)} positions, "
        f"{len(parser.texcoords)} texcoords, {len(parser.normals)} normals "
        f"→ {len(model.vertices)} vertices, {model.triangle_count} triangles"
    )
    return model
