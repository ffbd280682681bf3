# objscope/obj/errors.py
"""
Единый тип ошибки разбора OBJ: причина + номер/текст строки.
"""

from enum import Enum
from typing import Any, Optional


class ErrorType(Enum):
    IO_ERROR = "io_error"
    UNSUPPORTED = "unsupported"
    INVALID_ENTRY = "invalid_entry"
    INDEX_OUT_OF_BOUND = "index_out_of_bound"
    INVALID_PARAMETER = "invalid_parameter"
    INVALID_PARAMETER_NUMBER = "invalid_parameter_number"
    INVALID_LINE = "invalid_line"


def _describe(err_type: ErrorType, value: Any) -> str:
    if err_type is ErrorType.IO_ERROR:
        return str(value)
    if err_type is ErrorType.UNSUPPORTED:
        return f"Unsupported entry type : '{value}'"
    if err_type is ErrorType.INVALID_ENTRY:
        return f"Invalid entry type : '{value}'"
    if err_type is ErrorType.INDEX_OUT_OF_BOUND:
        return f"Index {value} is out of bound"
    if err_type is ErrorType.INVALID_PARAMETER:
        return f"Invalid parameter at position {value}"
    if err_type is ErrorType.INVALID_PARAMETER_NUMBER:
        return "Invalid number of parameters"
    return "Invalid line"


class ObjParseError(Exception):
    """
    Ошибка разбора. ``value`` зависит от причины: имя директивы,
    индекс из файла, позиция поля или исходное исключение ввода‑вывода.
    ``line_no`` – 0‑based; ``line`` – None, если строку прочитать не удалось.
    """

    def __init__(self, err_type: ErrorType, value: Any = None,
                 line_no: Optional[int] = None, line: Optional[str] = None):
        self.err_type = err_type
        self.value = value
        self.line_no = line_no
        self.line = line
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return _describe(self.err_type, self.value)

    def locate(self, line_no: int, line: Optional[str]) -> "ObjParseError":
        """Привязать ошибку к строке файла (если ещё не привязана)."""
        if self.line_no is None:
            self.line_no = line_no
            self.line = line
        return self

    def __str__(self) -> str:
        if self.line_no is None:
            return self.message
        if self.line is None:
            return f"{self.line_no}: {self.message}"
        return f"{self.line_no}:{self.line} : {self.message}"

    def __repr__(self) -> str:
        return (f"ObjParseError({self.err_type.name}, {self.value!r}, "
                f"line_no={self.line_no})")
