# -*- coding: utf-8 -*-
"""
Загрузка OBJ‑файла с диска: открывает файл и передаёт строки парсеру.
Материалы MTL не поддерживаются.
"""
from pathlib import Path

from objscope.obj import Model, parse_obj
from objscope.utils.logger import logger
from objscope.utils.profiler import Profiler


def load_obj(path) -> Model:
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"OBJ file not found: {p}")

    with Profiler(f"load_obj {p.name}"):
        with p.open("r", encoding="utf-8", newline="\n") as f:
            model = parse_obj(f)

    logger.info(f"[Loader] Loaded {p.name}: {len(model.vertices)} vertices, "
                f"{model.triangle_count} triangles")
    return model
