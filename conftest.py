# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: разбор OBJ из текста и изолированный Config.
"""

import io
import textwrap

import pytest

from objscope.obj import parse_obj
from objscope.utils.config import Config


TRIANGLE_OBJ = """\
v 0 0 0
v 1 0 0
v 0 1 0
f 1 2 3
"""


def parse_text(text: str):
    """Разобрать OBJ, записанный прямо в тесте (отступы убираются)."""
    return parse_obj(io.StringIO(textwrap.dedent(text)))


@pytest.fixture
def parse():
    return parse_text


@pytest.fixture(autouse=True)
def _reset_config():
    """Config – синглтон; каждый тест начинает с чистого листа."""
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(str(tmp_path / "objscope.json"))


@pytest.fixture
def obj_file(tmp_path):
    """Фабрика: записать текст OBJ во временный файл и вернуть путь."""
    def _write(text: str, name: str = "model.obj"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path
    return _write
