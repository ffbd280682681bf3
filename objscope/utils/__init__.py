# objscope/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * set_log_level – смена уровня по имени
    * Config        – JSON‑конфигурация
    * Profiler      – замер времени блока кода
"""

from .logger import logger, set_log_level
from .config import Config
from .profiler import Profiler

__all__ = ["logger", "set_log_level", "Config", "Profiler"]
