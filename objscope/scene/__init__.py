"""
Пакет scene – камера и матрицы преобразований для рендера модели.
"""

from objscope.scene.camera import Camera

__all__ = ["Camera"]
