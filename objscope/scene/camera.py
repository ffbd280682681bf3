"""
Камера, смотрящая на модель: view/projection/model матрицы для шейдера.
Управления с клавиатуры нет – только построение матриц.
"""

from objscope.math.vec3 import Vec3
from objscope.math.mat4 import Mat4

Y_AXIS = Vec3(0.0, 1.0, 0.0)


class Camera:
    def __init__(self, position=(0.0, 0.0, 3.0), target=(0.0, 0.0, 0.0),
                 up=(0.0, 1.0, 0.0), fov=45.0, near=0.1, far=100.0,
                 name="Camera"):
        self.name = name
        self.position = Vec3.from_iterable(position)
        self.target = Vec3.from_iterable(target)
        self.up = Vec3.from_iterable(up)
        self.fov = fov
        self.near = near
        self.far = far

    @classmethod
    def from_config(cls, cfg) -> "Camera":
        """Построить камеру из секции ``camera`` конфигурации."""
        cam = cfg.section("camera")
        return cls(
            position=cam["position"],
            target=cam["target"],
            up=cam["up"],
            fov=float(cam["fov"]),
            near=float(cam["near"]),
            far=float(cam["far"]),
        )

    def get_view_matrix(self) -> Mat4:
        return Mat4.look_at(self.position, self.target, self.up)

    def get_projection_matrix(self, aspect_ratio: float) -> Mat4:
        return Mat4.perspective(self.fov, aspect_ratio, self.near, self.far)

    @staticmethod
    def get_model_matrix(angle: float = 0.0, scale: float = 1.0) -> Mat4:
        """Поворот вокруг Y на ``angle`` радиан после равномерного масштаба."""
        return Mat4.rotate(Y_AXIS, angle) @ Mat4.scale(Vec3(scale, scale, scale))

    @property
    def forward(self) -> Vec3:
        return (self.target - self.position).normalized()

    @property
    def right(self) -> Vec3:
        return self.forward.cross(self.up).normalized()

    def __repr__(self):
        return (f"Camera({self.position!r} → {self.target!r}, "
                f"fov={self.fov}, near={self.near}, far={self.far})")
