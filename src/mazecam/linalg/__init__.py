from .vec3 import Vec3
from .mat4 import Mat4

__all__ = ["Vec3", "Mat4"]
