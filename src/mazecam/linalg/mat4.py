import math

import numpy as np

from mazecam.linalg.vec3 import Vec3


class Mat4:
    """4x4 matrix (row-major).

    Vectors are treated as column vectors:
        p' = M @ (x, y, z, 1)

    OpenGL wants column-major storage; use `to_gl()` when uploading.
    """

    def __init__(self, m):
        if len(m) != 16:
            raise ValueError("Mat4 expects 16 elements")
        self.m = [float(x) for x in m]

    @classmethod
    def perspective(cls, fov_y, aspect, near, far):
        """Right-handed perspective matrix.

        fov_y in radians. near/far > 0.
        Maps to OpenGL-style clip space: z in [-w, +w] after projection.
        """
        if aspect == 0:
            raise ValueError("aspect must be non-zero")
        n = float(near)
        fa = float(far)
        if n <= 0 or fa <= 0 or n == fa:
            raise ValueError("invalid near/far")
        f = 1.0 / math.tan(fov_y * 0.5)
        return cls(
            [
                f / float(aspect), 0.0, 0.0, 0.0,
                0.0, f, 0.0, 0.0,
                0.0, 0.0, (fa + n) / (n - fa), (2.0 * fa * n) / (n - fa),
                0.0, 0.0, -1.0, 0.0,
            ]
        )

    @classmethod
    def look_at(cls, eye, target, up):
        """Right-handed look-at view matrix (same layout as glm::lookAt)."""
        f = (target - eye).norm()
        s = f.cross(up).norm()
        u = s.cross(f)

        return cls(
            [
                s.x, s.y, s.z, -s.dot(eye),
                u.x, u.y, u.z, -u.dot(eye),
                -f.x, -f.y, -f.z, f.dot(eye),
                0.0, 0.0, 0.0, 1.0,
            ]
        )

    def __repr__(self):
        m = self.m
        return f"Mat4({m[0:4]}, {m[4:8]}, {m[8:12]}, {m[12:16]})"

    def to_gl(self):
        # Row-major list -> column-major buffer for glLoadMatrixf.
        return np.array(self.m, dtype=np.float32).reshape(4, 4).T.copy()

    def transform_point(self, v):
        x = float(v.x)
        y = float(v.y)
        z = float(v.z)
        m = self.m
        nx = m[0] * x + m[1] * y + m[2] * z + m[3]
        ny = m[4] * x + m[5] * y + m[6] * z + m[7]
        nz = m[8] * x + m[9] * y + m[10] * z + m[11]
        nw = m[12] * x + m[13] * y + m[14] * z + m[15]
        if nw != 0.0:
            invw = 1.0 / nw
            nx *= invw
            ny *= invw
            nz *= invw
        return Vec3(nx, ny, nz)

    def __matmul__(self, other):
        if isinstance(other, Vec3):
            return self.transform_point(other)
        raise TypeError(
            f"unsupported operand type(s) for @: 'Mat4' and '{type(other)}'"
        )
