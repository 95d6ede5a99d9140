import math


class Vec3:
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x, self.y, self.z = float(x), float(y), float(z)

    def mag(self):
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def norm(self):
        """Unit-length copy. A zero vector is returned unchanged."""
        mag = self.mag()
        if mag > 0:
            return Vec3(
                self.x / mag,
                self.y / mag,
                self.z / mag,
            )
        return self

    def flat(self):
        """Projection onto the XZ plane."""
        return Vec3(self.x, 0.0, self.z)

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def dot(self, vec3):
        return self.x * vec3.x + self.y * vec3.y + self.z * vec3.z

    def cross(self, vec3):
        return Vec3(
            self.y * vec3.z - self.z * vec3.y,
            self.z * vec3.x - self.x * vec3.z,
            self.x * vec3.y - self.y * vec3.x,
        )

    def isclose(self, other, abs_tol=1e-9):
        return (
            math.isclose(self.x, other.x, abs_tol=abs_tol)
            and math.isclose(self.y, other.y, abs_tol=abs_tol)
            and math.isclose(self.z, other.z, abs_tol=abs_tol)
        )

    def __repr__(self):
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def clone(self):
        return Vec3(self.x, self.y, self.z)
