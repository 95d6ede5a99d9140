from __future__ import annotations

import enum
import logging
import math
from typing import NamedTuple

from . import config
from .config import CameraConfig
from .grid import Grid
from .linalg import Mat4, Vec3

logger = logging.getLogger(__name__)


class Movement(enum.Enum):
    FORWARD = enum.auto()
    BACKWARD = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


class CollisionInfo(NamedTuple):
    collision_x: bool
    collision_z: bool


class Camera:
    """First-person camera with Euler-angle orientation and grid collision.

    Angles are in degrees. `front`, `right` and `up` are derived from
    yaw/pitch and must not be assigned directly.
    """

    def __init__(
        self,
        position: Vec3 | None = None,
        world_up: Vec3 | None = None,
        yaw: float = config.YAW,
        pitch: float = config.PITCH,
        margin: float = config.COLLISION_MARGIN,
        settings: CameraConfig | None = None,
    ):
        if margin < 0:
            raise ValueError(f"collision margin must be >= 0, got {margin}")
        settings = settings if settings is not None else CameraConfig()

        self.position = position.clone() if position is not None else Vec3(0.0, 0.0, 0.0)
        self._world_up = world_up.clone() if world_up is not None else Vec3(0.0, 1.0, 0.0)
        self.yaw = float(yaw)
        self.pitch = float(pitch)

        self.movement_speed = settings.movement_speed
        self.mouse_sensitivity = settings.mouse_sensitivity
        self.zoom = max(config.ZOOM_MIN, min(config.ZOOM_MAX, settings.zoom))
        self._margin = float(margin)

        self.front = Vec3(0.0, 0.0, -1.0)
        self.right = Vec3(1.0, 0.0, 0.0)
        self.up = self._world_up.clone()
        self._update_vectors()

    @classmethod
    def from_scalars(
        cls,
        pos_x: float,
        pos_y: float,
        pos_z: float,
        up_x: float,
        up_y: float,
        up_z: float,
        yaw: float,
        pitch: float,
        margin: float = config.COLLISION_MARGIN,
        settings: CameraConfig | None = None,
    ) -> Camera:
        return cls(
            Vec3(pos_x, pos_y, pos_z),
            Vec3(up_x, up_y, up_z),
            yaw,
            pitch,
            margin,
            settings,
        )

    @property
    def world_up(self) -> Vec3:
        return self._world_up.clone()

    @property
    def collision_margin(self) -> float:
        return self._margin

    def view_matrix(self) -> Mat4:
        return Mat4.look_at(self.position, self.position + self.front, self.up)

    def move(self, direction: Movement, delta_time: float, grid: Grid, tile_size: float) -> None:
        """Step along the XZ plane, sliding along whichever axis is not blocked."""
        velocity = self.movement_speed * delta_time
        horizontal_front = self.front.flat().norm()

        if direction is Movement.FORWARD:
            candidate = self.position + horizontal_front * velocity
        elif direction is Movement.BACKWARD:
            candidate = self.position - horizontal_front * velocity
        elif direction is Movement.LEFT:
            candidate = self.position - self.right * velocity
        else:
            candidate = self.position + self.right * velocity

        hit = self.check_collision(candidate, grid, tile_size)
        if hit.collision_x and hit.collision_z:
            logger.debug("move %s rejected at %r", direction.name, candidate)
            return
        if hit.collision_x:
            logger.debug("move %s blocked on x, sliding along z", direction.name)
            self.position = Vec3(self.position.x, candidate.y, candidate.z)
        elif hit.collision_z:
            logger.debug("move %s blocked on z, sliding along x", direction.name)
            self.position = Vec3(candidate.x, candidate.y, self.position.z)
        else:
            self.position = candidate

    def check_collision(self, candidate: Vec3, grid: Grid, tile_size: float) -> CollisionInfo:
        """Probe the footprint edges of `candidate` against `grid`.

        Anything outside the grid counts as a hit on both axes.
        """
        if tile_size <= 0:
            raise ValueError(f"tile_size must be > 0, got {tile_size}")
        m = self._margin
        x = math.floor((candidate.x + m) / tile_size)
        x_minus = math.floor((candidate.x - m) / tile_size)
        z = math.floor((candidate.z + m) / tile_size)
        z_minus = math.floor((candidate.z - m) / tile_size)
        col = math.floor(candidate.x / tile_size)
        row = math.floor(candidate.z / tile_size)

        w = grid.width()
        h = grid.height()
        if not all(0 <= i < w for i in (x, x_minus, col)):
            return CollisionInfo(True, True)
        if not all(0 <= i < h for i in (z, z_minus, row)):
            return CollisionInfo(True, True)

        return CollisionInfo(
            collision_x=grid.cell_at(row, x) or grid.cell_at(row, x_minus),
            collision_z=grid.cell_at(z, col) or grid.cell_at(z_minus, col),
        )

    def apply_look(self, xoffset: float, yoffset: float, constrain_pitch: bool = True) -> None:
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity

        # Past +-90 the basis flips and cross(front, world_up) degenerates.
        if constrain_pitch:
            self.pitch = max(-config.PITCH_LIMIT, min(config.PITCH_LIMIT, self.pitch))

        self._update_vectors()

    def apply_zoom(self, yoffset: float) -> None:
        self.zoom = max(config.ZOOM_MIN, min(config.ZOOM_MAX, self.zoom - yoffset))

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front = Vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ).norm()
        self.right = self.front.cross(self._world_up).norm()
        self.up = self.right.cross(self.front).norm()
