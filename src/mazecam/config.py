from __future__ import annotations

from dataclasses import dataclass

# Camera defaults.
YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SENSITIVITY = 0.1
ZOOM = 45.0
COLLISION_MARGIN = 0.12

PITCH_LIMIT = 89.0
ZOOM_MIN = 1.0
ZOOM_MAX = 45.0

# Window.
WIDTH, HEIGHT = 960, 640
FPS_LIMIT = 120

# Scene.
TILE_SIZE = 1.0
WALL_HEIGHT = 1.0
EYE_HEIGHT = 0.5
NEAR = 0.05
FAR = 100.0

SKY_COLOR = (135, 206, 235)
FLOOR_COLOR = (90, 90, 90)
WALL_COLOR = (150, 110, 80)


@dataclass
class CameraConfig:
    """Per-camera scale factors, handed to `Camera` at construction."""

    movement_speed: float = SPEED
    mouse_sensitivity: float = SENSITIVITY
    zoom: float = ZOOM
