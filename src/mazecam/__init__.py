from .camera import Camera, CollisionInfo, Movement
from .config import CameraConfig
from .grid import Grid, TileGrid

__all__ = ["Camera", "CameraConfig", "CollisionInfo", "Grid", "Movement", "TileGrid"]
