from __future__ import annotations

import math

from OpenGL.GL import (
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_LESS,
    GL_MODELVIEW,
    GL_PROJECTION,
    GL_QUADS,
    glBegin,
    glClear,
    glClearColor,
    glColor3ub,
    glDepthFunc,
    glEnable,
    glEnd,
    glLoadMatrixf,
    glMatrixMode,
    glVertex3f,
    glViewport,
)

from . import config
from .camera import Camera
from .grid import TileGrid
from .linalg import Mat4

# Per-face brightness so walls read as solid without lighting.
_SHADE_TOP = 1.0
_SHADE_X = 0.8
_SHADE_Z = 0.6


def setup_viewport(width: int, height: int) -> None:
    glViewport(0, 0, width, height)
    glEnable(GL_DEPTH_TEST)
    glDepthFunc(GL_LESS)
    r, g, b = config.SKY_COLOR
    glClearColor(r / 255.0, g / 255.0, b / 255.0, 1.0)


def projection_matrix(camera: Camera, aspect: float) -> Mat4:
    return Mat4.perspective(math.radians(camera.zoom), aspect, config.NEAR, config.FAR)


def _shade(color, k: float) -> tuple[int, int, int]:
    return tuple(max(0, min(255, int(c * k))) for c in color)


def _draw_floor(grid: TileGrid, tile_size: float) -> None:
    w = grid.width() * tile_size
    d = grid.height() * tile_size
    glColor3ub(*config.FLOOR_COLOR)
    glBegin(GL_QUADS)
    glVertex3f(0.0, 0.0, 0.0)
    glVertex3f(0.0, 0.0, d)
    glVertex3f(w, 0.0, d)
    glVertex3f(w, 0.0, 0.0)
    glEnd()


def _draw_box(x0: float, z0: float, x1: float, z1: float, h: float) -> None:
    glColor3ub(*_shade(config.WALL_COLOR, _SHADE_TOP))
    glVertex3f(x0, h, z0)
    glVertex3f(x0, h, z1)
    glVertex3f(x1, h, z1)
    glVertex3f(x1, h, z0)

    glColor3ub(*_shade(config.WALL_COLOR, _SHADE_X))
    for x in (x0, x1):
        glVertex3f(x, 0.0, z0)
        glVertex3f(x, h, z0)
        glVertex3f(x, h, z1)
        glVertex3f(x, 0.0, z1)

    glColor3ub(*_shade(config.WALL_COLOR, _SHADE_Z))
    for z in (z0, z1):
        glVertex3f(x0, 0.0, z)
        glVertex3f(x1, 0.0, z)
        glVertex3f(x1, h, z)
        glVertex3f(x0, h, z)


def draw_frame(camera: Camera, grid: TileGrid, tile_size: float, aspect: float) -> None:
    glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

    glMatrixMode(GL_PROJECTION)
    glLoadMatrixf(projection_matrix(camera, aspect).to_gl())
    glMatrixMode(GL_MODELVIEW)
    glLoadMatrixf(camera.view_matrix().to_gl())

    _draw_floor(grid, tile_size)

    h = config.WALL_HEIGHT * tile_size
    glBegin(GL_QUADS)
    for row, col in grid.blocked_cells():
        x0 = col * tile_size
        z0 = row * tile_size
        _draw_box(x0, z0, x0 + tile_size, z0 + tile_size, h)
    glEnd()
