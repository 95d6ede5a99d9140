from __future__ import annotations

import pygame

from .camera import Camera, Movement
from .grid import Grid

KEY_BINDINGS = {
    pygame.K_w: Movement.FORWARD,
    pygame.K_UP: Movement.FORWARD,
    pygame.K_s: Movement.BACKWARD,
    pygame.K_DOWN: Movement.BACKWARD,
    pygame.K_a: Movement.LEFT,
    pygame.K_LEFT: Movement.LEFT,
    pygame.K_d: Movement.RIGHT,
    pygame.K_RIGHT: Movement.RIGHT,
}


def handle_event(camera: Camera, event: pygame.event.Event) -> None:
    if event.type == pygame.MOUSEWHEEL:
        camera.apply_zoom(event.y)


def update(camera: Camera, dt: float, grid: Grid, tile_size: float) -> None:
    mx, my = pygame.mouse.get_rel()
    if mx or my:
        # Screen y grows downward; pitch grows upward.
        camera.apply_look(mx, -my)

    keys = pygame.key.get_pressed()
    held = {direction for key, direction in KEY_BINDINGS.items() if keys[key]}
    # One move per held direction, so opposite keys cancel and diagonals combine.
    for direction in Movement:
        if direction in held:
            camera.move(direction, dt, grid, tile_size)
