from __future__ import annotations

import argparse
import logging
import sys

import pygame

from . import config
from .camera import Camera
from .config import CameraConfig
from .controls import handle_event, update as update_controls
from .maze import default_grid, find_open_cell, load_maze
from .render_gl import draw_frame, setup_viewport

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="mazecam", add_help=True)
    parser.add_argument("--maze", help="Path to a text maze ('#' wall, '.' floor). Defaults to the built-in 10x10 maze.")
    parser.add_argument("--tile-size", type=float, default=config.TILE_SIZE, help="World units per grid cell.")
    parser.add_argument("--speed", type=float, default=config.SPEED, help="Movement speed in units per second.")
    parser.add_argument("--sensitivity", type=float, default=config.SENSITIVITY, help="Degrees per pixel of mouse motion.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.tile_size <= 0:
        print("error: --tile-size must be > 0", file=sys.stderr)
        return 2

    if args.maze:
        try:
            grid = load_maze(args.maze)
        except (OSError, ValueError) as e:
            print(f"error: {args.maze}: {e}", file=sys.stderr)
            return 2
    else:
        grid = default_grid()

    try:
        spawn = find_open_cell(grid, args.tile_size, y=config.EYE_HEIGHT * args.tile_size)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    camera = Camera(
        position=spawn,
        settings=CameraConfig(movement_speed=args.speed, mouse_sensitivity=args.sensitivity),
    )
    logger.info("spawned at %r facing yaw=%.1f", camera.position, camera.yaw)

    pygame.init()
    pygame.display.set_mode((config.WIDTH, config.HEIGHT), pygame.OPENGL | pygame.DOUBLEBUF)
    pygame.display.set_caption("mazecam")
    setup_viewport(config.WIDTH, config.HEIGHT)
    aspect = config.WIDTH / config.HEIGHT

    clock = pygame.time.Clock()
    pygame.mouse.set_visible(False)
    pygame.event.set_grab(True)
    # Drop the first relative motion so the grab does not jerk the view.
    pygame.mouse.get_rel()

    running = True
    while running:
        dt = clock.get_time() / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False
            else:
                handle_event(camera, event)

        update_controls(camera, dt, grid, args.tile_size)
        draw_frame(camera, grid, args.tile_size, aspect)
        pygame.display.flip()

        clock.tick(config.FPS_LIMIT)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
