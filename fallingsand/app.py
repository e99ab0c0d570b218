"""The interactive falling-sand window and the per-frame logic behind it."""

from __future__ import annotations

import argparse
from collections.abc import Container, Sequence

from .grid import Grid
from .input_handler import KEY_CLEAR, KEY_SAND, KEY_SNOW, KEY_WATER, InputHandler
from .particle import ParticleType

WINDOW_SIZE = 800
GRID_CELLS = 100
PARTICLE_SIZE = 8
UPDATES_PER_FRAME = 2
_WATER_RADIUS = 2


def _fill_empty(grid: Grid, x: int, y: int, particle_type: ParticleType) -> None:
    if grid.particle_type(x, y) is ParticleType.EMPTY:
        grid.set_particle(x, y, particle_type)


def place_particles(
    grid: Grid, grid_x: int, grid_y: int, particle_type: ParticleType
) -> None:
    """Place a brush of particles around a cell, only into empty cells."""
    if particle_type is ParticleType.SAND:
        offsets = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)]
    elif particle_type is ParticleType.WATER:
        span = range(-_WATER_RADIUS, _WATER_RADIUS + 1)
        offsets = [
            (dx, dy)
            for dy in span
            for dx in span
            if dx * dx + dy * dy <= _WATER_RADIUS * _WATER_RADIUS
        ]
    else:
        offsets = [(0, 0)]
    for dx, dy in offsets:
        _fill_empty(grid, grid_x + dx, grid_y + dy, particle_type)


def step(
    grid: Grid,
    input_handler: InputHandler,
    keys: Container[str],
    left_pressed: bool,
    mouse_pos: tuple[int, int],
) -> None:
    """Run one frame: read input, clear or place, then advance the grid."""
    input_handler.update(keys)
    if input_handler.clear_requested:
        grid.clear()
    placement = input_handler.particle_placement(left_pressed, mouse_pos)
    if placement is not None:
        place_particles(grid, *placement)
    for _ in range(UPDATES_PER_FRAME):
        grid.update()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the simulation window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="fallingsand",
        description="Falling sand simulation. Keys 1/2/3 pick sand, water, "
        "snow; left mouse places; space clears.",
    )
    parser.parse_args(argv)

    import pygame

    key_map = (
        (pygame.K_1, KEY_SAND),
        (pygame.K_2, KEY_WATER),
        (pygame.K_3, KEY_SNOW),
        (pygame.K_SPACE, KEY_CLEAR),
    )

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption("Falling Sand")
        grid = Grid(GRID_CELLS, GRID_CELLS, PARTICLE_SIZE)
        handler = InputHandler(grid.particle_size)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            pressed = pygame.key.get_pressed()
            keys = {name for code, name in key_map if pressed[code]}
            left_pressed = bool(pygame.mouse.get_pressed()[0])
            step(grid, handler, keys, left_pressed, pygame.mouse.get_pos())

            screen.fill((0, 0, 0))
            grid.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0