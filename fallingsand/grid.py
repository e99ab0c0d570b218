"""A rectangular grid of particles and the rules by which they move."""

from __future__ import annotations

import random
from typing import Any

from .particle import Particle, ParticleType

_EMPTY = Particle()


class Grid:
    """A width x height field of particles, each drawn as a square."""

    def __init__(
        self,
        width: int,
        height: int,
        particle_size: int,
        rng: random.Random | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        if particle_size <= 0:
            raise ValueError("particle size must be positive")
        self.width = width
        self.height = height
        self.particle_size = particle_size
        self._rng = rng if rng is not None else random.Random()
        self._cells: list[list[Particle]] = [
            [_EMPTY] * width for _ in range(height)
        ]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def update(self) -> None:
        """Advance the simulation by one step, from the second-last row upwards."""
        for y in range(self.height - 2, -1, -1):
            for x in range(self.width):
                kind = self._cells[y][x].type
                if kind is ParticleType.SNOW:
                    self._update_snow(x, y)
                elif kind is ParticleType.SAND:
                    self._update_sand(x, y)
                elif kind is ParticleType.WATER:
                    self._update_water(x, y)

    def _move(self, x: int, y: int, nx: int, ny: int) -> None:
        self._cells[ny][nx] = self._cells[y][x]
        self._cells[y][x] = _EMPTY

    def _update_snow(self, x: int, y: int) -> None:
        ny = y + 1
        candidates = [
            nx
            for nx in (x - 1, x, x + 1)
            if self._in_bounds(nx, ny) and self._cells[ny][nx].is_empty
        ]
        if candidates:
            self._move(x, y, self._rng.choice(candidates), ny)

    def _update_sand(self, x: int, y: int) -> None:
        ny = y + 1
        if ny >= self.height:
            return
        below = self._cells[ny][x]
        if below.is_empty:
            self._move(x, y, x, ny)
        elif below.type is ParticleType.WATER:
            self._cells[ny][x], self._cells[y][x] = self._cells[y][x], below
        elif x > 0 and self._cells[ny][x - 1].is_empty:
            self._move(x, y, x - 1, ny)
        elif x < self.width - 1 and self._cells[ny][x + 1].is_empty:
            self._move(x, y, x + 1, ny)

    def _update_water(self, x: int, y: int) -> None:
        ny = y + 1
        if ny < self.height:
            # Below, then bottom-left, then bottom-right; water displaces snow.
            for nx in (x, x - 1, x + 1):
                if 0 <= nx < self.width and self._cells[ny][nx].type in (
                    ParticleType.EMPTY,
                    ParticleType.SNOW,
                ):
                    self._move(x, y, nx, ny)
                    return
        for nx in (x - 1, x + 1):
            if 0 <= nx < self.width and self._cells[y][nx].is_empty:
                self._move(x, y, nx, y)
                return

    def particle_type(self, x: int, y: int) -> ParticleType:
        """Return the type at (x, y); cells outside the grid count as empty."""
        if not self._in_bounds(x, y):
            return ParticleType.EMPTY
        return self._cells[y][x].type

    def particle(self, x: int, y: int) -> Particle:
        """Return the particle at (x, y)."""
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return self._cells[y][x]

    def set_particle(self, x: int, y: int, particle_type: ParticleType) -> None:
        """Put a particle of the given type at (x, y); ignored outside the grid."""
        if self._in_bounds(x, y):
            self._cells[y][x] = Particle.of(particle_type)

    def clear(self) -> None:
        """Reset every cell to empty."""
        for row in self._cells:
            row[:] = [_EMPTY] * self.width

    def draw(self, surface: Any) -> None:
        """Fill one square per cell on a surface offering fill(color, rect)."""
        size = self.particle_size
        for y, row in enumerate(self._cells):
            for x, particle in enumerate(row):
                surface.fill(particle.color, (x * size, y * size, size, size))