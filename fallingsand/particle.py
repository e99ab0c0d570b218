"""Particle kinds and the colours they are drawn with."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)


class ParticleType(enum.Enum):
    """The kinds of cell a grid can hold."""

    EMPTY = enum.auto()
    SAND = enum.auto()
    WATER = enum.auto()
    SNOW = enum.auto()


_COLORS: dict[ParticleType, Color] = {
    ParticleType.SAND: (194, 178, 128),
    ParticleType.WATER: (64, 164, 223),
    ParticleType.SNOW: (255, 255, 255),
}


def color_for(particle_type: ParticleType) -> Color:
    """Return the RGB colour a particle of the given type is drawn with."""
    return _COLORS.get(particle_type, BLACK)


@dataclass(frozen=True)
class Particle:
    """A single cell of the grid; the default is an empty black cell."""

    type: ParticleType = ParticleType.EMPTY
    color: Color = BLACK

    @classmethod
    def of(cls, particle_type: ParticleType) -> Particle:
        """Build a particle of the given type with its standard colour."""
        return cls(particle_type, color_for(particle_type))

    @property
    def is_empty(self) -> bool:
        return self.type is ParticleType.EMPTY