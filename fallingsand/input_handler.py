"""Turns keyboard and mouse state into placement and clearing requests."""

from __future__ import annotations

from collections.abc import Container

from .particle import ParticleType

KEY_SAND = "1"
KEY_WATER = "2"
KEY_SNOW = "3"
KEY_CLEAR = "space"

_SELECTION_KEYS = (
    (KEY_SAND, ParticleType.SAND),
    (KEY_WATER, ParticleType.WATER),
    (KEY_SNOW, ParticleType.SNOW),
)


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


class InputHandler:
    """Tracks the selected particle type and the clear request per frame."""

    def __init__(self, particle_size: int) -> None:
        if particle_size <= 0:
            raise ValueError("particle size must be positive")
        self.particle_size = particle_size
        self.current_type = ParticleType.SAND
        self.clear_requested = False
        self._space_was_pressed = False

    def update(self, keys: Container[str]) -> None:
        """Read the pressed keys for this frame."""
        for key, particle_type in _SELECTION_KEYS:
            if key in keys:
                self.current_type = particle_type
                break
        space_pressed = KEY_CLEAR in keys
        self.clear_requested = space_pressed and not self._space_was_pressed
        self._space_was_pressed = space_pressed

    def particle_placement(
        self, left_pressed: bool, mouse_pos: tuple[int, int]
    ) -> tuple[int, int, ParticleType] | None:
        """Return (grid_x, grid_y, type) to place this frame, or None."""
        if not left_pressed:
            return None
        mx, my = mouse_pos
        return (
            _trunc_div(mx, self.particle_size),
            _trunc_div(my, self.particle_size),
            self.current_type,
        )