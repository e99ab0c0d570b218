# fallingsand

A small falling-sand simulation. Sand falls and piles up, and it sinks
through water by swapping places with it. Water falls, spreads sideways and
displaces any snow it flows onto. Snow drifts down into a randomly chosen
empty cell below it.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Run

    fallingsand

This opens an 800×800 window holding a 100×100 grid of 8-pixel particles.
The grid advances two simulation steps per frame. `fallingsand --help`
prints a short summary of the controls.

## Controls

| Input             | Effect                                   |
|-------------------|------------------------------------------|
| `1`               | Select sand (the default)                |
| `2`               | Select water                             |
| `3`               | Select snow                              |
| Left mouse button | Place the selected particle              |
| Space             | Clear the grid (once per press)          |

Sand is placed as a 3×3 block, water as a disc of radius 2, and snow one
cell at a time. Particles are only placed on empty cells.

## Using the library

    import random
    from fallingsand.grid import Grid
    from fallingsand.particle import ParticleType

    grid = Grid(10, 10, 8, random.Random(0))
    grid.set_particle(5, 0, ParticleType.SAND)
    grid.update()
    print(grid.particle_type(5, 1))  # ParticleType.SAND

- `fallingsand.particle` holds `ParticleType` (`EMPTY`, `SAND`, `WATER`,
  `SNOW`), the frozen `Particle` dataclass (`Particle.of(type)` gives a
  particle with its standard colour) and `color_for(type)`.
- `fallingsand.grid.Grid` holds the cells. `particle_type(x, y)` treats
  cells outside the grid as empty, `particle(x, y)` raises `IndexError`
  for them, `set_particle` ignores them, `clear()` empties every cell, and
  `draw(surface)` calls `surface.fill(color, rect)` once per cell. Pass a
  `random.Random` to make snow movement reproducible.
- `fallingsand.input_handler.InputHandler` turns a set of pressed key names
  (`"1"`, `"2"`, `"3"`, `"space"`) and the mouse state into the selected
  type, a `clear_requested` flag and, via `particle_placement`, the grid
  cell to place into.
- `fallingsand.app.place_particles` applies the same brush shapes the game
  uses, and `fallingsand.app.step` runs one frame of input handling and
  simulation without opening a window.