import dataclasses

import pytest

from fallingsand.particle import BLACK, Particle, ParticleType, color_for


def test_default_particle_is_empty_and_black():
    particle = Particle()
    assert particle.type is ParticleType.EMPTY
    assert particle.color == (0, 0, 0)
    assert particle.is_empty


@pytest.mark.parametrize(
    "particle_type, expected",
    [
        (ParticleType.SAND, (194, 178, 128)),
        (ParticleType.WATER, (64, 164, 223)),
        (ParticleType.SNOW, (255, 255, 255)),
        (ParticleType.EMPTY, (0, 0, 0)),
    ],
)
def test_color_for_matches_standard_colours(particle_type, expected):
    assert color_for(particle_type) == expected


@pytest.mark.parametrize("particle_type", list(ParticleType))
def test_of_uses_standard_colour(particle_type):
    particle = Particle.of(particle_type)
    assert particle.type is particle_type
    assert particle.color == color_for(particle_type)


def test_of_empty_equals_default():
    assert Particle.of(ParticleType.EMPTY) == Particle()
    assert Particle.of(ParticleType.EMPTY).color == BLACK


def test_particle_is_immutable():
    particle = Particle.of(ParticleType.SAND)
    with pytest.raises(dataclasses.FrozenInstanceError):
        particle.type = ParticleType.WATER  # type: ignore[misc]
    assert particle.type is ParticleType.SAND
    assert particle.color == (194, 178, 128)


def test_only_empty_reports_empty():
    assert not Particle.of(ParticleType.SAND).is_empty
    assert not Particle.of(ParticleType.WATER).is_empty
    assert not Particle.of(ParticleType.SNOW).is_empty