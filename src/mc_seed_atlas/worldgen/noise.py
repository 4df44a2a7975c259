"""Multi-octave gradient noise used as a biome-suitability proxy."""

from __future__ import annotations

import math

from mc_seed_atlas.worldgen.rng import mix

BIOME_SCALE = 0.0025
OCTAVES = 4

_GRADIENTS = ((1, 1), (-1, 1), (-1, -1), (1, -1))


def _gradient(seed: int, lattice_x: int, lattice_z: int) -> tuple[int, int]:
    hashed = mix(seed, lattice_x, lattice_z) & 0xFFFFFFFF
    hashed ^= hashed >> 16
    return _GRADIENTS[hashed & 3]


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def gradient_noise(seed: int, x: float, z: float) -> float:
    """Single octave of lattice gradient noise, roughly in [-1, 1]."""
    x0 = math.floor(x)
    z0 = math.floor(z)
    sx = x - x0
    sz = z - z0

    g00 = _gradient(seed, x0, z0)
    g10 = _gradient(seed, x0 + 1, z0)
    g01 = _gradient(seed, x0, z0 + 1)
    g11 = _gradient(seed, x0 + 1, z0 + 1)

    n00 = g00[0] * sx + g00[1] * sz
    n10 = g10[0] * (sx - 1) + g10[1] * sz
    n01 = g01[0] * sx + g01[1] * (sz - 1)
    n11 = g11[0] * (sx - 1) + g11[1] * (sz - 1)

    u = _fade(sx)
    v = _fade(sz)
    return _lerp(v, _lerp(u, n00, n10), _lerp(u, n01, n11))


def biome_value(seed: int, x: float, z: float) -> float:
    """Return the biome proxy for block ``(x, z)`` in ``[0, 1]``.

    Low values read as ocean-like terrain, high values as arid or frozen.
    Pure function of its arguments; safe to call from any thread.
    """
    scaled_x = x * BIOME_SCALE
    scaled_z = z * BIOME_SCALE

    value = 0.0
    amplitude = 1.0
    frequency = 1.0
    for _ in range(OCTAVES):
        value += gradient_noise(seed, scaled_x * frequency, scaled_z * frequency) * amplitude
        amplitude *= 0.5
        frequency *= 2

    return min(1.0, max(0.0, (value + 1) * 0.5))
