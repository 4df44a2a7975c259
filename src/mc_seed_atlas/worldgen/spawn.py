"""World spawn prediction."""

from __future__ import annotations

import logging
import math

from mc_seed_atlas.models import SpawnPoint
from mc_seed_atlas.worldgen.noise import biome_value
from mc_seed_atlas.worldgen.rng import DeterministicRandom

SPAWN_Y = 70
SPAWN_SEARCH_SIZE = 512
MAX_SPAWN_ATTEMPTS = 1000
HABITABLE_BAND = (0.3, 0.8)

_logger = logging.getLogger("mc_seed_atlas.worldgen.spawn")


def is_habitable(value: float) -> bool:
    low, high = HABITABLE_BAND
    return low < value < high


def locate_spawn(seed: int, *, max_attempts: int = MAX_SPAWN_ATTEMPTS) -> SpawnPoint:
    """Pick the first habitable candidate in the square around the origin.

    Falls back to the origin with ``fallback=True`` when every attempt lands
    in ocean, desert or snow-like terrain.
    """
    rng = DeterministicRandom(seed)
    for attempt in range(1, max_attempts + 1):
        (rx, rz), rng = rng.take(2)
        x = math.floor((rx - 0.5) * SPAWN_SEARCH_SIZE)
        z = math.floor((rz - 0.5) * SPAWN_SEARCH_SIZE)
        if is_habitable(biome_value(seed, x, z)):
            return SpawnPoint(x=x, y=SPAWN_Y, z=z, attempts=attempt)

    _logger.warning("spawn_fallback_to_origin", extra={"seed_value": seed, "attempts": max_attempts})
    return SpawnPoint(x=0, y=SPAWN_Y, z=0, fallback=True, attempts=max_attempts)
