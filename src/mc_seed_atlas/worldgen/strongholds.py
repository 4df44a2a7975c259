"""Concentric-ring stronghold placement."""

from __future__ import annotations

import math
from typing import Sequence

from mc_seed_atlas.models import (
    Category,
    Dimension,
    LocationType,
    PredictedStructure,
    RingSpec,
    SeedContractError,
)
from mc_seed_atlas.worldgen.rng import DeterministicRandom
from mc_seed_atlas.worldgen.structures import CHUNK_CENTER, CHUNK_SIZE

# Only the first three rings of the real layout are modeled.
STRONGHOLD_RINGS: tuple[RingSpec, ...] = (
    RingSpec(structure_count=3, min_distance=1408, max_distance=2688, ring_index=1),
    RingSpec(structure_count=6, min_distance=4480, max_distance=5760, ring_index=2),
    RingSpec(structure_count=10, min_distance=7552, max_distance=8832, ring_index=3),
)

STRONGHOLD_SALT = 341873128
STRONGHOLD_CONFIDENCE = 0.95
MAX_ANGLE_JITTER = math.pi / 8
MIN_HEIGHT = 10
MAX_HEIGHT = 50


def validate_rings(rings: Sequence[RingSpec]) -> None:
    if not rings:
        raise SeedContractError("Stronghold ring table is empty")
    for position, ring in enumerate(rings, start=1):
        if ring.ring_index != position:
            raise SeedContractError(f"Ring at position {position} has index {ring.ring_index}")
        if ring.structure_count <= 0:
            raise SeedContractError(f"Ring {ring.ring_index} must hold at least one stronghold")
        if ring.min_distance < 0 or ring.min_distance > ring.max_distance:
            raise SeedContractError(
                f"Ring {ring.ring_index} has an invalid distance band "
                f"[{ring.min_distance}, {ring.max_distance}]"
            )


def stronghold_height(seed: int, x: int, z: int) -> int:
    roll, _ = DeterministicRandom.for_region(seed, x, z, STRONGHOLD_SALT).next()
    variation = math.floor((roll - 0.5) * 40)
    return max(MIN_HEIGHT, min(MAX_HEIGHT, 32 + variation))


def snap_to_chunk_center(coordinate: int) -> int:
    return (coordinate // CHUNK_SIZE) * CHUNK_SIZE + CHUNK_CENTER


def place_strongholds(seed: int, rings: Sequence[RingSpec] = STRONGHOLD_RINGS) -> list[PredictedStructure]:
    """Place every stronghold of every ring, sorted by distance from the origin.

    All slots draw from one stream in ring order then slot order, so this loop
    must stay sequential.
    """
    validate_rings(rings)

    rng = DeterministicRandom(seed)
    strongholds: list[PredictedStructure] = []
    for ring in rings:
        angle_step = 2 * math.pi / ring.structure_count
        band = ring.max_distance - ring.min_distance
        for slot in range(ring.structure_count):
            (jitter, spread), rng = rng.take(2)
            angle = slot * angle_step + (jitter - 0.5) * 2 * MAX_ANGLE_JITTER
            radius = ring.min_distance + spread * band

            x = snap_to_chunk_center(math.floor(math.cos(angle) * radius))
            z = snap_to_chunk_center(math.floor(math.sin(angle) * radius))
            number = len(strongholds) + 1
            strongholds.append(
                PredictedStructure(
                    name=f"Stronghold {number} (Ring {ring.ring_index}) at ({x}, {z})",
                    category=Category.STRONGHOLD,
                    location_type=LocationType.STRONGHOLD,
                    x=x,
                    z=z,
                    y=stronghold_height(seed, x, z),
                    dimension=Dimension.OVERWORLD,
                    confidence=STRONGHOLD_CONFIDENCE,
                    distance=math.floor(math.hypot(x, z)),
                    description=(
                        f"Ring {ring.ring_index} stronghold with End portal "
                        f"({math.floor(radius)}m from origin)"
                    ),
                )
            )

    return sorted(strongholds, key=lambda structure: structure.distance)
