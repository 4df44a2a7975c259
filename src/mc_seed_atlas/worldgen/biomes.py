"""Rare biome sightings along random rays from spawn."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mc_seed_atlas.models import BiomePrediction, SpawnPoint
from mc_seed_atlas.worldgen.rng import DeterministicRandom

BIOME_SALT = 74921
ATTEMPTS_PER_BIOME = 20
MIN_DISTANCE = 500
MAX_DISTANCE = 3500
BIOME_CONFIDENCE = 0.6


@dataclass(frozen=True, slots=True)
class RareBiome:
    name: str
    rarity: float
    description: str


RARE_BIOMES: tuple[RareBiome, ...] = (
    RareBiome("Mushroom Fields", 0.01, "Rare mushroom island biome"),
    RareBiome("Cherry Grove", 0.05, "1.21+ Cherry blossom forest"),
    RareBiome("Badlands", 0.08, "Mesa/Badlands biome with gold"),
    RareBiome("Ice Spikes", 0.03, "Rare ice plains with spikes"),
    RareBiome("Bamboo Jungle", 0.07, "Jungle with bamboo and pandas"),
)


def predict_biomes(
    seed: int,
    spawn: SpawnPoint,
    biomes: tuple[RareBiome, ...] = RARE_BIOMES,
) -> list[BiomePrediction]:
    predictions: list[BiomePrediction] = []
    for index, biome in enumerate(biomes):
        for attempt in range(ATTEMPTS_PER_BIOME):
            rng = DeterministicRandom.for_region(seed, index, attempt, BIOME_SALT)
            roll, rng = rng.next()
            if roll >= biome.rarity:
                continue

            (turn, reach), rng = rng.take(2)
            angle = turn * 2 * math.pi
            distance = MIN_DISTANCE + reach * (MAX_DISTANCE - MIN_DISTANCE)
            predictions.append(
                BiomePrediction(
                    name=biome.name,
                    x=spawn.x + math.floor(math.cos(angle) * distance),
                    z=spawn.z + math.floor(math.sin(angle) * distance),
                    confidence=BIOME_CONFIDENCE,
                    description=biome.description,
                )
            )
            break
    return predictions
