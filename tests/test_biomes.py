from __future__ import annotations

import math

from mc_seed_atlas.models import SpawnPoint
from mc_seed_atlas.worldgen.biomes import MAX_DISTANCE, MIN_DISTANCE, RARE_BIOMES, RareBiome, predict_biomes

SPAWN = SpawnPoint(x=40, y=70, z=-24)


def test_certain_biomes_hit_on_first_attempt() -> None:
    table = (RareBiome("Always", 1.0, "always there"), RareBiome("Also", 1.0, "also there"))

    predictions = predict_biomes(7, SPAWN, table)

    assert [p.name for p in predictions] == ["Always", "Also"]


def test_impossible_biomes_are_omitted() -> None:
    assert predict_biomes(7, SPAWN, (RareBiome("Never", 0.0, "never"),)) == []


def test_predictions_lie_on_ray_from_spawn() -> None:
    table = tuple(RareBiome(f"Biome {i}", 1.0, "test") for i in range(10))

    for prediction in predict_biomes(321, SPAWN, table):
        distance = math.dist((prediction.x, prediction.z), (SPAWN.x, SPAWN.z))
        assert MIN_DISTANCE - 2 <= distance <= MAX_DISTANCE + 2
        assert 0.0 <= prediction.confidence <= 1.0


def test_at_most_one_prediction_per_biome_in_table_order() -> None:
    for seed in range(0, 400, 37):
        predictions = predict_biomes(seed, SPAWN)
        names = [p.name for p in predictions]
        order = [biome.name for biome in RARE_BIOMES]
        assert len(names) == len(set(names))
        assert names == [name for name in order if name in names]


def test_prediction_is_deterministic() -> None:
    assert predict_biomes(2024, SPAWN) == predict_biomes(2024, SPAWN)
