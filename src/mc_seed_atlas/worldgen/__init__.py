"""Seed-driven world generation predictors."""

from .biomes import RARE_BIOMES, RareBiome, predict_biomes
from .codec import parse_seed
from .noise import biome_value
from .rng import DeterministicRandom, region_seed
from .spawn import locate_spawn
from .strongholds import STRONGHOLD_RINGS, place_strongholds
from .structures import STRUCTURE_RULES, StructureRule, place_structures

__all__ = [
    "DeterministicRandom",
    "RARE_BIOMES",
    "RareBiome",
    "STRONGHOLD_RINGS",
    "STRUCTURE_RULES",
    "StructureRule",
    "biome_value",
    "locate_spawn",
    "parse_seed",
    "place_strongholds",
    "place_structures",
    "predict_biomes",
    "region_seed",
]
