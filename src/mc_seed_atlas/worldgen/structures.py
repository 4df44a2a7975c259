"""Region-grid placement of generated structures.

Every structure kind shares one algorithm: the world is cut into square
regions of ``separation`` chunks, each region gets its own stream derived from
the world seed, the region coordinates and the kind's salt, and that stream
decides whether (and where inside the region) the structure generates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from mc_seed_atlas.models import (
    Category,
    Dimension,
    LocationType,
    PredictedStructure,
    SpawnPoint,
    StructureKind,
)
from mc_seed_atlas.worldgen.codec import to_int32
from mc_seed_atlas.worldgen.noise import biome_value
from mc_seed_atlas.worldgen.rng import DeterministicRandom

CHUNK_SIZE = 16
CHUNK_CENTER = 8

BiomePredicate = Callable[[float], bool]
HeightEstimator = Callable[[int, int, int], int]


@dataclass(frozen=True, slots=True)
class BiomeBand:
    name: str
    low: float
    high: float
    confidence: float

    def contains(self, value: float) -> bool:
        return self.low < value < self.high


VILLAGE_BANDS = (
    BiomeBand("Plains", 0.2, 0.4, 0.95),
    BiomeBand("Savanna", 0.6, 0.75, 0.85),
    BiomeBand("Desert", 0.8, 0.95, 0.8),
)


def village_band(value: float) -> BiomeBand | None:
    for band in VILLAGE_BANDS:
        if band.contains(value):
            return band
    return None


def is_village_biome(value: float) -> bool:
    return village_band(value) is not None


def is_arid_biome(value: float) -> bool:
    return value > 0.65


def is_outpost_biome(value: float) -> bool:
    return 0.25 < value < 0.85


def village_confidence(value: float, distance: float) -> float:
    band = village_band(value)
    confidence = band.confidence if band else 0.9
    if distance > 5000:
        confidence *= 0.9
    return max(0.5, confidence)


def estimate_village_height(seed: int, x: int, z: int) -> int:
    terrain = biome_value(to_int32(seed + 1), x, z)
    return math.floor(64 + (terrain - 0.5) * 32)


@dataclass(frozen=True, slots=True)
class StructureRule:
    """Placement constants for one structure kind.

    ``separation`` is the region edge in chunks and ``spacing`` the minimum
    in-region offset, so a structure never sits on a region boundary.
    """

    kind: StructureKind
    display_name: str
    category: Category
    location_type: LocationType
    separation: int
    spacing: int
    probability: float
    salt: int
    alignment: int
    description: str
    confidence: float = 0.7
    y: int | None = None
    biome: BiomePredicate | None = None
    height: HeightEstimator | None = None

    def confidence_for(self, terrain: float, distance: float) -> float:
        if self.kind is StructureKind.VILLAGE:
            return village_confidence(terrain, distance)
        return self.confidence

    def describe(self, terrain: float) -> str:
        if self.kind is StructureKind.VILLAGE:
            band = village_band(terrain)
            return self.description.format(variant=band.name if band else "Unknown")
        return self.description


VILLAGE = StructureRule(
    kind=StructureKind.VILLAGE,
    display_name="Village",
    category=Category.VILLAGE,
    location_type=LocationType.VILLAGE,
    separation=34,
    spacing=8,
    probability=0.6,
    salt=10387312,
    alignment=CHUNK_CENTER,
    description="Predicted {variant} village",
    biome=is_village_biome,
    height=estimate_village_height,
)

DESERT_TEMPLE = StructureRule(
    kind=StructureKind.DESERT_TEMPLE,
    display_name="Desert Temple",
    category=Category.LANDMARK,
    location_type=LocationType.DUNGEON,
    separation=32,
    spacing=8,
    probability=0.5,
    salt=14357617,
    alignment=CHUNK_CENTER,
    description="Predicted desert temple with treasure rooms",
    confidence=0.7,
    y=64,
    biome=is_arid_biome,
)

OCEAN_MONUMENT = StructureRule(
    kind=StructureKind.OCEAN_MONUMENT,
    display_name="Ocean Monument",
    category=Category.MONUMENT,
    location_type=LocationType.MONUMENT,
    separation=32,
    spacing=5,
    probability=0.25,
    salt=10387313,
    alignment=0,
    description="Underwater monument guarded by guardians",
    confidence=0.6,
    y=40,
)

PILLAGER_OUTPOST = StructureRule(
    kind=StructureKind.PILLAGER_OUTPOST,
    display_name="Pillager Outpost",
    category=Category.LANDMARK,
    location_type=LocationType.CUSTOM,
    separation=32,
    spacing=8,
    probability=0.2,
    salt=165745296,
    alignment=0,
    description="Pillager outpost with watchtower",
    confidence=0.7,
    y=72,
    biome=is_outpost_biome,
)

TRIAL_CHAMBER = StructureRule(
    kind=StructureKind.TRIAL_CHAMBER,
    display_name="Trial Chamber",
    category=Category.TRIAL_CHAMBER,
    location_type=LocationType.TRIAL_CHAMBER,
    separation=34,
    spacing=12,
    probability=0.5,
    salt=94251327,
    alignment=0,
    description="1.21+ Trial Chamber with trial spawners and unique loot",
    confidence=0.8,
    y=20,
)

ANCIENT_CITY = StructureRule(
    kind=StructureKind.ANCIENT_CITY,
    display_name="Ancient City",
    category=Category.ANCIENT_CITY,
    location_type=LocationType.ANCIENT_CITY,
    separation=24,
    spacing=8,
    probability=0.3,
    salt=20083232,
    alignment=0,
    description="Deep dark ancient city with Warden spawning",
    confidence=0.6,
    y=-40,
)

STRUCTURE_RULES: dict[StructureKind, StructureRule] = {
    rule.kind: rule
    for rule in (VILLAGE, DESERT_TEMPLE, OCEAN_MONUMENT, PILLAGER_OUTPOST, TRIAL_CHAMBER, ANCIENT_CITY)
}


def _region_range(center_chunk: int, separation: int, radius_chunks: int) -> range:
    center_region = center_chunk // separation
    reach = math.ceil(radius_chunks / separation)
    return range(center_region - reach, center_region + reach + 1)


def place_structures(
    rule: StructureRule,
    seed: int,
    spawn: SpawnPoint,
    radius_chunks: int,
) -> list[PredictedStructure]:
    """Return every structure of ``rule.kind`` generated near ``spawn``.

    The list is in region order; callers sort by distance.
    """
    spawn_chunk_x = spawn.x // CHUNK_SIZE
    spawn_chunk_z = spawn.z // CHUNK_SIZE
    span = rule.separation - rule.spacing

    found: list[PredictedStructure] = []
    for region_x in _region_range(spawn_chunk_x, rule.separation, radius_chunks):
        for region_z in _region_range(spawn_chunk_z, rule.separation, radius_chunks):
            rng = DeterministicRandom.for_region(seed, region_x, region_z, rule.salt)
            roll, rng = rng.next()
            if roll >= rule.probability:
                continue

            (offset_x, offset_z), rng = rng.take(2)
            chunk_x = region_x * rule.separation + rule.spacing + math.floor(offset_x * span)
            chunk_z = region_z * rule.separation + rule.spacing + math.floor(offset_z * span)
            x = chunk_x * CHUNK_SIZE + rule.alignment
            z = chunk_z * CHUNK_SIZE + rule.alignment

            terrain = biome_value(seed, x, z)
            if rule.biome is not None and not rule.biome(terrain):
                continue

            distance = math.dist((x, z), (spawn.x, spawn.z))
            found.append(
                PredictedStructure(
                    name=f"{rule.display_name} at ({x}, {z})",
                    category=rule.category,
                    location_type=rule.location_type,
                    x=x,
                    z=z,
                    y=rule.height(seed, x, z) if rule.height else rule.y,
                    dimension=Dimension.OVERWORLD,
                    confidence=rule.confidence_for(terrain, distance),
                    distance=math.floor(distance),
                    description=rule.describe(terrain),
                )
            )
    return found
