from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class SeedContractError(ValueError):
    """Raised when an internal invariant of the analyzer is broken."""


class Category(str, Enum):
    BASE = "base"
    FARM = "farm"
    VILLAGE = "village"
    STRONGHOLD = "stronghold"
    MONUMENT = "monument"
    PORTAL = "portal"
    RESOURCE = "resource"
    LANDMARK = "landmark"
    TRIAL_CHAMBER = "trial_chamber"
    ANCIENT_CITY = "ancient_city"
    OTHER = "other"


class LocationType(str, Enum):
    PLAYER_BASE = "player_base"
    VILLAGE = "village"
    STRONGHOLD = "stronghold"
    DUNGEON = "dungeon"
    MINESHAFT = "mineshaft"
    MONUMENT = "monument"
    MANSION = "mansion"
    PORTAL = "portal"
    FARM = "farm"
    TRIAL_CHAMBER = "trial_chamber"
    ANCIENT_CITY = "ancient_city"
    CHERRY_GROVE = "cherry_grove"
    NATURAL = "natural"
    CUSTOM = "custom"


class Dimension(str, Enum):
    OVERWORLD = "overworld"
    NETHER = "nether"
    END = "end"


class StructureKind(str, Enum):
    """Placement strategies the analyzer knows how to run."""

    VILLAGE = "village"
    DESERT_TEMPLE = "desert_temple"
    OCEAN_MONUMENT = "ocean_monument"
    PILLAGER_OUTPOST = "pillager_outpost"
    TRIAL_CHAMBER = "trial_chamber"
    ANCIENT_CITY = "ancient_city"


@dataclass(frozen=True, slots=True)
class PredictedStructure:
    name: str
    category: Category
    location_type: LocationType
    x: int
    z: int
    y: int | None
    dimension: Dimension
    confidence: float
    distance: int
    description: str

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["category"] = self.category.value
        payload["location_type"] = self.location_type.value
        payload["dimension"] = self.dimension.value
        return payload


@dataclass(frozen=True, slots=True)
class BiomePrediction:
    name: str
    x: int
    z: int
    confidence: float
    description: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SpawnPoint:
    """Predicted world spawn.

    ``fallback`` is set when no habitable candidate was found and the origin
    was returned instead; such a point is not a real prediction.
    """

    x: int
    y: int
    z: int
    fallback: bool = False
    attempts: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class RingSpec:
    structure_count: int
    min_distance: int
    max_distance: int
    ring_index: int


@dataclass(frozen=True, slots=True)
class AnalysisOptions:
    """Tunables accepted at the analyzer boundary.

    ``structure_kinds`` of ``None`` runs every placement strategy.
    """

    search_radius_chunks: int = 50
    structure_kinds: frozenset[StructureKind] | None = None

    def __post_init__(self) -> None:
        if self.search_radius_chunks < 0:
            raise SeedContractError(f"search_radius_chunks must be >= 0, got {self.search_radius_chunks}")

    def includes(self, kind: StructureKind) -> bool:
        return self.structure_kinds is None or kind in self.structure_kinds


@dataclass(frozen=True, slots=True)
class SeedAnalysisResult:
    seed: str
    seed_value: int
    spawn_point: SpawnPoint
    nearby_structures: tuple[PredictedStructure, ...]
    strongholds: tuple[PredictedStructure, ...]
    biome_predictions: tuple[BiomePrediction, ...]
    analysis_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "seed": self.seed,
            "seed_value": self.seed_value,
            "spawn_point": self.spawn_point.to_dict(),
            "nearby_structures": [structure.to_dict() for structure in self.nearby_structures],
            "strongholds": [structure.to_dict() for structure in self.strongholds],
            "biome_predictions": [biome.to_dict() for biome in self.biome_predictions],
            "analysis_date": self.analysis_date.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class CoordinateRecord:
    """Shape handed to the coordinate persistence layer."""

    world_id: int
    x: int
    y: int
    z: int
    dimension: Dimension
    name: str
    description: str
    category: Category
    location_type: LocationType
    is_manually_edited: bool = False
    tags: tuple[str, ...] = ()
    screenshot_path: str | None = None
    thumbnail_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["dimension"] = self.dimension.value
        payload["category"] = self.category.value
        payload["location_type"] = self.location_type.value
        payload["tags"] = list(self.tags)
        return payload


@dataclass(slots=True)
class StructureLocation:
    structure: str
    dimension: str
    x: int
    z: int
    distance_blocks: float
    source: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class BiomeLocation:
    biome: str
    dimension: str
    x: int
    z: int
    distance_blocks: float
    source: str
    details: dict[str, Any] = field(default_factory=dict)
