from __future__ import annotations

import math
from typing import Protocol

from .analyzer import SeedAnalyzer
from .models import BiomeLocation, Dimension, PredictedStructure, SeedAnalysisResult, StructureLocation


class WorldLocator(Protocol):
    def nearest_structure(self, *, seed: str, structure: str, x: int, z: int, dimension: str) -> StructureLocation | None:
        ...

    def nearest_biome(self, *, seed: str, biome: str, x: int, z: int, dimension: str) -> BiomeLocation | None:
        ...


def _normalize(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


def _matches(structure: PredictedStructure, wanted: str) -> bool:
    if wanted in (structure.location_type.value, structure.category.value):
        return True
    return _normalize(structure.name).startswith(wanted)


class SeedAnalysisLocator:
    """Answers nearest-feature queries from a seed analysis.

    ``structure`` may be a location type, a category or the start of a
    structure name (``"desert_temple"``). Only the overworld is predicted.
    """

    source = "seed-analysis"

    def __init__(self, analyzer: SeedAnalyzer | None = None) -> None:
        self.analyzer = analyzer or SeedAnalyzer()
        self._cache: dict[str, SeedAnalysisResult] = {}

    def nearest_structure(self, *, seed: str, structure: str, x: int, z: int, dimension: str) -> StructureLocation | None:
        if dimension != Dimension.OVERWORLD.value:
            return None

        wanted = _normalize(structure)
        result = self._analysis(seed)
        candidates = [item for item in (*result.nearby_structures, *result.strongholds) if _matches(item, wanted)]
        if not candidates:
            return None

        best = min(candidates, key=lambda item: math.dist((x, z), (item.x, item.z)))
        return StructureLocation(
            structure=best.location_type.value,
            dimension=dimension,
            x=best.x,
            z=best.z,
            distance_blocks=math.dist((x, z), (best.x, best.z)),
            source=self.source,
            details={"name": best.name, "y": best.y, "confidence": best.confidence},
        )

    def nearest_biome(self, *, seed: str, biome: str, x: int, z: int, dimension: str) -> BiomeLocation | None:
        if dimension != Dimension.OVERWORLD.value:
            return None

        wanted = _normalize(biome)
        result = self._analysis(seed)
        candidates = [item for item in result.biome_predictions if _normalize(item.name) == wanted]
        if not candidates:
            return None

        best = min(candidates, key=lambda item: math.dist((x, z), (item.x, item.z)))
        return BiomeLocation(
            biome=best.name,
            dimension=dimension,
            x=best.x,
            z=best.z,
            distance_blocks=math.dist((x, z), (best.x, best.z)),
            source=self.source,
            details={"confidence": best.confidence, "description": best.description},
        )

    def _analysis(self, seed: str) -> SeedAnalysisResult:
        if seed not in self._cache:
            self._cache[seed] = self.analyzer.analyze(seed)
        return self._cache[seed]
