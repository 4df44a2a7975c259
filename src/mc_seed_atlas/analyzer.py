"""Seed analysis orchestration."""

from __future__ import annotations

import asyncio
import logging
import math
import time
from typing import Iterable

from mc_seed_atlas.models import (
    AnalysisOptions,
    BiomePrediction,
    CoordinateRecord,
    PredictedStructure,
    SeedAnalysisResult,
    SpawnPoint,
)
from mc_seed_atlas.telemetry import Telemetry
from mc_seed_atlas.worldgen import (
    STRUCTURE_RULES,
    StructureRule,
    locate_spawn,
    parse_seed,
    place_strongholds,
    place_structures,
    predict_biomes,
)

SEED_PREDICTED_TAG = "seed-predicted"
DEFAULT_COORDINATE_Y = 64


def _by_distance(structures: Iterable[PredictedStructure]) -> tuple[PredictedStructure, ...]:
    return tuple(sorted(structures, key=lambda structure: structure.distance))


class SeedAnalyzer:
    """Predicts spawn, structures, strongholds and rare biomes for a seed."""

    def __init__(
        self,
        options: AnalysisOptions | None = None,
        *,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.options = options or AnalysisOptions()
        self._telemetry = telemetry
        self._logger = logger or logging.getLogger("mc_seed_atlas.analyzer")

    def analyze(self, seed_input: str) -> SeedAnalysisResult:
        started = time.perf_counter()
        seed = parse_seed(seed_input)
        spawn = locate_spawn(seed)

        structures: list[PredictedStructure] = []
        for rule in self._selected_rules():
            structures.extend(place_structures(rule, seed, spawn, self.options.search_radius_chunks))
        strongholds = place_strongholds(seed)
        biomes = predict_biomes(seed, spawn)

        return self._assemble(seed_input, seed, spawn, structures, strongholds, biomes, started)

    async def analyze_async(self, seed_input: str) -> SeedAnalysisResult:
        """Same result as :meth:`analyze`, with the producers run in worker threads."""
        started = time.perf_counter()
        seed = parse_seed(seed_input)
        spawn = await asyncio.to_thread(locate_spawn, seed)

        radius = self.options.search_radius_chunks
        structure_batches, strongholds, biomes = await asyncio.gather(
            asyncio.gather(
                *(asyncio.to_thread(place_structures, rule, seed, spawn, radius) for rule in self._selected_rules())
            ),
            asyncio.to_thread(place_strongholds, seed),
            asyncio.to_thread(predict_biomes, seed, spawn),
        )

        structures = [structure for batch in structure_batches for structure in batch]
        return self._assemble(seed_input, seed, spawn, structures, strongholds, biomes, started)

    def structures_to_coordinates(
        self,
        world_id: int,
        structures: Iterable[PredictedStructure],
    ) -> list[CoordinateRecord]:
        """Map predictions to coordinate records without filtering or validation."""
        return [
            CoordinateRecord(
                world_id=world_id,
                x=structure.x,
                y=structure.y if structure.y is not None else DEFAULT_COORDINATE_Y,
                z=structure.z,
                dimension=structure.dimension,
                name=structure.name,
                description=(
                    f"{structure.description} (Confidence: {math.floor(structure.confidence * 100)}%)"
                ),
                category=structure.category,
                location_type=structure.location_type,
                tags=(SEED_PREDICTED_TAG, structure.location_type.value),
            )
            for structure in structures
        ]

    def _selected_rules(self) -> list[StructureRule]:
        return [rule for kind, rule in STRUCTURE_RULES.items() if self.options.includes(kind)]

    def _assemble(
        self,
        seed_input: str,
        seed: int,
        spawn: SpawnPoint,
        structures: list[PredictedStructure],
        strongholds: list[PredictedStructure],
        biomes: list[BiomePrediction],
        started: float,
    ) -> SeedAnalysisResult:
        result = SeedAnalysisResult(
            seed=seed_input,
            seed_value=seed,
            spawn_point=spawn,
            nearby_structures=_by_distance(structures),
            strongholds=_by_distance(strongholds),
            biome_predictions=tuple(biomes),
        )

        payload = {
            "seed_value": seed,
            "spawn_fallback": spawn.fallback,
            "structure_count": len(result.nearby_structures),
            "stronghold_count": len(result.strongholds),
            "biome_count": len(result.biome_predictions),
            "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
        }
        if self._telemetry is not None:
            self._telemetry.emit("seed_analysis_completed", payload)
        else:
            self._logger.info("seed_analysis_completed", extra=payload)
        return result
