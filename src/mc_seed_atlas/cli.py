"""CLI-side handler wrappers and result filtering."""

from __future__ import annotations

from typing import Iterable

from mc_seed_atlas.analyzer import SeedAnalyzer
from mc_seed_atlas.models import CoordinateRecord, PredictedStructure, SeedAnalysisResult


def filter_structures(structures: Iterable[PredictedStructure], types: Iterable[str] | None) -> list[PredictedStructure]:
    """Keep structures whose location type or category is in ``types``.

    An empty or missing selection keeps everything.
    """
    wanted = {item.strip().lower() for item in types or () if item.strip()}
    if not wanted:
        return list(structures)
    return [
        structure
        for structure in structures
        if structure.location_type.value in wanted or structure.category.value in wanted
    ]


class CliAnalysisHandler:
    """Simple sync facade over the analyzer with a per-seed result cache."""

    def __init__(self, analyzer: SeedAnalyzer) -> None:
        self._analyzer = analyzer
        self._results: dict[str, SeedAnalysisResult] = {}

    def analyze(self, seed: str) -> SeedAnalysisResult:
        if seed not in self._results:
            self._results[seed] = self._analyzer.analyze(seed)
        return self._results[seed]

    def coordinates(self, seed: str, world_id: int, types: Iterable[str] | None = None) -> list[CoordinateRecord]:
        result = self.analyze(seed)
        selected = filter_structures((*result.nearby_structures, *result.strongholds), types)
        return self._analyzer.structures_to_coordinates(world_id, selected)
