from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime

import pytest

from mc_seed_atlas.analyzer import SEED_PREDICTED_TAG, SeedAnalyzer
from mc_seed_atlas.models import (
    AnalysisOptions,
    Category,
    Dimension,
    LocationType,
    PredictedStructure,
    SeedContractError,
    StructureKind,
)
from mc_seed_atlas.telemetry import LoggingTelemetry


class RecordingTelemetry:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def emit(self, event_name: str, payload: dict) -> None:
        self.events.append((event_name, payload))


def _without_date(result) -> tuple:
    return (
        result.seed_value,
        result.spawn_point,
        result.nearby_structures,
        result.strongholds,
        result.biome_predictions,
    )


def _structure(name: str, location_type: LocationType, y: int | None = 12) -> PredictedStructure:
    return PredictedStructure(
        name=name,
        category=Category.LANDMARK,
        location_type=location_type,
        x=100,
        z=-200,
        y=y,
        dimension=Dimension.OVERWORLD,
        confidence=0.876,
        distance=223,
        description="Something worth visiting",
    )


@pytest.mark.parametrize("seed", ["0", "Minecraft", "-4172144997902289642", "glacier 2"])
def test_analysis_is_deterministic(seed) -> None:
    analyzer = SeedAnalyzer()

    assert _without_date(analyzer.analyze(seed)) == _without_date(analyzer.analyze(seed))


def test_empty_seed_matches_zero() -> None:
    analyzer = SeedAnalyzer()
    empty = analyzer.analyze("")
    zero = analyzer.analyze("0")

    assert empty.seed == ""
    assert zero.seed == "0"
    assert _without_date(empty) == _without_date(zero)


def test_numeric_and_trimmed_seed_equivalence() -> None:
    analyzer = SeedAnalyzer()

    assert _without_date(analyzer.analyze("12345")) == _without_date(analyzer.analyze("12345 "))


def test_seed_zero_golden_spawn_and_strongholds() -> None:
    result = SeedAnalyzer().analyze("0")

    spawn = result.spawn_point
    assert (spawn.x, spawn.y, spawn.z, spawn.fallback) == (-100, 70, 89, False)
    assert [(s.x, s.z) for s in result.strongholds[:3]] == [(-1528, -1400), (2072, -856), (-824, 2120)]
    assert len(result.strongholds) == 19


@pytest.mark.parametrize("seed", ["0", "1", "hello world", "-77"])
def test_sorted_and_bounded(seed) -> None:
    result = SeedAnalyzer().analyze(seed)

    for group in (result.nearby_structures, result.strongholds):
        distances = [structure.distance for structure in group]
        assert distances == sorted(distances)
        assert all(distance >= 0 for distance in distances)
    for item in (*result.nearby_structures, *result.strongholds, *result.biome_predictions):
        assert 0.0 <= item.confidence <= 1.0


def test_structure_kinds_option_limits_strategies() -> None:
    options = AnalysisOptions(structure_kinds=frozenset({StructureKind.OCEAN_MONUMENT}))
    result = SeedAnalyzer(options).analyze("0")

    assert {s.location_type for s in result.nearby_structures} <= {LocationType.MONUMENT}
    assert len(result.strongholds) == 19


def test_zero_radius_still_searches_spawn_region() -> None:
    wide = SeedAnalyzer(AnalysisOptions(search_radius_chunks=200)).analyze("0")
    narrow = SeedAnalyzer(AnalysisOptions(search_radius_chunks=0)).analyze("0")

    assert len(narrow.nearby_structures) <= len(wide.nearby_structures)
    assert set(narrow.nearby_structures) <= set(wide.nearby_structures)


def test_negative_radius_is_rejected() -> None:
    with pytest.raises(SeedContractError):
        AnalysisOptions(search_radius_chunks=-1)


def test_async_analysis_matches_sync() -> None:
    analyzer = SeedAnalyzer()

    async_result = asyncio.run(analyzer.analyze_async("Minecraft"))

    assert _without_date(async_result) == _without_date(analyzer.analyze("Minecraft"))


def test_result_is_json_serializable() -> None:
    result = SeedAnalyzer().analyze("json please")

    payload = json.loads(json.dumps(result.to_dict()))

    assert payload["seed"] == "json please"
    assert datetime.fromisoformat(payload["analysis_date"]) == result.analysis_date
    assert len(payload["strongholds"]) == 19
    assert payload["strongholds"][0]["location_type"] == "stronghold"
    assert payload["spawn_point"]["y"] == 70


def test_telemetry_receives_completion_event() -> None:
    telemetry = RecordingTelemetry()

    SeedAnalyzer(telemetry=telemetry).analyze("0")

    assert len(telemetry.events) == 1
    name, payload = telemetry.events[0]
    assert name == "seed_analysis_completed"
    assert payload["stronghold_count"] == 19
    assert payload["spawn_fallback"] is False


def test_structures_to_coordinates_maps_subset() -> None:
    analyzer = SeedAnalyzer()
    subset = [_structure("Trial Chamber", LocationType.TRIAL_CHAMBER), _structure("Outpost", LocationType.CUSTOM)]

    records = analyzer.structures_to_coordinates(7, subset)

    assert len(records) == 2
    for record, structure in zip(records, subset):
        assert record.world_id == 7
        assert record.tags == (SEED_PREDICTED_TAG, structure.location_type.value)
        assert record.description == "Something worth visiting (Confidence: 87%)"
        assert (record.x, record.y, record.z) == (100, 12, -200)
        assert record.is_manually_edited is False


def test_structures_to_coordinates_defaults_height() -> None:
    records = SeedAnalyzer().structures_to_coordinates(1, [_structure("Somewhere", LocationType.NATURAL, y=None)])

    assert records[0].y == 64


def test_structures_to_coordinates_from_real_analysis() -> None:
    analyzer = SeedAnalyzer()
    result = analyzer.analyze("0")

    records = analyzer.structures_to_coordinates(3, result.strongholds[:2])

    assert len(records) == 2
    assert all(record.tags == ("seed-predicted", "stronghold") for record in records)
    assert records[0].description.endswith("(Confidence: 95%)")


def test_completion_is_logged_once_with_logging_telemetry(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="mc_seed_atlas"):
        SeedAnalyzer(telemetry=LoggingTelemetry()).analyze("0")

    completed = [record for record in caplog.records if record.getMessage() == "seed_analysis_completed"]
    assert len(completed) == 1
    assert completed[0].name == "mc_seed_atlas.telemetry"
    assert completed[0].telemetry["stronghold_count"] == 19


def test_completion_is_logged_directly_without_telemetry(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="mc_seed_atlas"):
        SeedAnalyzer().analyze("0")

    completed = [record for record in caplog.records if record.getMessage() == "seed_analysis_completed"]
    assert len(completed) == 1
    assert completed[0].name == "mc_seed_atlas.analyzer"
    assert completed[0].stronghold_count == 19


def test_temple_and_outpost_are_selected_by_kind() -> None:
    options = AnalysisOptions(structure_kinds=frozenset({StructureKind.DESERT_TEMPLE}))
    analyzer = SeedAnalyzer(options, telemetry=RecordingTelemetry())

    structures = [s for seed in ("0", "1", "2", "3") for s in analyzer.analyze(seed).nearby_structures]

    assert structures
    assert {s.location_type for s in structures} == {LocationType.DUNGEON}
    assert all(s.name.startswith("Desert Temple") for s in structures)
