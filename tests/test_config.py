from __future__ import annotations

import pytest
from pydantic import ValidationError

from mc_seed_atlas.config import Settings, parse_structure_kinds
from mc_seed_atlas.models import StructureKind


def test_defaults_run_every_kind() -> None:
    options = Settings(_env_file=None).analysis_options()

    assert options.search_radius_chunks == 50
    assert options.structure_kinds is None


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("MC_SEED_ATLAS_SEARCH_RADIUS_CHUNKS", "12")
    monkeypatch.setenv("MC_SEED_ATLAS_STRUCTURE_KINDS", "village, trial_chamber")

    options = Settings(_env_file=None).analysis_options()

    assert options.search_radius_chunks == 12
    assert options.structure_kinds == frozenset({StructureKind.VILLAGE, StructureKind.TRIAL_CHAMBER})


def test_unknown_structure_kind_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, structure_kinds="village,castle")


def test_negative_radius_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, search_radius_chunks=-3)


def test_parse_structure_kinds() -> None:
    assert parse_structure_kinds("all") is None
    assert parse_structure_kinds("") is None
    assert parse_structure_kinds("ANCIENT_CITY") == frozenset({StructureKind.ANCIENT_CITY})
