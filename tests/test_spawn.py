from __future__ import annotations

from mc_seed_atlas.worldgen import spawn
from mc_seed_atlas.worldgen.noise import biome_value
from mc_seed_atlas.worldgen.spawn import SPAWN_Y, is_habitable, locate_spawn


def test_spawn_for_seed_zero() -> None:
    point = locate_spawn(0)

    assert (point.x, point.y, point.z) == (-100, SPAWN_Y, 89)
    assert point.attempts == 2
    assert point.fallback is False


def test_spawn_is_habitable_and_inside_search_square() -> None:
    for seed in (1, -1, 42, 123456789, -2147483648):
        point = locate_spawn(seed)
        if point.fallback:
            continue
        assert -256 <= point.x < 256
        assert -256 <= point.z < 256
        assert is_habitable(biome_value(seed, point.x, point.z))


def test_spawn_fallback_is_flagged(monkeypatch) -> None:
    monkeypatch.setattr(spawn, "biome_value", lambda seed, x, z: 0.05)

    point = locate_spawn(31337)

    assert (point.x, point.y, point.z) == (0, SPAWN_Y, 0)
    assert point.fallback is True
    assert point.attempts == spawn.MAX_SPAWN_ATTEMPTS


def test_habitable_band_is_exclusive() -> None:
    assert not is_habitable(0.3)
    assert is_habitable(0.5)
    assert not is_habitable(0.8)
