"""Seeded pseudo-random streams and per-region seed derivation."""

from __future__ import annotations

from dataclasses import dataclass

from mc_seed_atlas.models import SeedContractError
from mc_seed_atlas.worldgen.codec import to_int32

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 1 << 31

MIX_MULTIPLIER = 0x9E3779B9


def mix(seed: int, *values: int) -> int:
    """Fold ``values`` into ``seed`` with xor-multiply steps, staying in int32."""
    mixed = seed
    for value in values:
        mixed = to_int32((mixed ^ value) * MIX_MULTIPLIER)
    return mixed


def region_seed(world_seed: int, region_x: int, region_z: int, salt: int) -> int:
    return mix(world_seed, region_x, region_z, salt)


@dataclass(frozen=True, slots=True)
class DeterministicRandom:
    """Immutable linear-congruential stream.

    Every draw returns the value together with the successor stream, so a
    generator is never shared or mutated behind a caller's back::

        roll, rng = rng.next()
    """

    state: int

    def __post_init__(self) -> None:
        if isinstance(self.state, bool) or not isinstance(self.state, int):
            raise SeedContractError(f"PRNG seed must be an integer, got {self.state!r}")
        object.__setattr__(self, "state", self.state % LCG_MODULUS)

    @classmethod
    def for_region(cls, world_seed: int, region_x: int, region_z: int, salt: int) -> DeterministicRandom:
        return cls(region_seed(world_seed, region_x, region_z, salt))

    def next(self) -> tuple[float, DeterministicRandom]:
        state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return state / LCG_MODULUS, DeterministicRandom(state)

    def take(self, count: int) -> tuple[list[float], DeterministicRandom]:
        values: list[float] = []
        rng = self
        for _ in range(count):
            value, rng = rng.next()
            values.append(value)
        return values, rng
