"""Normalization of user-supplied world seeds."""

from __future__ import annotations

import math
import re

from mc_seed_atlas.models import SeedContractError

_UINT32_MASK = 0xFFFFFFFF
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def to_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _numeric_value(text: str) -> int | None:
    if _INTEGER.fullmatch(text):
        return int(text)
    if not _DECIMAL.fullmatch(text):
        return None

    number = float(text)
    if not math.isfinite(number):
        return None
    return math.trunc(number)


def hash_text(text: str) -> int:
    """Rolling ``h*31 + c`` hash over UTF-16 code units, as Java's String.hashCode."""
    encoded = text.encode("utf-16-le", errors="surrogatepass")
    value = 0
    for index in range(0, len(encoded), 2):
        code_unit = encoded[index] | (encoded[index + 1] << 8)
        value = to_int32(value * 31 + code_unit)
    return value


def parse_seed(text: str) -> int:
    """Convert a seed as typed by a player into a signed 32-bit integer.

    Surrounding whitespace is ignored, blank input is seed 0, numeric input is
    used directly (wrapped to 32 bits) and anything else is hashed.
    """
    if not isinstance(text, str):
        raise SeedContractError(f"Seed input must be a string, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        return 0

    numeric = _numeric_value(stripped)
    if numeric is not None:
        return to_int32(numeric)
    return hash_text(stripped)
