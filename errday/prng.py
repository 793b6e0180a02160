# errday/prng.py
"""Deterministic 32-bit hashing and random streams.

All arithmetic is kept in the unsigned 32-bit range and wraps like the
`Math.imul` / `>>> 0` idiom, so the same seed produces the same numbers on
every machine.
"""

from __future__ import annotations

from typing import Callable

MASK32 = 0xFFFFFFFF
TWO_POW_32 = 4294967296.0

FNV_OFFSET = 2166136261
FNV_PRIME = 16777619
MULBERRY_STEP = 0x6D2B79F5


def imul(a: int, b: int) -> int:
    """32-bit wrapping multiply; result in unsigned form."""
    return ((a & MASK32) * (b & MASK32)) & MASK32


def _utf16_units(text: str):
    raw = text.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(raw), 2):
        yield raw[i] | (raw[i + 1] << 8)


def hash_seed(text: str) -> int:
    """FNV-1a over the UTF-16 code units of `text`."""
    h = FNV_OFFSET
    for unit in _utf16_units(text):
        h ^= unit
        h = imul(h, FNV_PRIME)
    return h


def create_generator(seed: int) -> Callable[[], float]:
    """mulberry32 stream; every call returns a float in [0, 1)."""
    state = seed & MASK32

    def next_float() -> float:
        nonlocal state
        state = (state + MULBERRY_STEP) & MASK32
        t = state
        t = imul(t ^ (t >> 15), t | 1)
        t ^= (t + imul(t ^ (t >> 7), t | 61)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / TWO_POW_32

    return next_float


def cell_noise(seed: int, x: int, y: int, salt: int) -> float:
    """Stateless per-cell noise in [0, 1), independent of call order."""
    h = seed & MASK32
    h ^= imul(x + 1, 374761393)
    h ^= imul(y + 1, 668265263)
    h ^= imul(salt + 1, 1597334677)
    h = imul(h ^ (h >> 13), 1274126177)
    return ((h ^ (h >> 16)) & MASK32) / TWO_POW_32


__all__ = [
    "MASK32",
    "imul",
    "hash_seed",
    "create_generator",
    "cell_noise",
]
