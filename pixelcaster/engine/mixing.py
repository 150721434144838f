"""
32-bit integer mixing.

Every seed-derived value (rarity roll, pixel cells, daily fortune) goes
through these functions. They use only integer multiply, xor and shift
with fixed constants, so results are identical on every platform and
in any language that reimplements them.

INVARIANT: These constants are part of the minted-metadata contract.
Changing any of them changes every artifact ever generated.
"""

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

# Initial state for combine(); the 32-bit golden ratio.
_COMBINE_BASIS = 0x9E3779B9
_COMBINE_MULTIPLIER = 0x01000193

# Stream tags keep independent consumers of the same seed uncorrelated.
RARITY_STREAM = 0x52415249
PATTERN_STREAM = 0x50495845
FORTUNE_STREAM = 0x464F5254


def fmix32(value: int) -> int:
    """MurmurHash3 finalizer. Bijective on 32-bit integers."""
    h = value & MASK32
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & MASK32
    h ^= h >> 16
    return h


def fold32(value: int) -> int:
    """
    Reduce an arbitrary Python int to 32 bits.

    Negative values are taken modulo 2**64 first, then the two halves
    are xor-ed so high bits of wide seeds still matter.
    """
    v = value & MASK64
    return (v ^ (v >> 32)) & MASK32


def combine(*parts: int) -> int:
    """Mix any number of integers into one 32-bit value, order-sensitive."""
    h = _COMBINE_BASIS
    for part in parts:
        h = ((h ^ fold32(part)) * _COMBINE_MULTIPLIER) & MASK32
        h = fmix32(h)
    return h
