"""Tests for rarity classification."""

from collections import Counter

import pytest

from pixelcaster.engine.classifier import (
    RARITY_BUCKETS,
    RARITY_MODULUS,
    classify_rarity,
    classify_roll,
    rarity_roll,
)
from pixelcaster.models.tier import TIER_ORDER, RarityTier


class TestClassifyRoll:
    @pytest.mark.parametrize(
        ("roll", "expected"),
        [
            (0, RarityTier.COMMON),
            (799_999, RarityTier.COMMON),
            (800_000, RarityTier.UNCOMMON),
            (949_999, RarityTier.UNCOMMON),
            (950_000, RarityTier.SILVER),
            (989_999, RarityTier.SILVER),
            (990_000, RarityTier.GOLD),
            (999_899, RarityTier.GOLD),
            (999_900, RarityTier.PLATINUM),
            (999_999, RarityTier.PLATINUM),
        ],
    )
    def test_bucket_boundaries(self, roll: int, expected: RarityTier) -> None:
        """Buckets are half-open [lower, upper)."""
        assert classify_roll(roll) == expected

    def test_out_of_range_rolls_reduced(self) -> None:
        assert classify_roll(RARITY_MODULUS) == RarityTier.COMMON
        assert classify_roll(-1) == RarityTier.PLATINUM

    def test_buckets_partition_modulus(self) -> None:
        """Upper bounds ascend, end at the modulus, and cover tiers in order."""
        bounds = [bound for bound, _ in RARITY_BUCKETS]
        assert bounds == sorted(bounds)
        assert bounds[-1] == RARITY_MODULUS
        assert tuple(tier for _, tier in RARITY_BUCKETS) == TIER_ORDER

    def test_bucket_widths_match_rates(self) -> None:
        widths: dict[RarityTier, int] = {}
        lower = 0
        for upper, tier in RARITY_BUCKETS:
            widths[tier] = upper - lower
            lower = upper

        assert widths == {
            RarityTier.COMMON: 800_000,
            RarityTier.UNCOMMON: 150_000,
            RarityTier.SILVER: 40_000,
            RarityTier.GOLD: 9_900,
            RarityTier.PLATINUM: 100,
        }


class TestClassifyRarity:
    def test_returns_tier(self) -> None:
        assert classify_rarity(12345) in TIER_ORDER

    def test_deterministic(self) -> None:
        for seed in (0, 1, 12345, 67890, 999_999):
            assert classify_rarity(seed) == classify_rarity(seed)

    def test_seed_zero(self) -> None:
        classify_rarity(0)

    def test_max_random_seed(self) -> None:
        classify_rarity(999_999)

    def test_negative_and_huge_seeds(self) -> None:
        """Any int is accepted."""
        for seed in (-1, -999_999_999, 2**64, 10**30):
            assert classify_rarity(seed) in TIER_ORDER

    def test_reduction_is_modular(self) -> None:
        """Seeds congruent modulo the working modulus share a tier."""
        for seed in (0, 7, 12345, 999_999):
            assert classify_rarity(seed) == classify_rarity(seed + RARITY_MODULUS)
            assert classify_rarity(seed) == classify_rarity(seed - RARITY_MODULUS)

    def test_roll_in_range(self) -> None:
        for seed in range(0, 1_000_000, 9973):
            assert 0 <= rarity_roll(seed) < RARITY_MODULUS

    def test_distribution_shape(self) -> None:
        """Sampling the first 10,000 seeds follows the tier ordering."""
        counts = Counter(classify_rarity(i) for i in range(10_000))

        assert counts[RarityTier.COMMON] > counts[RarityTier.UNCOMMON]
        assert counts[RarityTier.UNCOMMON] > counts[RarityTier.SILVER]
        assert counts[RarityTier.SILVER] > counts[RarityTier.GOLD]
        assert counts[RarityTier.GOLD] > counts[RarityTier.PLATINUM]

    def test_distribution_close_to_rates(self) -> None:
        counts = Counter(classify_rarity(i) for i in range(100_000))

        assert 78_000 < counts[RarityTier.COMMON] < 82_000
        assert 13_500 < counts[RarityTier.UNCOMMON] < 16_500
        assert 3_200 < counts[RarityTier.SILVER] < 4_800
