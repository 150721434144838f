"""End-to-end tests for artifact generation."""

import pytest

from pixelcaster.engine import (
    allocate_serial,
    classify_rarity,
    generate_artifact,
    generate_palette,
    generate_pattern,
    tier_properties,
)
from pixelcaster.engine.artifact import generate_artifact_for
from pixelcaster.models.tier import RarityTier


class TestGenerateArtifact:
    def test_deterministic(self) -> None:
        assert generate_artifact(12345) == generate_artifact(12345)

    def test_parts_agree(self) -> None:
        artifact = generate_artifact(12345)
        tier = classify_rarity(12345)

        assert artifact.seed == 12345
        assert artifact.tier == tier
        assert artifact.properties == tier_properties(tier)
        assert artifact.pattern == generate_pattern(12345, tier)
        assert artifact.palette == generate_palette(12345, tier)
        assert artifact.serial == allocate_serial(12345) == "#12346/20000"
        assert artifact.message

    def test_attributes_reflect_tier(self) -> None:
        artifact = generate_artifact(12345)

        assert artifact.attributes[0].value == artifact.tier.display_name
        assert artifact.attributes[1].value == 12345

    @pytest.mark.parametrize("seed", [0, 999_999])
    def test_boundary_seeds(self, seed: int) -> None:
        artifact = generate_artifact(seed)
        assert artifact.seed == seed


class TestGenerateArtifactFor:
    def test_forced_tier(self) -> None:
        artifact = generate_artifact_for(RarityTier.PLATINUM, 5)

        assert artifact.tier == RarityTier.PLATINUM
        assert len(artifact.pattern) == 16
        assert "#E5E7EB" in artifact.palette.primary
        assert artifact.properties.has_halo
