"""Compose a complete artifact from a seed."""

from pixelcaster.engine.attributes import build_attributes
from pixelcaster.engine.catalog import tier_properties
from pixelcaster.engine.classifier import classify_rarity
from pixelcaster.engine.fortune import message_for
from pixelcaster.engine.palette import generate_palette
from pixelcaster.engine.pattern import generate_pattern
from pixelcaster.engine.serial import allocate_serial
from pixelcaster.models.artwork import NftArtifact
from pixelcaster.models.tier import RarityTier


def generate_artifact_for(tier: RarityTier, seed: int) -> NftArtifact:
    """Build an artifact for a tier the caller already holds."""
    return NftArtifact(
        seed=seed,
        tier=tier,
        properties=tier_properties(tier),
        pattern=generate_pattern(seed, tier),
        palette=generate_palette(seed, tier),
        serial=allocate_serial(seed),
        attributes=tuple(build_attributes(tier, seed)),
        message=message_for(tier),
    )


def generate_artifact(seed: int) -> NftArtifact:
    """Classify a seed and build its artifact."""
    return generate_artifact_for(classify_rarity(seed), seed)
