"""
NFT trait list.

Order is the display order marketplaces use. Every value is a pure
function of (tier, seed).
"""

from typing import Any

from pixelcaster.engine.palette import color_scheme_label
from pixelcaster.engine.pattern import generate_pattern, grid_size, pattern_density
from pixelcaster.engine.serial import allocate_serial
from pixelcaster.models.artwork import Attribute
from pixelcaster.models.tier import RarityTier

GENERATION_METHOD = "Deterministic Pixel v1"


def build_attributes(tier: RarityTier, seed: int) -> list[Attribute]:
    """
    Build the trait list for an artifact.

    Args:
        tier: Rarity tier
        seed: Artifact seed

    Returns:
        Attributes in display order, starting with Rarity and Seed
    """
    pattern = generate_pattern(seed, tier)
    return [
        Attribute(trait_type="Rarity", value=tier.display_name),
        Attribute(trait_type="Seed", value=seed),
        Attribute(trait_type="Serial", value=allocate_serial(seed)),
        Attribute(trait_type="Grid Size", value=grid_size(tier), display_type="number"),
        Attribute(
            trait_type="Pattern Density",
            value=pattern_density(pattern),
            display_type="boost_percentage",
        ),
        Attribute(trait_type="Color Scheme", value=color_scheme_label(seed, tier)),
        Attribute(trait_type="Generation", value=GENERATION_METHOD),
    ]


def attributes_to_dicts(attributes: list[Attribute] | tuple[Attribute, ...]) -> list[dict[str, Any]]:
    """Serialize attributes for JSON metadata."""
    return [attribute.to_dict() for attribute in attributes]
