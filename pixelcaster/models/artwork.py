from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from pixelcaster.models.tier import RarityTier, TierProperties

# Square grid of pixels, row-major. Tuples keep equal inputs value-equal and immutable.
PixelGrid = tuple[tuple[bool, ...], ...]


class SeedOrigin(str, Enum):
    """Where a seed came from."""

    FID = "fid"
    ADDRESS = "address"
    TOKEN = "token"
    RANDOM = "random"


@dataclass(frozen=True, slots=True)
class SeedResolution:
    """A seed plus how it was obtained."""

    seed: int
    origin: SeedOrigin

    @property
    def is_deterministic(self) -> bool:
        """Random seeds are the only ones that cannot be regenerated."""
        return self.origin != SeedOrigin.RANDOM


@dataclass(frozen=True, slots=True)
class ColorSet:
    """
    CSS color strings for one artifact.

    Seed-derived tiers use hsl() values; GOLD and PLATINUM use fixed
    gradients and hex constants.
    """

    primary: str
    secondary: str
    accent: str
    background_gradient: str

    def to_dict(self) -> dict[str, str]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "bgGradient": self.background_gradient,
        }


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single NFT trait in OpenSea attribute format."""

    trait_type: str
    value: str | int | float
    display_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"trait_type": self.trait_type, "value": self.value}
        if self.display_type is not None:
            data["display_type"] = self.display_type
        return data


@dataclass(frozen=True, slots=True)
class NftArtifact:
    """
    Everything derived from one seed.

    Attributes:
        seed: Input seed
        tier: Tier classified from the seed
        properties: Static tier properties
        pattern: Pixel grid
        palette: Colors for the grid and background
        serial: Formatted serial number (#NNNNN/MAX_SUPPLY)
        attributes: Ordered trait list
        message: Fortune flavor text
    """

    seed: int
    tier: RarityTier
    properties: TierProperties
    pattern: PixelGrid
    palette: ColorSet
    serial: str
    attributes: tuple[Attribute, ...]
    message: str


@dataclass(frozen=True, slots=True)
class FortuneReading:
    """A daily fortune drawn for an address."""

    tier: RarityTier
    message: str
    bonus_percent: int
    day: date
