"""Response models shared by the API routers."""

from typing import Any

from pydantic import BaseModel, Field

from pixelcaster.models.artwork import ColorSet, NftArtifact
from pixelcaster.models.tier import TierProperties


class TierResponse(BaseModel):
    """Static properties of one tier."""

    name: str
    display_name: str
    color: str
    rate: float
    glow_intensity: float
    border_width: int
    has_sparkles: bool
    has_halo: bool
    description: str
    icon: str

    @classmethod
    def from_properties(cls, props: TierProperties) -> "TierResponse":
        return cls(
            name=props.name,
            display_name=props.display_name,
            color=props.color,
            rate=props.rate,
            glow_intensity=props.glow_intensity,
            border_width=props.border_width,
            has_sparkles=props.has_sparkles,
            has_halo=props.has_halo,
            description=props.description,
            icon=props.icon,
        )


class PaletteResponse(BaseModel):
    """CSS colors for an artifact."""

    primary: str
    secondary: str
    accent: str
    background_gradient: str

    @classmethod
    def from_color_set(cls, colors: ColorSet) -> "PaletteResponse":
        return cls(
            primary=colors.primary,
            secondary=colors.secondary,
            accent=colors.accent,
            background_gradient=colors.background_gradient,
        )


class ArtworkResponse(BaseModel):
    """Everything a renderer needs to draw an artifact."""

    seed: int
    source: str
    is_deterministic: bool
    tier: str
    serial: str
    grid_size: int
    pattern: list[list[bool]]
    palette: PaletteResponse
    properties: TierResponse
    attributes: list[dict[str, Any]] = Field(default_factory=list)
    message: str

    @classmethod
    def from_artifact(
        cls, artifact: NftArtifact, source: str, is_deterministic: bool
    ) -> "ArtworkResponse":
        return cls(
            seed=artifact.seed,
            source=source,
            is_deterministic=is_deterministic,
            tier=artifact.tier.value,
            serial=artifact.serial,
            grid_size=len(artifact.pattern),
            pattern=[list(row) for row in artifact.pattern],
            palette=PaletteResponse.from_color_set(artifact.palette),
            properties=TierResponse.from_properties(artifact.properties),
            attributes=[attribute.to_dict() for attribute in artifact.attributes],
            message=artifact.message,
        )
