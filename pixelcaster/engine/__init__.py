"""
PixelCaster rarity and generative-art engine.

Pure functions only: identifier -> seed -> tier -> artifact.
"""

from pixelcaster.engine.achievements import (
    ACHIEVEMENTS,
    AchievementId,
    CollectorStats,
    achievement_progress,
    check_achievements,
    rarity_bonus,
)
from pixelcaster.engine.artifact import generate_artifact, generate_artifact_for
from pixelcaster.engine.attributes import attributes_to_dicts, build_attributes
from pixelcaster.engine.catalog import all_tier_properties, tier_color, tier_properties
from pixelcaster.engine.classifier import (
    RARITY_BUCKETS,
    RARITY_MODULUS,
    classify_rarity,
    classify_roll,
)
from pixelcaster.engine.fortune import FORTUNE_MESSAGES, daily_fortune, message_for
from pixelcaster.engine.hasher import hash_address, hash_fid, hash_identifier
from pixelcaster.engine.palette import color_scheme_label, generate_palette
from pixelcaster.engine.pattern import generate_pattern, grid_size, pattern_density
from pixelcaster.engine.seeds import SEED_SPACE, random_seed, resolve_seed, token_seed
from pixelcaster.engine.serial import MAX_SUPPLY, allocate_serial, serial_number
from pixelcaster.engine.upgrade import (
    BURN_RULES,
    BurnOutcome,
    BurnRule,
    UpgradeNotAvailableError,
    burn_rule_for,
    evaluate_burn,
)

__all__ = [
    # Identifier -> seed
    "hash_identifier",
    "hash_fid",
    "hash_address",
    "random_seed",
    "resolve_seed",
    "token_seed",
    "SEED_SPACE",
    # Seed -> tier
    "classify_rarity",
    "classify_roll",
    "RARITY_BUCKETS",
    "RARITY_MODULUS",
    "tier_properties",
    "tier_color",
    "all_tier_properties",
    # (seed, tier) -> artwork
    "generate_pattern",
    "grid_size",
    "pattern_density",
    "generate_palette",
    "color_scheme_label",
    "allocate_serial",
    "serial_number",
    "MAX_SUPPLY",
    "build_attributes",
    "attributes_to_dicts",
    "message_for",
    "daily_fortune",
    "FORTUNE_MESSAGES",
    "generate_artifact",
    "generate_artifact_for",
    # Burn upgrades
    "BURN_RULES",
    "BurnRule",
    "BurnOutcome",
    "UpgradeNotAvailableError",
    "burn_rule_for",
    "evaluate_burn",
    # Achievements
    "ACHIEVEMENTS",
    "AchievementId",
    "CollectorStats",
    "achievement_progress",
    "check_achievements",
    "rarity_bonus",
]
