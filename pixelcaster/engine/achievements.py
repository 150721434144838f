"""
Collector achievements.

Unlock rules over a collector's mint, tier and referral counts. Every rule
is a threshold on one count, except Early Bird, which compares the first
mint time with the launch time.

Remembering which achievements a collector has already been shown is the
caller's job; nothing here is stored.
"""

from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum
from operator import attrgetter
from types import MappingProxyType

from pixelcaster.models.tier import RarityTier

EARLY_BIRD_WINDOW = timedelta(hours=24)


class AchievementId(str, Enum):
    """Stable achievement identifiers, in display order."""

    FIRST_MINT = "first_mint"
    LUCKY_STAR = "lucky_star"
    COLLECTOR = "collector"
    WHALE = "whale"
    SOCIAL_BUTTERFLY = "social_butterfly"
    REFERRAL_MASTER = "referral_master"
    EARLY_BIRD = "early_bird"
    PLATINUM_HUNTER = "platinum_hunter"
    GOLD_RUSH = "gold_rush"
    SILVER_SURFER = "silver_surfer"


class AchievementRank(str, Enum):
    """How hard an achievement is to earn. Unrelated to NFT rarity tiers."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class RewardType(str, Enum):
    RARITY_BONUS = "rarity_bonus"
    DISCOUNT = "discount"
    BADGE = "badge"


@dataclass(frozen=True, slots=True)
class Reward:
    type: RewardType
    value: int | str


@dataclass(frozen=True, slots=True)
class Achievement:
    """
    A single achievement definition.

    Attributes:
        id: Stable identifier
        name: Display name
        description: One-line description
        icon: Badge emoji
        rank: Difficulty rank, which picks the badge color
        requirement: Short unlock condition shown to users
        reward: Reward granted on unlock, if any
    """

    id: AchievementId
    name: str
    description: str
    icon: str
    rank: AchievementRank
    requirement: str
    reward: Reward | None = None


@dataclass(frozen=True, slots=True)
class CollectorStats:
    """Counts an achievement check is evaluated against."""

    total_mints: int = 0
    platinum_count: int = 0
    gold_count: int = 0
    silver_count: int = 0
    uncommon_count: int = 0
    common_count: int = 0
    referral_count: int = 0
    first_minted_at: datetime | None = None
    launched_at: datetime | None = None

    @classmethod
    def from_tiers(
        cls,
        tiers: Iterable[RarityTier],
        referral_count: int = 0,
        first_minted_at: datetime | None = None,
        launched_at: datetime | None = None,
    ) -> "CollectorStats":
        """Build stats from the tiers of every token a collector minted."""
        counts = Counter(tiers)
        return cls(
            total_mints=sum(counts.values()),
            platinum_count=counts[RarityTier.PLATINUM],
            gold_count=counts[RarityTier.GOLD],
            silver_count=counts[RarityTier.SILVER],
            uncommon_count=counts[RarityTier.UNCOMMON],
            common_count=counts[RarityTier.COMMON],
            referral_count=referral_count,
            first_minted_at=first_minted_at,
            launched_at=launched_at,
        )


@dataclass(frozen=True, slots=True)
class AchievementProgress:
    """How far a collector is from unlocking one achievement."""

    achievement_id: AchievementId
    current: int
    target: int

    @property
    def percentage(self) -> float:
        """Progress in percent, capped at 100."""
        return min(100.0, self.current * 100 / self.target)

    @property
    def unlocked(self) -> bool:
        return self.current >= self.target


def _rarity_bonus(percent: int) -> Reward:
    return Reward(type=RewardType.RARITY_BONUS, value=percent)


ACHIEVEMENTS: MappingProxyType[AchievementId, Achievement] = MappingProxyType(
    {
        AchievementId.FIRST_MINT: Achievement(
            id=AchievementId.FIRST_MINT,
            name="First Mint",
            description="Mint your first PixelCaster NFT",
            icon="🎉",
            rank=AchievementRank.COMMON,
            requirement="Mint 1 NFT",
            reward=_rarity_bonus(5),
        ),
        AchievementId.LUCKY_STAR: Achievement(
            id=AchievementId.LUCKY_STAR,
            name="Lucky Star",
            description="Mint a Platinum rarity NFT",
            icon="💎",
            rank=AchievementRank.LEGENDARY,
            requirement="Get Platinum rarity",
            reward=_rarity_bonus(10),
        ),
        AchievementId.COLLECTOR: Achievement(
            id=AchievementId.COLLECTOR,
            name="Collector",
            description="Mint 5 or more NFTs",
            icon="📚",
            rank=AchievementRank.UNCOMMON,
            requirement="Mint 5 NFTs",
            reward=_rarity_bonus(8),
        ),
        AchievementId.WHALE: Achievement(
            id=AchievementId.WHALE,
            name="Whale",
            description="Mint 10 or more NFTs",
            icon="🐋",
            rank=AchievementRank.EPIC,
            requirement="Mint 10 NFTs",
            reward=_rarity_bonus(15),
        ),
        AchievementId.SOCIAL_BUTTERFLY: Achievement(
            id=AchievementId.SOCIAL_BUTTERFLY,
            name="Social Butterfly",
            description="Successfully refer 3 users",
            icon="🦋",
            rank=AchievementRank.RARE,
            requirement="Refer 3 users",
            reward=_rarity_bonus(10),
        ),
        AchievementId.REFERRAL_MASTER: Achievement(
            id=AchievementId.REFERRAL_MASTER,
            name="Referral Master",
            description="Successfully refer 10 users",
            icon="👑",
            rank=AchievementRank.EPIC,
            requirement="Refer 10 users",
            reward=_rarity_bonus(20),
        ),
        AchievementId.EARLY_BIRD: Achievement(
            id=AchievementId.EARLY_BIRD,
            name="Early Bird",
            description="Mint within the first 24 hours of launch",
            icon="🐦",
            rank=AchievementRank.RARE,
            requirement="Mint within 24h of launch",
        ),
        AchievementId.PLATINUM_HUNTER: Achievement(
            id=AchievementId.PLATINUM_HUNTER,
            name="Platinum Hunter",
            description="Collect 3 Platinum rarity NFTs",
            icon="🏆",
            rank=AchievementRank.LEGENDARY,
            requirement="Get 3 Platinum NFTs",
            reward=_rarity_bonus(25),
        ),
        AchievementId.GOLD_RUSH: Achievement(
            id=AchievementId.GOLD_RUSH,
            name="Gold Rush",
            description="Collect 5 Gold rarity NFTs",
            icon="🥇",
            rank=AchievementRank.EPIC,
            requirement="Get 5 Gold NFTs",
            reward=_rarity_bonus(15),
        ),
        AchievementId.SILVER_SURFER: Achievement(
            id=AchievementId.SILVER_SURFER,
            name="Silver Surfer",
            description="Collect 10 Silver rarity NFTs",
            icon="⚡",
            rank=AchievementRank.RARE,
            requirement="Get 10 Silver NFTs",
            reward=_rarity_bonus(10),
        ),
    }
)

ACHIEVEMENT_RANK_COLORS: MappingProxyType[AchievementRank, str] = MappingProxyType(
    {
        AchievementRank.COMMON: "#6B7280",
        AchievementRank.UNCOMMON: "#10B981",
        AchievementRank.RARE: "#3B82F6",
        AchievementRank.EPIC: "#A855F7",
        AchievementRank.LEGENDARY: "#F59E0B",
    }
)

# (count read from the stats, count needed to unlock)
_THRESHOLDS: MappingProxyType[
    AchievementId, tuple[Callable[[CollectorStats], int], int]
] = MappingProxyType(
    {
        AchievementId.FIRST_MINT: (attrgetter("total_mints"), 1),
        AchievementId.LUCKY_STAR: (attrgetter("platinum_count"), 1),
        AchievementId.COLLECTOR: (attrgetter("total_mints"), 5),
        AchievementId.WHALE: (attrgetter("total_mints"), 10),
        AchievementId.SOCIAL_BUTTERFLY: (attrgetter("referral_count"), 3),
        AchievementId.REFERRAL_MASTER: (attrgetter("referral_count"), 10),
        AchievementId.PLATINUM_HUNTER: (attrgetter("platinum_count"), 3),
        AchievementId.GOLD_RUSH: (attrgetter("gold_count"), 5),
        AchievementId.SILVER_SURFER: (attrgetter("silver_count"), 10),
    }
)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are read as UTC so they compare with aware ones
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=UTC)


def minted_early(stats: CollectorStats) -> bool:
    """True if the first mint came no later than EARLY_BIRD_WINDOW after launch."""
    if stats.first_minted_at is None or stats.launched_at is None:
        return False
    return _as_utc(stats.first_minted_at) - _as_utc(stats.launched_at) <= EARLY_BIRD_WINDOW


def achievement_progress(achievement_id: AchievementId, stats: CollectorStats) -> AchievementProgress:
    """
    Progress toward one achievement.

    Early Bird has no count to accumulate: its progress is 1/1 when the
    first mint qualifies and 0/1 otherwise.
    """
    if achievement_id == AchievementId.EARLY_BIRD:
        return AchievementProgress(achievement_id, current=int(minted_early(stats)), target=1)
    metric, target = _THRESHOLDS[achievement_id]
    return AchievementProgress(achievement_id, current=metric(stats), target=target)


def check_achievements(stats: CollectorStats) -> list[AchievementId]:
    """
    Every achievement the stats unlock.

    Args:
        stats: Collector counts and mint timing

    Returns:
        Unlocked achievement IDs in display order
    """
    return [
        achievement_id
        for achievement_id in ACHIEVEMENTS
        if achievement_progress(achievement_id, stats).unlocked
    ]


def rarity_bonus(unlocked: Iterable[AchievementId]) -> int:
    """Total rarity bonus percent granted by a set of unlocked achievements."""
    total = 0
    for achievement_id in unlocked:
        reward = ACHIEVEMENTS[achievement_id].reward
        if reward is not None and reward.type == RewardType.RARITY_BONUS:
            total += int(reward.value)
    return total
