"""
Export ERC-721 metadata files.

Writes one <token_id>.json per token so the collection can be pinned to
IPFS as a static directory. Run:

    python -m pixelcaster.jobs.export_metadata --start 1 --count 100 --out-dir build/metadata
"""

import argparse
import json
import logging
from collections import Counter
from pathlib import Path

from pixelcaster.config import settings
from pixelcaster.engine import generate_artifact, token_seed
from pixelcaster.models.artwork import SeedOrigin, SeedResolution
from pixelcaster.models.tier import TIER_ORDER, RarityTier
from pixelcaster.services.metadata import build_metadata

logger = logging.getLogger(__name__)


def export_metadata(
    start: int,
    count: int,
    out_dir: Path,
    owner: str | None = None,
) -> Counter[RarityTier]:
    """
    Write metadata for token IDs [start, start + count).

    Args:
        start: First token ID
        count: Number of tokens
        out_dir: Destination directory (created if missing)
        owner: When given, seeds come from token_seed(token_id, owner);
            otherwise the token ID itself is the seed

    Returns:
        Number of tokens written per tier
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    distribution: Counter[RarityTier] = Counter()

    for token_id in range(start, start + count):
        seed = token_id if owner is None else token_seed(token_id, owner)
        artifact = generate_artifact(seed)
        metadata = build_metadata(
            artifact,
            SeedResolution(seed=seed, origin=SeedOrigin.TOKEN),
            base_url=settings.base_url,
            collection_name=settings.collection_name,
            token_id=str(token_id),
            address=owner,
        )
        path = out_dir / f"{token_id}.json"
        path.write_text(json.dumps(metadata, indent=2, ensure_ascii=False), encoding="utf-8")
        distribution[artifact.tier] += 1

    logger.info("Exported %d metadata files to %s", count, out_dir)
    for tier in TIER_ORDER:
        logger.info("  %-9s %d", tier.value, distribution[tier])
    return distribution


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Export PixelCaster NFT metadata")
    parser.add_argument("--start", type=int, default=1, help="First token ID (default: 1)")
    parser.add_argument("--count", type=int, required=True, help="Number of tokens to export")
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path("build/metadata"),
        help="Output directory (default: build/metadata)",
    )
    parser.add_argument(
        "--owner",
        default=None,
        help="Owner address; seeds become token_seed(token_id, owner)",
    )

    args = parser.parse_args()
    export_metadata(args.start, args.count, args.out_dir, owner=args.owner)


if __name__ == "__main__":
    main()
