"""Tests for the metadata export job."""

import json
import sys
from pathlib import Path
from unittest.mock import patch

from pixelcaster.engine import classify_rarity, generate_artifact, token_seed
from pixelcaster.jobs.export_metadata import export_metadata, main


class TestExportMetadata:
    def test_writes_one_file_per_token(self, tmp_path: Path) -> None:
        """Each token ID gets its own JSON file."""
        distribution = export_metadata(1, 5, tmp_path)

        assert sorted(p.name for p in tmp_path.iterdir()) == [f"{i}.json" for i in range(1, 6)]
        assert sum(distribution.values()) == 5

    def test_file_contents(self, tmp_path: Path) -> None:
        """Files hold token metadata seeded by the token ID."""
        export_metadata(7, 1, tmp_path)

        data = json.loads((tmp_path / "7.json").read_text(encoding="utf-8"))
        assert data["name"].endswith("#7")
        assert data["rarity"] == generate_artifact(7).tier.value
        assert data["randomness"]["source"] == "token"
        assert "generated_at" not in data

    def test_owner_seeds(self, tmp_path: Path, sample_address: str) -> None:
        """With an owner, tiers match the gallery's token tiers."""
        export_metadata(1, 3, tmp_path, owner=sample_address)

        for token_id in range(1, 4):
            data = json.loads((tmp_path / f"{token_id}.json").read_text(encoding="utf-8"))
            assert data["rarity"] == classify_rarity(token_seed(token_id, sample_address)).value
            assert data["created_by"] == sample_address

    def test_creates_missing_directory(self, tmp_path: Path) -> None:
        """Output directory is created on demand."""
        out_dir = tmp_path / "nested" / "metadata"
        export_metadata(1, 1, out_dir)

        assert (out_dir / "1.json").exists()

    def test_idempotent(self, tmp_path: Path) -> None:
        """Re-running produces identical files."""
        export_metadata(1, 2, tmp_path)
        first = (tmp_path / "1.json").read_text(encoding="utf-8")
        export_metadata(1, 2, tmp_path)

        assert (tmp_path / "1.json").read_text(encoding="utf-8") == first


class TestMain:
    def test_cli_arguments(self, tmp_path: Path) -> None:
        """CLI parses arguments and runs the export."""
        argv = ["export", "--start", "10", "--count", "2", "--out-dir", str(tmp_path)]
        with patch.object(sys, "argv", argv):
            main()

        assert (tmp_path / "10.json").exists()
        assert (tmp_path / "11.json").exists()
