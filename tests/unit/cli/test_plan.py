"""Unit tests for the plan command."""

import json
from collections.abc import Callable
from pathlib import Path

from cachedecimate.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestPlanCommand:
    """Tests for cache-decimate plan."""

    def test_table_output(
        self, make_cache: Callable[[int], list[Path]], cache_dir: Path
    ) -> None:
        """The plan is shown as a table with a summary line."""
        files = make_cache(23)

        result = runner.invoke(app, ["plan", "-c", str(cache_dir)])

        assert result.exit_code == 0
        assert "Eviction Plan (Dry Run)" in result.stdout
        assert "23 files found - 2 would be removed" in result.stdout
        assert all(f.exists() for f in files)

    def test_json_output(
        self, make_cache: Callable[[int], list[Path]], cache_dir: Path
    ) -> None:
        """JSON output lists the victims oldest first."""
        files = make_cache(23)

        result = runner.invoke(app, ["plan", "-c", str(cache_dir), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["total_files"] == 23
        assert data["victim_count"] == 2
        assert data["skipped"] == 0
        assert [v["path"] for v in data["victims"]] == [str(files[0]), str(files[1])]
        assert data["victims"][0]["accessed_at"] == "2024-01-15T10:00:01+00:00"

    def test_limit(self, make_cache: Callable[[int], list[Path]], cache_dir: Path) -> None:
        """--limit truncates the displayed victims."""
        make_cache(50)

        result = runner.invoke(
            app, ["plan", "-c", str(cache_dir), "--format", "json", "--limit", "2"]
        )

        data = json.loads(result.stdout)
        assert data["victim_count"] == 5
        assert len(data["victims"]) == 2

    def test_limit_must_be_positive(
        self, make_cache: Callable[[int], list[Path]], cache_dir: Path
    ) -> None:
        """--limit rejects zero and negative values instead of showing all victims."""
        make_cache(50)

        for value in ("0", "-1"):
            result = runner.invoke(
                app, ["plan", "-c", str(cache_dir), "--format", "json", "--limit", value]
            )

            assert result.exit_code == 2

    def test_nothing_to_evict(
        self, make_cache: Callable[[int], list[Path]], cache_dir: Path
    ) -> None:
        """Small caches have an empty plan."""
        make_cache(4)

        result = runner.invoke(app, ["plan", "-c", str(cache_dir)])

        assert result.exit_code == 0
        assert "nothing to evict" in result.stdout

    def test_missing_cache(self, tmp_path: Path) -> None:
        """A missing cache directory is a fatal error."""
        result = runner.invoke(app, ["plan", "-c", str(tmp_path / "missing")])

        assert result.exit_code == 1
