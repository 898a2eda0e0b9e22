"""Tests for the CLI entry point."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import typer
from typer.testing import CliRunner

from zoorofile.cli import async_run, main
from zoorofile.config import Settings
from zoorofile.core import RemoteQueryError
from zoorofile.core.readme_patcher import END_MARKER, START_MARKER

runner = CliRunner()


def _app() -> typer.Typer:
    app = typer.Typer()
    app.command()(main)
    return app


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A profile repository with config, assets and an existing README."""
    (tmp_path / "assets").mkdir()
    for mood in ("sleeping", "normal", "happy", "excited"):
        (tmp_path / "assets" / f"raccoon_{mood}.png").write_bytes(b"png")
    (tmp_path / "config.yaml").write_text(
        "github_username: octocat\nlanguage: en\n"
        f"paths:\n  readme: {tmp_path / 'README.md'}\n  assets_dir: {tmp_path / 'assets'}\n",
        encoding="utf-8",
    )
    (tmp_path / "README.md").write_text("# Hi there\n", encoding="utf-8")
    monkeypatch.setenv("GITHUB_TOKEN", "secret")
    monkeypatch.delenv("ZOOROFILE_USERNAME", raising=False)
    return tmp_path


def _patch_client(weekly_total: int = 3):
    client = AsyncMock()
    client.fetch_weekly_total.return_value = weekly_total
    client.fetch_weekly_by_repository.side_effect = RemoteQueryError("rate limited")
    client.fetch_recent_commits.return_value = []
    return patch("zoorofile.cli.GitHubContributionClient", return_value=client)


def test_cli_writes_readme(project: Path) -> None:
    with _patch_client():
        result = runner.invoke(_app(), ["--config", str(project / "config.yaml")])
    
    assert result.exit_code == 0, result.output
    content = (project / "README.md").read_text(encoding="utf-8")
    assert content.startswith("# Hi there\n\n\n" + START_MARKER)
    assert content.endswith(END_MARKER)
    assert "raccoon_normal.png" in content


def test_cli_missing_asset_exits_non_zero(project: Path) -> None:
    (project / "assets" / "raccoon_normal.png").unlink()
    
    with _patch_client():
        result = runner.invoke(_app(), ["--config", str(project / "config.yaml")])
    
    assert result.exit_code == 1
    assert (project / "README.md").read_text(encoding="utf-8") == "# Hi there\n"


def test_cli_requires_token(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN")
    
    result = runner.invoke(_app(), ["--config", str(project / "config.yaml")])
    
    assert result.exit_code == 1


def test_cli_dry_run_does_not_write(project: Path) -> None:
    with _patch_client():
        result = runner.invoke(_app(), ["--config", str(project / "config.yaml"), "--dry-run"])
    
    assert result.exit_code == 0
    assert START_MARKER in result.output
    assert (project / "README.md").read_text(encoding="utf-8") == "# Hi there\n"


@pytest.mark.asyncio
async def test_async_run_returns_content(project: Path) -> None:
    settings = Settings(github_token="secret", github_username="octocat", language="en")
    settings.paths.readme = project / "README.md"
    settings.paths.assets_dir = project / "assets"
    
    with _patch_client(weekly_total=0):
        content = await async_run(settings)
    
    assert "raccoon_sleeping.png" in content
    assert "This Week's Contributions" not in content
