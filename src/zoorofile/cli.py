"""CLI entry point for zoorofile."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from zoorofile.adapters.github import GitHubContributionClient
from zoorofile.adapters.readme import SUPPORTED_LOCALES, MarkdownReadmeRenderer
from zoorofile.config import Settings, get_settings
from zoorofile.core import MissingAssetError
from zoorofile.use_cases import ActivityService, ReadmeService


def main(
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config.yaml / config.json"),
    readme: Optional[Path] = typer.Option(None, "--readme", help="README file to update"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the block instead of writing"),
) -> None:
    """Render your weekly GitHub activity pet into the README."""
    try:
        settings = get_settings(config)
        if readme is not None:
            settings.paths.readme = readme

        asyncio.run(async_run(settings, dry_run))
    except typer.Exit:
        raise
    except MissingAssetError as e:
        print(f"❌ 동물 이미지를 찾을 수 없습니다: \"{e.path}\"")
        print("   assets/ 폴더에 파일이 있는지 확인해주세요.")
        raise typer.Exit(code=1)
    except Exception as e:
        print(f"❌ 오류 발생: {type(e).__name__}: {e}")
        raise typer.Exit(code=1)


def app() -> None:
    """CLI entry point."""
    typer.run(main)


async def async_run(settings: Settings, dry_run: bool = False) -> Optional[str]:
    """Fetch activity, render the block and write the README.

    Returns the final README content (or the block on a dry run).
    """
    print("🐾 Zoorofile - README 생성 시작...\n")

    if not settings.github_token:
        print("❌ GITHUB_TOKEN 환경 변수가 필요합니다.")
        raise typer.Exit(code=1)
    if not settings.github_username:
        print("❌ github_username 설정 또는 ZOOROFILE_USERNAME 환경 변수가 필요합니다.")
        raise typer.Exit(code=1)
    if settings.language not in SUPPORTED_LOCALES:
        print(f"⚠️  지원하지 않는 언어: {settings.language} (ko 사용)")
        settings.language = "ko"

    client = GitHubContributionClient(
        username=settings.github_username,
        token=settings.github_token,
        timeout=settings.request_timeout,
    )
    activity_service = ActivityService(client, settings.recent_commits_limit)
    readme_service = ReadmeService(
        renderer=MarkdownReadmeRenderer(locale=settings.language),
        readme_path=settings.readme_path,
        assets_dir=settings.assets_dir,
        animal=settings.animal,
        locale=settings.language,
        mood_bands=settings.mood_bands,
        include_weekly=settings.weekly_contributions_enabled,
    )

    activity = await activity_service.collect()
    block = readme_service.build_block(activity)

    if dry_run:
        print(block)
        return block

    # Writing the README is always the last step
    return readme_service.update(block)


if __name__ == "__main__":
    app()
