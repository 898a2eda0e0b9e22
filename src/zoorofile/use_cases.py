"""Business logic use cases."""

import asyncio
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Sequence, TypeVar

import httpx

from zoorofile.core import (
    DEFAULT_MOOD_BANDS,
    CommitRecord,
    ContributionReport,
    ContributionSource,
    FetchResult,
    MissingAssetError,
    Mood,
    MoodBand,
    ReadmeRenderer,
    RemoteQueryError,
    aggregate,
    label_of,
    mood_of,
)
from zoorofile.core.mood import DEFAULT_LOCALE
from zoorofile.core.readme_patcher import patch, read_document, write_document

T = TypeVar("T")


@dataclass
class WeeklyActivity:
    """Results of the three independent activity fetches."""

    weekly_total: FetchResult[int]
    report: FetchResult[ContributionReport]
    recent_commits: FetchResult[list[CommitRecord]]

    @property
    def total_or_zero(self) -> int:
        if not self.weekly_total.ok:
            return 0
        return self.weekly_total.data or 0


class ActivityService:
    """Service for collecting weekly activity from a contribution source."""

    def __init__(self, source: ContributionSource, recent_commits_limit: int = 5) -> None:
        self.source = source
        self.recent_commits_limit = recent_commits_limit

    async def collect(self) -> WeeklyActivity:
        """Run the three fetches concurrently; a failure only affects its own result."""
        print("📡 데이터 가져오기...")

        weekly_total, report, recent_commits = await asyncio.gather(
            self._capture(self.source.fetch_weekly_total()),
            self._capture(self._fetch_report()),
            self._capture(self.source.fetch_recent_commits(self.recent_commits_limit)),
        )

        if weekly_total.ok:
            print(f"  ✅ 주간 컨트리뷰션: {weekly_total.data}")
        else:
            print(f"  ⚠️  컨트리뷰션 조회 실패: {weekly_total.error}")

        if report.ok:
            summary = report.data.summary
            print(
                f"  ✅ 레포별 기여: Public {summary.public_repo_count}개({summary.public_commits}), "
                f"Private {summary.private_repo_count}개({summary.private_commits})"
            )
        else:
            print(f"  ⚠️  레포별 기여 조회 실패: {report.error}")

        if recent_commits.ok:
            print(f"  ✅ 최근 커밋: {len(recent_commits.data)}개")
        else:
            print(f"  ⚠️  최근 커밋 조회 실패: {recent_commits.error}")

        return WeeklyActivity(
            weekly_total=weekly_total,
            report=report,
            recent_commits=recent_commits,
        )

    async def _fetch_report(self) -> ContributionReport:
        breakdown = await self.source.fetch_weekly_by_repository()
        return aggregate(breakdown.commits, breakdown.pull_requests, breakdown.issues)

    @staticmethod
    async def _capture(fetch: Awaitable[T]) -> FetchResult[T]:
        """Turn a fetch outcome into a FetchResult."""
        try:
            return FetchResult.success(await fetch)
        except (RemoteQueryError, httpx.HTTPError) as e:
            return FetchResult.failure(e)


class ReadmeService:
    """Service for rendering the pet block and patching it into the README."""

    def __init__(
        self,
        renderer: ReadmeRenderer,
        readme_path: Path,
        assets_dir: Path,
        animal: str = "raccoon",
        locale: str = DEFAULT_LOCALE,
        mood_bands: Sequence[MoodBand] = DEFAULT_MOOD_BANDS,
        include_weekly: bool = True,
    ) -> None:
        self.renderer = renderer
        self.readme_path = readme_path
        self.assets_dir = assets_dir
        self.animal = animal
        self.locale = locale
        self.mood_bands = mood_bands
        self.include_weekly = include_weekly

    def resolve_image(self, mood: Mood) -> str:
        """
        Find the pet image for ``mood``.

        Returns:
            Image path relative to the README directory, with forward slashes

        Raises:
            MissingAssetError: If the image file does not exist
        """
        image_path = self.assets_dir / f"{self.animal}_{mood.value}.png"
        if not image_path.is_file():
            raise MissingAssetError(str(image_path))

        readme_dir = self.readme_path.resolve().parent
        relative = os.path.relpath(image_path.resolve(), readme_dir)
        return Path(relative).as_posix()

    def build_block(self, activity: WeeklyActivity) -> str:
        """Resolve mood and image, then render the managed block."""
        mood = mood_of(activity.total_or_zero, self.mood_bands)
        mood_label = label_of(mood, self.locale)

        print(f"\n🎭 기분: {mood.value} → {mood_label}")
        print(f"🐾 동물: {self.animal}\n")

        image = self.resolve_image(mood)
        print(f"✅ 동물 이미지: {image}")

        report = activity.report.data if activity.report.ok else None
        recent_commits = activity.recent_commits.data if activity.recent_commits.ok else None

        return self.renderer.render(
            mood_label=mood_label,
            image_path=image,
            headline=self.renderer.headline(report.summary if report else None),
            report=report,
            recent_commits=recent_commits,
            include_weekly=self.include_weekly,
        )

    def update(self, block: str) -> str:
        """Patch ``block`` into the README and write it. Returns the new content."""
        existing = read_document(self.readme_path)
        content = patch(existing, block)
        write_document(self.readme_path, content)
        print(f"✅ {self.readme_path} 생성 완료!")
        return content
