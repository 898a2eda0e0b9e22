"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Optional

from zoorofile.core.entities import (
    CommitRecord,
    ContributionReport,
    ContributionSummary,
    WeeklyRepositoryBreakdown,
)


class ContributionSource(ABC):
    """Interface for fetching a user's weekly contribution activity."""
    
    @abstractmethod
    async def fetch_weekly_total(self) -> int:
        """Fetch total contribution count for the trailing week."""
        pass
    
    @abstractmethod
    async def fetch_weekly_by_repository(self) -> WeeklyRepositoryBreakdown:
        """Fetch per-repository commit, PR and issue contributions."""
        pass
    
    @abstractmethod
    async def fetch_recent_commits(self, limit: int) -> list[CommitRecord]:
        """Fetch the most recent public commits, newest first."""
        pass


class ReadmeRenderer(ABC):
    """Interface for rendering the managed README block."""
    
    @abstractmethod
    def headline(self, summary: Optional[ContributionSummary]) -> str:
        """Build the one-sentence contribution headline."""
        pass
    
    @abstractmethod
    def render(
        self,
        mood_label: str,
        image_path: str,
        headline: str,
        report: Optional[ContributionReport],
        recent_commits: Optional[list[CommitRecord]],
        include_weekly: bool = True,
    ) -> str:
        """Render the complete managed block, markers included."""
        pass
