"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Visibility(str, Enum):
    """Repository visibility."""

    PUBLIC = "public"
    PRIVATE = "private"


class Mood(str, Enum):
    """Pet mood, ordered from the calmest to the most active.

    The value is used in asset file names (``{animal}_{mood}.png``).
    """

    SLEEPING = "sleeping"
    NORMAL = "normal"
    HAPPY = "happy"
    EXCITED = "excited"

    @property
    def intensity(self) -> int:
        return list(Mood).index(self)


@dataclass(frozen=True)
class RepositoryContributionCount:
    """One entry of a per-repository contribution list."""

    name: str
    visibility: Visibility
    count: int
    url: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Repository name cannot be empty")
        if self.count < 0:
            raise ValueError("Contribution count cannot be negative")


@dataclass
class WeeklyRepositoryBreakdown:
    """Per-repository contribution lists for commits, PRs and issues."""

    commits: list[RepositoryContributionCount] = field(default_factory=list)
    pull_requests: list[RepositoryContributionCount] = field(default_factory=list)
    issues: list[RepositoryContributionCount] = field(default_factory=list)


@dataclass(frozen=True)
class RepoContribution:
    """Contributions to a single repository within the window."""

    name: str
    visibility: Visibility
    url: Optional[str] = None
    commit_count: int = 0
    pr_count: int = 0
    issue_count: int = 0

    @property
    def total(self) -> int:
        return self.commit_count + self.pr_count + self.issue_count

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE


@dataclass(frozen=True)
class ContributionSummary:
    """Repository and contribution counters split by visibility."""

    public_repo_count: int = 0
    public_commits: int = 0
    private_repo_count: int = 0
    private_commits: int = 0

    @property
    def total_repos(self) -> int:
        return self.public_repo_count + self.private_repo_count

    @property
    def total_contributions(self) -> int:
        return self.public_commits + self.private_commits


@dataclass
class ContributionReport:
    """Aggregated weekly contributions."""

    public_repos: list[RepoContribution]
    private_repos: list[RepoContribution]
    summary: ContributionSummary


@dataclass(frozen=True)
class CommitRecord:
    """A recent public commit authored by the tracked user."""

    repository: str
    message: str
    url: str
    committed_at: Optional[datetime] = None

    @property
    def short_repository(self) -> str:
        """Repository name without the owner part."""
        return self.repository.rsplit("/", 1)[-1] or self.repository


@dataclass
class FetchResult(Generic[T]):
    """Outcome of a single remote fetch: either data or the failure reason."""

    data: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T) -> "FetchResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: Exception) -> "FetchResult[T]":
        return cls(error=error)
