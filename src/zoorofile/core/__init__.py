"""Core domain layer."""

from zoorofile.core.aggregator import aggregate
from zoorofile.core.entities import (
    CommitRecord,
    ContributionReport,
    ContributionSummary,
    FetchResult,
    Mood,
    RepoContribution,
    RepositoryContributionCount,
    Visibility,
    WeeklyRepositoryBreakdown,
)
from zoorofile.core.exceptions import (
    MissingAssetError,
    RemoteQueryError,
    UnknownMoodError,
    ZoorofileError,
)
from zoorofile.core.interfaces import ContributionSource, ReadmeRenderer
from zoorofile.core.mood import DEFAULT_MOOD_BANDS, MoodBand, build_mood_bands, label_of, mood_of

__all__ = [
    "CommitRecord",
    "ContributionReport",
    "ContributionSummary",
    "FetchResult",
    "Mood",
    "RepoContribution",
    "RepositoryContributionCount",
    "Visibility",
    "WeeklyRepositoryBreakdown",
    "MissingAssetError",
    "RemoteQueryError",
    "UnknownMoodError",
    "ZoorofileError",
    "ContributionSource",
    "ReadmeRenderer",
    "aggregate",
    "DEFAULT_MOOD_BANDS",
    "MoodBand",
    "build_mood_bands",
    "label_of",
    "mood_of",
]
