"""Tests for core entities."""

import pytest

from zoorofile.core import (
    CommitRecord,
    ContributionSummary,
    FetchResult,
    Mood,
    RepoContribution,
    RepositoryContributionCount,
    Visibility,
)


def test_repo_contribution_total() -> None:
    """Test total is the sum of all contribution kinds."""
    repo = RepoContribution(
        name="octo/repo",
        visibility=Visibility.PUBLIC,
        url="https://github.com/octo/repo",
        commit_count=3,
        pr_count=2,
        issue_count=1,
    )
    
    assert repo.total == 6
    assert not repo.is_private


def test_repository_contribution_count_validation() -> None:
    """Test partial entries reject empty names and negative counts."""
    with pytest.raises(ValueError, match="Repository name cannot be empty"):
        RepositoryContributionCount(name="", visibility=Visibility.PUBLIC, count=1)
    
    with pytest.raises(ValueError, match="cannot be negative"):
        RepositoryContributionCount(name="octo/repo", visibility=Visibility.PUBLIC, count=-1)


def test_summary_totals() -> None:
    summary = ContributionSummary(
        public_repo_count=3, public_commits=12, private_repo_count=1, private_commits=4
    )
    
    assert summary.total_repos == 4
    assert summary.total_contributions == 16


def test_commit_short_repository() -> None:
    """Test short repository name is the segment after the last slash."""
    commit = CommitRecord(repository="octo/hello-world", message="init", url="u")
    assert commit.short_repository == "hello-world"
    
    bare = CommitRecord(repository="hello-world", message="init", url="u")
    assert bare.short_repository == "hello-world"


def test_mood_intensity_order() -> None:
    intensities = [mood.intensity for mood in (Mood.SLEEPING, Mood.NORMAL, Mood.HAPPY, Mood.EXCITED)]
    assert intensities == [0, 1, 2, 3]


def test_fetch_result() -> None:
    """Test success and failure results."""
    ok = FetchResult.success(5)
    assert ok.ok
    assert ok.data == 5
    
    failed = FetchResult.failure(RuntimeError("boom"))
    assert not failed.ok
    assert failed.data is None
    assert str(failed.error) == "boom"
