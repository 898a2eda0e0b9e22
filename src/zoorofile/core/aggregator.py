"""Merge per-repository contribution lists into a weekly report."""

from dataclasses import replace
from typing import Iterable

from zoorofile.core.entities import (
    ContributionReport,
    ContributionSummary,
    RepoContribution,
    RepositoryContributionCount,
)

# Field of RepoContribution that each input list feeds.
_COMMITS = "commit_count"
_PULL_REQUESTS = "pr_count"
_ISSUES = "issue_count"


def aggregate(
    commits: Iterable[RepositoryContributionCount],
    pull_requests: Iterable[RepositoryContributionCount],
    issues: Iterable[RepositoryContributionCount],
) -> ContributionReport:
    """
    Merge commit, pull request and issue contributions by repository.
    
    Repositories are split by visibility and sorted by total contributions,
    descending. The sort is stable, so repositories with equal totals keep
    the order in which they were first seen (commits, then PRs, then issues).
    
    Args:
        commits: Commit contributions per repository
        pull_requests: Pull request contributions per repository
        issues: Issue contributions per repository
        
    Returns:
        ContributionReport with public/private repositories and a summary
    """
    repos: dict[str, RepoContribution] = {}
    
    for entries, field_name in (
        (commits, _COMMITS),
        (pull_requests, _PULL_REQUESTS),
        (issues, _ISSUES),
    ):
        for entry in entries:
            repo = repos.get(entry.name) or RepoContribution(
                name=entry.name,
                visibility=entry.visibility,
                url=entry.url,
            )
            repos[entry.name] = replace(
                repo, **{field_name: getattr(repo, field_name) + entry.count}
            )
    
    public_repos = [r for r in repos.values() if not r.is_private]
    private_repos = [r for r in repos.values() if r.is_private]
    
    public_repos.sort(key=lambda r: r.total, reverse=True)
    private_repos.sort(key=lambda r: r.total, reverse=True)
    
    return ContributionReport(
        public_repos=public_repos,
        private_repos=private_repos,
        summary=summarize(public_repos, private_repos),
    )


def summarize(
    public_repos: list[RepoContribution], private_repos: list[RepoContribution]
) -> ContributionSummary:
    """Count repositories and sum contributions for each visibility."""
    return ContributionSummary(
        public_repo_count=len(public_repos),
        public_commits=sum(r.total for r in public_repos),
        private_repo_count=len(private_repos),
        private_commits=sum(r.total for r in private_repos),
    )
