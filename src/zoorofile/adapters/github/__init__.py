"""GitHub API adapters."""

from zoorofile.adapters.github.contribution_client import GitHubContributionClient

__all__ = ["GitHubContributionClient"]
