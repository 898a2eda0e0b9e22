"""GitHub client for a user's weekly contribution activity."""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

import httpx

from zoorofile.core import (
    CommitRecord,
    ContributionSource,
    RemoteQueryError,
    RepositoryContributionCount,
    Visibility,
    WeeklyRepositoryBreakdown,
)

WINDOW = timedelta(days=7)
MAX_REPOSITORIES = 100

WEEKLY_TOTAL_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      totalCommitContributions
      totalIssueContributions
      totalPullRequestContributions
      totalPullRequestReviewContributions
      contributionCalendar {
        totalContributions
      }
    }
  }
}
"""

_REPOSITORY_FIELDS = """
      repository {
        nameWithOwner
        url
        isPrivate
      }
      contributions {
        totalCount
      }
"""

WEEKLY_BY_REPOSITORY_QUERY = f"""
query($username: String!, $from: DateTime!, $to: DateTime!) {{
  user(login: $username) {{
    contributionsCollection(from: $from, to: $to) {{
      commitContributionsByRepository(maxRepositories: {MAX_REPOSITORIES}) {{{_REPOSITORY_FIELDS}}}
      pullRequestContributionsByRepository(maxRepositories: {MAX_REPOSITORIES}) {{{_REPOSITORY_FIELDS}}}
      issueContributionsByRepository(maxRepositories: {MAX_REPOSITORIES}) {{{_REPOSITORY_FIELDS}}}
    }}
  }}
}}
"""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _isoformat(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


class GitHubContributionClient(ContributionSource):
    """Query GitHub GraphQL and search APIs for the trailing week of activity."""

    def __init__(
        self,
        username: str,
        token: str,
        timeout: float = 30.0,
        now: Callable[[], datetime] = _utc_now,
        api_base: str = "https://api.github.com",
    ) -> None:
        self.username = username
        self.token = token
        self.timeout = timeout
        self.now = now
        self.api_base = api_base
        self.graphql_url = f"{api_base}/graphql"

    def window(self) -> tuple[datetime, datetime]:
        """Return the (start, end) of the trailing 7-day window."""
        end = self.now()
        return end - WINDOW, end

    async def fetch_weekly_total(self) -> int:
        """Fetch the contribution calendar total for the window."""
        data = await self._graphql(WEEKLY_TOTAL_QUERY)

        try:
            collection = data["user"]["contributionsCollection"]
            return int(collection["contributionCalendar"]["totalContributions"])
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteQueryError(f"Unexpected response shape: {e}", query="weekly_total") from e

    async def fetch_weekly_by_repository(self) -> WeeklyRepositoryBreakdown:
        """Fetch commit, pull request and issue contributions per repository."""
        data = await self._graphql(WEEKLY_BY_REPOSITORY_QUERY)

        try:
            collection = data["user"]["contributionsCollection"]
            return WeeklyRepositoryBreakdown(
                commits=self._parse_by_repository(collection["commitContributionsByRepository"]),
                pull_requests=self._parse_by_repository(
                    collection["pullRequestContributionsByRepository"]
                ),
                issues=self._parse_by_repository(collection["issueContributionsByRepository"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteQueryError(f"Unexpected response shape: {e}", query="weekly_by_repository") from e

    async def fetch_recent_commits(self, limit: int = 5) -> list[CommitRecord]:
        """Search the most recent public commits authored in the window."""
        since, _ = self.window()
        query = (
            f"author:{self.username} "
            f"committer-date:>={since.astimezone(timezone.utc).date().isoformat()} "
            f"is:public"
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    f"{self.api_base}/search/commits",
                    headers=self._get_headers(accept="application/vnd.github.cloak-preview+json"),
                    params={
                        "q": query,
                        "sort": "committer-date",
                        "order": "desc",
                        "per_page": limit,
                    },
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise RemoteQueryError(f"Commit search failed: {e}", query="recent_commits") from e
        except ValueError as e:
            raise RemoteQueryError(f"Invalid JSON response: {e}", query="recent_commits") from e

        if not isinstance(data, dict):
            raise RemoteQueryError("Unexpected response shape", query="recent_commits")

        if data.get("message") and "items" not in data:
            raise RemoteQueryError(data["message"], query="recent_commits")

        try:
            return [self._parse_commit(item) for item in data.get("items", [])[:limit]]
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteQueryError(f"Unexpected response shape: {e}", query="recent_commits") from e

    async def _graphql(self, query: str) -> dict[str, Any]:
        """Run a GraphQL query over the window and return its ``data``."""
        since, until = self.window()

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                self.graphql_url,
                headers=self._get_headers(),
                json={
                    "query": query,
                    "variables": {
                        "username": self.username,
                        "from": _isoformat(since),
                        "to": _isoformat(until),
                    },
                },
            )
            response.raise_for_status()

            try:
                payload = response.json()
            except ValueError as e:
                raise RemoteQueryError(f"Invalid JSON response: {e}") from e

        if not isinstance(payload, dict):
            raise RemoteQueryError("Unexpected response shape")

        if payload.get("errors"):
            raise RemoteQueryError(payload["errors"][0].get("message", "GraphQL error"))

        return payload.get("data") or {}

    def _parse_by_repository(self, entries: list[dict]) -> list[RepositoryContributionCount]:
        """Convert a ``*ContributionsByRepository`` list into entities."""
        result = []
        for entry in entries:
            repository = entry["repository"]
            result.append(RepositoryContributionCount(
                name=repository["nameWithOwner"],
                url=repository.get("url"),
                visibility=Visibility.PRIVATE if repository.get("isPrivate") else Visibility.PUBLIC,
                count=int(entry["contributions"]["totalCount"]),
            ))
        return result

    def _parse_commit(self, item: dict) -> CommitRecord:
        """Convert a commit search hit into a CommitRecord."""
        commit = item["commit"]
        date_str = (commit.get("committer") or {}).get("date")
        committed_at = None
        if date_str:
            committed_at = datetime.fromisoformat(date_str.replace("Z", "+00:00"))

        return CommitRecord(
            repository=item["repository"]["full_name"],
            message=commit["message"].split("\n")[0],
            url=item["html_url"],
            committed_at=committed_at,
        )

    def _get_headers(self, accept: Optional[str] = None) -> dict[str, str]:
        """Get headers for GitHub API requests."""
        headers = {
            "Authorization": f"bearer {self.token}",
            "Content-Type": "application/json",
        }

        if accept:
            headers["Accept"] = accept

        return headers
