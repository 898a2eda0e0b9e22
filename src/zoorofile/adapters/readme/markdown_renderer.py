"""Markdown renderer for the managed README block."""

from datetime import datetime, timezone
from typing import Callable, Optional

from zoorofile.adapters.readme.locales import text
from zoorofile.core import (
    CommitRecord,
    ContributionReport,
    ContributionSummary,
    ReadmeRenderer,
    RepoContribution,
)
from zoorofile.core.mood import DEFAULT_LOCALE
from zoorofile.core.readme_patcher import END_MARKER, START_MARKER

PROJECT_URL = "https://github.com/YangHyeonBin/zoorofile"

TOP_REPOSITORIES = 5
RECENT_COMMITS = 5
MESSAGE_MAX_LENGTH = 50
ELLIPSIS = "..."


def truncate_message(message: str, max_length: int = MESSAGE_MAX_LENGTH) -> str:
    """Cut ``message`` to ``max_length`` characters, ellipsis included."""
    if len(message) <= max_length:
        return message
    return message[:max_length - len(ELLIPSIS)] + ELLIPSIS


class MarkdownReadmeRenderer(ReadmeRenderer):
    """Render the pet, headline and weekly contributions as Markdown."""

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        now: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.locale = locale
        self.now = now or (lambda: datetime.now(timezone.utc))

    def _t(self, key: str) -> str:
        return text(self.locale, key)

    def headline(self, summary: Optional[ContributionSummary]) -> str:
        """Build the contribution headline, empty when no breakdown is known."""
        if summary is None:
            return ""

        if summary.total_contributions > 0:
            return self._t("headline").format(
                repos=summary.total_repos,
                contributions=summary.total_contributions,
            )
        return self._t("headline_empty")

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
        timestamp = (
            self.now().astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        )

        lines = [
            START_MARKER,
            "<!-- Auto-generated by Zoorofile 🐾 | Do not edit manually -->",
            f"<!-- Last updated: {timestamp} -->",
            "",
            '<div align="center">',
            "",
            f'<img src="{image_path}" alt="{self._t("pet_alt")}" width="150" />',
            "",
            mood_label,
            "",
            headline,
            "",
            "</div>",
            "",
        ]

        block = "\n".join(lines) + "\n"

        if include_weekly:
            block += self.render_weekly_section(report, recent_commits)

        block += "\n".join([
            "---",
            "",
            '<div align="center">',
            "",
            f"*🐾 Generated by [Zoorofile]({PROJECT_URL}) — Choose your git pet!*",
            "",
            "</div>",
            END_MARKER,
        ])

        return block

    def render_weekly_section(
        self,
        report: Optional[ContributionReport],
        recent_commits: Optional[list[CommitRecord]] = None,
    ) -> str:
        """Render the weekly contributions section, or "" without a report."""
        if report is None:
            return ""

        lines = [f"### {self._t('weekly_title')}", ""]
        lines.extend(self._format_summary_table(report.summary))

        if report.public_repos:
            lines.extend([f"**{self._t('public_detail_title')}**", ""])
            for repo in report.public_repos[:TOP_REPOSITORIES]:
                lines.append(self._format_repository(repo))
            lines.append("")

        if recent_commits:
            lines.extend([f"**{self._t('recent_commits_title')}**", ""])
            for commit in recent_commits[:RECENT_COMMITS]:
                lines.append(self._format_commit(commit))
            lines.append("")

        return "\n".join(lines) + "\n"

    def _format_summary_table(self, summary: ContributionSummary) -> list[str]:
        """Format the two-row public/private summary table."""
        unit = self._t("repo_unit")
        return [
            f"**{self._t('summary_title')}**",
            "",
            f"| | {self._t('repos_column')} | {self._t('contributions_column')} |",
            "|:---|:---:|:---:|",
            f"| 🔓 {self._t('public_label')} | {summary.public_repo_count}{unit} | {summary.public_commits} |",
            f"| 🔒 {self._t('private_label')} | {summary.private_repo_count}{unit} | {summary.private_commits} |",
            "",
        ]

    def _format_repository(self, repo: RepoContribution) -> str:
        """Format a repository line listing only non-zero counts."""
        parts = []
        if repo.commit_count > 0:
            parts.append(f"{repo.commit_count} commits")
        if repo.pr_count > 0:
            parts.append(f"{repo.pr_count} PRs")
        if repo.issue_count > 0:
            parts.append(f"{repo.issue_count} issues")

        return f"- [{repo.name}]({repo.url}) — {', '.join(parts)}"

    def _format_commit(self, commit: CommitRecord) -> str:
        return f"- `{commit.short_repository}` [{truncate_message(commit.message)}]({commit.url})"
