"""Localized strings for the README block, keyed by (locale, string id)."""

from zoorofile.core.mood import DEFAULT_LOCALE

SUPPORTED_LOCALES = ("ko", "en")

TEXTS: dict[tuple[str, str], str] = {
    ("ko", "weekly_title"): "📅 이번 주 기여",
    ("en", "weekly_title"): "📅 This Week's Contributions",
    ("ko", "summary_title"): "요약",
    ("en", "summary_title"): "Summary",
    ("ko", "repos_column"): "레포 수",
    ("en", "repos_column"): "Repos",
    ("ko", "contributions_column"): "기여 수",
    ("en", "contributions_column"): "Contributions",
    ("ko", "public_label"): "Public 레포",
    ("en", "public_label"): "Public repos",
    ("ko", "private_label"): "Private 레포",
    ("en", "private_label"): "Private repos",
    ("ko", "repo_unit"): "개",
    ("en", "repo_unit"): "",
    ("ko", "public_detail_title"): "🔓 Public 기여 상세",
    ("en", "public_detail_title"): "🔓 Public Contributions",
    ("ko", "recent_commits_title"): "💬 최근 커밋",
    ("en", "recent_commits_title"): "💬 Recent Commits",
    ("ko", "headline"): "이번 주 {repos}개의 레포지토리에 {contributions}개의 기여를 하고 있어요",
    ("en", "headline"): "{contributions} contributions to {repos} repositories this week",
    ("ko", "headline_empty"): "이번 주는 아직 기여가 없어요",
    ("en", "headline_empty"): "No contributions yet this week",
    ("ko", "pet_alt"): "My Zoorofile Pet",
    ("en", "pet_alt"): "My Zoorofile Pet",
}


def text(locale: str, key: str) -> str:
    """Look up a string, falling back to the default locale."""
    if (locale, key) in TEXTS:
        return TEXTS[(locale, key)]
    return TEXTS[(DEFAULT_LOCALE, key)]
