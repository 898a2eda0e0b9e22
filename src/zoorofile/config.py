"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from zoorofile.core.mood import DEFAULT_LOCALE, DEFAULT_MOOD_BANDS, MoodBand, build_mood_bands


@dataclass
class FeaturesConfig:
    """Optional README sections."""
    weekly_contributions: bool = True


@dataclass
class PathsConfig:
    """Path settings."""
    readme: Path = Path("README.md")
    assets_dir: Path = Path("assets")


@dataclass
class Settings:
    """Application settings."""

    # From environment only
    github_token: Optional[str] = None

    github_username: str = ""
    animal: str = "raccoon"
    language: str = DEFAULT_LOCALE
    recent_commits_limit: int = 5
    request_timeout: float = 30.0
    mood_bands: tuple[MoodBand, ...] = DEFAULT_MOOD_BANDS

    # Config sections
    features: FeaturesConfig = field(default_factory=FeaturesConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)

    @property
    def weekly_contributions_enabled(self) -> bool:
        return self.features.weekly_contributions

    @property
    def readme_path(self) -> Path:
        return self.paths.readme

    @property
    def assets_dir(self) -> Path:
        return self.paths.assets_dir


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from a YAML (or JSON) file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def find_config_path(base_dir: Path = Path(".")) -> Path:
    """Return the first existing config file, preferring YAML over JSON."""
    for name in ("config.yaml", "config.yml", "config.json"):
        candidate = base_dir / name
        if candidate.exists():
            return candidate
    return base_dir / "config.yaml"


def get_settings(config_path: Optional[Path] = None) -> Settings:
    """Get application settings from the config file and environment."""
    if config_path is None:
        config_path = find_config_path()
    config = load_config(config_path)

    settings = Settings(github_token=os.getenv("GITHUB_TOKEN") or None)

    for key in ("github_username", "animal", "language"):
        if config.get(key):
            setattr(settings, key, str(config[key]))

    if "recent_commits_limit" in config:
        settings.recent_commits_limit = int(config["recent_commits_limit"])

    if "request_timeout" in config:
        settings.request_timeout = float(config["request_timeout"])

    if config.get("mood_thresholds"):
        settings.mood_bands = build_mood_bands(config["mood_thresholds"])

    # Only an explicit false disables a feature
    features = config.get("features") or {}
    if features.get("weekly_contributions") is False:
        settings.features.weekly_contributions = False

    if "paths" in config:
        for key, value in (config["paths"] or {}).items():
            setattr(settings.paths, key, Path(value))

    # Environment override takes precedence over the config file
    username_override = os.getenv("ZOOROFILE_USERNAME")
    if username_override:
        settings.github_username = username_override

    return settings
