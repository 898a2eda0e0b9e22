"""Domain exceptions."""

from typing import Optional


class ZoorofileError(Exception):
    """Base class for all zoorofile errors."""


class RemoteQueryError(ZoorofileError):
    """Remote API reported an error or the request could not be completed."""

    def __init__(self, message: str, query: Optional[str] = None) -> None:
        super().__init__(message)
        self.query = query


class MissingAssetError(ZoorofileError):
    """Pet image for the resolved mood does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Animal image not found: {path}")
        self.path = path


class UnknownMoodError(ZoorofileError):
    """Mood value outside the configured enumeration."""
