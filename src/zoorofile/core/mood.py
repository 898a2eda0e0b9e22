"""Map weekly contribution counts to a pet mood."""

from dataclasses import dataclass
from typing import Mapping, Sequence

from zoorofile.core.entities import Mood
from zoorofile.core.exceptions import UnknownMoodError

DEFAULT_LOCALE = "ko"


@dataclass(frozen=True)
class MoodBand:
    """Lowest weekly total (inclusive) that selects ``mood``."""

    minimum: int
    mood: Mood


# Evaluated top-down, first match wins.
DEFAULT_MOOD_BANDS: tuple[MoodBand, ...] = (
    MoodBand(30, Mood.EXCITED),
    MoodBand(10, Mood.HAPPY),
    MoodBand(1, Mood.NORMAL),
    MoodBand(0, Mood.SLEEPING),
)

MOOD_LABELS: dict[str, dict[Mood, str]] = {
    "ko": {
        Mood.SLEEPING: "😴 쿨쿨 자고 있어요",
        Mood.NORMAL: "🙂 평범한 하루를 보내고 있어요",
        Mood.HAPPY: "😊 기분이 좋아요!",
        Mood.EXCITED: "🤩 신나서 어쩔 줄 몰라요!",
    },
    "en": {
        Mood.SLEEPING: "😴 Sleeping soundly",
        Mood.NORMAL: "🙂 Having an ordinary day",
        Mood.HAPPY: "😊 Feeling happy!",
        Mood.EXCITED: "🤩 Super excited!",
    },
}


def build_mood_bands(thresholds: Mapping[str, int]) -> tuple[MoodBand, ...]:
    """
    Build mood bands from a ``{mood: minimum}`` mapping.
    
    Bands are ordered by minimum, highest first. A band starting at 0 is
    required so every non-negative total has a mood.
    
    Raises:
        UnknownMoodError: If a key is not a known mood
        ValueError: If a minimum is negative, bands are not monotonic,
            or no band starts at 0
    """
    bands = []
    for name, minimum in thresholds.items():
        try:
            mood = Mood(name)
        except ValueError as e:
            raise UnknownMoodError(f"Unknown mood in thresholds: {name}") from e
        try:
            minimum = int(minimum)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Mood threshold must be an integer: {name}={minimum!r}") from e
        if minimum < 0:
            raise ValueError(f"Mood threshold cannot be negative: {name}={minimum}")
        bands.append(MoodBand(minimum, mood))
    
    bands.sort(key=lambda b: b.minimum, reverse=True)
    
    if not bands or bands[-1].minimum != 0:
        raise ValueError("Mood thresholds must include a band starting at 0")
    
    intensities = [b.mood.intensity for b in bands]
    if intensities != sorted(intensities, reverse=True):
        raise ValueError("Mood thresholds must increase with mood intensity")
    
    return tuple(bands)


def mood_of(weekly_total: int, bands: Sequence[MoodBand] = DEFAULT_MOOD_BANDS) -> Mood:
    """Return the mood for a weekly contribution total."""
    if weekly_total < 0:
        raise ValueError("Weekly total cannot be negative")
    
    for band in bands:
        if weekly_total >= band.minimum:
            return band.mood
    
    # Bands without a 0 catch-all
    return bands[-1].mood


def label_of(mood: Mood, locale: str = DEFAULT_LOCALE) -> str:
    """Return the human-readable label of ``mood`` in ``locale``."""
    labels = MOOD_LABELS.get(locale, MOOD_LABELS[DEFAULT_LOCALE])
    
    try:
        return labels[Mood(mood)]
    except (ValueError, KeyError) as e:
        raise UnknownMoodError(f"Unknown mood: {mood!r}") from e
