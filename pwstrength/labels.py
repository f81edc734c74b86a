"""Strength labels and score banding."""

from enum import Enum
from functools import total_ordering

from .config import STRENGTH_CONFIG, get_label_bands, get_label_text


@total_ordering
class StrengthLabel(Enum):
    """Ordinal strength label. Members are declared weakest first."""
    WEAK = "weak"
    MEDIUM = "medium"
    GOOD = "good"
    STRONG = "strong"

    @property
    def rank(self) -> int:
        return list(StrengthLabel).index(self)

    def text(self, locale: str = "en") -> str:
        """Display text, e.g. "Weak" or "Fraca"."""
        return get_label_text(self.value, locale)

    def __lt__(self, other):
        if not isinstance(other, StrengthLabel):
            return NotImplemented
        return self.rank < other.rank


def label_for_score(score: int) -> StrengthLabel:
    """
    Map a score to its band.

    0-15 Weak, 16-60 Medium, 61-85 Good, 86-100 Strong. Out-of-range scores
    are clamped first, so every integer maps to a label.
    """
    low, high = STRENGTH_CONFIG["score_bounds"]
    score = max(low, min(score, high))

    for name, upper in get_label_bands():
        if score <= upper:
            return StrengthLabel(name)
    return StrengthLabel.STRONG


def band_ranges() -> list:
    """(label, lowest score, highest score) for every band, weakest first."""
    ranges = []
    low = STRENGTH_CONFIG["score_bounds"][0]
    for name, upper in get_label_bands():
        ranges.append((StrengthLabel(name), low, upper))
        low = upper + 1
    return ranges
