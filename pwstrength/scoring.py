"""
Scoring Engine

Combines the pipeline stages into a final strength score.

Formula:
    score = clamp(sum(additions) - sum(deductions), 0, 100)

Passwords shorter than 8 characters score 0 without further analysis.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping
import logging

from .additions import calculate_additions
from .classification import classify
from .config import STRENGTH_CONFIG
from .deductions import calculate_deductions
from .labels import StrengthLabel, label_for_score


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrengthResult:
    """
    Final score and label for one password.

    The additions/deductions breakdowns are copied into read-only mappings,
    so a result can be shared between threads and used as a dict key.
    """
    score: int                          # 0-100
    label: StrengthLabel
    additions: Mapping[str, int] = field(default_factory=dict)
    deductions: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "additions", MappingProxyType(dict(self.additions)))
        object.__setattr__(self, "deductions", MappingProxyType(dict(self.deductions)))

    def __hash__(self):
        return hash((self.score, self.label,
                     frozenset(self.additions.items()), frozenset(self.deductions.items())))

    @property
    def raw_score(self) -> int:
        """Unclamped total; may be negative or above 100."""
        return sum(self.additions.values()) - sum(self.deductions.values())

    def to_dict(self, locale: str = "en") -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "label": self.label.value,
            "label_text": self.label.text(locale),
            "additions": dict(self.additions),
            "deductions": dict(self.deductions),
        }


def clamp_score(raw_score: int) -> int:
    low, high = STRENGTH_CONFIG["score_bounds"]
    return max(low, min(raw_score, high))


class StrengthScorer:
    """
    Password strength scorer.

    Stateless; one instance can be shared across threads.
    """

    def __init__(self):
        self.min_length = STRENGTH_CONFIG["min_length"]

    def score(self, password: str) -> StrengthResult:
        """
        Score a password.

        Args:
            password: Candidate password, any string

        Returns:
            StrengthResult with score in [0, 100] and its label
        """
        classification = classify(password)

        if classification.length < self.min_length:
            logger.debug(f"Length {classification.length} below minimum {self.min_length}, score = 0")
            return StrengthResult(score=0, label=label_for_score(0))

        additions = calculate_additions(classification)
        deductions = calculate_deductions(classification)

        raw = sum(additions.values()) - sum(deductions.values())
        score = clamp_score(raw)

        logger.debug(
            f"Strength score: {score} (raw={raw}, length={classification.length}, "
            f"classes={classification.classes_present})"
        )

        return StrengthResult(
            score=score,
            label=label_for_score(score),
            additions=additions,
            deductions=deductions,
        )

    def format_result(self, result: StrengthResult, locale: str = "en",
                      verbose: bool = False) -> str:
        """Format a result as text for CLI output."""
        lines = [
            "─" * 40,
            f"Strength: {result.score}/100  {result.label.text(locale)}",
            "─" * 40,
        ]

        if verbose and (result.additions or result.deductions):
            lines.append("")
            lines.append("Additions:")
            for name, points in result.additions.items():
                lines.append(f"  + {name:<24} {points:>4}")
            lines.append("Deductions:")
            for name, points in result.deductions.items():
                lines.append(f"  - {name:<24} {points:>4}")
            lines.append(f"  = {'raw':<24} {result.raw_score:>4}")
            lines.append("─" * 40)

        return "\n".join(lines)


_default_scorer = StrengthScorer()


def score_password(password: str) -> StrengthResult:
    """Score a password with the default scorer."""
    return _default_scorer.score(password)
