"""
Acceptance policy for callers that store passwords.

The scorer accepts any string; these helpers reject missing or weak input
before a caller persists it, and build the user-facing strength message.
"""

from typing import Dict, Optional
import logging

from .config import DEFAULT_SETTINGS, get_message_format
from .exceptions import MissingPasswordError, WeakPasswordError
from .scoring import StrengthResult, score_password


logger = logging.getLogger(__name__)


def require_password(password: Optional[str]) -> str:
    """Raise MissingPasswordError when no password was supplied."""
    if password is None:
        raise MissingPasswordError()
    return password


def validate_password_strength(password: Optional[str],
                               minimum: int = DEFAULT_SETTINGS["minimum_score"]) -> StrengthResult:
    """
    Score a password and reject it below `minimum`.

    Args:
        password: Candidate password
        minimum: Lowest accepted score

    Returns:
        StrengthResult of the accepted password

    Raises:
        MissingPasswordError: password is None
        WeakPasswordError: score < minimum
    """
    result = score_password(require_password(password))

    if result.score < minimum:
        logger.warning(f"Password rejected: score {result.score} < minimum {minimum}")
        raise WeakPasswordError(score=result.score, minimum=minimum)

    return result


def describe(result: StrengthResult, locale: str = "en") -> str:
    """Human-readable strength message, e.g. "Password strength Good 72%"."""
    return get_message_format(locale).format(
        label=result.label.text(locale),
        score=result.score,
    )


def to_response(result: StrengthResult, locale: str = "en") -> Dict:
    """Response body of a strength lookup: {"value": score, "text": message}."""
    return {
        "value": result.score,
        "text": describe(result, locale),
    }
