"""
pwstrength - Deterministic password strength scoring

Maps any string to a score in [0, 100] and a label (Weak, Medium, Good,
Strong) using additive bonuses for length and character variety, and
deductions for homogeneity, repeats and predictable runs.
"""

__version__ = "1.0.0"

from .classification import CharClass, Classification, classify
from .labels import StrengthLabel, label_for_score
from .scoring import StrengthResult, StrengthScorer, clamp_score, score_password
from .exceptions import (
    PasswordStrengthError,
    MissingPasswordError,
    WeakPasswordError,
    ConfigError,
    PasswordFileError,
)

__all__ = [
    # Classification
    'CharClass',
    'Classification',
    'classify',

    # Scoring
    'StrengthScorer',
    'StrengthResult',
    'score_password',
    'clamp_score',

    # Labels
    'StrengthLabel',
    'label_for_score',

    # Errors
    'PasswordStrengthError',
    'MissingPasswordError',
    'WeakPasswordError',
    'PasswordFileError',
    'ConfigError',
]
