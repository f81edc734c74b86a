"""
Additive Scoring

Bonus points from length, class composition and character positions.

Rules:
    length                  length x 4
    uppercase               (length - upper) x 2, if any uppercase
    lowercase               (length - lower) x 2, if any lowercase
    digits                  digits x 4
    symbols                 symbols x 6
    middle_digits_symbols   interior digits/symbols x 2
    requirements            2 x (classes + 1), if 3+ classes present
"""

from typing import Dict

from .classification import CharClass, Classification
from .config import STRENGTH_CONFIG, get_weight


def calculate_character_length_score(length: int) -> int:
    return length * get_weight("char_length_score")


def calculate_uppercase_bonus(upper_count: int, length: int) -> int:
    """Rewards non-uppercase characters mixed with at least one uppercase."""
    if upper_count > 0:
        return (length - upper_count) * get_weight("uppercase_bonus")
    return 0


def calculate_lowercase_bonus(lower_count: int, length: int) -> int:
    """Rewards non-lowercase characters mixed with at least one lowercase."""
    if lower_count > 0:
        return (length - lower_count) * get_weight("lowercase_bonus")
    return 0


def calculate_middle_digits_symbols_score(classification: Classification) -> int:
    """Score digits and symbols strictly between the first and last position."""
    if classification.length <= 2:
        return 0

    middle = sum(
        1 for i in range(1, classification.length - 1)
        if classification.is_class(i, CharClass.DIGIT, CharClass.SYMBOL)
    )
    return middle * get_weight("middle_bonus")


def calculate_requirements_bonus(classes_present: int) -> int:
    # Step function: nothing below the requirement count
    if classes_present >= STRENGTH_CONFIG["min_requirements"]:
        return 2 * (classes_present + 1)
    return 0


def calculate_additions(classification: Classification) -> Dict[str, int]:
    """
    Calculate every additive component.

    Args:
        classification: Classified password

    Returns:
        Ordered dict of rule name -> points
    """
    length = classification.length

    return {
        "length": calculate_character_length_score(length),
        "uppercase": calculate_uppercase_bonus(classification.upper_count, length),
        "lowercase": calculate_lowercase_bonus(classification.lower_count, length),
        "digits": classification.digit_count * get_weight("digit_bonus"),
        "symbols": classification.symbol_count * get_weight("symbol_bonus"),
        "middle_digits_symbols": calculate_middle_digits_symbols_score(classification),
        "requirements": calculate_requirements_bonus(classification.classes_present),
    }
