"""
Deductive Scoring

Penalties for homogeneous, repetitive and predictable passwords. Every value
returned here is an amount to subtract, so it is never negative.
"""

from collections import Counter
from typing import Dict, Tuple

from .classification import CharClass, Classification
from .config import get_weight


# Classes whose adjacent pairs are penalized. Symbol pairs are not.
CONSECUTIVE_CLASSES = (CharClass.UPPER, CharClass.LOWER, CharClass.DIGIT)

# Predicate groups for ascending runs. Letters are grouped regardless of case.
SEQUENTIAL_GROUPS: Tuple[Tuple[CharClass, ...], ...] = (
    (CharClass.UPPER, CharClass.LOWER),
    (CharClass.DIGIT,),
    (CharClass.SYMBOL,),
)


def calculate_letters_or_digits_only_deduction(classification: Classification) -> int:
    """Deduct the full length for letters-only or digits-only passwords."""
    length = classification.length
    letters = classification.upper_count + classification.lower_count

    if letters == length or classification.digit_count == length:
        return length
    return 0


def calculate_repeat_character_deduction(classification: Classification) -> int:
    """Deduct per distinct case-folded character seen more than once."""
    counts = Counter(ch.casefold() for ch in classification.text)
    repeated = sum(1 for n in counts.values() if n > 1)
    return repeated * get_weight("repeat_char_deduction")


def count_consecutive(classification: Classification, char_class: CharClass) -> int:
    """Count adjacent pairs (i, i+1) that both belong to `char_class`."""
    return sum(
        1 for i in range(classification.length - 1)
        if classification.is_class(i, char_class)
        and classification.is_class(i + 1, char_class)
    )


def count_sequential(classification: Classification, group: Tuple[CharClass, ...]) -> int:
    """Count triples in `group` whose code points ascend by exactly one."""
    text = classification.text
    total = 0

    for i in range(classification.length - 2):
        if not all(classification.is_class(i + k, *group) for k in range(3)):
            continue
        if ord(text[i + 1]) == ord(text[i]) + 1 and ord(text[i + 2]) == ord(text[i + 1]) + 1:
            total += 1

    return total


def calculate_consecutive_deductions(classification: Classification) -> int:
    pairs = sum(count_consecutive(classification, c) for c in CONSECUTIVE_CLASSES)
    return pairs * get_weight("consecutive_deduction")


def calculate_sequential_deductions(classification: Classification) -> int:
    triples = sum(count_sequential(classification, g) for g in SEQUENTIAL_GROUPS)
    return triples * get_weight("sequential_deduction")


def calculate_deductions(classification: Classification) -> Dict[str, int]:
    """
    Calculate every deductive component.

    Args:
        classification: Classified password

    Returns:
        Ordered dict of rule name -> points to subtract
    """
    return {
        "letters_or_digits_only": calculate_letters_or_digits_only_deduction(classification),
        "repeat_characters": calculate_repeat_character_deduction(classification),
        "consecutive_classes": calculate_consecutive_deductions(classification),
        "sequential_characters": calculate_sequential_deductions(classification),
    }
