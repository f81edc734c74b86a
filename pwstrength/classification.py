"""
Character Classification

Partitions a password into the four character classes. Every code point
lands in exactly one class; SYMBOL is the catch-all for anything that is
neither a letter nor a decimal digit.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class CharClass(Enum):
    """Character class of a single code point."""
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"


def classify_char(ch: str) -> CharClass:
    """
    Classify one character.

    Uncased letters (e.g. CJK ideographs) count as LOWER, titlecase letters
    as UPPER.
    """
    if ch.isdecimal():
        return CharClass.DIGIT
    if ch.isalpha():
        if ch.islower():
            return CharClass.LOWER
        if ch.isupper() or ch.istitle():
            return CharClass.UPPER
        return CharClass.LOWER
    return CharClass.SYMBOL


@dataclass(frozen=True)
class Classification:
    """Classified view of a password."""
    text: str = field(repr=False)
    classes: Tuple[CharClass, ...]
    upper_count: int
    lower_count: int
    digit_count: int
    symbol_count: int

    @property
    def length(self) -> int:
        return len(self.classes)

    def is_class(self, index: int, *char_classes: CharClass) -> bool:
        """True if the character at `index` belongs to any of `char_classes`."""
        return self.classes[index] in char_classes

    def count(self, char_class: CharClass) -> int:
        return {
            CharClass.UPPER: self.upper_count,
            CharClass.LOWER: self.lower_count,
            CharClass.DIGIT: self.digit_count,
            CharClass.SYMBOL: self.symbol_count,
        }[char_class]

    @property
    def classes_present(self) -> int:
        """Number of classes with at least one character (0-4)."""
        return sum(1 for c in CharClass if self.count(c) > 0)


def classify(password: str) -> Classification:
    """Classify every code point of `password`."""
    if not isinstance(password, str):
        raise TypeError(f"password must be str, not {type(password).__name__}")

    classes = tuple(classify_char(ch) for ch in password)

    return Classification(
        text=password,
        classes=classes,
        upper_count=classes.count(CharClass.UPPER),
        lower_count=classes.count(CharClass.LOWER),
        digit_count=classes.count(CharClass.DIGIT),
        symbol_count=classes.count(CharClass.SYMBOL),
    )
