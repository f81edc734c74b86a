"""
pwstrength Configuration

Rule weights, label bands and runtime defaults for password scoring.
"""

import os
import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml
from jsonschema import validate, ValidationError

from pwstrength.exceptions import ConfigError


logger = logging.getLogger(__name__)


STRENGTH_CONFIG = {
    "version": "1.0.0",

    # =========================================================================
    # ADDITIVE WEIGHTS
    # =========================================================================
    "additions": {
        "char_length_score": 4,     # per character
        "uppercase_bonus": 2,       # per non-uppercase character
        "lowercase_bonus": 2,       # per non-lowercase character
        "digit_bonus": 4,           # per digit
        "symbol_bonus": 6,          # per symbol
        "middle_bonus": 2,          # per interior digit or symbol
    },

    # =========================================================================
    # DEDUCTION WEIGHTS
    # =========================================================================
    "deductions": {
        "repeat_char_deduction": 2,     # per distinct repeated character
        "consecutive_deduction": 2,     # per same-class adjacent pair
        "sequential_deduction": 3,      # per ascending triple
    },

    # =========================================================================
    # LIMITS
    # =========================================================================
    "min_length": 8,            # shorter input scores 0
    "min_requirements": 3,      # classes needed for the requirements bonus
    "score_bounds": (0, 100),

    # =========================================================================
    # LABEL BANDS (upper bound inclusive)
    # =========================================================================
    "label_bands": [
        ("weak", 15),
        ("medium", 60),
        ("good", 85),
        ("strong", 100),
    ],

    "label_text": {
        "en": {
            "weak": "Weak",
            "medium": "Medium",
            "good": "Good",
            "strong": "Strong",
        },
        "pt": {
            "weak": "Fraca",
            "medium": "Mediana",
            "good": "Boa",
            "strong": "Forte",
        },
    },

    "message_format": {
        "en": "Password strength {label} {score}%",
        "pt": "Nível de senha {label} {score}%",
    },
}


# Runtime defaults. Only these keys can be overridden from a config file.
DEFAULT_SETTINGS = {
    "locale": "en",
    "minimum_score": 3,
    "max_workers": 4,
    "output_format": "text",
    "log_level": "WARNING",
}

SETTINGS_SCHEMA = {
    "type": "object",
    "properties": {
        "locale": {"type": "string", "enum": sorted(STRENGTH_CONFIG["label_text"])},
        "minimum_score": {"type": "integer", "minimum": 0, "maximum": 100},
        "max_workers": {"type": "integer", "minimum": 1},
        "output_format": {"type": "string", "enum": ["text", "json"]},
        "log_level": {
            "type": "string",
            "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        },
    },
    "additionalProperties": False,
}

ENV_OVERRIDES = {
    "PWSTRENGTH_LOCALE": "locale",
    "PWSTRENGTH_LOG_LEVEL": "log_level",
}


def get_weight(name: str) -> int:
    """Get an additive or deductive rule weight by name."""
    if name in STRENGTH_CONFIG["additions"]:
        return STRENGTH_CONFIG["additions"][name]
    if name in STRENGTH_CONFIG["deductions"]:
        return STRENGTH_CONFIG["deductions"][name]
    raise KeyError(f"Unknown rule weight: {name}")


def get_label_bands() -> list:
    """Get (label name, inclusive upper bound) pairs in ascending order."""
    return list(STRENGTH_CONFIG["label_bands"])


def get_label_text(label_name: str, locale: str = "en") -> str:
    """Get display text for a label in the given locale."""
    texts = STRENGTH_CONFIG["label_text"].get(locale)
    if texts is None:
        raise ConfigError(f"Unsupported locale: {locale}")
    return texts[label_name]


def get_message_format(locale: str = "en") -> str:
    """Get the strength message template for a locale."""
    template = STRENGTH_CONFIG["message_format"].get(locale)
    if template is None:
        raise ConfigError(f"Unsupported locale: {locale}")
    return template


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load runtime settings.

    Starts from DEFAULT_SETTINGS, overlays the YAML file at `path` (if
    given), then environment overrides.

    Args:
        path: Optional path to a YAML settings file

    Returns:
        Settings dictionary

    Raises:
        ConfigError: file missing, unreadable YAML, or schema violation
    """
    settings = copy.deepcopy(DEFAULT_SETTINGS)

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        settings.update(_validated(data, str(config_path)))
        logger.debug(f"Loaded settings from {config_path}")

    env_data = {
        key: os.environ[var]
        for var, key in ENV_OVERRIDES.items()
        if os.environ.get(var)
    }
    if "log_level" in env_data:
        env_data["log_level"] = env_data["log_level"].upper()
    if env_data:
        settings.update(_validated(env_data, "environment"))

    return settings


def _validated(data: Any, source: str) -> Dict[str, Any]:
    try:
        validate(instance=data, schema=SETTINGS_SCHEMA)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings from {source}: {e.message}") from e
    return data
