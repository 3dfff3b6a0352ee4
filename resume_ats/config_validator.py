"""Configuration validator for scoring weights and thresholds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from .domain.ats_constants import LONG_SUMMARY_BONUS_LENGTH, MAX_SUMMARY_LENGTH, SECTION_ORDER

THRESHOLD_FIELDS = (
    "ideal_skills_count",
    "ideal_bullets_per_entry",
    "min_summary_length",
    "long_summary_bonus_length",
    "max_summary_length",
    "max_bullet_words",
)

KNOWN_FIELDS = {"weights", "action_verbs", "min_skill_usage_ratio", *THRESHOLD_FIELDS}


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


def validate_scoring_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw scoring configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- Weights ---
    weights = raw_config.get("weights")
    if weights is not None:
        errors.extend(_validate_weights(weights))

    # --- Thresholds ---
    for name in THRESHOLD_FIELDS:
        if name not in raw_config:
            continue
        value = raw_config[name]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(ConfigError(
                field=name,
                message=f"{name} must be a positive integer, got {value!r}",
                severity=Severity.ERROR,
            ))

    # Unset keys fall back to the built-in defaults.
    bonus = raw_config.get("long_summary_bonus_length", LONG_SUMMARY_BONUS_LENGTH)
    maximum = raw_config.get("max_summary_length", MAX_SUMMARY_LENGTH)
    if _is_positive_int(bonus) and _is_positive_int(maximum) and maximum <= bonus:
        errors.append(ConfigError(
            field="max_summary_length" if "max_summary_length" in raw_config else "long_summary_bonus_length",
            message=f"max_summary_length ({maximum}) must exceed long_summary_bonus_length ({bonus})",
            severity=Severity.ERROR,
        ))

    # --- Skill usage ratio ---
    if "min_skill_usage_ratio" in raw_config:
        ratio = raw_config["min_skill_usage_ratio"]
        if isinstance(ratio, bool) or not isinstance(ratio, (int, float)) or not 0 <= ratio <= 1:
            errors.append(ConfigError(
                field="min_skill_usage_ratio",
                message=f"min_skill_usage_ratio must be a number between 0 and 1, got {ratio!r}",
                severity=Severity.ERROR,
            ))

    # --- Action verbs ---
    if "action_verbs" in raw_config:
        verbs = raw_config["action_verbs"]
        if (
            not isinstance(verbs, list)
            or not verbs
            or not all(isinstance(v, str) and v.strip() for v in verbs)
        ):
            errors.append(ConfigError(
                field="action_verbs",
                message="action_verbs must be a non-empty list of non-blank strings",
                severity=Severity.ERROR,
            ))

    # --- Unknown keys ---
    for key in sorted(set(raw_config) - KNOWN_FIELDS):
        errors.append(ConfigError(
            field=str(key),
            message=f"Unknown configuration key {key!r} is ignored",
            severity=Severity.WARNING,
        ))

    return errors


def _validate_weights(weights: Any) -> List[ConfigError]:
    if not isinstance(weights, dict):
        return [ConfigError(
            field="weights",
            message=f"weights must be a mapping of section to points, got {type(weights).__name__}",
            severity=Severity.ERROR,
        )]

    errors: List[ConfigError] = []
    missing = [s for s in SECTION_ORDER if s not in weights]
    unknown = sorted(set(weights) - set(SECTION_ORDER))
    if missing:
        errors.append(ConfigError(
            field="weights",
            message=f"weights is missing sections: {', '.join(missing)}",
            severity=Severity.ERROR,
        ))
    if unknown:
        errors.append(ConfigError(
            field="weights",
            message=f"weights has unknown sections: {', '.join(str(u) for u in unknown)}",
            severity=Severity.ERROR,
        ))

    bad_values = False
    for section, value in weights.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            bad_values = True
            errors.append(ConfigError(
                field=f"weights.{section}",
                message=f"weight must be a non-negative integer, got {value!r}",
                severity=Severity.ERROR,
            ))

    if not missing and not unknown and not bad_values:
        total = sum(weights.values())
        if total != 100:
            errors.append(ConfigError(
                field="weights",
                message=f"weights must sum to 100, got {total}",
                severity=Severity.ERROR,
            ))

    return errors


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
