"""Tunable parameters for the scoring engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from .ats_constants import (
    ACTION_VERBS,
    IDEAL_BULLETS_PER_ENTRY,
    IDEAL_SKILLS_COUNT,
    LONG_SUMMARY_BONUS_LENGTH,
    MAX_BULLET_WORDS,
    MAX_SUMMARY_LENGTH,
    MIN_SKILL_USAGE_RATIO,
    MIN_SUMMARY_LENGTH,
    SECTION_WEIGHTS,
)

POSITIVE_INT_FIELDS = (
    "ideal_skills_count",
    "ideal_bullets_per_entry",
    "min_summary_length",
    "long_summary_bonus_length",
    "max_summary_length",
    "max_bullet_words",
)


@dataclass(frozen=True)
class ScoringConfig:
    """Section weights and rule thresholds.

    Weights must sum to 100. Rule point values are calibrated against the
    default weights; a tuned weight rescales its section so a perfect
    section still reaches its maximum. Containers are stored read-only.
    """

    weights: Mapping[str, int] = field(default_factory=lambda: dict(SECTION_WEIGHTS))
    ideal_skills_count: int = IDEAL_SKILLS_COUNT
    ideal_bullets_per_entry: int = IDEAL_BULLETS_PER_ENTRY
    min_summary_length: int = MIN_SUMMARY_LENGTH
    long_summary_bonus_length: int = LONG_SUMMARY_BONUS_LENGTH
    max_summary_length: int = MAX_SUMMARY_LENGTH
    max_bullet_words: int = MAX_BULLET_WORDS
    min_skill_usage_ratio: float = MIN_SKILL_USAGE_RATIO
    action_verbs: Tuple[str, ...] = ACTION_VERBS

    def __post_init__(self):
        for name in POSITIVE_INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not 0 <= self.min_skill_usage_ratio <= 1:
            raise ValueError(f"min_skill_usage_ratio must be between 0 and 1, got {self.min_skill_usage_ratio!r}")
        if any(value < 0 for value in self.weights.values()):
            raise ValueError("weights must be non-negative")

        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))
        object.__setattr__(self, "action_verbs", tuple(self.action_verbs))

    def weight(self, section: str) -> int:
        return int(self.weights.get(section, SECTION_WEIGHTS[section]))

    def scale(self, section: str) -> float:
        """Factor mapping default rule points onto this config's section weight."""
        return self.weight(section) / SECTION_WEIGHTS[section]


DEFAULT_SCORING_CONFIG = ScoringConfig()
