"""Resume ATS Domain - Pure scoring logic for structured resumes.

This package contains pure functions with no file system or network dependencies.
All I/O is handled by the tools layer; this package operates on records and dicts.
"""

from .ats_constants import ACTION_VERBS, SECTION_LABELS, SECTION_ORDER, SECTION_WEIGHTS
from .ats_rules import RuleContext, RuleOutcome, RuleRunner, SectionTally, build_default_runners
from .ats_scorer import ScoreReport, SectionScore, analyze, coerce_record, format_ats_report, score_to_grade
from .bullets import has_action_verb, has_metric, split_bullets
from .resume_record import EducationEntry, ExperienceEntry, PersonalInfo, ResumeRecord, Skills
from .scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig

__all__ = [
    # Constants
    "ACTION_VERBS",
    "SECTION_LABELS",
    "SECTION_ORDER",
    "SECTION_WEIGHTS",
    # Input model
    "ResumeRecord",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "Skills",
    # Config
    "ScoringConfig",
    "DEFAULT_SCORING_CONFIG",
    # Rules
    "RuleContext",
    "RuleOutcome",
    "RuleRunner",
    "SectionTally",
    "build_default_runners",
    "has_action_verb",
    "has_metric",
    "split_bullets",
    # Scorer
    "analyze",
    "coerce_record",
    "ScoreReport",
    "SectionScore",
    "format_ats_report",
    "score_to_grade",
]
