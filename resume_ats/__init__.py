"""Resume ATS - rule-based ATS compatibility scoring for structured resumes."""

from .domain import ResumeRecord, ScoreReport, ScoringConfig, SectionScore, analyze, format_ats_report

__version__ = "0.1.0"

__all__ = [
    "ResumeRecord",
    "ScoreReport",
    "ScoringConfig",
    "SectionScore",
    "analyze",
    "format_ats_report",
]
