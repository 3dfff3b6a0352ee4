"""Pure domain logic for ATS (Applicant Tracking System) resume scoring.

All functions operate on structured resume data -- no file I/O.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .ats_constants import SECTION_LABELS, SECTION_ORDER
from .ats_rules import RuleRunner, build_context, build_default_runners
from .resume_record import ResumeRecord
from .scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig

logger = logging.getLogger(__name__)

_CAMEL_SECTION_KEYS = {"best_practices": "bestPractices"}


@dataclass
class SectionScore:
    """Capped score for one weighted section."""

    score: float
    max_score: int
    label: str

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "maxScore": self.max_score, "label": self.label}


@dataclass
class ScoreReport:
    """Structured result from ATS scoring."""

    total_score: int
    section_scores: Dict[str, SectionScore]
    warnings: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Plain camelCase structure for the presentation layer."""
        return {
            "totalScore": self.total_score,
            "sectionScores": {
                _CAMEL_SECTION_KEYS.get(key, key): section.to_dict() for key, section in self.section_scores.items()
            },
            "warnings": list(self.warnings),
            "suggestions": list(self.suggestions),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze(
    resume: Union[ResumeRecord, Mapping[str, Any], None],
    config: Optional[ScoringConfig] = None,
    runners: Optional[Dict[str, RuleRunner]] = None,
) -> ScoreReport:
    """Score *resume* for ATS compatibility.

    *resume* may be a :class:`ResumeRecord`, a plain mapping in the editor's
    shape, or ``None`` for an empty record. Sparse input never raises; gaps
    turn into warnings and suggestions instead.
    """
    record = coerce_record(resume)
    config = config or DEFAULT_SCORING_CONFIG
    runners = runners or build_default_runners()
    context = build_context(record, config)

    section_scores: Dict[str, SectionScore] = {}
    warnings: List[str] = []
    suggestions: List[str] = []

    for section in SECTION_ORDER:
        max_score = config.weight(section)
        runner = runners.get(section)
        if runner is None:
            section_scores[section] = SectionScore(score=0.0, max_score=max_score, label=SECTION_LABELS[section])
            continue

        tally = runner.run(record, context)
        score = min(tally.points * config.scale(section), float(max_score))
        section_scores[section] = SectionScore(score=score, max_score=max_score, label=SECTION_LABELS[section])
        warnings.extend(tally.warnings)
        suggestions.extend(tally.suggestions)
        logger.debug("section=%s raw=%.2f score=%.2f max=%d", section, tally.points, score, max_score)

    accumulated = sum(s.score for s in section_scores.values())
    total = _round_half_up(min(100.0, max(0.0, accumulated)))

    return ScoreReport(
        total_score=total,
        section_scores=section_scores,
        warnings=warnings,
        suggestions=suggestions,
    )


def coerce_record(resume: Union[ResumeRecord, Mapping[str, Any], None]) -> ResumeRecord:
    """Normalize accepted input shapes to a :class:`ResumeRecord`."""
    if resume is None:
        return ResumeRecord()
    if isinstance(resume, ResumeRecord):
        return resume
    if isinstance(resume, Mapping):
        return ResumeRecord.model_validate(dict(resume))
    raise TypeError(f"Expected a ResumeRecord or mapping, got {type(resume).__name__}")


# ---------------------------------------------------------------------------
# Formatting report (pure string output)
# ---------------------------------------------------------------------------


def format_ats_report(result: ScoreReport) -> str:
    """Render a :class:`ScoreReport` as a human-readable report."""
    grade = score_to_grade(result.total_score)
    bar = _score_bar(result.total_score)

    lines = [
        f"## ATS Score: {result.total_score}/100 {grade}",
        bar,
        "",
        "| Section            | Score   | Max |",
        "|--------------------|---------|-----|",
    ]
    for section in result.section_scores.values():
        lines.append(f"| {section.label:<18} | {section.score:7.2f} | {section.max_score:3d} |")

    if result.warnings:
        lines.append("")
        lines.append("### Warnings")
        for w in result.warnings:
            lines.append(f"- {w}")

    if result.suggestions:
        lines.append("")
        lines.append("### Suggestions")
        for i, s in enumerate(result.suggestions, 1):
            lines.append(f"{i}. {s}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def score_to_grade(score: int) -> str:
    if score >= 90:
        return "Excellent"
    elif score >= 75:
        return "Good"
    elif score >= 60:
        return "Fair"
    else:
        return "Needs Work"


def _score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return f"[{'=' * filled}{' ' * (width - filled)}]"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
