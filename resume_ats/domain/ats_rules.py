"""Rule tables and rule-runner for section-scoped ATS checks.

Each section is scored by an ordered list of rule configs resolved against
a registry of rule functions. A rule returns a :class:`RuleOutcome` with
the points it awards and at most one warning and one suggestion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .ats_constants import CURRENT_ROLE_MARKERS, PROFILE_LINK_PLATFORMS, SECTION_ORDER
from .bullets import has_action_verb, has_metric, mentions_term, split_bullets, word_count
from .resume_record import ResumeRecord
from .scoring_config import ScoringConfig

RuleFn = Callable[[ResumeRecord, "RuleContext", Dict[str, Any]], "RuleOutcome"]


@dataclass
class RuleContext:
    """Per-run facts shared by every rule."""

    config: ScoringConfig
    bullets: List[str] = field(default_factory=list)
    action_verb_bullets: int = 0
    metric_bullets: int = 0
    wordy_bullets: int = 0


@dataclass
class RuleOutcome:
    """Points awarded by one rule plus its optional messages."""

    points: float = 0.0
    warning: Optional[str] = None
    suggestion: Optional[str] = None


@dataclass
class SectionTally:
    """Raw (uncapped) result of running one section's rules."""

    points: float = 0.0
    warnings: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


class RuleRunner:
    """Config-driven registry runner."""

    def __init__(self, rules: List[Dict[str, Any]], registry: Dict[str, RuleFn]):
        self.rules = rules
        self.registry = registry

    def run(self, record: ResumeRecord, context: RuleContext) -> SectionTally:
        tally = SectionTally()
        for cfg in self.rules:
            if not bool(cfg.get("enabled", True)):
                continue

            rule_id = str(cfg.get("id", "")).strip()
            if not rule_id:
                continue
            rule_fn = self.registry.get(rule_id)
            if rule_fn is None:
                continue

            params = cfg.get("params", {}) or {}
            outcome = rule_fn(record, context, params)
            tally.points += outcome.points
            if outcome.warning:
                tally.warnings.append(outcome.warning)
            if outcome.suggestion:
                tally.suggestions.append(outcome.suggestion)
        return tally


def build_context(record: ResumeRecord, config: ScoringConfig) -> RuleContext:
    """Split every experience description into bullets and count their traits."""
    context = RuleContext(config=config)
    for entry in record.experience:
        context.bullets.extend(split_bullets(entry.description))

    for bullet in context.bullets:
        if has_action_verb(bullet, config.action_verbs):
            context.action_verb_bullets += 1
        if has_metric(bullet):
            context.metric_bullets += 1
        if word_count(bullet) > config.max_bullet_words:
            context.wordy_bullets += 1
    return context


# ---------------------------------------------------------------------------
# Default rule tables
# ---------------------------------------------------------------------------

DEFAULT_SECTION_RULES: Dict[str, List[Dict[str, Any]]] = {
    "keywords": [
        {"id": "technical_skills", "enabled": True, "params": {"points_per_skill": 2.5, "max_points": 20}},
        {"id": "languages_listed", "enabled": True, "params": {"points": 5}},
        {"id": "certifications_listed", "enabled": True, "params": {"points": 5}},
        {"id": "skill_usage", "enabled": True, "params": {}},
    ],
    "experience": [
        {"id": "experience_present", "enabled": True, "params": {"points": 5}},
        {"id": "bullet_density", "enabled": True, "params": {"max_points": 5}},
        {"id": "action_verbs", "enabled": True, "params": {"points": 7}},
        {"id": "quantified_impact", "enabled": True, "params": {"points": 8}},
        {"id": "verbs_or_metrics_floor", "enabled": True, "params": {}},
        {"id": "wordy_bullets", "enabled": True, "params": {}},
        {"id": "experience_dates", "enabled": True, "params": {}},
    ],
    "education": [
        {"id": "best_education_entry", "enabled": True, "params": {"points_per_field": 5}},
    ],
    "formatting": [
        {"id": "summary_present", "enabled": True, "params": {"points": 5}},
        {"id": "summary_too_long", "enabled": True, "params": {}},
        {"id": "contact_complete", "enabled": True, "params": {"points": 5}},
        {"id": "professional_link", "enabled": True, "params": {"points": 5}},
    ],
    "best_practices": [
        {"id": "current_role", "enabled": True, "params": {"points": 5}},
        {"id": "detailed_summary", "enabled": True, "params": {"points": 5}},
        {"id": "structural_completeness", "enabled": True, "params": {"points": 5}},
    ],
}


def build_default_runners() -> Dict[str, RuleRunner]:
    """Return one runner per section, in scoring order."""
    return {
        section: RuleRunner(rules=DEFAULT_SECTION_RULES[section], registry=RULE_REGISTRY)
        for section in SECTION_ORDER
    }


# ---------------------------------------------------------------------------
# Keywords & skills
# ---------------------------------------------------------------------------


def _rule_technical_skills(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    count = len(record.skills.technical)
    if count == 0:
        return RuleOutcome(warning="No technical skills listed. Skills section is empty and ATS systems prioritize skill keywords.")

    per_skill = float(params.get("points_per_skill", 2.5))
    max_points = float(params.get("max_points", 20))
    outcome = RuleOutcome(points=min(max_points, count * per_skill))

    ideal = context.config.ideal_skills_count
    if count < ideal:
        outcome.suggestion = f"Consider adding more technical skills (ideally {ideal}+) for better keyword coverage."
    return outcome


def _rule_languages_listed(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if record.skills.languages:
        return RuleOutcome(points=float(params.get("points", 5)))
    return RuleOutcome()


def _rule_certifications_listed(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if record.skills.certifications:
        return RuleOutcome(points=float(params.get("points", 5)))
    return RuleOutcome()


def _rule_skill_usage(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    skills = record.skills.technical
    if not skills:
        return RuleOutcome()

    texts = [record.summary] + [entry.description for entry in record.experience]
    used = sum(1 for skill in skills if any(mentions_term(text, skill) for text in texts))
    if used / len(skills) < context.config.min_skill_usage_ratio:
        return RuleOutcome(suggestion="Skills are not well-reflected in your experience or summary.")
    return RuleOutcome()


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------


def _rule_experience_present(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if not record.experience:
        return RuleOutcome(
            warning="No experience section found. Work experience is the most critical section for recruiters."
        )
    return RuleOutcome(points=float(params.get("points", 5)))


def _rule_bullet_density(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if not record.experience:
        return RuleOutcome()

    max_points = float(params.get("max_points", 5))
    ideal = context.config.ideal_bullets_per_entry
    avg_bullets = len(context.bullets) / len(record.experience)
    return RuleOutcome(points=min(max_points, max_points * avg_bullets / ideal))


def _rule_action_verbs(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if not record.experience:
        return RuleOutcome()
    if context.action_verb_bullets > 0:
        return RuleOutcome(points=float(params.get("points", 7)))
    return RuleOutcome(
        suggestion="Start your bullet points with strong action verbs (e.g., Led, Developed, Optimized)."
    )


def _rule_quantified_impact(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if not record.experience:
        return RuleOutcome()
    if context.metric_bullets > 0:
        return RuleOutcome(points=float(params.get("points", 8)))
    return RuleOutcome(suggestion="Use quantifiable metrics (%, $, numbers) to demonstrate measurable impact.")


def _rule_verbs_or_metrics_floor(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if not record.experience:
        return RuleOutcome()
    if context.action_verb_bullets == 0 and context.metric_bullets == 0:
        return RuleOutcome(warning="Experience descriptions lack strong action verbs or metrics.")
    return RuleOutcome()


def _rule_wordy_bullets(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if context.wordy_bullets == 0:
        return RuleOutcome()
    limit = context.config.max_bullet_words
    return RuleOutcome(
        suggestion=f"Some bullet points are too wordy ({context.wordy_bullets} over {limit} words). Keep each to one or two lines."
    )


def _rule_experience_dates(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    undated = [
        entry
        for entry in record.experience
        if not entry.start_date.strip() or (not entry.end_date.strip() and not entry.current)
    ]
    if not undated:
        return RuleOutcome()
    return RuleOutcome(suggestion="Some experience entries are missing dates. Add a start and end date to every role.")


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------


def _rule_best_education_entry(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if not record.education:
        return RuleOutcome(warning="Education section missing or incomplete.")

    per_field = float(params.get("points_per_field", 5))
    best = 0.0
    for entry in record.education:
        filled = sum(1 for value in (entry.degree, entry.school, entry.graduation_date) if value.strip())
        best = max(best, filled * per_field)
    return RuleOutcome(points=best)


# ---------------------------------------------------------------------------
# Formatting & contact
# ---------------------------------------------------------------------------


def _rule_summary_present(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if len(record.summary.strip()) >= context.config.min_summary_length:
        return RuleOutcome(points=float(params.get("points", 5)))
    return RuleOutcome(warning="Missing professional summary, or it is too short.")


def _rule_summary_too_long(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    limit = context.config.max_summary_length
    if len(record.summary) > limit:
        return RuleOutcome(warning=f"Summary is too long ({len(record.summary)} characters, max {limit}).")
    return RuleOutcome()


def _rule_contact_complete(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    info = record.personal_info
    if info.email and info.phone and info.location:
        return RuleOutcome(points=float(params.get("points", 5)))
    return RuleOutcome(warning="Missing contact information (email, phone, or location).")


def _rule_professional_link(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    links = [record.personal_info.linkedin] + [record.profile_link(p) for p in PROFILE_LINK_PLATFORMS]
    if any(link.strip() for link in links):
        return RuleOutcome(points=float(params.get("points", 5)))
    return RuleOutcome(suggestion="Add a LinkedIn or GitHub profile to increase professional credibility.")


# ---------------------------------------------------------------------------
# Best practices
# ---------------------------------------------------------------------------


def _rule_current_role(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    has_current = any(
        entry.current or entry.end_date.lower() in CURRENT_ROLE_MARKERS for entry in record.experience
    )
    if has_current:
        return RuleOutcome(points=float(params.get("points", 5)))
    if record.experience:
        return RuleOutcome(suggestion='Mark your current role as "Present" to show ongoing work.')
    return RuleOutcome()


def _rule_detailed_summary(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    # Raw length, not the trimmed length used by summary_present.
    if len(record.summary) > context.config.long_summary_bonus_length:
        return RuleOutcome(points=float(params.get("points", 5)))
    return RuleOutcome()


def _rule_structural_completeness(record: ResumeRecord, context: RuleContext, params: Dict[str, Any]) -> RuleOutcome:
    if record.experience and record.education and record.skills.technical:
        return RuleOutcome(points=float(params.get("points", 5)))
    return RuleOutcome()


RULE_REGISTRY: Dict[str, RuleFn] = {
    "technical_skills": _rule_technical_skills,
    "languages_listed": _rule_languages_listed,
    "certifications_listed": _rule_certifications_listed,
    "skill_usage": _rule_skill_usage,
    "experience_present": _rule_experience_present,
    "bullet_density": _rule_bullet_density,
    "action_verbs": _rule_action_verbs,
    "quantified_impact": _rule_quantified_impact,
    "verbs_or_metrics_floor": _rule_verbs_or_metrics_floor,
    "wordy_bullets": _rule_wordy_bullets,
    "experience_dates": _rule_experience_dates,
    "best_education_entry": _rule_best_education_entry,
    "summary_present": _rule_summary_present,
    "summary_too_long": _rule_summary_too_long,
    "contact_complete": _rule_contact_complete,
    "professional_link": _rule_professional_link,
    "current_role": _rule_current_role,
    "detailed_summary": _rule_detailed_summary,
    "structural_completeness": _rule_structural_completeness,
}
