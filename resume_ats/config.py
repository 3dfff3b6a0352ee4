"""Load scoring configuration from YAML."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .config_validator import ConfigError, Severity, has_errors, validate_scoring_config
from .domain.scoring_config import ScoringConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/scoring.yaml"
CONFIG_ENV_VAR = "RESUME_ATS_CONFIG"


class ConfigurationError(Exception):
    """Raised when scoring configuration has blocking issues."""

    def __init__(self, issues: List[ConfigError]):
        self.issues = issues
        details = "; ".join(f"{i.field}: {i.message}" for i in issues if i.severity == Severity.ERROR)
        super().__init__(f"Invalid scoring configuration: {details}")


def load_scoring_config(config_path: Optional[str] = None) -> ScoringConfig:
    """Load :class:`ScoringConfig` from YAML.

    Resolution order: explicit *config_path*, then ``$RESUME_ATS_CONFIG``,
    then ``config/scoring.yaml``. A missing default file yields the built-in
    defaults; a missing explicit file raises ``FileNotFoundError``.
    """
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR, "")
    path = Path(explicit or DEFAULT_CONFIG_PATH)
    if not path.exists() and not path.is_absolute():
        path = Path(__file__).parent.parent / path

    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {explicit}")
        logger.debug("No scoring config at %s, using defaults", DEFAULT_CONFIG_PATH)
        return ScoringConfig()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError([
            ConfigError(field="<root>", message="config file must contain a mapping", severity=Severity.ERROR)
        ])

    return build_scoring_config(data)


def build_scoring_config(data: Dict[str, Any]) -> ScoringConfig:
    """Validate a raw config mapping and build a :class:`ScoringConfig`."""
    issues = validate_scoring_config(data)
    for issue in issues:
        if issue.severity == Severity.WARNING:
            logger.warning("config %s: %s", issue.field, issue.message)
    if has_errors(issues):
        raise ConfigurationError(issues)

    defaults = ScoringConfig()
    return ScoringConfig(
        weights=dict(data.get("weights") or defaults.weights),
        ideal_skills_count=data.get("ideal_skills_count", defaults.ideal_skills_count),
        ideal_bullets_per_entry=data.get("ideal_bullets_per_entry", defaults.ideal_bullets_per_entry),
        min_summary_length=data.get("min_summary_length", defaults.min_summary_length),
        long_summary_bonus_length=data.get("long_summary_bonus_length", defaults.long_summary_bonus_length),
        max_summary_length=data.get("max_summary_length", defaults.max_summary_length),
        max_bullet_words=data.get("max_bullet_words", defaults.max_bullet_words),
        min_skill_usage_ratio=data.get("min_skill_usage_ratio", defaults.min_skill_usage_ratio),
        action_verbs=tuple(v.strip().lower() for v in data.get("action_verbs") or defaults.action_verbs),
    )
