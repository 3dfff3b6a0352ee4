"""Constant tables for ATS scoring: section weights, labels, thresholds, vocabulary."""

from __future__ import annotations

from typing import Dict, List, Tuple

# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

SECTION_ORDER: List[str] = [
    "keywords",
    "experience",
    "education",
    "formatting",
    "best_practices",
]

# Must sum to 100.
SECTION_WEIGHTS: Dict[str, int] = {
    "keywords": 30,
    "experience": 25,
    "education": 15,
    "formatting": 15,
    "best_practices": 15,
}

SECTION_LABELS: Dict[str, str] = {
    "keywords": "Keywords & Skills",
    "experience": "Experience",
    "education": "Education",
    "formatting": "Formatting",
    "best_practices": "Best Practices",
}

# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------

IDEAL_SKILLS_COUNT = 8
IDEAL_BULLETS_PER_ENTRY = 3
MIN_SUMMARY_LENGTH = 50
LONG_SUMMARY_BONUS_LENGTH = 150
MAX_SUMMARY_LENGTH = 500
MAX_BULLET_WORDS = 30
MIN_SKILL_USAGE_RATIO = 0.5

CURRENT_ROLE_MARKERS = ("present", "current")
PROFILE_LINK_PLATFORMS = ("github", "leetcode")

# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

ACTION_VERBS: Tuple[str, ...] = (
    "led",
    "managed",
    "developed",
    "created",
    "implemented",
    "improved",
    "built",
    "optimized",
    "designed",
    "researched",
    "analyzed",
    "coordinated",
    "achieved",
    "accelerated",
    "delivered",
    "launched",
    "mentored",
    "orchestrated",
    "pioneered",
    "transformed",
    "increased",
    "decreased",
    "saved",
    "generated",
    "resolved",
    "streamlined",
    "strengthened",
    "automated",
    "executed",
    "facilitated",
)
