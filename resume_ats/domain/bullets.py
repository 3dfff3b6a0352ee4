"""Line-level helpers for experience descriptions."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, List, Optional, Pattern, Tuple

from .ats_constants import ACTION_VERBS

_METRIC_RE = re.compile(r"[%$]|\b\d+\b")


def split_bullets(description: str) -> List[str]:
    """Split a free-text description into its non-empty lines."""
    return [line for line in description.split("\n") if line.strip()]


@lru_cache(maxsize=8)
def _verb_pattern(verbs: Tuple[str, ...]) -> Optional[Pattern[str]]:
    terms = [re.escape(v.strip()) for v in verbs if v.strip()]
    if not terms:
        return None
    return re.compile(r"\b(?:" + "|".join(terms) + r")\b", re.IGNORECASE)


def has_action_verb(line: str, verbs: Iterable[str] = ACTION_VERBS) -> bool:
    """True when *line* contains a vocabulary verb as a whole word, any case."""
    pattern = _verb_pattern(tuple(verbs))
    return bool(pattern and pattern.search(line))


def has_metric(line: str) -> bool:
    """True when *line* contains ``%``, ``$`` or a standalone run of digits."""
    return bool(_METRIC_RE.search(line))


def word_count(line: str) -> int:
    return len(line.split())


@lru_cache(maxsize=256)
def _term_pattern(term: str) -> Pattern[str]:
    # Word-character lookarounds instead of \b so terms like "C++" or ".NET" still match.
    return re.compile(r"(?<!\w)" + re.escape(term) + r"(?!\w)", re.IGNORECASE)


def mentions_term(text: str, term: str) -> bool:
    """True when *term* appears in *text* as a whole word, any case."""
    term = term.strip()
    return bool(term) and bool(_term_pattern(term).search(text))
