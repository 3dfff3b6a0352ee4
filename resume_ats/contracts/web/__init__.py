"""Web API contracts."""

from .ats import (
    ScoreReportResponse,
    SectionScoreResponse,
    SectionScoresResponse,
    SectionWeightResponse,
    WeightsResponse,
)

__all__ = [
    "ScoreReportResponse",
    "SectionScoreResponse",
    "SectionScoresResponse",
    "SectionWeightResponse",
    "WeightsResponse",
]
