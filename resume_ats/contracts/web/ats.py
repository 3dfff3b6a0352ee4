"""ATS endpoint response contracts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SectionScoreResponse(_CamelModel):
    score: float
    max_score: int
    label: str


class SectionScoresResponse(_CamelModel):
    keywords: SectionScoreResponse
    experience: SectionScoreResponse
    education: SectionScoreResponse
    formatting: SectionScoreResponse
    best_practices: SectionScoreResponse


class ScoreReportResponse(_CamelModel):
    total_score: int
    grade: str
    section_scores: SectionScoresResponse
    warnings: list[str]
    suggestions: list[str]


class SectionWeightResponse(_CamelModel):
    key: str
    label: str
    max_score: int


class WeightsResponse(_CamelModel):
    total: int
    sections: list[SectionWeightResponse]
