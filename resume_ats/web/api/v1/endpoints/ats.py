"""ATS scoring endpoints for Web API v1."""

from __future__ import annotations

import logging
from time import perf_counter

from fastapi import APIRouter, Depends

from .....contracts.web.ats import (
    ScoreReportResponse,
    SectionScoreResponse,
    SectionScoresResponse,
    SectionWeightResponse,
    WeightsResponse,
)
from .....domain.ats_constants import SECTION_LABELS, SECTION_ORDER
from .....domain.ats_scorer import ScoreReport, analyze, score_to_grade
from .....domain.resume_record import ResumeRecord
from .....domain.scoring_config import ScoringConfig
from .....observability import ScoringObserver
from ..deps import get_observer, get_scoring_config

router = APIRouter(prefix="/ats", tags=["ats"])
logger = logging.getLogger("resume_ats.web.api")


@router.post("/score", response_model=ScoreReportResponse)
async def score_resume(
    resume: ResumeRecord,
    config: ScoringConfig = Depends(get_scoring_config),
    observer: ScoringObserver = Depends(get_observer),
) -> ScoreReportResponse:
    start = perf_counter()
    report = analyze(resume, config)
    duration_ms = (perf_counter() - start) * 1000
    observer.log_score("api", report, duration_ms)
    return _to_response(report)


@router.get("/weights", response_model=WeightsResponse)
async def get_weights(config: ScoringConfig = Depends(get_scoring_config)) -> WeightsResponse:
    sections = [
        SectionWeightResponse(key=key, label=SECTION_LABELS[key], max_score=config.weight(key))
        for key in SECTION_ORDER
    ]
    return WeightsResponse(total=sum(s.max_score for s in sections), sections=sections)


def _to_response(report: ScoreReport) -> ScoreReportResponse:
    sections = {
        key: SectionScoreResponse(score=s.score, max_score=s.max_score, label=s.label)
        for key, s in report.section_scores.items()
    }
    return ScoreReportResponse(
        total_score=report.total_score,
        grade=score_to_grade(report.total_score),
        section_scores=SectionScoresResponse(**sections),
        warnings=report.warnings,
        suggestions=report.suggestions,
    )
