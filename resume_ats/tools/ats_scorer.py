"""ATS (Applicant Tracking System) scoring tool for resume JSON files."""

from __future__ import annotations

import json
from time import perf_counter
from typing import Optional

from pydantic import ValidationError

from ..domain.ats_scorer import analyze, format_ats_report
from ..domain.resume_record import ResumeRecord
from ..domain.scoring_config import ScoringConfig
from ..observability import ScoringObserver
from .base import BaseTool, ToolResult


class ATSScorerTool(BaseTool):
    """Score a structured resume file for ATS compatibility."""

    def __init__(
        self,
        workspace_dir: str = ".",
        config: Optional[ScoringConfig] = None,
        observer: Optional[ScoringObserver] = None,
    ):
        super().__init__(workspace_dir)
        self.config = config
        self.observer = observer

    async def execute(self, path: str) -> ToolResult:
        try:
            file_path = self.resolve_path(path)
            if not file_path.exists():
                return self._fail("file_not_found", f"File not found: {path}")

            content = file_path.read_text(encoding="utf-8")
            if not content.strip():
                return self._fail("empty_file", f"File is empty: {path}")

            try:
                payload = json.loads(content)
            except json.JSONDecodeError as e:
                return self._fail("invalid_json", f"Invalid JSON in {path}: {e.msg} (line {e.lineno})")

            if not isinstance(payload, dict):
                return self._fail("invalid_shape", f"Expected a JSON object in {path}, got {type(payload).__name__}")

            try:
                record = ResumeRecord.model_validate(payload)
            except ValidationError as e:
                return self._fail("invalid_shape", f"Resume data in {path} has the wrong shape: {e.error_count()} error(s)")

            start = perf_counter()
            report = analyze(record, self.config)
            duration_ms = (perf_counter() - start) * 1000
            if self.observer is not None:
                self.observer.log_score(str(path), report, duration_ms)

            return ToolResult(
                success=True,
                output=format_ats_report(report),
                data=report.to_dict(),
            )
        except (OSError, UnicodeDecodeError) as e:
            return self._fail("io_error", str(e))

    def _fail(self, error_type: str, message: str) -> ToolResult:
        if self.observer is not None:
            self.observer.log_error(error_type, message)
        return ToolResult.failed(message)
