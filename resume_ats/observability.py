"""Observability for scoring runs - logging and run statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .domain.ats_scorer import ScoreReport


@dataclass
class ScoreEvent:
    """A single event recorded by the observer."""

    timestamp: datetime
    event_type: str  # "score", "error"
    data: Dict[str, Any]
    duration_ms: Optional[float] = None


class ScoringObserver:
    """
    Observability layer for tracking scoring runs.

    Collects events and logs them for debugging and monitoring.
    """

    def __init__(self, verbose: bool = False):
        self.events: List[ScoreEvent] = []
        self.logger = logging.getLogger("resume_ats")
        self.verbose = verbose
        self._setup_logging()

    def _setup_logging(self):
        """Configure logging format and handlers."""
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO if self.verbose else logging.WARNING)

    def log_score(self, source: str, report: ScoreReport, duration_ms: float):
        """
        Log a completed scoring run.

        Args:
            source: Where the resume came from (file path, "api", ...)
            report: The produced score report
            duration_ms: Scoring time in milliseconds
        """
        event = ScoreEvent(
            timestamp=datetime.now(),
            event_type="score",
            data={
                "source": source,
                "total_score": report.total_score,
                "warnings": len(report.warnings),
                "suggestions": len(report.suggestions),
            },
            duration_ms=duration_ms,
        )
        self.events.append(event)

        self.logger.info(
            "score source=%s total=%d warnings=%d suggestions=%d duration_ms=%.2f",
            source,
            report.total_score,
            len(report.warnings),
            len(report.suggestions),
            duration_ms,
        )

    def log_error(self, error_type: str, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Log an error event.

        Args:
            error_type: Type of error (e.g., "file_not_found", "invalid_json")
            message: Error message
            context: Additional context about the error
        """
        event = ScoreEvent(
            timestamp=datetime.now(),
            event_type="error",
            data={"error_type": error_type, "message": message, "context": context or {}},
        )
        self.events.append(event)
        self.logger.error("Error (%s): %s", error_type, message)

    def get_stats(self) -> Dict[str, Any]:
        """Aggregated statistics for recorded runs."""
        runs = [e for e in self.events if e.event_type == "score"]
        errors = [e for e in self.events if e.event_type == "error"]
        total_duration = sum(e.duration_ms or 0 for e in runs)
        average = sum(e.data["total_score"] for e in runs) / len(runs) if runs else 0.0

        return {
            "event_count": len(self.events),
            "runs": len(runs),
            "errors": len(errors),
            "average_score": average,
            "total_duration_ms": total_duration,
        }

    def clear(self):
        """Clear all recorded events."""
        self.events.clear()
        self.logger.info("Observer events cleared")
