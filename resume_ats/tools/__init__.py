"""Resume ATS Tools - Connect the scoring engine to local resume files."""

from .ats_scorer import ATSScorerTool
from .base import BaseTool, ToolResult

__all__ = [
    "BaseTool",
    "ToolResult",
    "ATSScorerTool",
]
