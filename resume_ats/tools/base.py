"""Base class for tools that feed local files to the scoring engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

@dataclass
class ToolResult:
    """Result from a tool execution."""
    success: bool
    output: str
    error: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def failed(cls, error: str) -> "ToolResult":
        return cls(success=False, output="", error=error)


class BaseTool(ABC):
    """Base class for tools rooted in a workspace directory."""

    def __init__(self, workspace_dir: str = "."):
        self.workspace_dir = Path(workspace_dir).resolve()

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """Execute the tool with given parameters."""

    def resolve_path(self, path: str) -> Path:
        """Absolute paths pass through; relative ones resolve against the workspace."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self.workspace_dir / p
