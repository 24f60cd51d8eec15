"""
Judgment context model.

The context is the read-only input every judge of a single
evaluation request receives.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExecutionStatus(str, Enum):
	"""Outcome of the agent run that produced the artifact under review."""

	SUCCESS = "success"
	FAILED = "failed"
	TIMEOUT = "timeout"
	CANCELLED = "cancelled"
	UNKNOWN = "unknown"


class JudgmentContext(BaseModel):
	"""
	Everything a judge may inspect about one agent run.

	Attributes:
		goal: The task the agent was asked to accomplish.
		workspace: Directory holding the produced artifact, if any.
		agent_output: Final text the agent produced.
		status: How the agent run ended.
		started_at: When the agent run started.
		execution_time: How long the agent run took.
		metadata: Open bag of extra inputs (baselines, targets, ...).
	"""

	model_config = ConfigDict(frozen=True)

	goal: str = Field(description="Task given to the agent")
	workspace: Path | None = Field(default=None,
	                               description="Artifact workspace directory")
	agent_output: str | None = Field(default=None,
	                                 description="Agent output text")
	status: ExecutionStatus = Field(default=ExecutionStatus.UNKNOWN)
	started_at: datetime | None = Field(default=None)
	execution_time: timedelta | None = Field(default=None)
	metadata: dict[str, Any] = Field(default_factory=dict)

	def get_metadata(self, key: str, default: Any = None) -> Any:
		"""Return a metadata value, or ``default`` when absent."""
		return self.metadata.get(key, default)


__all__ = ["ExecutionStatus", "JudgmentContext"]
