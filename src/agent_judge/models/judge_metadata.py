"""
Judge metadata models.

Describes a judge for introspection and for keying its judgment
inside a Verdict.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JudgeType(str, Enum):
	"""Broad family a judge belongs to."""

	DETERMINISTIC = "deterministic"
	LLM = "llm"
	AGENT = "agent"
	CUSTOM = "custom"


class JudgeMetadata(BaseModel):
	"""Name, description and family of a judge."""

	model_config = ConfigDict(frozen=True)

	name: str = Field(description="Unique name within a jury")
	description: str = Field(default="", description="What the judge checks")
	type: JudgeType = Field(default=JudgeType.CUSTOM)

	@field_validator("name")
	@classmethod
	def validate_name(cls, v: str) -> str:
		v = v.strip()
		if not v:
			raise ValueError("judge name must be non-empty")
		return v


__all__ = ["JudgeType", "JudgeMetadata"]
