"""
Cascade tier models.

A tier is one stage of a cascaded jury: a named jury plus the policy
that maps its individual judgments to stop-or-escalate.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TierPolicy(str, Enum):
	"""How a tier's judgments map to cascade control flow."""

	REJECT_ON_ANY_FAIL = "reject_on_any_fail"
	"""Stop when any judge of the tier fails; otherwise escalate."""

	ACCEPT_ON_ALL_PASS = "accept_on_all_pass"
	"""Stop when every judge of the tier passes; otherwise escalate."""

	FINAL_TIER = "final_tier"
	"""Always stop. Only valid for the last tier."""


class TierConfig(BaseModel):
	"""Configuration for a single tier of a cascade."""

	model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

	name: str = Field(description="Tier name used in diagnostics")
	jury: Any = Field(description="Jury evaluating this tier")
	policy: TierPolicy = Field(description="Stop/escalate policy")

	@field_validator("name")
	@classmethod
	def validate_name(cls, v: str) -> str:
		v = v.strip()
		if not v:
			raise ValueError("tier name must be non-empty")
		return v

	@field_validator("jury")
	@classmethod
	def validate_jury(cls, v: Any) -> Any:
		if v is None or not callable(getattr(v, "vote", None)):
			raise ValueError("tier jury must provide a vote(context) method")
		return v


__all__ = ["TierPolicy", "TierConfig"]
