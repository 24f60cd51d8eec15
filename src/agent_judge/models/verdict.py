"""
Verdict model.

A Verdict is what a jury returns: the aggregated judgment, the full
audit trail of individual judgments and, for cascades, the verdicts
of every tier that actually ran.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .judgment import Judgment, JudgmentStatus


class Verdict(BaseModel):
	"""
	Aggregated opinion of a jury plus its audit trail.

	Attributes:
		aggregated: Judgment produced by the voting strategy (or, for a
			cascade, by the tier that stopped the cascade).
		individual: Per-judge judgments in judge declaration order.
		individual_by_name: The same judgments keyed by judge name.
		sub_verdicts: Verdicts of the executed cascade tiers, in
			execution order; empty for a flat jury.
	"""

	model_config = ConfigDict(frozen=True)

	aggregated: Judgment
	individual: tuple[Judgment, ...] = ()
	individual_by_name: dict[str, Judgment] = Field(default_factory=dict)
	sub_verdicts: tuple[Verdict, ...] = ()

	@model_validator(mode="after")
	def check_individual_consistency(self) -> "Verdict":
		if len(self.individual) != len(self.individual_by_name):
			raise ValueError(
			    f"individual has {len(self.individual)} judgments but "
			    f"individual_by_name has {len(self.individual_by_name)}")
		remaining = list(self.individual)
		for name, judgment in self.individual_by_name.items():
			for idx, candidate in enumerate(remaining):
				if candidate is judgment or candidate == judgment:
					del remaining[idx]
					break
			else:
				raise ValueError(
				    f"judgment for '{name}' is missing from individual")
		return self

	@property
	def status(self) -> JudgmentStatus:
		"""Status of the aggregated judgment."""
		return self.aggregated.status

	@property
	def passed(self) -> bool:
		return self.aggregated.passed

	def judgment_for(self, name: str) -> Judgment | None:
		"""Return the individual judgment of the named judge, if present."""
		return self.individual_by_name.get(name)


__all__ = ["Verdict"]
