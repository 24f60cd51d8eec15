"""
Voting strategies.

A voting strategy folds the ordered judgments of a flat jury into
one aggregated Judgment. ABSTAIN and ERROR judgments never count as
votes: they stay visible in the Verdict's individual list but are
excluded from every tally below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from pydantic import BaseModel

from agent_judge.models.judgment import Judgment, JudgmentStatus
from agent_judge.models.score import BooleanScore, NumericalScore


class VoteTally(BaseModel):
	"""Counts of judgment statuses in one vote."""

	passed: int = 0
	failed: int = 0
	abstained: int = 0
	errored: int = 0

	@property
	def decisive(self) -> int:
		return self.passed + self.failed

	@property
	def total(self) -> int:
		return self.passed + self.failed + self.abstained + self.errored

	def describe(self) -> str:
		"""Return e.g. ``"2 pass, 1 fail, 0 abstain, 0 error"``."""
		return (f"{self.passed} pass, {self.failed} fail, "
		        f"{self.abstained} abstain, {self.errored} error")


def tally(judgments: Sequence[Judgment]) -> VoteTally:
	"""Count the statuses of the given judgments."""
	counts = VoteTally()
	for j in judgments:
		if j.status is JudgmentStatus.PASS:
			counts.passed += 1
		elif j.status is JudgmentStatus.FAIL:
			counts.failed += 1
		elif j.status is JudgmentStatus.ABSTAIN:
			counts.abstained += 1
		else:
			counts.errored += 1
	return counts


class VotingStrategy(ABC):
	"""Base class for strategies combining several judgments into one."""

	name: str = "voting"

	@abstractmethod
	def aggregate(self, judgments: Sequence[Judgment]) -> Judgment:
		...

	@staticmethod
	def _require_judgments(judgments: Sequence[Judgment]) -> None:
		if not judgments:
			raise ValueError("cannot aggregate an empty list of judgments")

	def _no_decisive_votes(self, counts: VoteTally) -> Judgment:
		return Judgment(
		    status=JudgmentStatus.ABSTAIN,
		    reasoning=(f"{self.name}: no decisive votes "
		               f"({counts.describe()})"),
		    metadata={"strategy": self.name, **counts.model_dump()},
		)


class MajorityVotingStrategy(VotingStrategy):
	"""
	Simple majority of decisive votes.

	More PASS than FAIL passes, more FAIL than PASS fails, and an exact
	tie fails so that a split jury never passes silently.
	"""

	name = "majority"

	def aggregate(self, judgments: Sequence[Judgment]) -> Judgment:
		self._require_judgments(judgments)
		counts = tally(judgments)
		if counts.decisive == 0:
			return self._no_decisive_votes(counts)
		if counts.passed > counts.failed:
			status = JudgmentStatus.PASS
			outcome = "majority pass"
		elif counts.failed > counts.passed:
			status = JudgmentStatus.FAIL
			outcome = "majority fail"
		else:
			status = JudgmentStatus.FAIL
			outcome = "tie, failing conservatively"
		return Judgment(
		    status=status,
		    score=NumericalScore(value=counts.passed / counts.decisive,
		                         min_value=0.0,
		                         max_value=1.0),
		    reasoning=f"{self.name}: {outcome} ({counts.describe()})",
		    metadata={"strategy": self.name, **counts.model_dump()},
		)


class ConsensusStrategy(VotingStrategy):
	"""Unanimity among decisive votes; any FAIL fails."""

	name = "consensus"

	def aggregate(self, judgments: Sequence[Judgment]) -> Judgment:
		self._require_judgments(judgments)
		counts = tally(judgments)
		if counts.decisive == 0:
			return self._no_decisive_votes(counts)
		if counts.failed:
			status = JudgmentStatus.FAIL
			outcome = "consensus not reached"
		else:
			status = JudgmentStatus.PASS
			outcome = "consensus reached"
		return Judgment(
		    status=status,
		    score=BooleanScore(value=status is JudgmentStatus.PASS),
		    reasoning=f"{self.name}: {outcome} ({counts.describe()})",
		    metadata={"strategy": self.name, **counts.model_dump()},
		)


class WeightedVotingStrategy(VotingStrategy):
	"""
	Weighted vote against a threshold.

	``weights`` holds one non-negative weight per judge, in the jury's
	judge declaration order. The score is the PASS share of the
	decisive weight; the result passes only when the score is strictly
	greater than ``threshold``.

	Parameters:
		weights: Weight of each judge.
		threshold: Pass threshold within [0, 1].
	"""

	name = "weighted"

	def __init__(self, weights: Sequence[float], threshold: float = 0.5) -> None:
		if not weights:
			raise ValueError("weights must not be empty")
		if any(w < 0 for w in weights):
			raise ValueError("weights must be non-negative")
		if not 0.0 <= threshold <= 1.0:
			raise ValueError("threshold must be within [0, 1]")
		self.weights = [float(w) for w in weights]
		self.threshold = float(threshold)

	def aggregate(self, judgments: Sequence[Judgment]) -> Judgment:
		self._require_judgments(judgments)
		if len(judgments) != len(self.weights):
			raise ValueError(f"expected {len(self.weights)} judgments for "
			                 f"{len(self.weights)} weights, "
			                 f"got {len(judgments)}")
		counts = tally(judgments)
		pass_weight = 0.0
		decisive_weight = 0.0
		for judgment, weight in zip(judgments, self.weights):
			if not judgment.status.is_decisive:
				continue
			decisive_weight += weight
			if judgment.status is JudgmentStatus.PASS:
				pass_weight += weight
		if decisive_weight == 0:
			return self._no_decisive_votes(counts)
		score = pass_weight / decisive_weight
		status = (JudgmentStatus.PASS
		          if score > self.threshold else JudgmentStatus.FAIL)
		comparison = ">" if status is JudgmentStatus.PASS else "<="
		return Judgment(
		    status=status,
		    score=NumericalScore(value=score, min_value=0.0, max_value=1.0),
		    reasoning=(f"{self.name}: pass weight {pass_weight:g} of "
		               f"{decisive_weight:g} decisive ({score:.2f} "
		               f"{comparison} threshold {self.threshold:.2f}; "
		               f"{counts.describe()})"),
		    metadata={
		        "strategy": self.name,
		        "pass_weight": pass_weight,
		        "decisive_weight": decisive_weight,
		        "threshold": self.threshold,
		        **counts.model_dump(),
		    },
		)


__all__ = [
    "VoteTally",
    "tally",
    "VotingStrategy",
    "MajorityVotingStrategy",
    "ConsensusStrategy",
    "WeightedVotingStrategy",
]
