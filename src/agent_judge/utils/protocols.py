"""
Protocol definitions for pluggable evaluation components.

Juries accept any object matching these protocols, so judges and
voting strategies defined outside this package (or test doubles)
need not inherit from the bundled base classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
	from agent_judge.models.context import JudgmentContext
	from agent_judge.models.judge_metadata import JudgeMetadata
	from agent_judge.models.judgment import Judgment
	from agent_judge.models.verdict import Verdict


@runtime_checkable
class JudgeProtocol(Protocol):
	"""
	Protocol for a single evaluator.

	``evaluate`` may be a plain or an ``async`` method.
	"""

	metadata: JudgeMetadata

	def evaluate(self, context: JudgmentContext) -> Any:
		"""Return a Judgment (or an awaitable resolving to one)."""
		...


@runtime_checkable
class VotingStrategyProtocol(Protocol):
	"""Protocol for folding several judgments into one."""

	def aggregate(self, judgments: Sequence[Judgment]) -> Judgment:
		"""Combine a non-empty, ordered list of judgments."""
		...


@runtime_checkable
class JuryProtocol(Protocol):
	"""Protocol for anything that can render a Verdict."""

	def vote(self, context: JudgmentContext) -> Verdict:
		"""Evaluate the context and return a Verdict."""
		...


__all__ = ["JudgeProtocol", "VotingStrategyProtocol", "JuryProtocol"]
