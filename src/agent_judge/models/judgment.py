"""
Judgment models.

A Judgment is the immutable opinion of one judge: a status, an
optional score, human-readable reasoning, named sub-checks and an
opaque metadata bag.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field

from agent_judge.utils.logging import describe_exception, sanitize_text
from .score import BooleanScore, Score


class JudgmentStatus(str, Enum):
	"""
	Outcome of a single judgment.

	ABSTAIN means the judge declined to opine (its preconditions were
	not met) and ERROR means the judge itself broke. Neither is a
	negative verdict about the artifact.
	"""

	PASS = "pass"
	FAIL = "fail"
	ABSTAIN = "abstain"
	ERROR = "error"

	@property
	def is_decisive(self) -> bool:
		"""Return True for PASS and FAIL."""
		return self in (JudgmentStatus.PASS, JudgmentStatus.FAIL)


class Check(BaseModel):
	"""One named sub-assertion inside a judgment (e.g. one per file)."""

	model_config = ConfigDict(frozen=True)

	name: str = Field(description="Check identifier")
	message: str = Field(default="", description="Human-readable explanation")
	passed: bool = Field(description="Whether the check passed")

	@classmethod
	def passing(cls, name: str, message: str = "") -> "Check":
		return cls(name=name, message=message, passed=True)

	@classmethod
	def failing(cls, name: str, message: str = "") -> "Check":
		return cls(name=name, message=message, passed=False)


class Judgment(BaseModel):
	"""Immutable opinion of one judge."""

	model_config = ConfigDict(frozen=True)

	status: JudgmentStatus
	score: Score | None = None
	reasoning: str = ""
	checks: tuple[Check, ...] = ()
	metadata: dict[str, Any] = Field(default_factory=dict)

	@property
	def passed(self) -> bool:
		return self.status is JudgmentStatus.PASS

	@property
	def failed_checks(self) -> list[Check]:
		"""Return the checks that did not pass, in order."""
		return [c for c in self.checks if not c.passed]

	@classmethod
	def abstain(cls, reasoning: str) -> "Judgment":
		"""Build an ABSTAIN judgment for a judge whose preconditions failed."""
		return cls(status=JudgmentStatus.ABSTAIN, reasoning=reasoning)

	@classmethod
	def error(
	    cls,
	    reasoning: str,
	    cause: BaseException | None = None,
	    metadata: dict[str, Any] | None = None,
	) -> "Judgment":
		"""
		Build an ERROR judgment for a judge that failed unexpectedly.

		Parameters:
			reasoning: Description of what went wrong.
			cause: The exception raised, if any; its type and sanitized
				message are kept in metadata.
			metadata: Extra metadata to attach.

		Returns:
			Judgment with ERROR status and no score.
		"""
		meta = dict(metadata or {})
		if cause is not None:
			meta["error_type"] = type(cause).__name__
			meta["error"] = describe_exception(cause)
		return cls(
		    status=JudgmentStatus.ERROR,
		    reasoning=sanitize_text(reasoning),
		    metadata=meta,
		)

	@classmethod
	def pass_(
	    cls,
	    reasoning: str = "",
	    *,
	    score: Score | None = None,
	    checks: Iterable[Check] = (),
	    metadata: dict[str, Any] | None = None,
	) -> "Judgment":
		"""Build a PASS judgment; the score defaults to ``BooleanScore(True)``."""
		return cls(
		    status=JudgmentStatus.PASS,
		    score=score if score is not None else BooleanScore(value=True),
		    reasoning=reasoning,
		    checks=tuple(checks),
		    metadata=dict(metadata or {}),
		)

	@classmethod
	def fail(
	    cls,
	    reasoning: str = "",
	    *,
	    score: Score | None = None,
	    checks: Iterable[Check] = (),
	    metadata: dict[str, Any] | None = None,
	) -> "Judgment":
		"""Build a FAIL judgment; the score defaults to ``BooleanScore(False)``."""
		return cls(
		    status=JudgmentStatus.FAIL,
		    score=score if score is not None else BooleanScore(value=False),
		    reasoning=reasoning,
		    checks=tuple(checks),
		    metadata=dict(metadata or {}),
		)

	@classmethod
	def from_checks(
	    cls,
	    checks: Iterable[Check],
	    metadata: dict[str, Any] | None = None,
	) -> "Judgment":
		"""
		Fold a list of checks into one judgment.

		PASS when every check passed, FAIL when any failed, ABSTAIN
		when there is nothing to judge.

		Parameters:
			checks: Ordered checks to fold.
			metadata: Extra metadata to attach.

		Returns:
			Judgment carrying the checks.
		"""
		checks = tuple(checks)
		if not checks:
			return cls.abstain("No checks were run")
		failed = [c for c in checks if not c.passed]
		if failed:
			return cls.fail(
			    (f"{len(failed)} of {len(checks)} checks failed: "
			     f"{', '.join(c.name for c in failed)}"),
			    checks=checks,
			    metadata=metadata,
			)
		return cls.pass_(
		    f"All {len(checks)} checks passed",
		    checks=checks,
		    metadata=metadata,
		)


__all__ = ["JudgmentStatus", "Check", "Judgment"]
