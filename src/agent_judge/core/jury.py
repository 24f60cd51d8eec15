"""
Jury abstractions and the flat jury.

A jury runs judges against one context and returns a Verdict.
``SimpleJury`` fans the context out to its judges (one after another
or concurrently) and folds the judgments through a voting strategy.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Sequence

from agent_judge.core.judge import evaluate_async, judge_name
from agent_judge.core.voting import WeightedVotingStrategy
from agent_judge.models.config import JurySettings
from agent_judge.models.context import JudgmentContext
from agent_judge.models.judgment import Judgment
from agent_judge.models.verdict import Verdict
from agent_judge.utils.logging import describe_exception, get_logger
from agent_judge.utils.protocols import JudgeProtocol, VotingStrategyProtocol

logger = get_logger(__name__)


class JuryConfigurationError(ValueError):
	"""Raised when a jury is assembled from an invalid configuration."""


class Jury(ABC):
	"""
	Base class for juries.

	Implementations provide ``avote``; ``vote`` is the synchronous entry
	point for callers that are not already inside an event loop.
	"""

	@property
	@abstractmethod
	def judges(self) -> list[Any]:
		"""Judges taking part in this jury (flattened for cascades)."""
		...

	@property
	def voting_strategy(self) -> VotingStrategyProtocol | None:
		return None

	@abstractmethod
	async def avote(self, context: JudgmentContext) -> Verdict:
		...

	def vote(self, context: JudgmentContext) -> Verdict:
		"""
		Evaluate the context and return a Verdict.

		Raises:
			RuntimeError: When called from a running event loop; use
				``await jury.avote(context)`` there instead.
		"""
		try:
			asyncio.get_running_loop()
		except RuntimeError:
			return asyncio.run(self.avote(context))
		raise RuntimeError("vote() cannot run inside an event loop; "
		                   "await avote() instead")


async def vote_async(jury: Any, context: JudgmentContext) -> Verdict:
	"""
	Run any jury from async code.

	Juries deriving from ``Jury`` are awaited directly; duck-typed
	juries that only offer a blocking ``vote`` run on a worker thread.
	"""
	if isinstance(jury, Jury):
		return await jury.avote(context)
	return await asyncio.to_thread(jury.vote, context)


class SimpleJury(Jury):
	"""
	Flat jury: every judge evaluates the same context once.

	Judgments are reported in judge declaration order whatever the
	execution mode. A judge that raises is recorded as an ERROR
	judgment under its own name and the vote carries on.

	Parameters:
		judges: Judges in declaration order; names must be unique.
		voting_strategy: Strategy folding the judgments into one.
		parallel: Run judges concurrently. Defaults to
			``JurySettings.parallel``.
		max_parallel: Bound on concurrently running judges. Defaults to
			``JurySettings.max_parallel`` (None means no bound).
		settings: Settings to read defaults from.

	Raises:
		JuryConfigurationError: On an empty judge list, duplicate judge
			names, a missing strategy or a weight count mismatch.
	"""

	def __init__(
	    self,
	    judges: Sequence[JudgeProtocol],
	    voting_strategy: VotingStrategyProtocol,
	    *,
	    parallel: bool | None = None,
	    max_parallel: int | None = None,
	    settings: JurySettings | None = None,
	) -> None:
		if not judges:
			raise JuryConfigurationError(
			    "SimpleJury requires at least one judge")
		if voting_strategy is None or not callable(
		    getattr(voting_strategy, "aggregate", None)):
			raise JuryConfigurationError(
			    "SimpleJury requires a voting strategy")
		names = [judge_name(j) for j in judges]
		duplicates = sorted({n for n in names if names.count(n) > 1})
		if duplicates:
			raise JuryConfigurationError(
			    f"duplicate judge names: {', '.join(duplicates)}; "
			    "wrap repeated judges in NamedJudge")
		if (isinstance(voting_strategy, WeightedVotingStrategy)
		    and len(voting_strategy.weights) != len(judges)):
			raise JuryConfigurationError(
			    f"weighted strategy has {len(voting_strategy.weights)} "
			    f"weights for {len(judges)} judges")
		settings = settings or JurySettings()
		if max_parallel is not None and max_parallel <= 0:
			raise JuryConfigurationError("max_parallel must be > 0")

		self._judges = list(judges)
		self._names = names
		self._voting_strategy = voting_strategy
		self.parallel = settings.parallel if parallel is None else parallel
		self.max_parallel = max_parallel or settings.max_parallel

	@property
	def judges(self) -> list[Any]:
		return list(self._judges)

	@property
	def judge_names(self) -> list[str]:
		return list(self._names)

	@property
	def voting_strategy(self) -> VotingStrategyProtocol:
		return self._voting_strategy

	async def avote(self, context: JudgmentContext) -> Verdict:
		logger.info(
		    "jury vote start judges=%d parallel=%s",
		    len(self._judges),
		    self.parallel,
		)
		if self.parallel and len(self._judges) > 1:
			judgments = await self._run_parallel(context)
		else:
			judgments = await self._run_sequential(context)

		aggregated = self._voting_strategy.aggregate(judgments)
		verdict = Verdict(
		    aggregated=aggregated,
		    individual=tuple(judgments),
		    individual_by_name=dict(zip(self._names, judgments)),
		)
		logger.info("jury vote done status=%s", aggregated.status.value)
		return verdict

	async def _run_sequential(
	    self,
	    context: JudgmentContext,
	) -> list[Judgment]:
		judgments: list[Judgment] = []
		for name, judge in zip(self._names, self._judges):
			try:
				judgment = await evaluate_async(judge, context)
			except Exception as exc:
				judgment = self._error_judgment(name, exc)
			else:
				logger.debug("judge %s -> %s", name, judgment.status.value)
			judgments.append(judgment)
		return judgments

	async def _run_parallel(self, context: JudgmentContext) -> list[Judgment]:
		sem = asyncio.Semaphore(self.max_parallel or len(self._judges))

		async def run_one(judge: JudgeProtocol) -> Judgment:
			async with sem:
				return await evaluate_async(judge, context)

		# gather keeps input order, so results line up with declaration order
		results_raw = await asyncio.gather(
		    *(run_one(j) for j in self._judges),
		    return_exceptions=True,
		)
		judgments: list[Judgment] = []
		for name, res in zip(self._names, results_raw):
			if isinstance(res, Exception):
				judgments.append(self._error_judgment(name, res))
			elif isinstance(res, BaseException):
				raise res
			else:
				logger.debug("judge %s -> %s", name, res.status.value)
				judgments.append(res)
		return judgments

	@staticmethod
	def _error_judgment(name: str, exc: Exception) -> Judgment:
		logger.warning("judge %s raised during vote", name, exc_info=exc)
		return Judgment.error(
		    f"Judge '{name}' threw exception: {describe_exception(exc)}",
		    cause=exc,
		    metadata={"judge": name},
		)


__all__ = ["Jury", "JuryConfigurationError", "SimpleJury", "vote_async"]
