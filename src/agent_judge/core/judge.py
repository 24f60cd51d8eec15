"""
Judge base classes and adapters.

A judge renders one Judgment about one JudgmentContext. Concrete
judges (build runners, coverage parsers, LLM graders, ...) live
outside this package; the classes here give them a common shape and
adapt plain functions and check lists into judges.
"""

from __future__ import annotations

import asyncio
import inspect
import threading
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Sequence, Union

from agent_judge.models.context import JudgmentContext
from agent_judge.models.judge_metadata import JudgeMetadata, JudgeType
from agent_judge.models.judgment import Check, Judgment
from agent_judge.utils.logging import get_logger
from agent_judge.utils.protocols import JudgeProtocol

logger = get_logger(__name__)

JudgeFunction = Callable[[JudgmentContext], Union[Judgment,
                                                  Awaitable[Judgment]]]
CheckFunction = Callable[[JudgmentContext], Check]


class Judge(ABC):
	"""
	Base class for judges.

	Subclasses implement ``evaluate`` either as a plain method or as
	``async def``. Business outcomes are expressed through the returned
	Judgment's status; raising is reserved for infrastructure failures,
	which juries convert into ERROR judgments.
	"""

	def __init__(
	    self,
	    name: str | None = None,
	    description: str = "",
	    judge_type: JudgeType = JudgeType.CUSTOM,
	) -> None:
		self.metadata = JudgeMetadata(
		    name=name or type(self).__name__,
		    description=description,
		    type=judge_type,
		)

	@property
	def name(self) -> str:
		return self.metadata.name

	@abstractmethod
	def evaluate(self, context: JudgmentContext) -> Judgment:
		...

	def __repr__(self) -> str:
		return f"{type(self).__name__}(name={self.name!r})"


class DeterministicJudge(Judge):
	"""
	Base class for rule-based judges.

	Keys listed in ``required_metadata`` must be present in the
	context metadata; when one is missing the judge abstains instead
	of calling ``judge``.
	"""

	required_metadata: Sequence[str] = ()

	def __init__(self, name: str | None = None, description: str = "") -> None:
		super().__init__(name, description, JudgeType.DETERMINISTIC)

	def evaluate(self, context: JudgmentContext) -> Judgment:
		for key in self.required_metadata:
			if context.get_metadata(key) is None:
				return Judgment.abstain(f"No {key} in metadata")
		return self.judge(context)

	@abstractmethod
	def judge(self, context: JudgmentContext) -> Judgment:
		...


class FunctionJudge(Judge):
	"""Judge backed by a plain (or async) function of the context."""

	def __init__(
	    self,
	    fn: JudgeFunction,
	    name: str | None = None,
	    description: str = "",
	    judge_type: JudgeType = JudgeType.CUSTOM,
	) -> None:
		if not description:
			description = (inspect.getdoc(fn) or "").split("\n")[0]
		super().__init__(name or getattr(fn, "__name__", None), description,
		                 judge_type)
		self.fn = fn
		self.is_async = inspect.iscoroutinefunction(fn)

	def evaluate(self, context: JudgmentContext) -> Any:
		return self.fn(context)


def as_judge(
    name: str | None = None,
    description: str = "",
    judge_type: JudgeType = JudgeType.CUSTOM,
) -> Callable[[JudgeFunction], FunctionJudge]:
	"""
	Decorator turning a function into a FunctionJudge.

	Example::

		@as_judge(name="non_empty_output")
		def non_empty_output(context):
			if context.agent_output:
				return Judgment.pass_("Agent produced output")
			return Judgment.fail("Agent output is empty")
	"""

	def wrap(fn: JudgeFunction) -> FunctionJudge:
		return FunctionJudge(fn, name, description, judge_type)

	return wrap


class CheckSuiteJudge(DeterministicJudge):
	"""
	Judge that runs a list of check functions and folds their results.

	Each check is a pure function ``(JudgmentContext) -> Check``. The
	judgment passes only when every check passes.
	"""

	def __init__(
	    self,
	    checks: Sequence[CheckFunction],
	    name: str | None = None,
	    description: str = "",
	    required_metadata: Sequence[str] = (),
	) -> None:
		super().__init__(name, description)
		if not checks:
			raise ValueError("CheckSuiteJudge requires at least one check")
		self.checks = list(checks)
		self.required_metadata = tuple(required_metadata)

	def judge(self, context: JudgmentContext) -> Judgment:
		results: list[Check] = []
		for check_fn in self.checks:
			results.append(check_fn(context))
		return Judgment.from_checks(results)


class NamedJudge(Judge):
	"""Wrap a judge under a different name (e.g. two instances of one type)."""

	def __init__(self, inner: JudgeProtocol, name: str) -> None:
		super().__init__(name, inner.metadata.description, inner.metadata.type)
		self.inner = inner
		self.is_async = _is_async_judge(inner)

	def evaluate(self, context: JudgmentContext) -> Any:
		return self.inner.evaluate(context)


class TimeoutJudge(Judge):
	"""
	Bound a judge's run time.

	A judge that does not finish within ``timeout_seconds`` resolves to
	an ERROR judgment so the enclosing jury never hangs. Synchronous
	judges run on a daemon thread of their own rather than the loop's
	default executor, so neither ``Jury.vote`` nor interpreter exit
	waits for an abandoned judge; its late result is discarded.
	"""

	is_async = True

	def __init__(self, inner: JudgeProtocol, timeout_seconds: float) -> None:
		if timeout_seconds <= 0:
			raise ValueError("timeout_seconds must be > 0")
		super().__init__(inner.metadata.name, inner.metadata.description,
		                 inner.metadata.type)
		self.inner = inner
		self.timeout_seconds = timeout_seconds

	async def evaluate(self, context: JudgmentContext) -> Judgment:
		if _is_async_judge(self.inner):
			pending = evaluate_async(self.inner, context)
		else:
			pending = _evaluate_on_daemon_thread(self.inner, context)
		try:
			return await asyncio.wait_for(pending,
			                              timeout=self.timeout_seconds)
		except asyncio.TimeoutError:
			logger.warning("judge %s timed out after %ss", self.name,
			               self.timeout_seconds)
			return Judgment.error(
			    (f"Judge '{self.name}' timed out after "
			     f"{self.timeout_seconds}s"),
			    metadata={"timeout_seconds": self.timeout_seconds},
			)


def with_timeout(judge: JudgeProtocol, timeout_seconds: float) -> TimeoutJudge:
	"""Return ``judge`` wrapped in a TimeoutJudge."""
	return TimeoutJudge(judge, timeout_seconds)


def judge_name(judge: Any) -> str:
	"""Return the name a jury files a judge's judgment under."""
	metadata = getattr(judge, "metadata", None)
	name = getattr(metadata, "name", None)
	return name or type(judge).__name__


def _is_async_judge(judge: Any) -> bool:
	flag = getattr(judge, "is_async", None)
	if isinstance(flag, bool):
		return flag
	return inspect.iscoroutinefunction(getattr(judge, "evaluate", None))


def _ensure_judgment(judge: Any, result: Any) -> Judgment:
	if not isinstance(result, Judgment):
		raise TypeError(f"judge {judge_name(judge)} returned "
		                f"{type(result).__name__}, expected Judgment")
	return result


async def _evaluate_on_daemon_thread(
    judge: JudgeProtocol,
    context: JudgmentContext,
) -> Judgment:
	loop = asyncio.get_running_loop()
	future = loop.create_future()
	name = judge_name(judge)

	def deliver(setter: Callable[[Any], None], value: Any) -> None:
		# skipped once the caller has timed out and cancelled the future
		if not future.done():
			setter(value)

	def run() -> None:
		try:
			outcome = (future.set_result, judge.evaluate(context))
		except Exception as exc:
			outcome = (future.set_exception, exc)
		try:
			loop.call_soon_threadsafe(deliver, *outcome)
		except RuntimeError:
			logger.debug("judge %s finished after its event loop closed", name)

	threading.Thread(target=run, name=f"judge-{name}", daemon=True).start()
	return _ensure_judgment(judge, await future)


async def evaluate_async(
    judge: JudgeProtocol,
    context: JudgmentContext,
) -> Judgment:
	"""
	Run any judge from async code.

	Async judges are awaited directly; synchronous judges run on a
	worker thread via ``asyncio.to_thread`` so the event loop stays
	responsive.

	Parameters:
		judge: Judge to run.
		context: Context to evaluate.

	Returns:
		The judge's Judgment.

	Raises:
		TypeError: If the judge returns something other than a Judgment.
	"""
	if _is_async_judge(judge):
		result = judge.evaluate(context)
	else:
		result = await asyncio.to_thread(judge.evaluate, context)
	if inspect.isawaitable(result):
		result = await result
	return _ensure_judgment(judge, result)


__all__ = [
    "Judge",
    "DeterministicJudge",
    "FunctionJudge",
    "as_judge",
    "CheckSuiteJudge",
    "NamedJudge",
    "TimeoutJudge",
    "with_timeout",
    "judge_name",
    "evaluate_async",
    "JudgeFunction",
    "CheckFunction",
]
