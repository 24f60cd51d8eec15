"""
Cascaded jury.

Evaluates a context through tiers of juries, cheapest first. After
each tier the tier's policy looks at the individual judgments of that
tier and either stops the cascade with the tier's verdict or
escalates to the next tier. Escalation never depends on the tier's
aggregated judgment, so intra-tier voting and cascade control flow
stay independent.

Example::

	jury = build_cascade(
	    ("deterministic", build_jury, TierPolicy.REJECT_ON_ANY_FAIL),
	    ("structural", structure_jury, TierPolicy.ACCEPT_ON_ALL_PASS),
	    ("semantic", llm_jury, TierPolicy.FINAL_TIER),
	)
	verdict = jury.vote(context)
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from agent_judge.core.jury import Jury, JuryConfigurationError, vote_async
from agent_judge.models.context import JudgmentContext
from agent_judge.models.judgment import Judgment, JudgmentStatus
from agent_judge.models.tier import TierConfig, TierPolicy
from agent_judge.models.verdict import Verdict
from agent_judge.utils.logging import get_logger

logger = get_logger(__name__)

TierSpec = Union[TierConfig, tuple[str, Any, TierPolicy]]


class CascadeConfigurationError(JuryConfigurationError):
	"""Raised when a cascade's tier list violates its invariants."""


def _should_stop(policy: TierPolicy, verdict: Verdict) -> bool:
	"""Apply a tier policy to the individual judgments of a tier verdict."""
	if policy is TierPolicy.REJECT_ON_ANY_FAIL:
		return any(j.status is JudgmentStatus.FAIL for j in verdict.individual)
	if policy is TierPolicy.ACCEPT_ON_ALL_PASS:
		return all(j.status is JudgmentStatus.PASS for j in verdict.individual)
	return True


def _cascade_verdict(stopping: Verdict, executed: list[Verdict]) -> Verdict:
	return Verdict(
	    aggregated=stopping.aggregated,
	    individual=stopping.individual,
	    individual_by_name=stopping.individual_by_name,
	    sub_verdicts=tuple(executed),
	)


def _error_verdict(tier_name: str, exc: BaseException,
                   executed: list[Verdict]) -> Verdict:
	aggregated = Judgment.error(
	    f"Final tier '{tier_name}' threw exception: {exc}",
	    cause=exc,
	    metadata={"tier": tier_name},
	)
	return Verdict(aggregated=aggregated, sub_verdicts=tuple(executed))


class CascadedJury(Jury):
	"""
	Jury evaluating through sequential tiers with early stop.

	Parameters:
		tiers: Tier configurations in execution order. The list must not
			be empty and its last tier must use ``TierPolicy.FINAL_TIER``.

	Raises:
		CascadeConfigurationError: When the tier list is invalid.
	"""

	def __init__(self, tiers: Sequence[TierConfig]) -> None:
		if not tiers:
			raise CascadeConfigurationError(
			    "CascadedJury requires at least one tier")
		last = tiers[-1]
		if last.policy is not TierPolicy.FINAL_TIER:
			raise CascadeConfigurationError(
			    f"Last tier must use FINAL_TIER policy, but '{last.name}' "
			    f"uses {last.policy.name}")
		misplaced = [
		    t.name for t in tiers[:-1] if t.policy is TierPolicy.FINAL_TIER
		]
		if misplaced:
			logger.warning(
			    "FINAL_TIER used before the last tier (%s); later tiers "
			    "are unreachable",
			    ", ".join(misplaced),
			)
		self._tiers = tuple(tiers)

	@property
	def tiers(self) -> tuple[TierConfig, ...]:
		return self._tiers

	@property
	def tier_names(self) -> list[str]:
		return [t.name for t in self._tiers]

	@property
	def judges(self) -> list[Any]:
		"""Judges of every tier, flattened in tier order."""
		flattened: list[Any] = []
		for tier in self._tiers:
			flattened.extend(getattr(tier.jury, "judges", []) or [])
		return flattened

	async def avote(self, context: JudgmentContext) -> Verdict:
		executed: list[Verdict] = []
		last_index = len(self._tiers) - 1
		for idx, tier in enumerate(self._tiers):
			logger.info("cascade tier %s start policy=%s", tier.name,
			            tier.policy.name)
			try:
				tier_verdict = await vote_async(tier.jury, context)
				if not isinstance(tier_verdict, Verdict):
					raise TypeError(
					    f"tier {tier.name} returned "
					    f"{type(tier_verdict).__name__}, expected Verdict")
			except Exception as exc:
				if idx == last_index:
					logger.warning("final tier %s threw exception",
					               tier.name,
					               exc_info=exc)
					return _error_verdict(tier.name, exc, executed)
				logger.warning(
				    "tier %s threw exception, escalating to next tier",
				    tier.name,
				    exc_info=exc,
				)
				continue

			executed.append(tier_verdict)
			if _should_stop(tier.policy, tier_verdict):
				logger.info("cascade stopped at tier %s status=%s", tier.name,
				            tier_verdict.status.value)
				return _cascade_verdict(tier_verdict, executed)
			logger.info("tier %s escalating", tier.name)

		# unreachable while the last tier is FINAL_TIER
		if executed:
			return _cascade_verdict(executed[-1], executed)
		return Verdict(aggregated=Judgment.error(
		    "Cascade finished without any tier verdict"))


def build_cascade(*tiers: TierSpec) -> CascadedJury:
	"""
	Assemble a CascadedJury from TierConfigs or ``(name, jury, policy)``.

	All validation happens here, once, before any vote.

	Raises:
		CascadeConfigurationError: On an invalid tier list.
		pydantic.ValidationError: On an invalid individual tier.
	"""
	configs = [
	    t if isinstance(t, TierConfig) else TierConfig(
	        name=t[0], jury=t[1], policy=t[2]) for t in tiers
	]
	return CascadedJury(configs)


__all__ = [
    "CascadedJury",
    "CascadeConfigurationError",
    "build_cascade",
    "TierSpec",
]
