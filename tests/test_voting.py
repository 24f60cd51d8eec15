"""Tests for the built-in voting strategies."""

from __future__ import annotations

import pytest

from agent_judge.core.voting import (
    ConsensusStrategy,
    MajorityVotingStrategy,
    WeightedVotingStrategy,
    tally,
)
from agent_judge.models.judgment import Check, Judgment, JudgmentStatus
from agent_judge.models.score import BooleanScore, NumericalScore

P = JudgmentStatus.PASS
F = JudgmentStatus.FAIL
A = JudgmentStatus.ABSTAIN
E = JudgmentStatus.ERROR


def _judgments(*statuses: JudgmentStatus) -> list[Judgment]:
	out = []
	for s in statuses:
		if s is P:
			out.append(Judgment.pass_(checks=[Check.passing("c")]))
		elif s is F:
			out.append(Judgment.fail(checks=[Check.failing("c")]))
		elif s is A:
			out.append(Judgment.abstain("no input"))
		else:
			out.append(Judgment.error("boom"))
	return out


def test_tally_counts_every_status():
	counts = tally(_judgments(P, P, F, A, E))
	assert (counts.passed, counts.failed, counts.abstained,
	        counts.errored) == (2, 1, 1, 1)
	assert counts.decisive == 3
	assert counts.total == 5


class TestMajority:
	"""Majority voting over decisive judgments."""

	@pytest.mark.parametrize(
	    "statuses, expected",
	    [
	        ((P, P, F), P),
	        ((P, F), F),
	        ((A, A), A),
	        ((F, F, P), F),
	        ((P, A, E), P),
	        ((E, E), A),
	        ((P, F, A, A, A), F),
	    ],
	)
	def test_outcomes(self, statuses, expected):
		result = MajorityVotingStrategy().aggregate(_judgments(*statuses))
		assert result.status is expected

	def test_tie_reasoning_mentions_tie(self):
		result = MajorityVotingStrategy().aggregate(_judgments(P, F))
		assert "tie" in result.reasoning
		assert "1 pass, 1 fail" in result.reasoning

	def test_score_is_pass_fraction(self):
		result = MajorityVotingStrategy().aggregate(_judgments(P, P, F, A))
		assert isinstance(result.score, NumericalScore)
		assert result.score.value == pytest.approx(2 / 3)

	def test_checks_not_flattened(self):
		result = MajorityVotingStrategy().aggregate(_judgments(P, F))
		assert result.checks == ()

	def test_metadata_carries_tally(self):
		result = MajorityVotingStrategy().aggregate(_judgments(P, A))
		assert result.metadata["strategy"] == "majority"
		assert result.metadata["passed"] == 1
		assert result.metadata["abstained"] == 1

	def test_all_abstain_has_no_score(self):
		result = MajorityVotingStrategy().aggregate(_judgments(A, A))
		assert result.score is None
		assert "no decisive votes" in result.reasoning

	def test_empty_rejected(self):
		with pytest.raises(ValueError):
			MajorityVotingStrategy().aggregate([])


class TestConsensus:
	"""Unanimity among decisive judgments."""

	@pytest.mark.parametrize(
	    "statuses, expected",
	    [
	        ((P, P), P),
	        ((P, F), F),
	        ((A, ), A),
	        ((P, A), P),
	        ((P, E), P),
	        ((F, A, E), F),
	        ((E, ), A),
	    ],
	)
	def test_outcomes(self, statuses, expected):
		result = ConsensusStrategy().aggregate(_judgments(*statuses))
		assert result.status is expected

	def test_boolean_score(self):
		result = ConsensusStrategy().aggregate(_judgments(P, P))
		assert result.score == BooleanScore(value=True)
		assert "2 pass" in result.reasoning
		assert result.checks == ()


class TestWeighted:
	"""Weighted voting against a threshold."""

	def test_heavy_pass_wins(self):
		strategy = WeightedVotingStrategy([3.0, 1.0])
		result = strategy.aggregate(_judgments(P, F))
		assert result.status is P
		assert result.score.value == pytest.approx(0.75)
		assert "pass weight 3 of 4" in result.reasoning

	def test_heavy_fail_wins(self):
		strategy = WeightedVotingStrategy([1.0, 3.0])
		assert strategy.aggregate(_judgments(P, F)).status is F

	def test_score_equal_to_threshold_fails(self):
		strategy = WeightedVotingStrategy([1.0, 1.0], threshold=0.5)
		result = strategy.aggregate(_judgments(P, F))
		assert result.status is F
		assert "<= threshold" in result.reasoning

	def test_custom_threshold(self):
		strategy = WeightedVotingStrategy([2.0, 1.0], threshold=0.7)
		assert strategy.aggregate(_judgments(P, F)).status is F
		strategy = WeightedVotingStrategy([3.0, 1.0], threshold=0.7)
		assert strategy.aggregate(_judgments(P, F)).status is P

	def test_abstain_and_error_excluded(self):
		strategy = WeightedVotingStrategy([1.0, 10.0, 10.0])
		result = strategy.aggregate(_judgments(P, A, E))
		assert result.status is P
		assert result.metadata["decisive_weight"] == 1.0

	def test_no_decisive_weight_abstains(self):
		strategy = WeightedVotingStrategy([0.0, 1.0])
		assert strategy.aggregate(_judgments(P, A)).status is A

	def test_length_mismatch_rejected(self):
		with pytest.raises(ValueError):
			WeightedVotingStrategy([1.0]).aggregate(_judgments(P, P))

	@pytest.mark.parametrize("weights, threshold", [
	    ([], 0.5),
	    ([-1.0], 0.5),
	    ([1.0], 1.5),
	])
	def test_invalid_configuration(self, weights, threshold):
		with pytest.raises(ValueError):
			WeightedVotingStrategy(weights, threshold)
