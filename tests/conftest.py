"""Shared fixtures: a context and canned judges."""

from __future__ import annotations

import time
from pathlib import Path

import pytest

from agent_judge.core.judge import Judge
from agent_judge.models.context import ExecutionStatus, JudgmentContext
from agent_judge.models.judgment import Judgment, JudgmentStatus


class StaticJudge(Judge):
	"""Judge returning a fixed status, optionally after a delay."""

	def __init__(self, name: str, status: JudgmentStatus, delay: float = 0.0):
		super().__init__(name, f"always {status.value}")
		self.status = status
		self.delay = delay
		self.calls = 0

	def evaluate(self, context):
		self.calls += 1
		if self.delay:
			time.sleep(self.delay)
		if self.status is JudgmentStatus.ABSTAIN:
			return Judgment.abstain(f"{self.name} abstains")
		if self.status is JudgmentStatus.ERROR:
			return Judgment.error(f"{self.name} errored")
		if self.status is JudgmentStatus.PASS:
			return Judgment.pass_(f"{self.name} passed")
		return Judgment.fail(f"{self.name} failed")


class RaisingJudge(Judge):
	"""Judge that raises instead of returning a judgment."""

	def __init__(self, name: str = "Raiser", message: str = "judge exploded"):
		super().__init__(name)
		self.message = message

	def evaluate(self, context):
		raise RuntimeError(self.message)


def always_pass(name: str, delay: float = 0.0) -> StaticJudge:
	return StaticJudge(name, JudgmentStatus.PASS, delay)


def always_fail(name: str, delay: float = 0.0) -> StaticJudge:
	return StaticJudge(name, JudgmentStatus.FAIL, delay)


def always_abstain(name: str) -> StaticJudge:
	return StaticJudge(name, JudgmentStatus.ABSTAIN)


@pytest.fixture
def context() -> JudgmentContext:
	return JudgmentContext(
	    goal="Test goal",
	    workspace=Path("/tmp/test"),
	    agent_output="Test output",
	    status=ExecutionStatus.SUCCESS,
	)

