import pytest
from pydantic import ValidationError

from agent_judge.core.jury import SimpleJury
from agent_judge.core.voting import MajorityVotingStrategy
from agent_judge.models.config import JurySettings, load_env
from conftest import always_pass

ENV_VARS = (
    "AGENT_JUDGE_PARALLEL",
    "AGENT_JUDGE_MAX_PARALLEL",
    "AGENT_JUDGE_WEIGHTED_THRESHOLD",
    "AGENT_JUDGE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
	# setenv first so monkeypatch removes anything load_env adds
	for name in ENV_VARS:
		monkeypatch.setenv(name, "")
		monkeypatch.delenv(name)


def test_defaults():
	cfg = JurySettings()
	assert cfg.parallel is True
	assert cfg.max_parallel is None
	assert cfg.weighted_threshold == 0.5
	assert cfg.log_level == "info"


def test_aliases():
	cfg = JurySettings(AGENT_JUDGE_PARALLEL=False, AGENT_JUDGE_MAX_PARALLEL=2)
	assert cfg.parallel is False
	assert cfg.max_parallel == 2


def test_field_names_accepted():
	cfg = JurySettings(max_parallel=3, weighted_threshold=0.75)
	assert cfg.max_parallel == 3
	assert cfg.weighted_threshold == 0.75


def test_reads_environment(monkeypatch):
	monkeypatch.setenv("AGENT_JUDGE_PARALLEL", "false")
	monkeypatch.setenv("AGENT_JUDGE_MAX_PARALLEL", "4")
	monkeypatch.setenv("AGENT_JUDGE_LOG_LEVEL", "debug")
	cfg = JurySettings()
	assert cfg.parallel is False
	assert cfg.max_parallel == 4
	assert cfg.log_level == "debug"


def test_empty_max_parallel_is_none(monkeypatch):
	monkeypatch.setenv("AGENT_JUDGE_MAX_PARALLEL", "")
	assert JurySettings().max_parallel is None


@pytest.mark.parametrize("value", [0, -1])
def test_max_parallel_must_be_positive(value):
	with pytest.raises(ValidationError):
		JurySettings(AGENT_JUDGE_MAX_PARALLEL=value)


@pytest.mark.parametrize("value", [-0.1, 1.5])
def test_weighted_threshold_bounds(value):
	with pytest.raises(ValidationError):
		JurySettings(AGENT_JUDGE_WEIGHTED_THRESHOLD=value)


def test_jury_reads_settings():
	settings = JurySettings(parallel=False, max_parallel=2)
	jury = SimpleJury([always_pass("A"), always_pass("B")],
	                  MajorityVotingStrategy(),
	                  settings=settings)
	assert jury.parallel is False
	assert jury.max_parallel == 2


def test_jury_arguments_override_settings():
	settings = JurySettings(parallel=False, max_parallel=2)
	jury = SimpleJury([always_pass("A")],
	                  MajorityVotingStrategy(),
	                  parallel=True,
	                  max_parallel=5,
	                  settings=settings)
	assert jury.parallel is True
	assert jury.max_parallel == 5


def test_load_env_reads_file(tmp_path):
	env_file = tmp_path / ".env"
	env_file.write_text("AGENT_JUDGE_MAX_PARALLEL=7\n")
	load_env(env_file)
	assert JurySettings().max_parallel == 7


def test_load_env_missing_file_is_noop(tmp_path):
	load_env(tmp_path / "missing.env")
	assert JurySettings().max_parallel is None
