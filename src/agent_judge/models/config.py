from __future__ import annotations

from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class JurySettings(BaseSettings):
	"""Jury defaults loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="",
	                                  case_sensitive=False,
	                                  populate_by_name=True)

	parallel: bool = Field(
	    True,
	    alias="AGENT_JUDGE_PARALLEL",
	    description="Run the judges of a flat jury concurrently by default",
	)
	max_parallel: int | None = Field(
	    default=None,
	    alias="AGENT_JUDGE_MAX_PARALLEL",
	    description="Maximum concurrent judges per jury (default=one per judge)",
	)
	weighted_threshold: float = Field(
	    0.5,
	    alias="AGENT_JUDGE_WEIGHTED_THRESHOLD",
	    description="Default pass threshold for weighted voting",
	)
	log_level: str = Field("info", alias="AGENT_JUDGE_LOG_LEVEL",
	                       description="Log level for configure_logging")

	@field_validator("max_parallel", mode="before")
	@classmethod
	def empty_as_none(cls, v: Any) -> Any:
		if v == "":
			return None
		return v

	@field_validator("max_parallel")
	@classmethod
	def validate_positive(cls, v: int | None,
	                      info: ValidationInfo) -> int | None:
		if v is None:
			return v
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@field_validator("weighted_threshold")
	@classmethod
	def validate_threshold(cls, v: float) -> float:
		if not 0.0 <= v <= 1.0:
			raise ValueError("weighted_threshold must be within [0, 1]")
		return v


__all__ = ["JurySettings", "load_env"]
