"""
Score models.

A judge attaches at most one score to its judgment. Scores form a
small closed union discriminated by the ``kind`` field so they
serialize and validate unambiguously.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BooleanScore(BaseModel):
	"""Binary outcome score."""

	model_config = ConfigDict(frozen=True)

	kind: Literal["boolean"] = "boolean"
	value: bool


class NumericalScore(BaseModel):
	"""
	Numeric score with optional bounds.

	When bounds are given the value must lie within them.
	"""

	model_config = ConfigDict(frozen=True)

	kind: Literal["numerical"] = "numerical"
	value: float
	min_value: float | None = Field(default=None,
	                                description="Inclusive lower bound")
	max_value: float | None = Field(default=None,
	                                description="Inclusive upper bound")

	@model_validator(mode="after")
	def check_bounds(self) -> "NumericalScore":
		if (self.min_value is not None and self.max_value is not None
		    and self.min_value > self.max_value):
			raise ValueError(
			    f"min_value {self.min_value} exceeds max_value {self.max_value}")
		if self.min_value is not None and self.value < self.min_value:
			raise ValueError(
			    f"value {self.value} below min_value {self.min_value}")
		if self.max_value is not None and self.value > self.max_value:
			raise ValueError(
			    f"value {self.value} above max_value {self.max_value}")
		return self

	def normalized(self) -> float | None:
		"""Return the value mapped into [0, 1], or None without both bounds."""
		if self.min_value is None or self.max_value is None:
			return None
		span = self.max_value - self.min_value
		if span == 0:
			return 1.0
		return (self.value - self.min_value) / span


class CategoricalScore(BaseModel):
	"""Label score, e.g. ``"excellent"`` or ``"needs-work"``."""

	model_config = ConfigDict(frozen=True)

	kind: Literal["categorical"] = "categorical"
	label: str

	@field_validator("label")
	@classmethod
	def validate_label(cls, v: str) -> str:
		if not v.strip():
			raise ValueError("label must be non-empty")
		return v


Score = Annotated[Union[BooleanScore, NumericalScore, CategoricalScore],
                  Field(discriminator="kind")]

__all__ = ["BooleanScore", "NumericalScore", "CategoricalScore", "Score"]
