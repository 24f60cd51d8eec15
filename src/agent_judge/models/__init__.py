"""
Agent Judge models.

This subpackage contains the Pydantic models exchanged between judges
and juries, plus the settings model.

Key models:
    - JudgmentContext: Read-only input shared by all judges
    - Judgment: One judge's opinion (status, score, reasoning, checks)
    - Verdict: A jury's aggregated opinion and audit trail
    - TierConfig / TierPolicy: Cascade tier configuration
    - JurySettings: Defaults loaded from the environment
"""

from .score import BooleanScore, NumericalScore, CategoricalScore, Score
from .judgment import JudgmentStatus, Check, Judgment
from .context import ExecutionStatus, JudgmentContext
from .judge_metadata import JudgeType, JudgeMetadata
from .verdict import Verdict
from .tier import TierPolicy, TierConfig
from .config import JurySettings, load_env

__all__ = [
    "BooleanScore",
    "NumericalScore",
    "CategoricalScore",
    "Score",
    "JudgmentStatus",
    "Check",
    "Judgment",
    "ExecutionStatus",
    "JudgmentContext",
    "JudgeType",
    "JudgeMetadata",
    "Verdict",
    "TierPolicy",
    "TierConfig",
    "JurySettings",
    "load_env",
]
